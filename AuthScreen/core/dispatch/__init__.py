"""
Main-thread dispatcher.

Hands work produced on worker threads (network callbacks, the async service
loop) over to the single thread that is allowed to touch UI state. Any thread
may submit; only the owning loop drains, once per tick.

Usage:
    dispatcher = MainThreadDispatcher()

    # worker thread
    dispatcher.submit(lambda: label.configure(text="done"))

    # UI loop, every tick
    dispatcher.drain()
"""

import threading
from collections import deque
from typing import Callable, Deque, Optional

from AuthScreen.core.client.utils.exceptions import DispatcherError
from AuthScreen.core.logging import get_logger

logger = get_logger(__name__)

PendingCallback = Callable[[], None]


class MainThreadDispatcher:
    """
    FIFO queue of deferred callbacks drained by one owning thread.

    The lock is held only to append and to swap the queue out; callbacks run
    outside it, so a callback may submit more work without deadlocking.
    Work submitted during a drain runs on the following tick.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._queue: Deque[PendingCallback] = deque()
        self._owner: Optional[int] = None
        self._failures = 0

    def submit(self, action: Optional[PendingCallback]) -> None:
        """
        Queue an action for the owning thread.

        Args:
            action: Zero-argument callable; None is ignored
        """
        if action is None:
            logger.debug("Ignoring empty dispatcher submission")
            return

        with self._lock:
            self._queue.append(action)

    def drain(self) -> int:
        """
        Run every queued action in submission order.

        Returns:
            Number of actions executed
        """
        self._check_owner()

        with self._lock:
            if not self._queue:
                return 0
            batch = self._queue
            self._queue = deque()

        executed = 0
        while batch:
            action = batch.popleft()
            executed += 1
            try:
                action()
            except Exception:
                self._failures += 1
                logger.error("Dispatched action %r failed", action, exc_info=True)

        return executed

    def pending(self) -> int:
        """Number of actions waiting for the next drain."""
        with self._lock:
            return len(self._queue)

    @property
    def failures(self) -> int:
        """Count of actions that raised while being drained."""
        return self._failures

    def bind_owner(self, thread: Optional[threading.Thread] = None) -> None:
        """Pin the thread allowed to drain (defaults to the caller)."""
        thread = thread or threading.current_thread()
        with self._lock:
            self._owner = thread.ident
        logger.debug("Dispatcher bound to thread %s", thread.name)

    def _check_owner(self) -> None:
        ident = threading.get_ident()
        with self._lock:
            if self._owner is None:
                self._owner = ident
            owner = self._owner
        if owner != ident:
            raise DispatcherError(
                "drain() called off the owning thread",
                {"owner": owner, "caller": ident},
            )


__all__ = ['MainThreadDispatcher', 'PendingCallback']
