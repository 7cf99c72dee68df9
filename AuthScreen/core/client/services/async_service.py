"""
Async service running identity provider calls off the UI thread.
"""
import asyncio
import concurrent.futures
import threading
from typing import Coroutine, Optional

from AuthScreen.core.logging import get_logger

logger = get_logger(__name__)


class AsyncService:
    """
    Manages an asyncio event loop in a background thread.

    Futures returned by run_async() complete on that thread, so their
    done-callbacks must not touch UI state directly.
    """

    def __init__(self, name: str = "auth-io"):
        self._name = name
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._running = False
        self._ready = threading.Event()

    def start(self) -> None:
        """Start the event loop thread and wait until it accepts work."""
        if self._running:
            return

        self._ready.clear()

        def run_loop():
            self._loop = asyncio.new_event_loop()
            asyncio.set_event_loop(self._loop)
            self._ready.set()
            try:
                self._loop.run_forever()
            finally:
                self._loop.close()

        self._thread = threading.Thread(target=run_loop, name=self._name, daemon=True)
        self._thread.start()
        self._running = True

        self._ready.wait()
        logger.debug("Async service %s started", self._name)

    def stop(self, timeout: float = 2.0) -> None:
        """Cancel outstanding work and stop the loop thread."""
        if not self._running:
            return

        loop = self._loop
        if loop is not None and loop.is_running():
            fut = asyncio.run_coroutine_threadsafe(self._cancel_tasks(), loop)
            try:
                fut.result(timeout=timeout)
            except (concurrent.futures.TimeoutError, concurrent.futures.CancelledError):
                logger.warning("Async service did not shut down cleanly; forcing stop")
            loop.call_soon_threadsafe(loop.stop)

        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=timeout)

        self._running = False
        self._loop = None
        self._thread = None
        self._ready.clear()
        logger.debug("Async service %s stopped", self._name)

    async def _cancel_tasks(self) -> None:
        """Cancel every other task and wait for them to finish."""
        current = asyncio.current_task()
        tasks = [t for t in asyncio.all_tasks() if t is not current]
        for t in tasks:
            t.cancel()
        if tasks:
            logger.info("Cancelling %d outstanding task(s)", len(tasks))
            await asyncio.gather(*tasks, return_exceptions=True)

    def run_async(self, coro: Coroutine) -> Optional[concurrent.futures.Future]:
        """
        Schedule a coroutine on the background loop.

        Returns:
            A future completed on the loop thread, or None when the service
            is not running (the coroutine is closed unstarted)
        """
        if not self.is_running():
            logger.warning("Async service not running; dropping %r", coro)
            coro.close()
            return None
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    def is_running(self) -> bool:
        """Check if the async service is running."""
        return self._running and self._loop is not None
