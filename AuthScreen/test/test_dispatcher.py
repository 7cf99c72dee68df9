"""
Unit tests for the main-thread dispatcher.

Tests cover:
- FIFO execution across submitting threads
- Empty drains and ignored submissions
- Failure isolation
- Work submitted during a drain
- Owning-thread enforcement
"""

import threading

from AuthScreen.core.client.utils.exceptions import DispatcherError
from AuthScreen.core.dispatch import MainThreadDispatcher


class TestMainThreadDispatcher:
    """Tests for MainThreadDispatcher."""

    def setup_method(self):
        """Set up test fixtures."""
        self.dispatcher = MainThreadDispatcher()

    def test_drain_runs_actions_in_submission_order(self):
        """Test a single drain runs everything once, oldest first."""
        ran = []
        for i in range(5):
            self.dispatcher.submit(lambda i=i: ran.append(i))

        assert self.dispatcher.drain() == 5
        assert ran == [0, 1, 2, 3, 4]
        assert self.dispatcher.pending() == 0

    def test_submit_does_not_run_inline(self):
        """Test actions wait for drain."""
        ran = []
        self.dispatcher.submit(lambda: ran.append(1))

        assert ran == []
        assert self.dispatcher.pending() == 1

    def test_drain_empty_queue_is_noop(self):
        """Test draining with nothing queued."""
        assert self.dispatcher.drain() == 0
        assert self.dispatcher.drain() == 0
        assert self.dispatcher.failures == 0

    def test_submit_none_is_ignored(self):
        """Test a missing action is dropped."""
        self.dispatcher.submit(None)

        assert self.dispatcher.pending() == 0
        assert self.dispatcher.drain() == 0

    def test_concurrent_submits_run_once_in_order(self):
        """Test many threads submitting; one drain runs all in submission order."""
        order_lock = threading.Lock()
        submitted = []
        ran = []
        start = threading.Barrier(8)

        def worker(worker_id: int):
            start.wait()
            for n in range(50):
                with order_lock:
                    token = (worker_id, n)
                    submitted.append(token)
                    self.dispatcher.submit(lambda token=token: ran.append(token))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert self.dispatcher.drain() == 400
        assert ran == submitted
        assert self.dispatcher.pending() == 0
        assert self.dispatcher.drain() == 0

    def test_two_threads_share_a_counter(self):
        """Test two submitting threads observed through a global counter."""
        counter = {"value": 0}
        order_lock = threading.Lock()
        submitted = []
        observed = []

        def make_action(name):
            def action():
                counter["value"] += 1
                observed.append((name, counter["value"]))
            return action

        def worker(name):
            with order_lock:
                submitted.append(name)
                self.dispatcher.submit(make_action(name))

        threads = [threading.Thread(target=worker, args=(name,)) for name in ("a", "b")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.dispatcher.drain()

        assert counter["value"] == 2
        assert [name for name, _ in observed] == submitted
        assert [value for _, value in observed] == [1, 2]

    def test_failing_action_does_not_block_the_rest(self):
        """Test exceptions are isolated per action."""
        ran = []

        def boom():
            raise RuntimeError("boom")

        self.dispatcher.submit(lambda: ran.append("first"))
        self.dispatcher.submit(boom)
        self.dispatcher.submit(lambda: ran.append("last"))

        assert self.dispatcher.drain() == 3
        assert ran == ["first", "last"]
        assert self.dispatcher.failures == 1

    def test_actions_submitted_during_drain_run_next_tick(self):
        """Test an action may submit more work without deadlocking."""
        ran = []

        def outer():
            ran.append("outer")
            self.dispatcher.submit(lambda: ran.append("inner"))

        self.dispatcher.submit(outer)

        assert self.dispatcher.drain() == 1
        assert ran == ["outer"]
        assert self.dispatcher.pending() == 1

        assert self.dispatcher.drain() == 1
        assert ran == ["outer", "inner"]

    def test_drain_from_foreign_thread_raises(self):
        """Test only the bound thread may drain."""
        self.dispatcher.bind_owner()
        errors = []

        def foreign():
            try:
                self.dispatcher.drain()
            except DispatcherError as e:
                errors.append(e)

        t = threading.Thread(target=foreign)
        t.start()
        t.join()

        assert len(errors) == 1
        assert "owning thread" in str(errors[0])

    def test_first_drain_claims_ownership(self):
        """Test the first draining thread becomes the owner."""
        self.dispatcher.drain()
        errors = []

        def foreign():
            try:
                self.dispatcher.drain()
            except DispatcherError as e:
                errors.append(e)

        t = threading.Thread(target=foreign)
        t.start()
        t.join()

        assert len(errors) == 1
        assert errors[0].details["owner"] == threading.get_ident()
        assert errors[0].details["caller"] != threading.get_ident()

    def test_racing_first_drains_elect_one_owner(self):
        """Test only one of several threads draining at once becomes the owner."""
        count = 8
        barrier = threading.Barrier(count)
        errors = []
        drained = []

        def worker():
            barrier.wait()
            try:
                self.dispatcher.drain()
                drained.append(threading.get_ident())
            except DispatcherError as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(drained) == 1
        assert len(errors) == count - 1
        assert all(e.details["owner"] == drained[0] for e in errors)
