"""Background load task.

Runs one EventLoader.load() off the calling thread and hands the
result back to the thread that owns the screen, exactly once.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable

from soonami.core.event import Event
from soonami.orchestrator import EventLoader, LoadResult


logger = logging.getLogger(__name__)


class EventTask:
    """One-shot, cancellable load of a single earthquake.

    Usage on the owning thread::

        task = EventTask(loader, screen.show)
        task.start()
        ...
        task.deliver(timeout=30)   # calls screen.show(event) once

    The callback is only invoked with an Event; "no record" and
    cancelled runs leave the caller's state untouched.
    """

    def __init__(
        self,
        loader: EventLoader,
        on_result: Callable[[Event], None],
    ) -> None:
        self.loader = loader
        self.on_result = on_result
        self._cancel = threading.Event()
        self._executor: ThreadPoolExecutor | None = None
        self._future: Future[LoadResult] | None = None
        self._delivered: LoadResult | None = None

    @property
    def started(self) -> bool:
        return self._future is not None

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    @property
    def done(self) -> bool:
        return self._future is not None and self._future.done()

    def start(self) -> None:
        """Start the background load.

        Raises:
            RuntimeError: If the task was already started
        """
        if self._future is not None:
            raise RuntimeError("EventTask can only be started once")

        self._executor = ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="soonami-load",
        )
        self._future = self._executor.submit(self.loader.load, self._cancel)
        # Worker thread exits once the single job finishes
        self._executor.shutdown(wait=False)

    def cancel(self) -> None:
        """Abandon the load. The callback will not be invoked."""
        if not self._cancel.is_set():
            logger.info("Cancelling earthquake load")
        self._cancel.set()

    def deliver(self, timeout: float | None = None) -> LoadResult:
        """Wait for the background load and deliver its result.

        Must be called on the owning thread. The first call invokes the
        callback if an Event was loaded and the task was not cancelled;
        later calls return the same result without invoking it again.

        Args:
            timeout: Seconds to wait for the load

        Returns:
            The LoadResult of the background run

        Raises:
            RuntimeError: If the task was never started
            concurrent.futures.TimeoutError: If the load is still running
        """
        if self._delivered is not None:
            return self._delivered

        if self._future is None:
            raise RuntimeError("EventTask was not started")

        result = self._future.result(timeout=timeout)
        self._delivered = result

        if self._cancel.is_set() or result.cancelled:
            return result

        if result.event is not None:
            self.on_result(result.event)

        return result
