"""Thread-based periodic task runner."""

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class IntervalTask:
    """Runs a callback immediately and then every ``interval`` seconds.

    Implements ScheduledTask through structural subtyping. The loop runs
    on a daemon thread and waits on a threading.Event, so ``stop()``
    takes effect without waiting out the interval.
    """

    def __init__(
        self,
        callback: Callable[[], object],
        interval: float,
        name: str = "interval-task",
    ):
        """Initialize the task.

        Args:
            callback: Callable to run on every tick
            interval: Seconds between runs
            name: Thread name, for logging and debugging
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.callback = callback
        self.interval = interval
        self.name = name
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """Whether the background loop is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the background loop. No-op if already running."""
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        """Stop the loop and wait for the thread to exit.

        Args:
            timeout: Seconds to wait for the thread to finish
        """
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None

    def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.callback()
            except Exception:
                logger.warning(f"Scheduled task '{self.name}' failed", exc_info=True)
            if self._stop_event.wait(self.interval):
                break
