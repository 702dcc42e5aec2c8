"""QTimer-based periodic task."""

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class QtIntervalTask(QObject):
    """Runs a callback on the GUI event loop every ``interval`` seconds.

    Implements ScheduledTask through structural subtyping, mirroring
    IntervalTask for code that must stay on the GUI thread.
    """

    def __init__(self, callback: Callable[[], object], interval: float, parent=None):
        """Initialize the task.

        Args:
            callback: Callable to run on every tick
            interval: Seconds between runs
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.callback = callback
        self._timer = QTimer(self)
        self._timer.setInterval(int(interval * 1000))
        self._timer.timeout.connect(self._tick)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        """Run the callback now and start the timer."""
        if self.is_running:
            return
        self._tick()
        self._timer.start()

    def stop(self) -> None:
        """Stop the timer."""
        self._timer.stop()

    def _tick(self) -> None:
        try:
            self.callback()
        except Exception:
            logger.warning("Scheduled GUI task failed", exc_info=True)
