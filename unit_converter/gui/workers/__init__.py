"""Qt-driven background tasks."""

from .rate_timer import QtIntervalTask

__all__ = ["QtIntervalTask"]
