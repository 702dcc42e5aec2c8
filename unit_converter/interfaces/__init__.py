"""Interface protocols for Unit Converter."""

from .presenter import PresenterProtocol
from .scheduler import ScheduledTask
from .storage import KeyValueStorage

__all__ = ["KeyValueStorage", "PresenterProtocol", "ScheduledTask"]
