"""Protocol for periodically scheduled tasks."""

from typing import Protocol


class ScheduledTask(Protocol):
    """Interface for a task that runs a callback on a fixed interval.

    The conversion core never depends on a scheduler; only the
    exchange rate board is driven by one.
    """

    @property
    def is_running(self) -> bool:
        """Whether the task is currently scheduled."""
        ...

    def start(self) -> None:
        """Run the callback now and then on every interval."""
        ...

    def stop(self) -> None:
        """Stop scheduling the callback. Safe to call more than once."""
        ...
