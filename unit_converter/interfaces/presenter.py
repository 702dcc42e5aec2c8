"""Presenter protocol for output abstraction."""

from typing import Protocol

from unit_converter.models import ConversionResult, HistoryRecord, RateSnapshot


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    conversion logic to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_result(self, result: ConversionResult) -> None:
        """Display the result of a conversion.

        Args:
            result: The conversion result to display
        """
        ...

    def show_history(self, records: list[HistoryRecord]) -> None:
        """Display the conversion history, newest first.

        Args:
            records: History records to display
        """
        ...

    def show_rates(self, snapshot: RateSnapshot) -> None:
        """Display the exchange rate board.

        Args:
            snapshot: Rates and their update time
        """
        ...
