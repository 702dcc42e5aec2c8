"""Null presenter for testing (no output)."""

from unit_converter.models import ConversionResult, HistoryRecord, RateSnapshot


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_result(self, result: ConversionResult) -> None:
        """Display the result of a conversion (no-op)."""
        pass

    def show_history(self, records: list[HistoryRecord]) -> None:
        """Display the conversion history (no-op)."""
        pass

    def show_rates(self, snapshot: RateSnapshot) -> None:
        """Display the exchange rate board (no-op)."""
        pass
