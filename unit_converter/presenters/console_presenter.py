"""Console presenter for CLI output."""

from unit_converter.models import ConversionResult, HistoryRecord, RateSnapshot


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_result(self, result: ConversionResult) -> None:
        """Display the result of a conversion."""
        print(result)

    def show_history(self, records: list[HistoryRecord]) -> None:
        """Display the conversion history, newest first."""
        if not records:
            print("No conversions yet")
            return

        print(f"\nRecent Conversions ({len(records)}):")
        print("=" * 60)
        for record in records:
            print(f"  {str(record):40s} {record.timestamp}")

    def show_rates(self, snapshot: RateSnapshot) -> None:
        """Display the exchange rate board."""
        print(f"\nExchange Rates (updated {snapshot.updated_label}):")
        for board_id, rate in snapshot.rates.items():
            base, quote = board_id.upper().split("-")
            print(f"  1 {base} = {rate:g} {quote}")
