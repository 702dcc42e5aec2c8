"""CLI command for printing the exchange rate board."""

from unit_converter.presenters import ConsolePresenter
from unit_converter.services import ExchangeRateBoard


def rates_command(args) -> int:
    """Execute the rates subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (always 0)
    """
    presenter = ConsolePresenter()
    ExchangeRateBoard(presenter).refresh()
    presenter.show_info("\nRates are reference values, not live market data.")
    return 0
