"""CLI command for listing the units of a category."""

from unit_converter.models import Category
from unit_converter.presenters import ConsolePresenter
from unit_converter.services import RateTable


def units_command(args) -> int:
    """Execute the units subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (always 0)
    """
    presenter = ConsolePresenter()
    category = Category.parse(args.category)

    presenter.show_info(f"{category.label} units:")
    for unit in RateTable().units(category):
        presenter.show_info(f"  {unit}")
    return 0
