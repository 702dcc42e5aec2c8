"""CLI command for converting a single value."""

from unit_converter.exceptions import UnitConverterException
from unit_converter.models import Category
from unit_converter.orchestration import create_session
from unit_converter.presenters import ConsolePresenter

from .common import config_from_args


def convert_command(args) -> int:
    """Execute the convert subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = ConsolePresenter()
    category = Category.parse(args.category)

    try:
        session = create_session(config, presenter, follow_history=False)
        session.select_units(category, from_unit=args.from_unit, to_unit=args.to_unit)
        session.convert(category, args.value, record=not args.no_history)
        return 0

    except UnitConverterException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1
