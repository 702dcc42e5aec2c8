"""CLI command for showing or clearing conversion history."""

from unit_converter.orchestration import create_history_store
from unit_converter.presenters import ConsolePresenter

from .common import config_from_args


def history_command(args) -> int:
    """Execute the history subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = ConsolePresenter()

    try:
        store = create_history_store(config)
        if args.clear:
            store.clear()
            presenter.show_success("Conversion history cleared")
            return 0

        presenter.show_history(store.list())
        return 0

    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1
