"""Main CLI entry point for unit_converter."""

import argparse
import logging
import sys

from unit_converter import __version__
from unit_converter.cli.commands import convert, history, rates, units
from unit_converter.models import Category


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="unit-converter",
        description="Convert values between units of length, weight, area, volume, "
        "speed, time, temperature and currency",
        epilog="Use 'unit-converter <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--db",
        help="Path to the history database (default: ~/.unit_converter/storage.db)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    categories = [category.value for category in Category]

    # unit-converter convert <category> <value> <from> <to>
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a value between two units",
        description="Convert a value and record it in the conversion history",
    )
    convert_parser.add_argument("category", choices=categories, help="Conversion category")
    convert_parser.add_argument("value", help="Value to convert (non-numeric input counts as 0)")
    convert_parser.add_argument("from_unit", metavar="from", help="Source unit, e.g. km or USD")
    convert_parser.add_argument("to_unit", metavar="to", help="Target unit, e.g. mile or CNY")
    convert_parser.add_argument(
        "--no-history",
        action="store_true",
        help="Do not record this conversion",
    )
    convert_parser.add_argument(
        "--strict-temperature",
        action="store_true",
        help="Reject unknown temperature scales instead of treating them as Celsius",
    )

    # unit-converter units <category>
    units_parser = subparsers.add_parser(
        "units",
        help="List the units of a category",
        description="List the unit labels accepted by a category",
    )
    units_parser.add_argument("category", choices=categories, help="Conversion category")

    # unit-converter history [--clear]
    history_parser = subparsers.add_parser(
        "history",
        help="Show recent conversions",
        description="Show or clear the recent conversion history",
    )
    history_parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete all recorded conversions",
    )

    # unit-converter rates
    subparsers.add_parser(
        "rates",
        help="Show the exchange rate board",
        description="Show reference exchange rates against CNY",
    )

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "convert":
        return convert.convert_command(args)
    elif args.command == "units":
        return units.units_command(args)
    elif args.command == "history":
        return history.history_command(args)
    elif args.command == "rates":
        return rates.rates_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
