"""Helpers shared by CLI subcommands."""

from unit_converter.config import ConverterConfig, create_default_config


def config_from_args(args) -> ConverterConfig:
    """Build the configuration for a CLI run.

    Args:
        args: Parsed command-line arguments

    Returns:
        ConverterConfig with command-line overrides applied
    """
    overrides = {}
    if getattr(args, "db", None):
        overrides["storage_path"] = args.db
    if getattr(args, "strict_temperature", False):
        overrides["strict_temperature"] = True
    return create_default_config(**overrides)
