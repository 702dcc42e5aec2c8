"""Default configuration values for Unit Converter."""

from .config import ConverterConfig


def create_default_config(**overrides) -> ConverterConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        ConverterConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            history_max_items=20,
            strict_temperature=True
        )
    """
    return ConverterConfig(**overrides)
