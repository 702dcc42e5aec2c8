"""Configuration classes for Unit Converter."""

from dataclasses import dataclass, field
from pathlib import Path

from unit_converter.exceptions import ConfigurationError


@dataclass(frozen=True)
class ConverterConfig:
    """Immutable configuration for conversion and history operations.

    All configuration is frozen (immutable) so it can be shared between
    the GUI thread and the rate refresh thread without copying.
    """

    # History settings
    history_max_items: int = 10
    history_storage_key: str = "convert_history"
    timestamp_format: str = "%Y/%m/%d %H:%M:%S"

    # Storage settings
    storage_path: Path = field(
        default_factory=lambda: Path.home() / ".unit_converter" / "storage.db"
    )

    # Display settings
    display_decimals: int = 4

    # Temperature settings
    strict_temperature: bool = False  # Raise on unknown temperature units instead of Celsius

    # Exchange rate board settings
    rate_refresh_interval: float = 300.0  # Seconds between board refreshes

    def __post_init__(self):
        """Convert string paths to Path objects and validate limits."""
        if isinstance(self.storage_path, str):
            object.__setattr__(self, "storage_path", Path(self.storage_path))

        if self.history_max_items < 1:
            raise ConfigurationError(
                f"history_max_items must be at least 1, got {self.history_max_items}"
            )
        if self.rate_refresh_interval <= 0:
            raise ConfigurationError(
                f"rate_refresh_interval must be positive, got {self.rate_refresh_interval}"
            )
        if self.display_decimals < 0:
            raise ConfigurationError(
                f"display_decimals must not be negative, got {self.display_decimals}"
            )
