"""Data model for the exchange rate board."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class RateSnapshot:
    """Rates shown on the exchange rate board at one point in time."""

    rates: dict[str, float] = field(default_factory=dict)  # board id -> CNY per unit
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def updated_label(self) -> str:
        """Update time formatted as H:MM."""
        return f"{self.updated_at.hour}:{self.updated_at.minute:02d}"
