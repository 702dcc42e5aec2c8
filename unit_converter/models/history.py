"""Data model for conversion history records."""

from dataclasses import dataclass
from typing import Any

from unit_converter.exceptions import MalformedLedgerError
from unit_converter.utils.number_utils import format_plain

from .conversion import ConversionResult


@dataclass(frozen=True)
class HistoryRecord:
    """A single entry of the conversion history ledger.

    Field names on disk follow the original storage layout
    (``fromValue``, ``fromUnit``, ``toValue``, ``toUnit``, ``type``,
    ``timestamp``) so existing ledgers keep loading.
    """

    from_value: float
    from_unit: str
    to_value: str
    to_unit: str
    category: str
    timestamp: str = ""

    @classmethod
    def from_result(cls, result: ConversionResult) -> "HistoryRecord":
        """Build an unstamped record from a conversion result."""
        return cls(
            from_value=result.value,
            from_unit=result.from_unit,
            to_value=result.formatted,
            to_unit=result.to_unit,
            category=result.category.label,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted field layout."""
        return {
            "fromValue": self.from_value,
            "fromUnit": self.from_unit,
            "toValue": self.to_value,
            "toUnit": self.to_unit,
            "type": self.category,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "HistoryRecord":
        """Deserialize a persisted record.

        Raises:
            MalformedLedgerError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise MalformedLedgerError(f"History record is not an object: {data!r}")

        from_value = data.get("fromValue")
        if isinstance(from_value, bool) or not isinstance(from_value, (int, float)):
            raise MalformedLedgerError(f"Invalid fromValue: {from_value!r}")

        strings = {}
        for key in ("fromUnit", "toValue", "toUnit", "type", "timestamp"):
            value = data.get(key)
            if not isinstance(value, str):
                raise MalformedLedgerError(f"Invalid {key}: {value!r}")
            strings[key] = value

        return cls(
            from_value=float(from_value),
            from_unit=strings["fromUnit"],
            to_value=strings["toValue"],
            to_unit=strings["toUnit"],
            category=strings["type"],
            timestamp=strings["timestamp"],
        )

    def __str__(self) -> str:
        return f"{format_plain(self.from_value)} {self.from_unit} → {self.to_value} {self.to_unit}"
