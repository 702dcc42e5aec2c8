"""Data model for a single conversion result."""

from dataclasses import dataclass

from unit_converter.utils.number_utils import format_plain

from .category import Category


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one value between two units.

    ``result`` is the unrounded logical value; ``formatted`` is the
    fixed-decimal display string written to history.
    """

    category: Category
    value: float
    from_unit: str
    to_unit: str
    result: float
    formatted: str

    @property
    def is_zero(self) -> bool:
        """Check if the source value is zero (never recorded in history)."""
        return self.value == 0

    def __str__(self) -> str:
        return f"{format_plain(self.value)} {self.from_unit} = {self.formatted} {self.to_unit}"
