"""Conversion category enum."""

from enum import Enum

from .units import (
    AreaUnit,
    CurrencyCode,
    LengthUnit,
    SpeedUnit,
    TemperatureUnit,
    TimeUnit,
    VolumeUnit,
    WeightUnit,
)


class Category(Enum):
    """A conversion domain with its own unit set and conversion rule."""

    LENGTH = "length"
    WEIGHT = "weight"
    AREA = "area"
    VOLUME = "volume"
    SPEED = "speed"
    TIME = "time"
    TEMPERATURE = "temperature"
    CURRENCY = "currency"

    @property
    def label(self) -> str:
        """Display label used in history records."""
        return self.value.capitalize()

    @property
    def unit_type(self) -> type[Enum]:
        """The unit enum for this category."""
        return _UNIT_TYPES[self]

    @property
    def default_units(self) -> tuple[str, str]:
        """Default (from, to) unit labels shown when the category opens."""
        return _DEFAULT_UNITS[self]

    @classmethod
    def parse(cls, name: "str | Category") -> "Category":
        """Look up a category by name, case-insensitively.

        Raises:
            ValueError: If the name is not a known category
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown category '{name}'. Valid: {valid}") from None


_UNIT_TYPES: dict[Category, type[Enum]] = {
    Category.LENGTH: LengthUnit,
    Category.WEIGHT: WeightUnit,
    Category.AREA: AreaUnit,
    Category.VOLUME: VolumeUnit,
    Category.SPEED: SpeedUnit,
    Category.TIME: TimeUnit,
    Category.TEMPERATURE: TemperatureUnit,
    Category.CURRENCY: CurrencyCode,
}

_DEFAULT_UNITS: dict[Category, tuple[str, str]] = {
    Category.LENGTH: ("m", "ft"),
    Category.WEIGHT: ("kg", "lb"),
    Category.AREA: ("m²", "ft²"),
    Category.VOLUME: ("l", "gal"),
    Category.SPEED: ("km/h", "mph"),
    Category.TIME: ("h", "min"),
    Category.TEMPERATURE: ("c", "f"),
    Category.CURRENCY: ("USD", "CNY"),
}
