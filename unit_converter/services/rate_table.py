"""Static conversion factor tables.

Every linear factor expresses "1 unit = factor base units"; every
currency factor expresses "units of that currency per 1 USD". The
tables are constants for the life of the process.
"""

from enum import Enum
from types import MappingProxyType

from unit_converter.exceptions import UnknownCurrencyError, UnknownUnitError
from unit_converter.models import (
    AreaUnit,
    Category,
    CurrencyCode,
    LengthUnit,
    SpeedUnit,
    TimeUnit,
    VolumeUnit,
    WeightUnit,
)

LENGTH_RATES = MappingProxyType(
    {
        LengthUnit.METER: 1.0,
        LengthUnit.KILOMETER: 1000.0,
        LengthUnit.CENTIMETER: 0.01,
        LengthUnit.MILLIMETER: 0.001,
        LengthUnit.FOOT: 0.3048,
        LengthUnit.INCH: 0.0254,
        LengthUnit.YARD: 0.9144,
        LengthUnit.MILE: 1609.344,
        LengthUnit.NAUTICAL_MILE: 1852.0,
        LengthUnit.SHI_CHI: 0.33333,
    }
)

WEIGHT_RATES = MappingProxyType(
    {
        WeightUnit.KILOGRAM: 1.0,
        WeightUnit.GRAM: 0.001,
        WeightUnit.MILLIGRAM: 0.000001,
        WeightUnit.POUND: 0.453592,
        WeightUnit.OUNCE: 0.0283495,
        WeightUnit.TONNE: 1000.0,
        WeightUnit.JIN: 0.5,
        WeightUnit.LIANG: 0.05,
    }
)

AREA_RATES = MappingProxyType(
    {
        AreaUnit.SQUARE_METER: 1.0,
        AreaUnit.SQUARE_KILOMETER: 1000000.0,
        AreaUnit.HECTARE: 10000.0,
        AreaUnit.ACRE: 4046.86,
        AreaUnit.SQUARE_FOOT: 0.092903,
        AreaUnit.SQUARE_INCH: 0.00064516,
        AreaUnit.MU: 666.667,
    }
)

VOLUME_RATES = MappingProxyType(
    {
        VolumeUnit.LITER: 1.0,
        VolumeUnit.MILLILITER: 0.001,
        VolumeUnit.CUBIC_METER: 1000.0,
        VolumeUnit.GALLON: 3.78541,
        VolumeUnit.QUART: 0.946353,
        VolumeUnit.PINT: 0.473176,
        VolumeUnit.CUP: 0.236588,
    }
)

SPEED_RATES = MappingProxyType(
    {
        SpeedUnit.METER_PER_SECOND: 1.0,
        SpeedUnit.KILOMETER_PER_HOUR: 0.277778,
        SpeedUnit.MILE_PER_HOUR: 0.44704,
        SpeedUnit.KNOT: 0.514444,
        SpeedUnit.FOOT_PER_SECOND: 0.3048,
    }
)

TIME_RATES = MappingProxyType(
    {
        TimeUnit.SECOND: 1.0,
        TimeUnit.MINUTE: 60.0,
        TimeUnit.HOUR: 3600.0,
        TimeUnit.DAY: 86400.0,
        TimeUnit.WEEK: 604800.0,
        TimeUnit.MONTH: 2592000.0,
        TimeUnit.YEAR: 31536000.0,
    }
)

CURRENCY_RATES = MappingProxyType(
    {
        CurrencyCode.USD: 1.0,
        CurrencyCode.CNY: 7.25,
        CurrencyCode.EUR: 0.92,
        CurrencyCode.GBP: 0.79,
        CurrencyCode.JPY: 151.5,
        CurrencyCode.AUD: 1.52,
        CurrencyCode.CAD: 1.36,
        CurrencyCode.CHF: 0.89,
        CurrencyCode.HKD: 7.82,
        CurrencyCode.KRW: 1350.0,
    }
)

PIVOT_CURRENCY = CurrencyCode.USD

LINEAR_TABLES = MappingProxyType(
    {
        Category.LENGTH: LENGTH_RATES,
        Category.WEIGHT: WEIGHT_RATES,
        Category.AREA: AREA_RATES,
        Category.VOLUME: VOLUME_RATES,
        Category.SPEED: SPEED_RATES,
        Category.TIME: TIME_RATES,
    }
)

# Labels written by earlier versions, resolved to their current unit
UNIT_ALIASES = MappingProxyType(
    {
        Category.AREA: MappingProxyType({"㎡": AreaUnit.SQUARE_METER}),
    }
)


class RateTable:
    """Read-only registry of conversion factors per category."""

    def is_linear(self, category: Category) -> bool:
        """Check if a category converts through a rate table."""
        return category in LINEAR_TABLES

    def units(self, category: Category) -> list[str]:
        """List the unit labels of a category in display order.

        Args:
            category: Conversion category

        Returns:
            Unit labels, e.g. ["m", "km", ...] for length
        """
        return [unit.value for unit in category.unit_type]

    def resolve_unit(self, category: Category, unit: "str | Enum") -> Enum:
        """Resolve a unit label (or alias) to the category's unit enum.

        Args:
            category: Conversion category
            unit: Unit enum member or label

        Returns:
            The matching unit enum member

        Raises:
            UnknownCurrencyError: If category is currency and the code is unknown
            UnknownUnitError: If the unit is not registered for the category
        """
        unit_type = category.unit_type
        if isinstance(unit, unit_type):
            return unit

        label = unit.value if isinstance(unit, Enum) else str(unit)
        try:
            return unit_type(label)
        except ValueError:
            pass

        alias = UNIT_ALIASES.get(category, {}).get(label)
        if alias is not None:
            return alias

        if category is Category.CURRENCY:
            raise UnknownCurrencyError(label, self.units(category))
        raise UnknownUnitError(category.value, label, self.units(category))

    def rate_of(self, category: Category, unit: "str | Enum") -> float:
        """Get the factor of a unit within a category.

        Args:
            category: Linear category or currency
            unit: Unit enum member or label

        Returns:
            Positive factor relative to the category's base unit

        Raises:
            UnknownCurrencyError: If the currency code is unknown
            UnknownUnitError: If the unit is unknown, or the category has no rate table
        """
        if category is Category.CURRENCY:
            return CURRENCY_RATES[self.resolve_unit(category, unit)]

        table = LINEAR_TABLES.get(category)
        if table is None:
            label = unit.value if isinstance(unit, Enum) else str(unit)
            raise UnknownUnitError(category.value, label)
        return table[self.resolve_unit(category, unit)]

    def currency_rate(self, code: "str | CurrencyCode") -> float:
        """Get units of a currency per 1 USD."""
        return self.rate_of(Category.CURRENCY, code)

