"""Unit enums for every conversion category.

Each member's value is its serialization label, exactly as it is shown
to the user and written to history. Labels are case-sensitive.
"""

from enum import Enum


class LengthUnit(str, Enum):
    """Length units (base: meter)."""

    METER = "m"
    KILOMETER = "km"
    CENTIMETER = "cm"
    MILLIMETER = "mm"
    FOOT = "ft"
    INCH = "in"
    YARD = "yd"
    MILE = "mile"
    NAUTICAL_MILE = "nmi"
    SHI_CHI = "市尺"


class WeightUnit(str, Enum):
    """Weight units (base: kilogram)."""

    KILOGRAM = "kg"
    GRAM = "g"
    MILLIGRAM = "mg"
    POUND = "lb"
    OUNCE = "oz"
    TONNE = "t"
    JIN = "斤"
    LIANG = "两"


class AreaUnit(str, Enum):
    """Area units (base: square meter)."""

    SQUARE_METER = "m²"
    SQUARE_KILOMETER = "km²"
    HECTARE = "ha"
    ACRE = "acre"
    SQUARE_FOOT = "ft²"
    SQUARE_INCH = "in²"
    MU = "亩"


class VolumeUnit(str, Enum):
    """Volume units (base: liter)."""

    LITER = "l"
    MILLILITER = "ml"
    CUBIC_METER = "m³"
    GALLON = "gal"
    QUART = "qt"
    PINT = "pt"
    CUP = "cup"


class SpeedUnit(str, Enum):
    """Speed units (base: meter per second)."""

    METER_PER_SECOND = "m/s"
    KILOMETER_PER_HOUR = "km/h"
    MILE_PER_HOUR = "mph"
    KNOT = "knot"
    FOOT_PER_SECOND = "ft/s"


class TimeUnit(str, Enum):
    """Time units (base: second)."""

    SECOND = "s"
    MINUTE = "min"
    HOUR = "h"
    DAY = "d"
    WEEK = "week"
    MONTH = "month"  # Fixed 30 days
    YEAR = "year"  # Fixed 365 days, no leap years


class TemperatureUnit(str, Enum):
    """Temperature scales (converted through Celsius)."""

    CELSIUS = "c"
    FAHRENHEIT = "f"
    KELVIN = "k"


class CurrencyCode(str, Enum):
    """ISO currency codes (pivot: USD)."""

    USD = "USD"
    CNY = "CNY"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    AUD = "AUD"
    CAD = "CAD"
    CHF = "CHF"
    HKD = "HKD"
    KRW = "KRW"
