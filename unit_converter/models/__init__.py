"""Data models for Unit Converter."""

from .category import Category
from .conversion import ConversionResult
from .history import HistoryRecord
from .rates import RateSnapshot
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

__all__ = [
    "Category",
    "ConversionResult",
    "HistoryRecord",
    "RateSnapshot",
    "LengthUnit",
    "WeightUnit",
    "AreaUnit",
    "VolumeUnit",
    "SpeedUnit",
    "TimeUnit",
    "TemperatureUnit",
    "CurrencyCode",
]
