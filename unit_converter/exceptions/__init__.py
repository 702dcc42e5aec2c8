"""Custom exceptions for Unit Converter."""

from .base import ConfigurationError, UnitConverterException
from .lookup import LookupFailedError, UnknownCurrencyError, UnknownUnitError
from .storage import MalformedLedgerError

__all__ = [
    "UnitConverterException",
    "ConfigurationError",
    "LookupFailedError",
    "UnknownUnitError",
    "UnknownCurrencyError",
    "MalformedLedgerError",
]
