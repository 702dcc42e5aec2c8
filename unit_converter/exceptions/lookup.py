"""Rate table lookup exceptions."""

from collections.abc import Iterable

from .base import UnitConverterException


class LookupFailedError(UnitConverterException):
    """Raised when a unit or currency is not registered in a rate table."""

    pass


class UnknownUnitError(LookupFailedError):
    """Raised when a unit is not registered for the requested category."""

    def __init__(self, category: str, unit: str, valid: Iterable[str] = ()):
        self.category = category
        self.unit = unit
        self.valid = list(valid)
        message = f"Unknown {category} unit '{unit}'"
        if self.valid:
            message += f". Valid: {', '.join(self.valid)}"
        super().__init__(message)


class UnknownCurrencyError(LookupFailedError):
    """Raised when a currency code is not in the exchange rate table."""

    def __init__(self, code: str, valid: Iterable[str] = ()):
        self.code = code
        self.valid = list(valid)
        message = f"Unknown currency '{code}'"
        if self.valid:
            message += f". Valid: {', '.join(self.valid)}"
        super().__init__(message)
