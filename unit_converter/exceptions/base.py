"""Base exception classes for Unit Converter."""


class UnitConverterException(Exception):
    """Base exception for all Unit Converter errors.

    All custom exceptions in the unit_converter package should inherit
    from this base class for consistent error handling.
    """

    pass


class ConfigurationError(UnitConverterException):
    """Raised when a configuration value is out of range."""

    pass
