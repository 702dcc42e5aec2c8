"""Conversion engine for linear, temperature and currency categories."""

import logging
from enum import Enum

from unit_converter.config import ConverterConfig, create_default_config
from unit_converter.exceptions import UnknownUnitError
from unit_converter.models import Category, ConversionResult, TemperatureUnit
from unit_converter.utils.number_utils import format_fixed, parse_number

from .rate_table import RateTable

logger = logging.getLogger(__name__)


def _label(unit) -> str:
    return unit.value if isinstance(unit, Enum) else str(unit)


class ConversionEngine:
    """Pure conversion functions over the static rate tables.

    Linear categories pivot through their base unit, temperature pivots
    through Celsius, and currency pivots through USD.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        rate_table: RateTable | None = None,
    ):
        """Initialize the conversion engine.

        Args:
            config: Configuration (defaults are used if omitted)
            rate_table: Rate table to look factors up in
        """
        self.config = config or create_default_config()
        self.rate_table = rate_table or RateTable()

    def convert_linear(self, value: float, from_unit, to_unit, category: Category) -> float:
        """Convert a value between two units of a linear category.

        Args:
            value: Source value
            from_unit: Source unit label or enum
            to_unit: Target unit label or enum
            category: Linear category whose table both units belong to

        Returns:
            Unrounded converted value

        Raises:
            UnknownUnitError: If either unit is not in the category's table
            ValueError: If the category is temperature or currency
        """
        if not self.rate_table.is_linear(category):
            raise ValueError(f"{category.value} is not a linear category")

        source = self.rate_table.resolve_unit(category, from_unit)
        target = self.rate_table.resolve_unit(category, to_unit)
        from_rate = self.rate_table.rate_of(category, source)
        to_rate = self.rate_table.rate_of(category, target)

        if source is target:
            return value

        base = value * from_rate
        return base / to_rate

    def convert_temperature(self, value: float, from_unit, to_unit) -> float:
        """Convert a temperature through Celsius.

        Unrecognized scales fall back to Celsius: an unknown source is
        read as Celsius and an unknown target receives the Celsius value.
        With ``strict_temperature`` enabled they raise instead.

        Args:
            value: Source temperature
            from_unit: Source scale ("c", "f" or "k")
            to_unit: Target scale ("c", "f" or "k")

        Returns:
            Converted temperature

        Raises:
            UnknownUnitError: In strict mode, if either scale is unknown
        """
        source = self._temperature_unit(from_unit)
        target = self._temperature_unit(to_unit)

        if source is not None and source is target:
            return value

        if source is TemperatureUnit.FAHRENHEIT:
            celsius = (value - 32) * 5 / 9
        elif source is TemperatureUnit.KELVIN:
            celsius = value - 273.15
        else:
            celsius = value

        if target is TemperatureUnit.FAHRENHEIT:
            return celsius * 9 / 5 + 32
        if target is TemperatureUnit.KELVIN:
            return celsius + 273.15
        return celsius

    def convert_currency(self, value: float, from_currency, to_currency) -> float:
        """Convert an amount between currencies, pivoting through USD.

        Args:
            value: Source amount
            from_currency: Source currency code
            to_currency: Target currency code

        Returns:
            Converted amount

        Raises:
            UnknownCurrencyError: If either code is not in the rate table
        """
        from_rate = self.rate_table.currency_rate(from_currency)
        to_rate = self.rate_table.currency_rate(to_currency)

        if _label(from_currency) == _label(to_currency):
            return value

        return value * to_rate / from_rate

    def convert(self, category: Category, raw_value, from_unit, to_unit) -> ConversionResult:
        """Normalize raw input and convert it within a category.

        Empty or non-numeric input is treated as 0.

        Args:
            category: Conversion category
            raw_value: User input (text or number)
            from_unit: Source unit label
            to_unit: Target unit label

        Returns:
            ConversionResult with unrounded and formatted values

        Raises:
            UnknownUnitError: If a unit is not registered for the category
            UnknownCurrencyError: If a currency code is unknown
        """
        value = parse_number(raw_value)

        if category is Category.TEMPERATURE:
            result = self.convert_temperature(value, from_unit, to_unit)
        elif category is Category.CURRENCY:
            result = self.convert_currency(value, from_unit, to_unit)
        else:
            result = self.convert_linear(value, from_unit, to_unit, category)

        logger.debug(f"{category.value}: {value} {_label(from_unit)} -> {result} {_label(to_unit)}")

        return ConversionResult(
            category=category,
            value=value,
            from_unit=_label(from_unit),
            to_unit=_label(to_unit),
            result=result,
            formatted=format_fixed(result, self.config.display_decimals),
        )

    def _temperature_unit(self, unit) -> TemperatureUnit | None:
        """Resolve a temperature scale, or None for the Celsius fallback."""
        try:
            return TemperatureUnit(_label(unit))
        except ValueError:
            if self.config.strict_temperature:
                raise UnknownUnitError(
                    Category.TEMPERATURE.value,
                    _label(unit),
                    [member.value for member in TemperatureUnit],
                ) from None
            logger.debug(f"Unknown temperature unit '{_label(unit)}', treating as Celsius")
            return None
