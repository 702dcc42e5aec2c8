"""Orchestrator tying conversion, history and presentation together."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from unit_converter.interfaces import PresenterProtocol
from unit_converter.models import Category, ConversionResult, HistoryRecord
from unit_converter.services import ConversionEngine, HistoryStore

logger = logging.getLogger(__name__)


@dataclass
class UnitSelection:
    """Currently selected units and last input of one category."""

    from_unit: str
    to_unit: str
    last_value: object = None


class ConverterSession:
    """Collaborator-facing surface used by the CLI and GUI.

    Keeps the from/to unit selection of every category, converts with
    it, and records every non-zero conversion in history. Zero-valued
    conversions are shown but never recorded.
    """

    def __init__(
        self,
        engine: ConversionEngine,
        history: HistoryStore,
        presenter: PresenterProtocol,
        follow_history: bool = True,
    ):
        """Initialize the session.

        Args:
            engine: Conversion engine
            history: History store receiving non-zero conversions
            presenter: Output presenter
            follow_history: Whether history changes are pushed to the presenter
        """
        self.engine = engine
        self.history_store = history
        self.presenter = presenter
        self._selections = {
            category: UnitSelection(*category.default_units) for category in Category
        }
        if follow_history:
            self.history_store.subscribe(self.presenter.show_history)

    def selection(self, category: Category) -> tuple[str, str]:
        """Get the selected (from, to) units of a category."""
        selected = self._selections[category]
        return selected.from_unit, selected.to_unit

    def select_units(
        self,
        category: Category,
        from_unit: str | None = None,
        to_unit: str | None = None,
    ) -> None:
        """Change the selected units of a category.

        Args:
            category: Category to update
            from_unit: New source unit, or None to keep the current one
            to_unit: New target unit, or None to keep the current one

        Raises:
            UnknownUnitError: If a unit is not registered for the category
            UnknownCurrencyError: If a currency code is unknown
        """
        selected = self._selections[category]
        new_from = selected.from_unit if from_unit is None else self._validate(category, from_unit)
        new_to = selected.to_unit if to_unit is None else self._validate(category, to_unit)
        selected.from_unit, selected.to_unit = new_from, new_to

    def convert(self, category: Category, raw_value, record: bool = True) -> ConversionResult:
        """Convert a value with the category's selected units.

        Args:
            category: Conversion category
            raw_value: User input; empty or non-numeric input counts as 0
            record: Whether a non-zero conversion is added to history

        Returns:
            The conversion result

        Raises:
            UnknownUnitError: If a selected unit is not registered
            UnknownCurrencyError: If a selected currency is unknown
        """
        selected = self._selections[category]
        selected.last_value = raw_value

        result = self.engine.convert(category, raw_value, selected.from_unit, selected.to_unit)
        self.presenter.show_result(result)

        if record and not result.is_zero:
            self.history_store.add(HistoryRecord.from_result(result))

        return result

    def convert_length(self, raw_value, from_unit=None, to_unit=None) -> ConversionResult:
        """Convert a length, optionally changing the selected units first."""
        return self._convert_with(Category.LENGTH, raw_value, from_unit, to_unit)

    def convert_weight(self, raw_value, from_unit=None, to_unit=None) -> ConversionResult:
        """Convert a weight, optionally changing the selected units first."""
        return self._convert_with(Category.WEIGHT, raw_value, from_unit, to_unit)

    def convert_area(self, raw_value, from_unit=None, to_unit=None) -> ConversionResult:
        """Convert an area, optionally changing the selected units first."""
        return self._convert_with(Category.AREA, raw_value, from_unit, to_unit)

    def convert_volume(self, raw_value, from_unit=None, to_unit=None) -> ConversionResult:
        """Convert a volume, optionally changing the selected units first."""
        return self._convert_with(Category.VOLUME, raw_value, from_unit, to_unit)

    def convert_speed(self, raw_value, from_unit=None, to_unit=None) -> ConversionResult:
        """Convert a speed, optionally changing the selected units first."""
        return self._convert_with(Category.SPEED, raw_value, from_unit, to_unit)

    def convert_time(self, raw_value, from_unit=None, to_unit=None) -> ConversionResult:
        """Convert a duration, optionally changing the selected units first."""
        return self._convert_with(Category.TIME, raw_value, from_unit, to_unit)

    def convert_temperature(self, raw_value, from_unit=None, to_unit=None) -> ConversionResult:
        """Convert a temperature, optionally changing the selected scales first."""
        return self._convert_with(Category.TEMPERATURE, raw_value, from_unit, to_unit)

    def convert_currency(self, raw_value, from_unit=None, to_unit=None) -> ConversionResult:
        """Convert an amount, optionally changing the selected currencies first."""
        return self._convert_with(Category.CURRENCY, raw_value, from_unit, to_unit)

    def swap(self, category: Category) -> ConversionResult | None:
        """Exchange the from/to units and re-run the last conversion.

        Args:
            category: Category whose units are swapped

        Returns:
            The new result, or None if the category has not converted yet
        """
        selected = self._selections[category]
        selected.from_unit, selected.to_unit = selected.to_unit, selected.from_unit
        logger.debug(f"Swapped {category.value} units: {selected.from_unit} -> {selected.to_unit}")

        if selected.last_value is None:
            return None
        return self.convert(category, selected.last_value)

    def history(self) -> list[HistoryRecord]:
        """Get the conversion history, newest first."""
        return self.history_store.list()

    def clear_history(self) -> None:
        """Delete all conversion history."""
        self.history_store.clear()

    def _convert_with(self, category, raw_value, from_unit, to_unit) -> ConversionResult:
        self.select_units(category, from_unit, to_unit)
        return self.convert(category, raw_value)

    def _validate(self, category: Category, unit: str) -> str:
        """Check a unit label against the category's table (temperature is lenient)."""
        if category is Category.TEMPERATURE and not self.engine.config.strict_temperature:
            return unit
        return self.engine.rate_table.resolve_unit(category, unit).value
