"""Tests for rate_table module."""

import pytest

from unit_converter.exceptions import UnknownCurrencyError, UnknownUnitError
from unit_converter.models import AreaUnit, Category, CurrencyCode, LengthUnit
from unit_converter.services.rate_table import (
    CURRENCY_RATES,
    LINEAR_TABLES,
    PIVOT_CURRENCY,
    RateTable,
)


@pytest.fixture
def table():
    return RateTable()


class TestTables:
    """Tests for the static factor tables."""

    def test_every_linear_factor_is_positive(self):
        """Every registered factor should be a positive number."""
        for rates in LINEAR_TABLES.values():
            assert all(factor > 0 for factor in rates.values())

    def test_every_unit_enum_member_has_a_factor(self):
        """Each linear category's unit enum should be fully covered by its table."""
        for category, rates in LINEAR_TABLES.items():
            assert set(rates) == set(category.unit_type)

    def test_base_units_map_to_one(self, table):
        """The base unit of each linear category should have factor 1."""
        assert table.rate_of(Category.LENGTH, "m") == 1.0
        assert table.rate_of(Category.WEIGHT, "kg") == 1.0
        assert table.rate_of(Category.AREA, "m²") == 1.0
        assert table.rate_of(Category.VOLUME, "l") == 1.0
        assert table.rate_of(Category.SPEED, "m/s") == 1.0
        assert table.rate_of(Category.TIME, "s") == 1.0

    def test_pivot_currency_maps_to_one(self):
        """USD should be the pivot with rate exactly 1."""
        assert PIVOT_CURRENCY is CurrencyCode.USD
        assert CURRENCY_RATES[CurrencyCode.USD] == 1.0

    def test_tables_are_read_only(self):
        """The module-level tables should reject mutation."""
        with pytest.raises(TypeError):
            LINEAR_TABLES[Category.LENGTH][LengthUnit.METER] = 2.0  # type: ignore[index]

    def test_traditional_units(self, table):
        """Non-ASCII traditional units should resolve with their stated factors."""
        assert table.rate_of(Category.LENGTH, "市尺") == 0.33333
        assert table.rate_of(Category.WEIGHT, "斤") == 0.5
        assert table.rate_of(Category.WEIGHT, "两") == 0.05
        assert table.rate_of(Category.AREA, "亩") == 666.667

    def test_calendar_approximations(self, table):
        """Month and year should use the fixed 30-day and 365-day lengths."""
        assert table.rate_of(Category.TIME, "month") == 2592000.0
        assert table.rate_of(Category.TIME, "year") == 31536000.0

    def test_currency_rates(self, table):
        """Currency rates should match the reference table."""
        assert table.currency_rate("CNY") == 7.25
        assert table.currency_rate("JPY") == 151.5
        assert table.currency_rate(CurrencyCode.KRW) == 1350.0


class TestRateOf:
    """Tests for RateTable.rate_of lookups."""

    def test_accepts_enum_member(self, table):
        """Should accept a unit enum member as well as its label."""
        assert table.rate_of(Category.LENGTH, LengthUnit.KILOMETER) == 1000.0

    def test_unknown_unit_raises(self, table):
        """Should raise UnknownUnitError for an unregistered unit."""
        with pytest.raises(UnknownUnitError) as exc_info:
            table.rate_of(Category.LENGTH, "furlong")
        assert exc_info.value.unit == "furlong"
        assert exc_info.value.category == "length"
        assert "m" in exc_info.value.valid

    def test_labels_are_case_sensitive(self, table):
        """Should not match labels that differ only in case."""
        with pytest.raises(UnknownUnitError):
            table.rate_of(Category.LENGTH, "KM")

    def test_unit_from_other_category_raises(self, table):
        """Should only look units up in the requested category's table."""
        with pytest.raises(UnknownUnitError):
            table.rate_of(Category.WEIGHT, "km")

    def test_unknown_currency_raises(self, table):
        """Should raise UnknownCurrencyError for an unknown code."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            table.rate_of(Category.CURRENCY, "XYZ")
        assert exc_info.value.code == "XYZ"

    def test_temperature_has_no_rate(self, table):
        """Temperature is not a rate table and should raise UnknownUnitError."""
        with pytest.raises(UnknownUnitError):
            table.rate_of(Category.TEMPERATURE, "c")

    def test_legacy_square_meter_alias(self, table):
        """The legacy ㎡ label should resolve to square meters."""
        assert table.resolve_unit(Category.AREA, "㎡") is AreaUnit.SQUARE_METER
        assert table.rate_of(Category.AREA, "㎡") == 1.0


class TestUnits:
    """Tests for RateTable.units and is_linear."""

    def test_length_units_in_order(self, table):
        """Should list length units in table order."""
        assert table.units(Category.LENGTH) == [
            "m", "km", "cm", "mm", "ft", "in", "yd", "mile", "nmi", "市尺",
        ]

    def test_currency_units(self, table):
        """Should list all ten currency codes."""
        assert len(table.units(Category.CURRENCY)) == 10
        assert table.units(Category.CURRENCY)[0] == "USD"

    def test_temperature_units(self, table):
        """Should list the three temperature scales."""
        assert table.units(Category.TEMPERATURE) == ["c", "f", "k"]

    def test_is_linear(self, table):
        """Only the six rate-table categories should be linear."""
        linear = {category for category in Category if table.is_linear(category)}
        assert Category.TEMPERATURE not in linear
        assert Category.CURRENCY not in linear
        assert len(linear) == 6
