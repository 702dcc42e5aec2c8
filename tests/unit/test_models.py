"""Tests for data models."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from unit_converter.exceptions import MalformedLedgerError
from unit_converter.models import (
    Category,
    ConversionResult,
    CurrencyCode,
    HistoryRecord,
    LengthUnit,
    RateSnapshot,
)


class TestCategory:
    """Tests for the Category enum."""

    def test_labels(self):
        assert Category.LENGTH.label == "Length"
        assert Category.CURRENCY.label == "Currency"

    def test_unit_type(self):
        assert Category.LENGTH.unit_type is LengthUnit
        assert Category.CURRENCY.unit_type is CurrencyCode

    def test_default_units_are_registered(self):
        """Every category's default units should belong to its unit enum."""
        for category in Category:
            valid = {unit.value for unit in category.unit_type}
            from_unit, to_unit = category.default_units
            assert from_unit in valid
            assert to_unit in valid

    def test_parse_is_case_insensitive(self):
        assert Category.parse("Length") is Category.LENGTH
        assert Category.parse(" TEMPERATURE ") is Category.TEMPERATURE

    def test_parse_passes_through_members(self):
        assert Category.parse(Category.AREA) is Category.AREA

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown category"):
            Category.parse("energy")


class TestConversionResult:
    """Tests for ConversionResult."""

    def _make(self, value=1.0):
        return ConversionResult(
            category=Category.LENGTH,
            value=value,
            from_unit="km",
            to_unit="m",
            result=value * 1000,
            formatted=f"{value * 1000:.4f}",
        )

    def test_str(self):
        assert str(self._make()) == "1 km = 1000.0000 m"

    def test_str_keeps_all_digits(self):
        assert str(self._make(1234567.0)).startswith("1234567 km = ")

    def test_is_zero(self):
        assert self._make(0.0).is_zero
        assert not self._make(2.0).is_zero

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            self._make().value = 5  # type: ignore[misc]


class TestHistoryRecord:
    """Tests for HistoryRecord serialization."""

    def test_from_result(self):
        """Should copy the inputs, the formatted value and the category label."""
        result = ConversionResult(
            category=Category.WEIGHT,
            value=2.0,
            from_unit="斤",
            to_unit="kg",
            result=1.0,
            formatted="1.0000",
        )
        record = HistoryRecord.from_result(result)
        assert record.from_value == 2.0
        assert record.from_unit == "斤"
        assert record.to_value == "1.0000"
        assert record.to_unit == "kg"
        assert record.category == "Weight"
        assert record.timestamp == ""

    def test_to_dict_layout(self, make_record):
        data = make_record(timestamp="2026/10/18 09:05:00").to_dict()
        assert data == {
            "fromValue": 1.0,
            "fromUnit": "km",
            "toValue": "1000.0000",
            "toUnit": "m",
            "type": "Length",
            "timestamp": "2026/10/18 09:05:00",
        }

    def test_from_dict_accepts_integer_value(self):
        record = HistoryRecord.from_dict(
            {
                "fromValue": 3,
                "fromUnit": "h",
                "toValue": "180.0000",
                "toUnit": "min",
                "type": "Time",
                "timestamp": "now",
            }
        )
        assert record.from_value == 3.0
        assert isinstance(record.from_value, float)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"fromValue": True, "fromUnit": "m", "toValue": "1", "toUnit": "m", "type": "L",
             "timestamp": "t"},
            {"fromValue": 1, "fromUnit": 5, "toValue": "1", "toUnit": "m", "type": "L",
             "timestamp": "t"},
            {"fromValue": 1, "fromUnit": "m", "toValue": "1", "toUnit": "m", "type": "L"},
        ],
    )
    def test_from_dict_rejects_bad_records(self, data):
        with pytest.raises(MalformedLedgerError):
            HistoryRecord.from_dict(data)

    def test_str(self, make_record):
        assert str(make_record()) == "1 km → 1000.0000 m"

    def test_str_keeps_all_digits(self):
        record = HistoryRecord(1234567.0, "m", "1234.5670", "km", "Length")
        assert str(record) == "1234567 m → 1234.5670 km"


class TestRateSnapshot:
    """Tests for RateSnapshot."""

    def test_updated_label_pads_minutes(self):
        snapshot = RateSnapshot(rates={}, updated_at=datetime(2026, 10, 18, 9, 5))
        assert snapshot.updated_label == "9:05"
