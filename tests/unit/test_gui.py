"""Tests for the PyQt6 GUI.

Requires PyQt6 to be importable. Tests are skipped if PyQt6 or a display is unavailable.
"""

import os

import pytest

from unit_converter.models import Category
from unit_converter.services import InMemoryStorage

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Skip all tests in this module if PyQt6 is not available
try:
    from PyQt6.QtWidgets import QApplication

    # Create QApplication if not already running (needed for any widget)
    _app = QApplication.instance() or QApplication([])
    _HAS_QT = True
except (ImportError, RuntimeError):
    _HAS_QT = False

pytestmark = pytest.mark.skipif(not _HAS_QT, reason="PyQt6 not available")


@pytest.fixture
def window(test_config):
    """Create a MainWindow backed by in-memory history."""
    from unit_converter.gui.main_window import MainWindow

    win = MainWindow(test_config, storage=InMemoryStorage())
    yield win
    win.rate_task.stop()


class TestConverterTab:
    """Tests for ConverterTab live conversion."""

    def test_one_tab_per_category(self, window):
        assert window.tabs.count() == len(Category)

    def test_typing_converts(self, window):
        tab = window.converter_tabs[Category.LENGTH]
        tab.value_input.setText("1")
        assert tab.output.text() == "3.2808"

    def test_changing_unit_converts(self, window):
        tab = window.converter_tabs[Category.LENGTH]
        tab.value_input.setText("1")
        tab.to_combo.setCurrentIndex(tab.to_combo.findData("cm"))
        assert tab.output.text() == "100.0000"

    def test_swap_button(self, window):
        tab = window.converter_tabs[Category.LENGTH]
        tab.value_input.setText("1")
        tab.swap_button.click()
        assert tab.from_combo.currentData() == "ft"
        assert tab.to_combo.currentData() == "m"
        assert tab.output.text() == "0.3048"

    def test_temperature_display_names(self, window):
        tab = window.converter_tabs[Category.TEMPERATURE]
        assert tab.from_combo.currentText() == "°C"
        assert tab.from_combo.currentData() == "c"


class TestHistoryWidget:
    """Tests for the history panel."""

    def test_empty_placeholder(self, window):
        assert window.history_widget.list_widget.count() == 1
        assert not window.history_widget.clear_button.isEnabled()

    def test_conversion_appears(self, window):
        window.converter_tabs[Category.CURRENCY].value_input.setText("100")
        item = window.history_widget.list_widget.item(0)
        assert item.text().startswith("100 USD → 725.0000 CNY")

    def test_zero_not_listed(self, window):
        window.converter_tabs[Category.LENGTH].value_input.setText("0")
        assert window.session.history() == []

    def test_clear_button(self, window):
        window.converter_tabs[Category.LENGTH].value_input.setText("2")
        window.history_widget.clear_button.click()
        assert window.session.history() == []
        assert window.history_widget.list_widget.count() == 1


class TestRateBoardWidget:
    """Tests for the exchange rate board panel."""

    def test_populated_on_start(self, window):
        assert window.rate_task.is_running
        assert window.rate_board_widget.rate_labels["usd-cny"].text() == "7.25"
