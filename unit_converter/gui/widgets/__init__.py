"""Widgets for the Unit Converter GUI."""

from .converter_tab import ConverterTab
from .history_widget import HistoryWidget
from .rate_board_widget import RateBoardWidget

__all__ = ["ConverterTab", "HistoryWidget", "RateBoardWidget"]
