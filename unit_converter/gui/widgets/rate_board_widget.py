"""Exchange rate board panel."""

from PyQt6.QtWidgets import QFormLayout, QLabel, QWidget

from unit_converter.models import RateSnapshot
from unit_converter.services.exchange_rate_board import BOARD_CURRENCIES, QUOTE_CURRENCY


class RateBoardWidget(QWidget):
    """Shows reference CNY quotes and when they were last refreshed."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QFormLayout()

        self.rate_labels: dict[str, QLabel] = {}
        for board_id, code in BOARD_CURRENCIES.items():
            label = QLabel("-")
            self.rate_labels[board_id] = label
            layout.addRow(f"{code.value}/{QUOTE_CURRENCY.value}:", label)

        self.updated_label = QLabel("-")
        layout.addRow("Updated:", self.updated_label)
        self.setLayout(layout)

    def set_snapshot(self, snapshot: RateSnapshot) -> None:
        """Show a new set of rates.

        Args:
            snapshot: Rates keyed by board id
        """
        for board_id, rate in snapshot.rates.items():
            label = self.rate_labels.get(board_id)
            if label is not None:
                label.setText(f"{rate:g}")
        self.updated_label.setText(snapshot.updated_label)
