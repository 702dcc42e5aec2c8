"""Panel listing recent conversions."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QListWidget, QPushButton, QVBoxLayout, QWidget

from unit_converter.models import HistoryRecord

EMPTY_HISTORY_TEXT = "No conversions yet"


class HistoryWidget(QWidget):
    """Shows the conversion history, newest first, with a clear button."""

    clear_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        header = QHBoxLayout()
        header.addWidget(QLabel("Recent Conversions"))
        header.addStretch()
        self.clear_button = QPushButton("Clear")
        self.clear_button.setToolTip("Delete all recorded conversions")
        self.clear_button.clicked.connect(lambda: self.clear_requested.emit())
        header.addWidget(self.clear_button)
        layout.addLayout(header)

        self.list_widget = QListWidget()
        layout.addWidget(self.list_widget)
        self.setLayout(layout)

        self.set_records([])

    def set_records(self, records: list[HistoryRecord]) -> None:
        """Replace the displayed records.

        Args:
            records: History records, newest first
        """
        self.list_widget.clear()
        if not records:
            self.list_widget.addItem(EMPTY_HISTORY_TEXT)
            self.clear_button.setEnabled(False)
            return

        for record in records:
            self.list_widget.addItem(f"{record}    {record.timestamp}")
        self.clear_button.setEnabled(True)
