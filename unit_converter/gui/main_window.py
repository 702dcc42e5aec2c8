"""Main window for Unit Converter GUI."""

from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QSplitter,
    QStatusBar,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from unit_converter import __version__
from unit_converter.config import ConverterConfig, create_default_config
from unit_converter.gui.presenters import GUIPresenter
from unit_converter.gui.widgets import ConverterTab, HistoryWidget, RateBoardWidget
from unit_converter.gui.workers import QtIntervalTask
from unit_converter.interfaces import KeyValueStorage
from unit_converter.models import Category
from unit_converter.orchestration import create_session
from unit_converter.services import ExchangeRateBoard

WINDOW_MIN_WIDTH = 640
WINDOW_MIN_HEIGHT = 420
STATUS_MESSAGE_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """Main application window for Unit Converter.

    This window provides:
    - One converter tab per category
    - The recent conversion history
    - The exchange rate board, refreshed on a timer
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        storage: KeyValueStorage | None = None,
    ):
        """Initialize the main window.

        Args:
            config: Configuration (defaults are used if omitted)
            storage: Optional history storage override
        """
        super().__init__()
        self.config = config or create_default_config()

        self.presenter = GUIPresenter(self)
        self.session = create_session(self.config, self.presenter, storage)
        self.rate_board = ExchangeRateBoard(self.presenter)
        self.rate_task = QtIntervalTask(
            self.rate_board.refresh, self.config.rate_refresh_interval, parent=self
        )

        self._setup_ui()
        self._connect_presenter_signals()

        self.history_widget.set_records(self.session.history())
        self.rate_task.start()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle("Unit Converter")
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.tabs = QTabWidget()
        self.converter_tabs: dict[Category, ConverterTab] = {}
        for category in Category:
            tab = ConverterTab(category, self.session)
            self.converter_tabs[category] = tab
            self.tabs.addTab(tab, category.label)

        self.history_widget = HistoryWidget()
        self.history_widget.clear_requested.connect(self._on_clear_history)
        self.rate_board_widget = RateBoardWidget()

        side_panel = QWidget()
        side_layout = QVBoxLayout()
        side_layout.addWidget(self.history_widget)
        side_layout.addWidget(self.rate_board_widget)
        side_panel.setLayout(side_layout)

        splitter = QSplitter()
        splitter.addWidget(self.tabs)
        splitter.addWidget(side_panel)

        central_widget = QWidget()
        central_layout = QHBoxLayout()
        central_layout.addWidget(splitter)
        central_widget.setLayout(central_layout)
        self.setCentralWidget(central_widget)

        self.setStatusBar(QStatusBar())
        self._setup_menu_bar()
        self._setup_shortcuts()

    def _setup_menu_bar(self) -> None:
        """Set up the application menu bar."""
        help_menu = self.menuBar().addMenu("&Help")
        about_action = help_menu.addAction("About Unit Converter")
        about_action.setShortcut(QKeySequence("F1"))
        about_action.triggered.connect(self._show_about)

    def _setup_shortcuts(self) -> None:
        """Set up global keyboard shortcuts."""
        # Tab switching shortcuts (Ctrl+1..8)
        for i in range(1, self.tabs.count() + 1):
            shortcut = QShortcut(QKeySequence(f"Ctrl+{i}"), self)
            shortcut.activated.connect(lambda idx=i - 1: self.tabs.setCurrentIndex(idx))

    def _connect_presenter_signals(self) -> None:
        self.presenter.history_signal.connect(self.history_widget.set_records)
        self.presenter.rates_signal.connect(self.rate_board_widget.set_snapshot)
        self.presenter.info_signal.connect(self._on_status_message)
        self.presenter.success_signal.connect(self._on_status_message)
        self.presenter.warning_signal.connect(self._on_status_message)
        self.presenter.error_signal.connect(self._on_status_message)

    def _on_status_message(self, message: str) -> None:
        self.statusBar().showMessage(message, STATUS_MESSAGE_TIMEOUT_MS)

    def _on_clear_history(self) -> None:
        self.session.clear_history()
        self.presenter.show_success("Conversion history cleared")

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About Unit Converter",
            f"Unit Converter {__version__}\n\n"
            "Exchange rates are static reference values, not live market data.",
        )

    def closeEvent(self, event) -> None:
        """Stop the rate board timer before closing."""
        self.rate_task.stop()
        super().closeEvent(event)
