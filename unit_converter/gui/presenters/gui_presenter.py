"""GUI presenter implementation using Qt signals for thread-safe communication."""

from PyQt6.QtCore import QObject, pyqtSignal

from unit_converter.models import ConversionResult, HistoryRecord, RateSnapshot


class GUIPresenter(QObject):
    """Thread-safe presenter using Qt signals.

    Implements PresenterProtocol through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.

    The rate board refresh may run off the GUI thread; emitting signals
    queues its output for the main thread.
    """

    info_signal = pyqtSignal(str)
    success_signal = pyqtSignal(str)
    warning_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    result_signal = pyqtSignal(object)  # ConversionResult
    history_signal = pyqtSignal(list)  # List[HistoryRecord]
    rates_signal = pyqtSignal(object)  # RateSnapshot

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        self.info_signal.emit(message)

    def show_success(self, message: str) -> None:
        self.success_signal.emit(message)

    def show_warning(self, message: str) -> None:
        self.warning_signal.emit(message)

    def show_error(self, message: str) -> None:
        self.error_signal.emit(message)

    def show_result(self, result: ConversionResult) -> None:
        self.result_signal.emit(result)

    def show_history(self, records: list[HistoryRecord]) -> None:
        self.history_signal.emit(records)

    def show_rates(self, snapshot: RateSnapshot) -> None:
        self.rates_signal.emit(snapshot)
