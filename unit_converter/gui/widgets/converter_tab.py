"""Per-category conversion tab."""

from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from unit_converter.exceptions import LookupFailedError
from unit_converter.models import Category, ConversionResult
from unit_converter.orchestration import ConverterSession

# Combo box text for units whose label is not meant for display
UNIT_DISPLAY_NAMES = {
    Category.TEMPERATURE: {"c": "°C", "f": "°F", "k": "K"},
}


class ConverterTab(QWidget):
    """Tab converting live between two units of one category.

    Every edit of the value or either unit converts immediately.
    """

    def __init__(self, category: Category, session: ConverterSession, parent=None):
        """Initialize the converter tab.

        Args:
            category: Category this tab converts
            session: Shared conversion session
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.category = category
        self.session = session
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout()
        form = QFormLayout()

        self.value_input = QLineEdit()
        self.value_input.setPlaceholderText("Enter a value")
        self.value_input.textChanged.connect(self._on_input_changed)
        form.addRow("Value:", self.value_input)

        units = self.session.engine.rate_table.units(self.category)
        from_unit, to_unit = self.session.selection(self.category)
        self.from_combo = self._create_unit_combo(units, from_unit)
        self.to_combo = self._create_unit_combo(units, to_unit)

        unit_row = QHBoxLayout()
        unit_row.addWidget(self.from_combo)
        self.swap_button = QPushButton("⇄")
        self.swap_button.setToolTip("Swap units")
        self.swap_button.clicked.connect(self._on_swap_clicked)
        unit_row.addWidget(self.swap_button)
        unit_row.addWidget(self.to_combo)
        form.addRow("Units:", unit_row)

        self.output = QLineEdit()
        self.output.setReadOnly(True)
        form.addRow("Result:", self.output)

        layout.addLayout(form)
        layout.addStretch()
        self.setLayout(layout)

        self.from_combo.currentIndexChanged.connect(self._on_units_changed)
        self.to_combo.currentIndexChanged.connect(self._on_units_changed)

        self.setAccessibleName(f"{self.category.label} Converter")

    def _create_unit_combo(self, units: list[str], selected: str) -> QComboBox:
        names = UNIT_DISPLAY_NAMES.get(self.category, {})
        combo = QComboBox()
        for unit in units:
            combo.addItem(names.get(unit, unit), unit)
        index = combo.findData(selected)
        if index >= 0:
            combo.setCurrentIndex(index)
        return combo

    def _on_input_changed(self, _text: str) -> None:
        self.convert()

    def _on_units_changed(self, _index: int) -> None:
        self.session.select_units(
            self.category,
            from_unit=self.from_combo.currentData(),
            to_unit=self.to_combo.currentData(),
        )
        self.convert()

    def _on_swap_clicked(self) -> None:
        """Swap the selected units and convert again."""
        result = self.session.swap(self.category)

        from_unit, to_unit = self.session.selection(self.category)
        for combo, unit in ((self.from_combo, from_unit), (self.to_combo, to_unit)):
            combo.blockSignals(True)
            combo.setCurrentIndex(combo.findData(unit))
            combo.blockSignals(False)

        if result is None:
            self.convert()
        else:
            self.output.setText(result.formatted)

    def convert(self) -> ConversionResult | None:
        """Convert the current input and show the result.

        Returns:
            The result, or None if a unit lookup failed
        """
        try:
            result = self.session.convert(self.category, self.value_input.text())
        except LookupFailedError as e:
            self.output.clear()
            self.session.presenter.show_error(str(e))
            return None

        self.output.setText(result.formatted)
        return result
