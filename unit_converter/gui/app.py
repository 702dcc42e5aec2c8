"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from unit_converter.gui.main_window import MainWindow


def main():
    """Launch the Unit Converter GUI application."""
    logging.basicConfig(level=logging.WARNING)

    app = QApplication(sys.argv)
    app.setApplicationName("Unit Converter")
    app.setOrganizationName("UnitConverter")

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
