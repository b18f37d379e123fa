"""Patto Pattern Digitizer - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from logging_config import setup_logging
from models import DigitizerConfig
from ui.main_window import DigitizerWindow


def main():
    """Launch the pattern digitizer application."""
    config = DigitizerConfig()
    setup_logging(config.log_level)

    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Patto Pattern Digitizer")
    app.setApplicationName("PattoDigitizer")
    app.setOrganizationName("Patto")

    window = DigitizerWindow(config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
