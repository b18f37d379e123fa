"""Activity log panel."""

import logging
from datetime import datetime

from PyQt6.QtWidgets import QGroupBox, QPushButton, QTextEdit, QVBoxLayout

from ui.styles import FONTS, SIZES


def level_marker(level: int) -> str:
    """Symbol shown before warning and error entries."""
    if level >= logging.ERROR:
        return "❌"
    if level >= logging.WARNING:
        return "⚠"
    return ""


def format_entry(message: str, level: int, timestamp: datetime) -> str:
    """Build one log line: ``[HH:MM:SS] <marker> message``."""
    marker = level_marker(level)
    text = f"{marker} {message}" if marker else message
    return f"[{timestamp:%H:%M:%S}] {text}"


class ConsolePanel(QGroupBox):
    """Timestamped record of the session: image loads, calibration, exports."""

    def __init__(self, parent=None):
        super().__init__("Activity", parent)
        self.warning_count = 0
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.console = QTextEdit()
        self.console.setReadOnly(True)
        self.console.setMinimumHeight(SIZES.CONSOLE_MIN_HEIGHT)
        self.console.setFont(FONTS.CONSOLE)
        layout.addWidget(self.console)

        clear_console_btn = QPushButton("Clear Log")
        clear_console_btn.clicked.connect(self.clear)
        layout.addWidget(clear_console_btn)

        self.setLayout(layout)

    def append(self, message: str, level: int = logging.INFO):
        """Add a timestamped entry; warnings are marked and counted."""
        if level >= logging.WARNING:
            self.warning_count += 1
        self.console.append(format_entry(message, level, datetime.now()))
        scrollbar = self.console.verticalScrollBar()
        if scrollbar:
            scrollbar.setValue(scrollbar.maximum())

    def clear(self):
        """Clear all log output."""
        self.console.clear()
        self.warning_count = 0
