"""Centralized styling constants for the digitizer UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QColor, QFont


class ThemeColors:
    """Application theme colors for the canvas frame and panels."""

    # Canvas letterbox and frame
    CANVAS_BACKGROUND = QColor(255, 255, 255)
    CANVAS_BORDER = QColor(226, 232, 240)

    # Tool buttons (match marker colors on the canvas)
    TRACE = "#3b82f6"
    NOTCH = "#f59e0b"

    # Action buttons
    EXPORT = "#22c55e"
    PRINT = "#6366f1"
    CLEAR = "#ef4444"
    DISABLED = "#cbd5e1"

    # Status banners
    CALIBRATION_BANNER = "#eff6ff"
    CALIBRATION_TEXT = "#1e40af"
    SCALE_OK_BANNER = "#f0fdf4"
    SCALE_OK_TEXT = "#166534"


class Fonts:
    """Standard application fonts."""

    CONSOLE = QFont("Courier", 9)
    STATUS = QFont("Arial", 11)


class Sizes:
    """Standard widget sizes and constraints."""

    CONSOLE_MIN_HEIGHT = 100

    # Image preview thumbnail
    PREVIEW_MIN_SIZE = (200, 120)
    PREVIEW_MAX_SIZE = (300, 200)

    # Left control column
    CONTROL_PANEL_WIDTH = 320

    # Canvas
    CANVAS_MIN_SIZE = (400, 300)

    BUTTON_MIN_HEIGHT = 35


COLORS = ThemeColors
FONTS = Fonts
SIZES = Sizes


def action_button_stylesheet(color: str) -> str:
    """Generate a filled action button stylesheet.

    Args:
        color: Background color for the enabled state

    Returns:
        CSS stylesheet string
    """
    return f"""
        QPushButton {{
            background-color: {color};
            color: white;
            border: none;
            border-radius: 4px;
            padding: 8px 20px;
            font-weight: bold;
        }}
        QPushButton:checked {{
            border: 2px solid #1e293b;
        }}
        QPushButton:disabled {{
            background-color: {ThemeColors.DISABLED};
            color: #64748b;
        }}
    """


def banner_stylesheet(background: str, text: str) -> str:
    """Generate a status banner stylesheet."""
    return (
        f"background-color: {background}; color: {text}; "
        "border-radius: 4px; padding: 8px;"
    )
