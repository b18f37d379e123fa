"""UI components for the Patto pattern digitizer.

This package contains the PyQt6 shell: the main window, the drawing
canvas and the control panels around it.
"""

from ui.calibration_panel import CalibrationPanel
from ui.canvas import PatternCanvas
from ui.console_panel import ConsolePanel
from ui.image_panel import ImagePanel
from ui.main_window import DigitizerWindow
from ui.state_panel import StatePanel
from ui.tools_panel import ActionsPanel, ToolsPanel

__all__ = [
    "DigitizerWindow",
    "PatternCanvas",
    "ImagePanel",
    "CalibrationPanel",
    "ToolsPanel",
    "ActionsPanel",
    "StatePanel",
    "ConsolePanel",
]
