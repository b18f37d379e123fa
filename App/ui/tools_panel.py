"""Drawing tool selection and pattern action panels."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QButtonGroup, QGroupBox, QVBoxLayout

from models import PointKind
from ui.styles import COLORS
from ui.widgets import WidgetFactory


class ToolsPanel(QGroupBox):
    """Exclusive Trace / Notch tool buttons."""

    tool_selected = pyqtSignal(object)  # PointKind

    def __init__(self, parent=None):
        super().__init__("Drawing Tools", parent)
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        tool_colors = {PointKind.TRACE: COLORS.TRACE, PointKind.NOTCH: COLORS.NOTCH}
        self.tool_group = QButtonGroup(self)
        self.tool_group.setExclusive(True)
        self.tool_buttons = {}

        for kind in PointKind:
            btn = WidgetFactory.create_action_button(
                kind.label, tool_colors[kind], checkable=True
            )
            self.tool_group.addButton(btn)
            self.tool_buttons[kind] = btn
            layout.addWidget(btn)

        self.tool_buttons[PointKind.TRACE].setChecked(True)
        self.setLayout(layout)

    def _connect_signals(self):
        """Connect internal signals."""
        for kind, btn in self.tool_buttons.items():
            btn.clicked.connect(lambda _, k=kind: self.tool_selected.emit(k))

    def set_tool(self, kind: PointKind):
        """Check the button for kind without emitting tool_selected."""
        self.tool_buttons[kind].setChecked(True)


class ActionsPanel(QGroupBox):
    """Export, print and clear buttons; export and print need recorded points."""

    def __init__(self, parent=None):
        super().__init__("Pattern Actions", parent)
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.export_btn = WidgetFactory.create_action_button(
            "Export SVG", COLORS.EXPORT, tooltip="Save the trace and notches as SVG"
        )
        self.print_btn = WidgetFactory.create_action_button(
            "Print PDF", COLORS.PRINT, tooltip="Open a printable report of the canvas"
        )
        self.clear_btn = WidgetFactory.create_action_button(
            "Clear All", COLORS.CLEAR, tooltip="Remove every point (scale is kept)"
        )

        for btn in (self.export_btn, self.print_btn, self.clear_btn):
            layout.addWidget(btn)

        self.set_has_points(False)
        self.setLayout(layout)

    def set_has_points(self, has_points: bool):
        """Enable export and print only when there is something to export.

        AIDEV-NOTE: Clear stays enabled; it also removes calibration points,
        which can exist before any trace or notch is recorded.
        """
        for btn in (self.export_btn, self.print_btn):
            btn.setEnabled(has_points)
