"""Session status display panel."""

from PyQt6.QtWidgets import QFormLayout, QGroupBox, QLabel

from digitizing.point_store import PointCounts
from models import Pattern, PointKind


class StatePanel(QGroupBox):
    """Panel displaying the active tool, point counts and scale."""

    def __init__(self, unit: str = "inch", parent=None):
        super().__init__("Status", parent)
        self.unit = unit
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QFormLayout()

        self.tool_label = QLabel(PointKind.TRACE.value.capitalize())
        self.points_label = QLabel("0")
        self.trace_label = QLabel("0")
        self.notches_label = QLabel("0")
        self.scale_label = QLabel("Not set")

        layout.addRow("Active Tool:", self.tool_label)
        layout.addRow("Points:", self.points_label)
        layout.addRow("Trace Points:", self.trace_label)
        layout.addRow("Notches:", self.notches_label)
        layout.addRow("Scale:", self.scale_label)

        self.setLayout(layout)

    def update_state(self, tool: PointKind, counts: PointCounts, pattern: Pattern):
        """Update the display with new state values."""
        self.tool_label.setText(tool.value.capitalize())
        self.points_label.setText(str(counts.total))
        self.trace_label.setText(str(counts.trace))
        self.notches_label.setText(str(counts.notch))
        if pattern.calibrated:
            self.scale_label.setText(f"{pattern.scale:.1f} px/{self.unit}")
        else:
            self.scale_label.setText("Not set")
