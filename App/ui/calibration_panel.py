"""Scale calibration controls."""

from PyQt6.QtWidgets import QGroupBox, QLabel, QVBoxLayout

from models import Pattern
from ui.styles import COLORS, banner_stylesheet
from ui.widgets import WidgetFactory


class CalibrationPanel(QGroupBox):
    """Known-distance input, the calibration trigger and the scale readout."""

    def __init__(self, known_distance: float = 1.0, unit: str = "inch", parent=None):
        super().__init__("Scale Calibration", parent)
        self.unit = unit
        self._setup_ui(known_distance)

    def _setup_ui(self, known_distance: float):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        # AIDEV-NOTE: Spinbox minimum keeps the UI from ever submitting a
        # non-positive distance; the session validates again regardless
        self.distance_spin = WidgetFactory.create_double_spinbox(
            0.1,
            1000.0,
            known_distance,
            suffix=" in" if self.unit == "inch" else f" {self.unit}",
            decimals=2,
            step=0.1,
            tooltip="Real-world distance between the two reference points",
        )
        layout.addLayout(
            WidgetFactory.create_labeled_row("Known Distance:", self.distance_spin)
        )

        self.calibrate_btn = WidgetFactory.create_action_button(
            "Set Scale Reference",
            COLORS.TRACE,
            tooltip="Click two points on the canvas that are the known distance apart",
        )
        layout.addWidget(self.calibrate_btn)

        self.scale_label = QLabel("")
        self.scale_label.setStyleSheet(
            banner_stylesheet(COLORS.SCALE_OK_BANNER, COLORS.SCALE_OK_TEXT)
        )
        self.scale_label.setVisible(False)
        layout.addWidget(self.scale_label)

        self.setLayout(layout)

    def update_state(self, pattern: Pattern):
        """Reflect the calibration state of the pattern."""
        active = pattern.calibration.active
        self.calibrate_btn.setEnabled(not active)
        self.calibrate_btn.setText(
            "Calibrating..." if active else "Set Scale Reference"
        )

        if pattern.calibrated:
            self.scale_label.setText(f"✓ Scale set: {pattern.scale:.1f} px/{self.unit}")
            self.scale_label.setVisible(True)
        else:
            self.scale_label.setVisible(False)
