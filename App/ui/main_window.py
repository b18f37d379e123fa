"""Main application window for the pattern digitizer."""

import logging
from pathlib import Path

from PIL import Image
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDockWidget,
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from digitizing import DigitizerSession
from errors import CalibrationError, ImageDecodeError
from exporting import BrowserPrintPresenter, ExportEngine
from models import CalibrationPhase, DigitizerConfig, PointKind
from ui.calibration_panel import CalibrationPanel
from ui.canvas import PatternCanvas
from ui.console_panel import ConsolePanel
from ui.image_panel import ImagePanel
from ui.state_panel import StatePanel
from ui.styles import COLORS, FONTS, SIZES, banner_stylesheet
from ui.tools_panel import ActionsPanel, ToolsPanel

logger = logging.getLogger(__name__)


class QtFileExporter:
    """FileExporter that asks where to save with a native dialog."""

    def __init__(self, parent: QWidget, directory: Path):
        self.parent = parent
        self.directory = directory

    def save(self, filename: str, content: bytes, media_type: str) -> Path | None:
        file_path, _ = QFileDialog.getSaveFileName(
            self.parent,
            "Export Pattern",
            str(self.directory / filename),
            "SVG Files (*.svg);;All Files (*)",
        )
        if not file_path:
            return None

        target = Path(file_path)
        target.write_bytes(content)
        # Next dialog opens where the user last saved
        self.directory = target.parent
        logger.info("Wrote %s (%s, %d bytes)", target, media_type, len(content))
        return target


class DigitizerWindow(QMainWindow):
    """Main application window: controls on the left, canvas in the center."""

    def __init__(self, config: DigitizerConfig | None = None):
        super().__init__()
        self.config = config or DigitizerConfig()
        self.setWindowTitle("Patto - Pattern Digitizer")
        self.setMinimumSize(1100, 750)

        # UI component references (created in _setup_ui)
        self.canvas: PatternCanvas
        self.image_panel: ImagePanel
        self.calibration_panel: CalibrationPanel
        self.tools_panel: ToolsPanel
        self.actions_panel: ActionsPanel
        self.state_panel: StatePanel
        self.console_panel: ConsolePanel

        self._setup_ui()

        # AIDEV-NOTE: Session is created after the canvas so its first
        # render lands on screen immediately
        self.session = DigitizerSession(self.config, on_render=self.canvas.set_frame)
        self.print_presenter = BrowserPrintPresenter()
        self.export_engine = ExportEngine(
            QtFileExporter(self, self.config.export_directory),
            self.print_presenter,
            notify=self._notify,
            unit=self.config.distance_unit,
        )

        self._connect_signals()
        self._refresh_controls()

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_menu_bar()

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.addWidget(self._create_control_column())
        layout.addWidget(self._create_canvas_area(), stretch=1)
        self.setCentralWidget(central)

        self._create_dock_widgets()

    def _create_menu_bar(self):
        """Create the menu bar with View menu for panel toggles."""
        self.view_menu = None
        menubar = self.menuBar()
        if menubar is None:
            return
        self.view_menu = menubar.addMenu("&View")

    def _create_control_column(self) -> QWidget:
        """Left column: name, image, calibration, tools, actions, status."""
        column = QWidget()
        column.setFixedWidth(SIZES.CONTROL_PANEL_WIDTH)
        layout = QVBoxLayout(column)
        layout.setContentsMargins(0, 0, 0, 0)

        name_group = QGroupBox("Pattern Name")
        name_layout = QVBoxLayout()
        self.name_edit = QLineEdit(self.config.default_pattern_name)
        self.name_edit.setPlaceholderText("Enter pattern name")
        name_layout.addWidget(self.name_edit)
        name_group.setLayout(name_layout)
        layout.addWidget(name_group)

        self.image_panel = ImagePanel()
        self.calibration_panel = CalibrationPanel(
            self.config.default_known_distance, self.config.distance_unit
        )
        self.tools_panel = ToolsPanel()
        self.actions_panel = ActionsPanel()
        self.state_panel = StatePanel(self.config.distance_unit)

        for panel in (
            self.image_panel,
            self.calibration_panel,
            self.tools_panel,
            self.actions_panel,
            self.state_panel,
        ):
            layout.addWidget(panel)
        layout.addStretch()

        return column

    def _create_canvas_area(self) -> QWidget:
        """Instruction banner above the drawing canvas."""
        area = QWidget()
        layout = QVBoxLayout(area)
        layout.setContentsMargins(0, 0, 0, 0)

        self.status_label = QLabel("")
        self.status_label.setFont(FONTS.STATUS)
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.canvas = PatternCanvas()
        layout.addWidget(self.canvas, stretch=1)

        return area

    def _create_dock_widgets(self):
        """Create the activity console as a dockable widget."""
        self.console_panel = ConsolePanel()
        self.console_dock = QDockWidget("Console", self)
        self.console_dock.setWidget(self.console_panel)
        self.console_dock.setAllowedAreas(
            Qt.DockWidgetArea.BottomDockWidgetArea
            | Qt.DockWidgetArea.RightDockWidgetArea
        )
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, self.console_dock)

        action = self.console_dock.toggleViewAction()
        if action and self.view_menu is not None:
            action.setText("Show Console")
            self.view_menu.addAction(action)

    def _connect_signals(self):
        """Connect all UI signals to handlers."""
        self.name_edit.textChanged.connect(self.session.set_pattern_name)

        self.image_panel.image_loaded.connect(self._on_image_loaded)
        self.image_panel.load_failed.connect(self._on_image_failed)

        self.calibration_panel.distance_spin.valueChanged.connect(
            self._on_distance_changed
        )
        self.calibration_panel.calibrate_btn.clicked.connect(self._start_calibration)

        self.tools_panel.tool_selected.connect(self._on_tool_selected)

        self.actions_panel.export_btn.clicked.connect(self._export_svg)
        self.actions_panel.print_btn.clicked.connect(self._print_report)
        self.actions_panel.clear_btn.clicked.connect(self._clear_pattern)

        self.canvas.surface_clicked.connect(self._on_canvas_clicked)

    # === Session handlers ===

    def _on_image_loaded(self, image: Image.Image):
        self.session.install_image(image)
        self.console_panel.append(
            f"✓ Image loaded ({image.width}x{image.height}); points cleared"
        )
        self._refresh_controls()

    def _on_image_failed(self, error_msg: str):
        self.console_panel.append(error_msg, logging.ERROR)
        QMessageBox.warning(
            self, "Image Error", f"{ImageDecodeError.notice}\n\n{error_msg}"
        )

    def _on_distance_changed(self, value: float):
        try:
            self.session.set_known_distance(value)
        except CalibrationError as e:
            self.console_panel.append(str(e), logging.WARNING)
        self._refresh_controls()

    def _start_calibration(self):
        self.session.begin_calibration()
        self.console_panel.append("📏 Calibration started: click two reference points")
        self._refresh_controls()

    def _on_tool_selected(self, kind: PointKind):
        self.session.set_tool(kind)
        self._refresh_controls()

    def _on_canvas_clicked(self, x: float, y: float):
        """Route a surface click through the session."""
        pattern = self.session.pattern
        was_calibrating = pattern.calibration.active
        try:
            result = self.session.click(x, y)
        except CalibrationError as e:
            self.status_label.setText(f"⚠ {e}")
            self.console_panel.append(str(e), logging.WARNING)
            self.calibration_panel.update_state(pattern)
            return

        if was_calibrating and result is not None:
            self.console_panel.append(
                f"✓ Scale set: {result:.1f} px/{self.config.distance_unit}"
            )
        self._refresh_controls()

    def _export_svg(self):
        saved = self.export_engine.save_vector(self.session.pattern)
        if saved is not None:
            logger.info("Pattern exported to %s", saved)

    def _print_report(self):
        self.export_engine.print_report(self.session.pattern, self.session.snapshot())

    def _clear_pattern(self):
        self.session.clear()
        self.console_panel.append("Pattern cleared.")
        self._refresh_controls()

    def _notify(self, level: int, message: str):
        """Mirror export notices into the console; warnings also pop up."""
        self.console_panel.append(message, level)
        if level >= logging.WARNING:
            QMessageBox.warning(self, "Export", message)

    def closeEvent(self, event):
        """Remove temporary print reports before the window closes."""
        self.print_presenter.close()
        super().closeEvent(event)

    # === Display ===

    def _refresh_controls(self):
        """Sync every panel with the session after a mutation."""
        pattern = self.session.pattern
        calibrating = pattern.calibration.phase is not CalibrationPhase.IDLE

        self.status_label.setText(self.session.status_message())
        if calibrating:
            self.status_label.setStyleSheet(
                banner_stylesheet(COLORS.CALIBRATION_BANNER, COLORS.CALIBRATION_TEXT)
            )
        else:
            self.status_label.setStyleSheet("")

        self.tools_panel.set_tool(self.session.active_tool)
        self.calibration_panel.update_state(pattern)
        self.actions_panel.set_has_points(self.session.has_points)
        self.state_panel.update_state(
            self.session.active_tool, self.session.counts(), pattern
        )
