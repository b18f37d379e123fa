"""Data models and constants for the Patto pattern digitizer."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# AIDEV-NOTE: Fixed internal drawing surface - all stored coordinates use it
SURFACE_WIDTH = 800  # px
SURFACE_HEIGHT = 600  # px
GRID_PITCH = 20  # px between placeholder grid lines


class PointKind(Enum):
    """What a recorded point marks on the pattern piece."""

    TRACE = "trace"  # Outline of the pattern piece
    NOTCH = "notch"  # Construction reference mark

    @property
    def label(self) -> str:
        """Get display label for the tool that records this kind."""
        labels = {
            PointKind.TRACE: "Trace Outline",
            PointKind.NOTCH: "Add Notches",
        }
        return labels[self]


class CalibrationPhase(Enum):
    """Calibration progress, derived from CalibrationState."""

    IDLE = "Idle"
    AWAITING_FIRST = "Awaiting first point"
    AWAITING_SECOND = "Awaiting second point"


@dataclass(frozen=True)
class Point:
    """A recorded point in surface pixel coordinates."""

    x: float
    y: float
    kind: PointKind


@dataclass(frozen=True)
class CalibrationPoint:
    """One of the two reference points used to derive the scale."""

    x: float
    y: float


@dataclass
class CalibrationState:
    """Transient calibration sub-state of a pattern."""

    points: "list[CalibrationPoint]" = field(default_factory=list)
    known_distance: float = 1.0  # real-world units between the two points
    active: bool = False

    @property
    def phase(self) -> CalibrationPhase:
        if not self.active:
            return CalibrationPhase.IDLE
        if not self.points:
            return CalibrationPhase.AWAITING_FIRST
        return CalibrationPhase.AWAITING_SECOND


@dataclass
class Pattern:
    """Aggregate root for one editing session.

    AIDEV-NOTE: scale is pixels per real-world unit. It is only overwritten
    by a completed calibration; clearing the pattern keeps it.
    """

    name: str = "Pattern 1"
    scale: float = 1.0
    points: "list[Point]" = field(default_factory=list)
    calibration: CalibrationState = field(default_factory=CalibrationState)
    calibrated: bool = False  # True once scale came from a calibration


# --- Rendering / Session Configuration ---


@dataclass
class RenderConfig:
    """Colors and sizes used by the render pipeline."""

    width: int = SURFACE_WIDTH
    height: int = SURFACE_HEIGHT

    # Placeholder background
    gradient_start: "tuple[int, int, int]" = (248, 250, 252)  # #f8fafc
    gradient_end: "tuple[int, int, int]" = (241, 245, 249)  # #f1f5f9
    grid_pitch: int = GRID_PITCH
    grid_color: "tuple[int, int, int]" = (226, 232, 240)  # #e2e8f0
    grid_dash: "tuple[int, int]" = (2, 3)  # dash, gap in px

    # Calibration overlay
    calibration_color: "tuple[int, int, int]" = (239, 68, 68)  # #ef4444
    calibration_line_width: int = 4
    badge_size: "tuple[int, int]" = (40, 20)

    # Trace polyline and markers
    trace_color: "tuple[int, int, int]" = (59, 130, 246)  # #3b82f6
    trace_line_width: int = 3
    trace_radius: int = 5
    notch_color: "tuple[int, int, int]" = (245, 158, 11)  # #f59e0b
    notch_radius: int = 8
    label_size: "tuple[int, int]" = (28, 16)
    outline_color: "tuple[int, int, int]" = (255, 255, 255)

    # Font sizes in px (badge text, notch label text)
    badge_font_size: int = 14
    label_font_size: int = 12


@dataclass
class DigitizerConfig:
    """Session settings. Held in memory only, never written to disk."""

    default_pattern_name: str = "Pattern 1"
    default_known_distance: float = 1.0
    distance_unit: str = "inch"
    export_directory: Path = field(default_factory=Path.cwd)
    log_level: str = "INFO"
    render: RenderConfig = field(default_factory=RenderConfig)
