"""Editing session controller.

AIDEV-NOTE: The session is the only writer of the Pattern. Every public
mutation ends with _refresh(), which re-renders the whole scene and passes
the frame to the on_render listener. There is no observer machinery beyond
that single explicit call.
"""

import logging
from typing import Callable

from PIL import Image

from models import (
    CalibrationPoint,
    DigitizerConfig,
    Pattern,
    Point,
    PointKind,
)

from . import calibration, point_store
from .rendering import format_distance, new_surface, render, snapshot_png

logger = logging.getLogger(__name__)

RenderListener = Callable[[Image.Image], None]


class DigitizerSession:
    """Owns the pattern, source image and active tool for one session."""

    def __init__(
        self,
        config: DigitizerConfig | None = None,
        on_render: RenderListener | None = None,
    ):
        self.config = config or DigitizerConfig()
        self.pattern = Pattern(name=self.config.default_pattern_name)
        calibration.set_known_distance(
            self.pattern.calibration, self.config.default_known_distance
        )
        self.source_image: Image.Image | None = None
        self.active_tool = PointKind.TRACE
        self.on_render = on_render

        self._surface = new_surface(self.config.render)
        self.frame: Image.Image = self._surface
        self._refresh()

    # === Mutations ===

    def set_pattern_name(self, name: str) -> None:
        """Rename the pattern (used as SVG title and export filename)."""
        self.pattern.name = name

    def set_tool(self, kind: PointKind) -> None:
        """Choose which kind of point the next click records."""
        self.active_tool = kind

    def install_image(self, image: Image.Image) -> None:
        """Install a decoded source image.

        Called when the background decode finishes. Points and calibration
        points recorded against the previous image are discarded.
        """
        self.source_image = image
        point_store.clear(self.pattern)
        logger.info("Source image installed (%dx%d)", image.width, image.height)
        self._refresh()

    def begin_calibration(self) -> None:
        calibration.begin_calibration(self.pattern.calibration)
        self._refresh()

    def set_known_distance(self, value: float) -> None:
        """Update the reference distance.

        Raises:
            InvalidDistanceError: If value is not a finite number > 0
        """
        calibration.set_known_distance(self.pattern.calibration, value)
        self._refresh()

    def click(self, x: float, y: float) -> "Point | float | None":
        """Handle a click at surface coordinates.

        Returns:
            While calibrating, the computed scale after the second point (or
            None after the first). Otherwise the recorded Point.

        Raises:
            CalibrationError: If a calibration point is rejected
        """
        if self.pattern.calibration.active:
            try:
                return calibration.add_calibration_point(
                    self.pattern, CalibrationPoint(x=x, y=y)
                )
            finally:
                self._refresh()

        point = point_store.add_point(self.pattern, x, y, self.active_tool)
        logger.debug("Recorded %s point at (%.2f, %.2f)", point.kind.value, x, y)
        self._refresh()
        return point

    def clear(self) -> None:
        """Remove all points and calibration points; scale is kept."""
        point_store.clear(self.pattern)
        logger.info("Pattern cleared")
        self._refresh()

    # === Queries ===

    @property
    def has_points(self) -> bool:
        return bool(self.pattern.points)

    def counts(self) -> point_store.PointCounts:
        return point_store.point_counts(self.pattern)

    def status_message(self) -> str:
        """Instruction text for the canvas header."""
        state = self.pattern.calibration
        if state.active:
            return (
                f'Click two points {format_distance(state.known_distance)}" '
                "apart to set scale"
            )
        if self.source_image is None:
            return "Upload an image to begin digitizing your pattern"
        if self.active_tool is PointKind.TRACE:
            return "Click to trace the pattern outline"
        return "Click to add construction notches"

    def snapshot(self) -> bytes:
        """PNG bytes of the current frame, ready to embed in a report."""
        return snapshot_png(self.frame)

    # === Internal ===

    def _refresh(self) -> None:
        render(self._surface, self.pattern, self.source_image, self.config.render)
        # Listeners may keep frames; the surface is redrawn in place
        self.frame = self._surface.copy()
        if self.on_render is not None:
            self.on_render(self.frame)
