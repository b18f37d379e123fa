"""Digitizing core: coordinate mapping, calibration, point store and rendering.

AIDEV-NOTE: Nothing in this package imports Qt, so it can be used and tested
without a display. Organized into modular components:
- coordinates: pointer position -> fixed surface coordinates
- calibration: two-point scale state machine
- point_store: ordered trace/notch points and derived counts
- rendering: full-scene redraw with Pillow
- session: controller that mutates state and triggers rendering
"""

from .coordinates import SurfaceBounds, fit_bounds, map_to_surface
from .rendering import render, render_frame, snapshot_png
from .session import DigitizerSession

__all__ = [
    "DigitizerSession",
    "SurfaceBounds",
    "fit_bounds",
    "map_to_surface",
    "render",
    "render_frame",
    "snapshot_png",
]
