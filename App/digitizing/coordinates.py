"""Mapping between on-screen pointer positions and surface coordinates."""

from dataclasses import dataclass

from models import SURFACE_HEIGHT, SURFACE_WIDTH


@dataclass(frozen=True)
class SurfaceBounds:
    """On-screen box the drawing surface is currently displayed in."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Check whether a client-space position falls on the surface."""
        return (
            self.left <= x <= self.left + self.width
            and self.top <= y <= self.top + self.height
        )


def map_to_surface(
    client_x: float,
    client_y: float,
    bounds: SurfaceBounds,
    surface_size: "tuple[int, int]" = (SURFACE_WIDTH, SURFACE_HEIGHT),
) -> "tuple[float, float]":
    """Convert a pointer position into fixed surface coordinates.

    Args:
        client_x: Pointer X in the same space as ``bounds``
        client_y: Pointer Y in the same space as ``bounds``
        bounds: Displayed box of the surface
        surface_size: Internal (width, height) of the surface

    Returns:
        (x, y) in surface pixels, independent of display scaling

    Raises:
        ValueError: If the surface has no displayed size yet
    """
    if bounds.width <= 0 or bounds.height <= 0:
        raise ValueError("Surface is not displayed; cannot map coordinates")

    surface_width, surface_height = surface_size
    scale_x = surface_width / bounds.width
    scale_y = surface_height / bounds.height

    return (
        (client_x - bounds.left) * scale_x,
        (client_y - bounds.top) * scale_y,
    )


def fit_bounds(
    available_width: float,
    available_height: float,
    surface_size: "tuple[int, int]" = (SURFACE_WIDTH, SURFACE_HEIGHT),
) -> SurfaceBounds:
    """Largest centered box with the surface's aspect ratio.

    AIDEV-NOTE: The canvas widget paints the frame into this box and maps
    clicks back out through it.
    """
    surface_width, surface_height = surface_size
    scale = min(available_width / surface_width, available_height / surface_height)
    width = surface_width * scale
    height = surface_height * scale
    return SurfaceBounds(
        left=(available_width - width) / 2,
        top=(available_height - height) / 2,
        width=width,
        height=height,
    )
