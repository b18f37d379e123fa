"""Vector (SVG) serialization of a digitized pattern."""

import html
import re
from dataclasses import dataclass

import svg

from digitizing.point_store import filter_by_kind, notch_labels
from errors import EmptyPatternError
from models import SURFACE_HEIGHT, SURFACE_WIDTH, Pattern, PointKind

SVG_EXTENSION = ".svg"
SVG_MEDIA_TYPE = "image/svg+xml"

NOTCH_RADIUS = 8
NOTCH_LABEL_OFFSET = (15.0, -10.0)  # label position relative to the notch

SVG_STYLE = """
.trace-path { fill: none; stroke: #3b82f6; stroke-width: 3; }
.notch-circle { fill: #f59e0b; }
.notch-text { font-family: Arial, sans-serif; font-size: 12px; fill: #f59e0b; }
"""


@dataclass(frozen=True)
class VectorDocument:
    """Serialized SVG ready to hand to a FileExporter."""

    filename: str
    title: str
    content: str
    path_data: str  # "d" of the trace path, empty without trace points
    media_type: str = SVG_MEDIA_TYPE


def format_coordinate(value: float) -> str:
    """Fixed two-decimal form used for every exported coordinate.

    AIDEV-NOTE: Python's ".2f" rounds the exact binary value of the float
    (ties go half-to-even). The same input always gives the same text.
    """
    return f"{value:.2f}"


def sanitize_filename(name: str, extension: str = SVG_EXTENSION) -> str:
    """Replace every non-alphanumeric character with ``_`` and add extension."""
    return re.sub(r"[^a-zA-Z0-9]", "_", name) + extension


def trace_path_data(pattern: Pattern) -> str:
    """Build ``M x0 y0 L x1 y1 ...`` from the trace points in order."""
    commands = []
    for index, point in enumerate(filter_by_kind(pattern.points, PointKind.TRACE)):
        command = "M" if index == 0 else "L"
        commands.append(
            f"{command} {format_coordinate(point.x)} {format_coordinate(point.y)}"
        )
    return " ".join(commands)


def export_vector(pattern: Pattern) -> VectorDocument:
    """Serialize the pattern's trace outline and notches as SVG.

    Args:
        pattern: Pattern to export (not modified)

    Returns:
        VectorDocument with an 800x600 SVG titled with the pattern name

    Raises:
        EmptyPatternError: If the pattern has no points
    """
    if not pattern.points:
        raise EmptyPatternError(f"Pattern {pattern.name!r} has no points")

    elements: list[svg.Element] = []

    path_data = trace_path_data(pattern)
    if path_data:
        # Pre-formatted so coordinates keep exactly two decimals
        elements.append(svg.Path(d=path_data, class_=["trace-path"]))  # type: ignore[arg-type]

    dx, dy = NOTCH_LABEL_OFFSET
    for point, label in notch_labels(pattern.points):
        elements.append(
            svg.Circle(
                cx=format_coordinate(point.x),  # type: ignore[arg-type]
                cy=format_coordinate(point.y),  # type: ignore[arg-type]
                r=NOTCH_RADIUS,
                class_=["notch-circle"],
            )
        )
        elements.append(
            svg.Text(
                x=format_coordinate(point.x + dx),  # type: ignore[arg-type]
                y=format_coordinate(point.y + dy),  # type: ignore[arg-type]
                text=label,
                class_=["notch-text"],
            )
        )

    document = svg.SVG(
        width=SURFACE_WIDTH,
        height=SURFACE_HEIGHT,
        elements=[
            # svg.py writes element text verbatim
            svg.Title(text=html.escape(pattern.name, quote=False)),
            svg.Defs(elements=[svg.Style(text=SVG_STYLE)]),
            svg.G(id="pattern", elements=elements),
        ],
    )

    return VectorDocument(
        filename=sanitize_filename(pattern.name),
        title=pattern.name,
        content=document.as_str(),
        path_data=path_data,
    )
