"""Ordered, append-only store of trace and notch points."""

from dataclasses import dataclass
from typing import Iterable, Iterator

from models import Pattern, Point, PointKind


@dataclass(frozen=True)
class PointCounts:
    """Point totals shown in the status panel and print header."""

    total: int
    trace: int
    notch: int


def add_point(pattern: Pattern, x: float, y: float, kind: PointKind) -> Point:
    """Append a point to the pattern and return it."""
    point = Point(x=x, y=y, kind=kind)
    pattern.points.append(point)
    return point


def clear(pattern: Pattern) -> None:
    """Remove all points and calibration points.

    AIDEV-NOTE: Scale, calibrated flag and name survive a clear.
    """
    pattern.points.clear()
    pattern.calibration.points.clear()
    pattern.calibration.active = False


def filter_by_kind(points: "Iterable[Point]", kind: PointKind) -> "Iterator[Point]":
    """Lazy, order-preserving view of the points of one kind."""
    return (point for point in points if point.kind is kind)


def trace_points(pattern: Pattern) -> "list[Point]":
    """Trace points in insertion order (the outline polyline)."""
    return list(filter_by_kind(pattern.points, PointKind.TRACE))


def notch_points(pattern: Pattern) -> "list[Point]":
    """Notch points in insertion order."""
    return list(filter_by_kind(pattern.points, PointKind.NOTCH))


def point_counts(pattern: Pattern) -> PointCounts:
    """Count points by kind. Not cached; the store is small."""
    trace = sum(1 for _ in filter_by_kind(pattern.points, PointKind.TRACE))
    notch = sum(1 for _ in filter_by_kind(pattern.points, PointKind.NOTCH))
    return PointCounts(total=len(pattern.points), trace=trace, notch=notch)


def notch_labels(points: "Iterable[Point]") -> "list[tuple[Point, str]]":
    """Pair each notch with its ``N{i}`` label.

    Numbering follows the notch-only sub-sequence, so trace points recorded
    in between do not shift it. Rendering and export both use this.
    """
    return [
        (point, f"N{index}")
        for index, point in enumerate(filter_by_kind(points, PointKind.NOTCH), start=1)
    ]
