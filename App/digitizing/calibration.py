"""Two-point scale calibration.

AIDEV-NOTE: State machine Idle -> AwaitingFirst -> AwaitingSecond ->
Computed -> Idle. The phase is derived from CalibrationState (active flag
and point count), so there is no separate state field to keep in sync.
"""

import logging
import math

from errors import CalibrationError, InvalidDistanceError
from models import CalibrationPoint, CalibrationState, Pattern

logger = logging.getLogger(__name__)


def validate_distance(value: float) -> float:
    """Check that a known distance is a finite number greater than zero.

    Raises:
        InvalidDistanceError: For zero, negative, NaN, infinite or non-numeric values
    """
    try:
        distance = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidDistanceError(f"Known distance must be a number, got {value!r}") from e

    if not math.isfinite(distance) or distance <= 0:
        raise InvalidDistanceError(
            f"Known distance must be greater than zero, got {value!r}"
        )
    return distance


def set_known_distance(state: CalibrationState, value: float) -> None:
    """Store a new known distance; rejected values leave the state unchanged."""
    state.known_distance = validate_distance(value)


def begin_calibration(state: CalibrationState) -> None:
    """Enter calibration mode, discarding any earlier reference points.

    Calling this while already calibrating simply restarts it.
    """
    state.points.clear()
    state.active = True
    logger.debug("Calibration started (known distance %s)", state.known_distance)


def pixel_distance(p1: CalibrationPoint, p2: CalibrationPoint) -> float:
    """Euclidean distance between two surface points in pixels."""
    return math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)


def add_calibration_point(pattern: Pattern, point: CalibrationPoint) -> "float | None":
    """Record a reference point and compute the scale on the second one.

    Args:
        pattern: Pattern whose calibration sub-state is updated
        point: Reference point in surface coordinates

    Returns:
        The new scale (px per unit) when this was the second point, else None

    Raises:
        CalibrationError: If calibration is not active, already has two
            points, or the second point coincides with the first
    """
    state = pattern.calibration
    if not state.active:
        raise CalibrationError("Calibration is not active")
    if len(state.points) >= 2:
        raise CalibrationError("Calibration already has two reference points")

    if not state.points:
        state.points.append(point)
        return None

    first = state.points[0]
    distance = pixel_distance(first, point)
    if distance == 0:
        # AIDEV-NOTE: Keep waiting for a usable second point; a zero
        # distance would produce a zero scale.
        raise CalibrationError("Reference points must be at different positions")

    known_distance = validate_distance(state.known_distance)
    state.points.append(point)
    pattern.scale = distance / known_distance
    pattern.calibrated = True
    state.active = False

    logger.info(
        "Calibrated: %.2f px over %s units -> %.3f px/unit",
        distance,
        known_distance,
        pattern.scale,
    )
    return pattern.scale
