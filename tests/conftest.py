"""Shared fixtures for the digitizer test suite."""

from __future__ import annotations

import pytest

from digitizing import point_store
from models import Pattern, PointKind


@pytest.fixture
def pattern() -> Pattern:
    return Pattern(name="Front Bodice")


@pytest.fixture
def mixed_pattern() -> Pattern:
    """Trace, notch, trace, notch, trace in that order."""
    p = Pattern(name="Sleeve")
    point_store.add_point(p, 10.0, 10.0, PointKind.TRACE)
    point_store.add_point(p, 50.0, 40.0, PointKind.NOTCH)
    point_store.add_point(p, 20.0, 20.0, PointKind.TRACE)
    point_store.add_point(p, 70.0, 60.0, PointKind.NOTCH)
    point_store.add_point(p, 30.0, 15.0, PointKind.TRACE)
    return p
