"""Shared pytest fixtures for the freehand test suite.

This module provides common fixtures used across unit and regression
tests.

Fixtures:
    straight_points: Three points along the x axis
    reversal_points: Three points that double back on themselves
    wiggly_points: A longer curving stroke with varying pressure
    constant_options: Options with constant width and raw positions
    identity_union: Polygon union stub that returns its input unchanged
    failing_union: Polygon union stub that always fails

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import math
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from freehand.domain import StrokeOptions
from freehand.render.clipping import ClipUnavailableError


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


class IdentityUnion:
    """Union stub returning the input rings unchanged."""

    def __init__(self):
        self.calls = []

    def union(self, rings):
        self.calls.append(rings)
        return [list(ring) for ring in rings]


class FailingUnion:
    """Union stub that always reports failure."""

    def union(self, rings):
        raise ClipUnavailableError("union backend offline")


@pytest.fixture
def straight_points():
    """Three points along the x axis with default pressure."""
    return [(0, 0, 0.5), (10, 0, 0.5), (20, 0, 0.5)]


@pytest.fixture
def reversal_points():
    """A stroke that goes out along x and comes straight back."""
    return [(0, 0, 0.5), (10, 0, 0.5), (0, 0, 0.5)]


@pytest.fixture
def wiggly_points():
    """A 60-point sine-like stroke with varying pressure."""
    return [
        (i * 3.0, 20 * math.sin(i / 6.0), 0.3 + 0.5 * abs(math.cos(i / 9.0)))
        for i in range(60)
    ]


@pytest.fixture
def constant_options():
    """Size 8, constant radius, no streamlining."""
    return StrokeOptions(size=8, thinning=None, streamline=0, simulate_pressure=False)


@pytest.fixture
def identity_union():
    return IdentityUnion()


@pytest.fixture
def failing_union():
    return FailingUnion()
