"""Geometric utility functions.

This module provides the vector helpers used by the stroke pipeline and
a few numpy-backed polygon metrics used when reporting on outlines.

The module provides the following functions:
    lerp: Linear interpolation between two scalars.
    clamp: Clamp a scalar into a range.
    get_angle: Direction from one point to another.
    get_angle_delta: Shortest signed difference between two angles.
    point_distance: Euclidean distance between two points.
    point_between: Point part way along a segment.
    project_point: Point at a distance along a direction.
    polygon_perimeter: Perimeter of a closed polygon.
    polygon_area: Signed area of a closed polygon.
    polygon_bounds: Axis-aligned bounds of a polygon.
    winding_number: Winding number of a polygon around a point.

Example usage:
    Projecting rib points::

        import math
        from freehand.utils.geometry import project_point

        left = project_point((10, 0), math.pi / 2, 4)   # (10.0, 4.0)
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

Vec = Sequence[float]


def lerp(a: float, b: float, t: float) -> float:
    """Interpolate from a to b by t. Exact at t == 0 and t == 1."""
    return a * (1 - t) + b * t


def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


def get_angle(p0: Vec, p1: Vec) -> float:
    """Direction of the vector from p0 to p1 in radians."""
    return math.atan2(p1[1] - p0[1], p1[0] - p0[0])


def get_angle_delta(a0: float, a1: float) -> float:
    """Shortest signed angular distance from a0 to a1.

    Uses a truncated modulo so the sign of the remainder follows the
    dividend. The magnitude never exceeds pi.

    Example:
        >>> get_angle_delta(0.0, math.pi / 2)
        1.5707963267948966
    """
    full = math.pi * 2
    da = math.fmod(a1 - a0, full)
    return math.fmod(2 * da, full) - da


def point_distance(p0: Vec, p1: Vec) -> float:
    """Compute Euclidean distance between two points.

    Args:
        p0: First point as (x, y).
        p1: Second point as (x, y).

    Returns:
        Distance between the points.
    """
    return math.hypot(p1[0] - p0[0], p1[1] - p0[1])


def point_between(p0: Vec, p1: Vec, t: float = 0.5) -> tuple[float, float]:
    """Point at fraction t along the segment p0 -> p1 (midpoint by default)."""
    return (p0[0] + (p1[0] - p0[0]) * t, p0[1] + (p1[1] - p0[1]) * t)


def project_point(p0: Vec, angle: float, distance: float) -> tuple[float, float]:
    """Project p0 by distance along the direction angle."""
    return (math.cos(angle) * distance + p0[0], math.sin(angle) * distance + p0[1])


# ---------------------------------------------------------------------------
# Polygon metrics
# ---------------------------------------------------------------------------

def _as_ring(points: Sequence[Vec]) -> np.ndarray:
    """Return an (N, 2) float array of the polygon vertices."""
    arr = np.asarray(points, dtype=float)
    return arr.reshape(-1, 2)


def polygon_perimeter(points: Sequence[Vec]) -> float:
    """Perimeter of an implicitly closed polygon.

    The last vertex connects back to the first. Polygons with fewer than
    two vertices have zero perimeter.
    """
    ring = _as_ring(points)
    if len(ring) < 2:
        return 0.0
    edges = np.roll(ring, -1, axis=0) - ring
    return float(np.hypot(edges[:, 0], edges[:, 1]).sum())


def polygon_area(points: Sequence[Vec]) -> float:
    """Signed shoelace area of an implicitly closed polygon.

    Positive for counter-clockwise winding in a y-up frame. Self-overlapping
    regions are counted once per winding.
    """
    ring = _as_ring(points)
    if len(ring) < 3:
        return 0.0
    x, y = ring[:, 0], ring[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def polygon_bounds(points: Sequence[Vec]) -> tuple[float, float, float, float] | None:
    """Axis-aligned bounds as (x_min, y_min, x_max, y_max), or None if empty."""
    ring = _as_ring(points)
    if len(ring) == 0:
        return None
    x_min, y_min = ring.min(axis=0)
    x_max, y_max = ring.max(axis=0)
    return (float(x_min), float(y_min), float(x_max), float(y_max))


def winding_number(points: Sequence[Vec], p: Vec) -> int:
    """Winding number of an implicitly closed polygon around point p.

    Counts signed crossings of the horizontal ray from p. Zero means p
    lies outside the polygon under the non-zero fill rule.
    """
    ring = _as_ring(points)
    if len(ring) < 3:
        return 0
    px, py = p[0], p[1]
    x0, y0 = ring[:, 0], ring[:, 1]
    nxt = np.roll(ring, -1, axis=0)
    x1, y1 = nxt[:, 0], nxt[:, 1]

    cross = (x1 - x0) * (py - y0) - (px - x0) * (y1 - y0)
    upward = (y0 <= py) & (y1 > py) & (cross > 0)
    downward = (y0 > py) & (y1 <= py) & (cross < 0)
    return int(upward.sum() - downward.sum())
