"""Utility functions for freehand strokes.

This module provides the vector helpers used by the stroke pipeline and
numpy-backed polygon metrics used by the service layer.

The module exports the following functions:

Vector helpers:
    lerp, clamp: Scalar interpolation and clamping.
    get_angle, get_angle_delta: Directions and angular differences.
    point_distance, point_between, project_point: Point arithmetic.

Polygon metrics:
    polygon_perimeter, polygon_area, polygon_bounds, winding_number

Example usage:
    Measuring an outline::

        from freehand.utils import polygon_perimeter, polygon_bounds

        square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        polygon_perimeter(square)  # 40.0
        polygon_bounds(square)     # (0.0, 0.0, 10.0, 10.0)
"""

from .geometry import (
    clamp,
    get_angle,
    get_angle_delta,
    lerp,
    point_between,
    point_distance,
    polygon_area,
    polygon_bounds,
    polygon_perimeter,
    project_point,
    winding_number,
)

__all__ = [
    'lerp', 'clamp', 'get_angle', 'get_angle_delta',
    'point_distance', 'point_between', 'project_point',
    'polygon_perimeter', 'polygon_area', 'polygon_bounds', 'winding_number',
]
