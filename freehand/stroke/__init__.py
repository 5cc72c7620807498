"""Stroke geometry pipeline.

This module turns raw pointer samples into the outline polygon of a
variable-width freehand stroke. Data flows through four stages:

    to_samples: Normalize heterogeneous input points.
    get_stroke_points: Streamline positions and annotate each sample.
    get_stroke_radius: Map pressure to a stroke half-width.
    get_stroke_outline_points: Trace the closed outline polygon.

``get_stroke`` runs the whole pipeline. Every stage is a pure function of
its arguments, so strokes can be processed concurrently; the points of a
single stroke must be processed in order.

Example usage:
    Outline for a pen stroke::

        from freehand.domain import StrokeOptions
        from freehand.stroke import get_stroke

        outline = get_stroke(
            [(0, 0, 0.3), (10, 4, 0.6), (25, 6, 0.8)],
            StrokeOptions(size=16, simulate_pressure=False),
        )
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..domain.options import StrokeOptions
from ..domain.points import Outline
from .normalize import to_sample, to_samples
from .outline import get_stroke_outline_points
from .radius import get_stroke_radius
from .streamline import get_stroke_points


def get_stroke(points: Iterable[Any], options: Optional[StrokeOptions] = None) -> Outline:
    """Return the outline polygon for a stroke.

    Args:
        points: Raw input points (sequences, mappings or coordinate objects).
        options: Stroke options. Defaults to StrokeOptions().

    Returns:
        Closed polygon as a list of (x, y) tuples.
    """
    options = (options or StrokeOptions()).sanitized()
    return get_stroke_outline_points(get_stroke_points(points, options.streamline), options)


__all__ = [
    'get_stroke',
    'to_sample', 'to_samples',
    'get_stroke_points', 'get_stroke_radius', 'get_stroke_outline_points',
]
