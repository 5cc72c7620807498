"""Streamline resampling.

Each point is pulled toward its already-resampled predecessor and then
annotated with its angle, step distance and running length. The fold is
order dependent: every output point depends on the previous output.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, List

from .. import config
from ..domain.points import AnnotatedSample
from ..utils.geometry import clamp, get_angle, lerp
from .normalize import to_samples


def get_stroke_points(points: Iterable[Any], streamline: float | None = config.DEFAULT_STREAMLINE) -> List[AnnotatedSample]:
    """Streamline raw points and annotate them for outline tracing.

    Args:
        points: Raw input points in any shape accepted by ``to_samples``.
        streamline: Smoothing strength in [0, 1]. 0 leaves positions
            untouched, 1 holds every point at the first position. Values
            outside the range are clamped and None means the default.

    Returns:
        One AnnotatedSample per usable input point. The first sample has
        zero angle, distance and running length. Running length never
        decreases along the list.

    Example:
        >>> pts = get_stroke_points([(0, 0), (10, 0)], streamline=0)
        >>> pts[1].distance, pts[1].running_length
        (10.0, 10.0)
    """
    samples = to_samples(points)
    if not samples:
        return []

    if streamline is None:
        streamline = config.DEFAULT_STREAMLINE
    t = 1 - clamp(streamline, 0.0, 1.0)

    first = samples[0]
    prev = AnnotatedSample(first.x, first.y, first.pressure)
    result = [prev]

    for sample in samples[1:]:
        x = lerp(prev.x, sample.x, t)
        y = lerp(prev.y, sample.y, t)
        distance = math.hypot(x - prev.x, y - prev.y)
        prev = AnnotatedSample(
            x,
            y,
            sample.pressure,
            angle=get_angle((x, y), prev.position),
            distance=distance,
            running_length=prev.running_length + distance,
        )
        result.append(prev)

    return result
