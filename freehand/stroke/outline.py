"""Outline tracing for freehand strokes.

Walks a list of annotated samples once and builds the closed polygon of
a variable-width stroke. Two ribs are collected: the left rib runs along
``angle - pi/2`` of every sample and the right rib along ``angle + pi/2``
(angles point back toward the previous sample). The outline is the left
rib followed by the reversed right rib.

Tracing proceeds as follows:
    1. Strokes with a single point, or shorter than size / 4, become a
       round dot made of two half-turn sweeps.
    2. Samples are skipped until the running length passes size / 4; the
       start cap is swept around the first point at that moment.
    3. A turn sharper than a quarter turn before the next sample gets a
       small cap on both ribs instead of regular rib points.
    4. Regular rib points are emitted only on dull turns or once the
       candidate has moved far enough from the last emitted point, which
       keeps straight runs sparse and curves dense.
    5. The end cap is swept around the last sample onto the right rib.

Example usage:
    Tracing a stroke::

        from freehand.domain import StrokeOptions
        from freehand.stroke import get_stroke_points, get_stroke_outline_points

        samples = get_stroke_points([(0, 0), (10, 0), (20, 0)], streamline=0)
        outline = get_stroke_outline_points(samples, StrokeOptions(thinning=None))
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .. import config
from ..domain.options import StrokeOptions
from ..domain.points import AnnotatedSample, Outline
from ..utils.geometry import get_angle, get_angle_delta, point_between, point_distance, project_point
from .radius import get_stroke_radius

logger = logging.getLogger(__name__)

PI = math.pi
HALF_PI = math.pi / 2

Point2 = Tuple[float, float]


def _sweep(steps: int) -> List[float]:
    """Sweep fractions 0, 1/steps, ..., 1."""
    return [i / steps for i in range(steps + 1)]


_CAP_SWEEP = _sweep(config.CAP_STEPS)
_CORNER_SWEEP = _sweep(config.CORNER_STEPS)


@dataclass
class _TraceState:
    """State carried from one sample to the next while tracing."""
    test_left: Point2
    test_right: Point2
    prev_angle: float
    prev_pressure: float = 0.0
    radius: float = 0.0
    short: bool = True
    left: List[Point2] = field(default_factory=list)
    right: List[Point2] = field(default_factory=list)


def _dot_outline(points: Sequence[AnnotatedSample], options: StrokeOptions) -> Outline:
    """Outline for a stroke too short to have a direction: a round dot."""
    first = points[0]
    last = points[-1]
    angle = get_angle(first.position, last.position)

    radius = options.size / 2
    if options.thinning:
        radius = get_stroke_radius(options.size, options.thinning, options.easing, last.pressure)

    left = [project_point(first.position, angle + PI + HALF_PI - t * PI, radius) for t in _CAP_SWEEP]
    right = [project_point(last.position, angle + HALF_PI - t * PI, radius) for t in _CAP_SWEEP]
    return left + right


def get_stroke_outline_points(
    points: Sequence[AnnotatedSample],
    options: Optional[StrokeOptions] = None,
) -> Outline:
    """Trace the outline polygon of a stroke.

    Args:
        points: Annotated samples from ``get_stroke_points``.
        options: Stroke options. Out-of-range values are clamped.
            Defaults to StrokeOptions().

    Returns:
        Closed polygon as a list of (x, y) tuples; the last point connects
        back to the first. Empty input, or a size of zero, gives an empty
        outline. Identical inputs always give identical outlines.
    """
    if not points:
        return []

    options = (options or StrokeOptions()).sanitized()
    size = options.size
    if size <= 0:
        logger.debug("Zero stroke size, returning empty outline")
        return []

    thinning = options.thinning
    easing = options.easing
    min_length = size * config.MIN_LENGTH_RATIO
    min_dist = size * options.smoothing

    total_length = points[-1].running_length
    if len(points) == 1 or total_length <= min_length:
        return _dot_outline(points, options)

    first = points[0]
    state = _TraceState(
        test_left=first.position,
        test_right=first.position,
        prev_angle=first.angle,
        radius=size / 2,
    )

    for i in range(1, len(points) - 1):
        current = points[i]
        next_angle = points[i + 1].angle
        pos = current.position
        angle = current.angle
        pressure = current.pressure

        if thinning:
            if options.simulate_pressure:
                # Slow movement raises the pressure, fast movement lowers it
                rp = min(1 - current.distance / size, 1)
                sp = min(current.distance / size, 1)
                pressure = min(1, state.prev_pressure + (rp - state.prev_pressure) * (sp / 2))
            state.radius = get_stroke_radius(size, thinning, easing, pressure)

        radius = state.radius

        if state.short:
            if current.running_length < min_length:
                continue

            # First sample past the minimum length: start cap around the first point
            state.short = False
            for t in _CAP_SWEEP:
                state.test_left = project_point(first.position, angle + HALF_PI - t * PI, radius)
                state.left.append(state.test_left)
            state.test_right = project_point(first.position, angle + HALF_PI, radius)
            state.right.append(state.test_right)

        abs_delta = abs(get_angle_delta(next_angle, angle))

        if abs_delta > config.SHARP_TURN:
            # Corner cap on both ribs, swept around the previous direction
            for t in _CORNER_SWEEP:
                state.test_left = project_point(pos, state.prev_angle - HALF_PI - t * PI, radius)
                state.test_right = project_point(pos, state.prev_angle + HALF_PI + t * PI, radius)
                state.left.append(state.test_left)
                state.right.append(state.test_right)
            continue

        pl = project_point(pos, angle - HALF_PI, radius)
        pr = project_point(pos, angle + HALF_PI, radius)
        dull = abs_delta > config.DULL_TURN

        if dull or point_distance(pl, state.test_left) > min_dist:
            state.left.append(point_between(state.test_left, pl))
            state.test_left = pl

        if dull or point_distance(pr, state.test_right) > min_dist:
            state.right.append(point_between(state.test_right, pr))
            state.test_right = pr

        state.prev_pressure = pressure
        state.prev_angle = angle

    last = points[-1]
    for t in _CAP_SWEEP:
        state.right.append(project_point(last.position, last.angle + HALF_PI + t * PI, state.radius))

    return state.left + state.right[::-1]
