"""Input point normalization.

Pointer capture code hands over points in several shapes: ``[x, y]`` or
``[x, y, pressure]`` sequences, ``{'x', 'y', 'pressure'}`` mappings, or
objects with ``x``/``y`` attributes such as ``Coordinates`` and
``CoordinatesWithPressure``. ``to_samples`` converts all of them into one
list of ``Sample`` objects so nothing downstream inspects input types.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from .. import config
from ..domain.points import Sample

logger = logging.getLogger(__name__)


def _as_number(value: Any) -> Optional[float]:
    """Return value as a finite float, or None if it is not one."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _unpack(point: Any) -> Tuple[Any, Any, Any]:
    """Split one raw point into its x, y and pressure fields."""
    if isinstance(point, np.ndarray):
        point = point.tolist()
    if isinstance(point, Mapping):
        return point.get('x'), point.get('y'), point.get('pressure')
    if isinstance(point, Sequence) and not isinstance(point, (str, bytes)):
        if len(point) < 2:
            return None, None, None
        return point[0], point[1], point[2] if len(point) > 2 else None
    return getattr(point, 'x', None), getattr(point, 'y', None), getattr(point, 'pressure', None)


def to_sample(point: Any) -> Optional[Sample]:
    """Normalize one raw point.

    Args:
        point: A sequence, mapping or object carrying x, y and an optional
            pressure.

    Returns:
        A Sample, or None when the point has no usable position. Missing
        or malformed pressure becomes the default pressure; pressure
        outside [0, 1] is clamped.
    """
    raw_x, raw_y, raw_pressure = _unpack(point)
    x = _as_number(raw_x)
    y = _as_number(raw_y)
    if x is None or y is None:
        return None

    pressure = _as_number(raw_pressure)
    if pressure is None:
        pressure = config.DEFAULT_PRESSURE
    else:
        pressure = max(0.0, min(1.0, pressure))

    return Sample(x, y, pressure)


def to_samples(points: Iterable[Any]) -> List[Sample]:
    """Normalize an ordered sequence of raw points.

    Entries without a usable x/y position are dropped with a warning.
    Empty input yields an empty list.

    Example:
        >>> to_samples([(0, 0), {'x': 1, 'y': 2, 'pressure': 0.8}])
        [Sample(x=0.0, y=0.0, pressure=0.5), Sample(x=1.0, y=2.0, pressure=0.8)]
    """
    samples = []
    dropped = 0
    for point in points:
        sample = to_sample(point)
        if sample is None:
            dropped += 1
            continue
        samples.append(sample)

    if dropped:
        logger.warning("Dropped %d malformed point(s) without a usable position", dropped)
    return samples
