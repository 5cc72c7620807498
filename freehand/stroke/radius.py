"""Pressure to radius mapping."""

from __future__ import annotations

from typing import Callable, Optional

from .. import config
from ..utils.geometry import clamp, lerp


def get_stroke_radius(
    size: float,
    thinning: Optional[float],
    easing: Callable[[float], float],
    pressure: float = config.DEFAULT_PRESSURE,
) -> float:
    """Compute the stroke half-width for a pressure value.

    With positive thinning light pressure draws thinner; with negative
    thinning light pressure draws thicker. The thinning magnitude is kept
    within [0.05, 0.95] so the width never collapses to zero.

    Args:
        size: Base diameter of the stroke.
        thinning: Effect of pressure on width, or None for a constant
            radius of size / 2.
        easing: Function applied to the pressure before mapping. Its
            result is clamped to [0, 1].
        pressure: Pressure value, real or simulated.

    Returns:
        The radius (half of the computed width).

    Example:
        >>> get_stroke_radius(8, 0.5, lambda t: t, 1.0)
        4.0
        >>> get_stroke_radius(8, None, lambda t: t, 0.0)
        4.0
    """
    if thinning is None:
        return size / 2

    pressure = clamp(easing(pressure), 0.0, 1.0)
    if thinning < 0:
        pressed = size + size * clamp(thinning, -config.MAX_THINNING, -config.MIN_THINNING)
        return lerp(size, pressed, pressure) / 2

    light = size - size * clamp(thinning, config.MIN_THINNING, config.MAX_THINNING)
    return lerp(light, size, pressure) / 2
