"""Stroke options and easing functions.

``StrokeOptions`` is an immutable record with every field defaulted.
Partial overrides are applied with ``patch()``, which overlays only the
fields that are given, or with ``from_dict()`` for settings that arrive
as JSON.

Example usage:
    Overriding a few options::

        from freehand.domain.options import StrokeOptions

        options = StrokeOptions().patch(size=16, thinning=0.75)
        pen = options.patch(simulate_pressure=False)

    Loading browser settings::

        options = StrokeOptions.from_dict({'size': 12, 'simulatePressure': False})
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .. import config

logger = logging.getLogger(__name__)

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


# Named easings, keyed the way saved settings refer to them
EASINGS: Dict[str, Easing] = {
    'linear': linear,
    'easeIn': ease_in,
    'easeOut': ease_out,
    'easeInOut': ease_in_out,
}

# camelCase keys used by browser-side settings
_KEY_ALIASES = {
    'simulatePressure': 'simulate_pressure',
}


def resolve_easing(easing: Union[str, Easing, None]) -> Easing:
    """Return an easing function for a name or callable.

    Unknown names fall back to linear easing so that a bad setting never
    stops a drawing session.
    """
    if easing is None:
        return linear
    if callable(easing):
        return easing
    func = EASINGS.get(easing) if isinstance(easing, str) else None
    if func is None:
        logger.warning("Unknown easing %r, using linear", easing)
        return linear
    return func


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _coerce(name: str, value: Any, default: float) -> float:
    """Return value as a finite float, or the default if it is not one."""
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        number = math.nan
    if isinstance(value, bool) or not math.isfinite(number):
        logger.warning("Invalid stroke option %s=%r, using %s", name, value, default)
        return default
    return number


@dataclass(frozen=True)
class StrokeOptions:
    """Options controlling the shape of a stroke outline.

    Attributes:
        size: Base diameter of the stroke.
        thinning: Effect of pressure on the stroke's width, in [-1, 1].
            Negative values make light pressure thicker. None (or 0)
            disables pressure modulation and keeps a constant radius.
        smoothing: Scales the minimum distance between emitted rib points.
        streamline: Positional smoothing in [0, 1]. 0 keeps raw positions,
            1 freezes every point at its predecessor.
        simulate_pressure: Derive pressure from velocity instead of using
            the reported pressure.
        easing: Function (or easing name) applied to pressure before the
            radius is computed.
        clip: Remove self-overlap through a polygon union when building
            the path.
    """
    size: float = config.DEFAULT_SIZE
    thinning: Optional[float] = config.DEFAULT_THINNING
    smoothing: float = config.DEFAULT_SMOOTHING
    streamline: float = config.DEFAULT_STREAMLINE
    simulate_pressure: bool = config.DEFAULT_SIMULATE_PRESSURE
    easing: Union[str, Easing] = linear
    clip: bool = False

    @property
    def easing_function(self) -> Easing:
        return resolve_easing(self.easing)

    def patch(self, **overrides: Any) -> StrokeOptions:
        """Return a copy with only the given fields replaced.

        Raises:
            TypeError: If a keyword does not name an option.
        """
        return replace(self, **overrides)

    def sanitized(self) -> StrokeOptions:
        """Return a copy with out-of-range values clamped.

        Malformed values are never rejected: values that are not finite
        numbers fall back to the defaults (with a warning), size and
        smoothing are kept non-negative, streamline is clamped to [0, 1]
        and thinning to [-1, 1]. A thinning of None stays None. The easing
        is resolved to a callable.
        """
        thinning = self.thinning
        if thinning is not None:
            thinning = _clamp(_coerce('thinning', thinning, config.DEFAULT_THINNING), -1.0, 1.0)
        size = _coerce('size', self.size, config.DEFAULT_SIZE)
        smoothing = _coerce('smoothing', self.smoothing, config.DEFAULT_SMOOTHING)
        streamline = _coerce('streamline', self.streamline, config.DEFAULT_STREAMLINE)
        return replace(
            self,
            size=max(0.0, size),
            thinning=thinning,
            smoothing=max(0.0, smoothing),
            streamline=_clamp(streamline, 0.0, 1.0),
            simulate_pressure=bool(self.simulate_pressure),
            easing=self.easing_function,
            clip=bool(self.clip),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Callable easings that are not one of the named easings are written
        as 'custom'.
        """
        easing = self.easing
        if callable(easing):
            easing = next((name for name, func in EASINGS.items() if func is easing), 'custom')
        return {
            'size': self.size,
            'thinning': self.thinning,
            'smoothing': self.smoothing,
            'streamline': self.streamline,
            'simulate_pressure': self.simulate_pressure,
            'easing': easing,
            'clip': self.clip,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: Optional[StrokeOptions] = None) -> StrokeOptions:
        """Create options from a mapping, overlaying onto ``base``.

        Args:
            data: Mapping of option names to values. camelCase aliases are
                accepted. Unknown keys are ignored.
            base: Options to overlay onto. Defaults to StrokeOptions().

        Returns:
            New StrokeOptions instance.
        """
        known = {f.name for f in fields(cls)}
        overrides = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                logger.debug("Ignoring unknown stroke option %r", key)
                continue
            overrides[name] = value
        return (base or cls()).patch(**overrides)
