"""Domain objects for freehand strokes.

This module provides the value objects used throughout the package: the
input coordinate types, normalized and annotated samples, the outline
type and the stroke options.

The module exports the following:

Point classes:
    Coordinates: Raw input position without pressure.
    CoordinatesWithPressure: Raw input position with reported pressure.
    Sample: Normalized input point.
    AnnotatedSample: Streamlined point with angle, distance and length.
    Outline: Type alias for a closed polygon as a list of (x, y) tuples.

Options:
    StrokeOptions: Immutable stroke configuration with defaults.
    EASINGS: Named easing functions.

Example usage:
    Working with options::

        from freehand.domain import StrokeOptions

        options = StrokeOptions(size=16).patch(thinning=0.75)
        print(options.to_dict())
"""

from .options import EASINGS, StrokeOptions, resolve_easing
from .points import (
    AnnotatedSample,
    Coordinates,
    CoordinatesWithPressure,
    Outline,
    PointInput,
    Sample,
)

__all__ = [
    'Coordinates', 'CoordinatesWithPressure', 'PointInput',
    'Sample', 'AnnotatedSample', 'Outline',
    'StrokeOptions', 'EASINGS', 'resolve_easing',
]
