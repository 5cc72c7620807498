"""Point value objects for freehand strokes.

This module provides the immutable point types that flow through the
stroke pipeline. Raw input arrives as one of the two coordinate
constructors (or as a tuple/mapping that the normalizer converts), is
normalized into a ``Sample`` and then annotated by the streamline
resampler into an ``AnnotatedSample``.

The module provides the following classes:
    Coordinates: A raw input position without pressure.
    CoordinatesWithPressure: A raw input position with reported pressure.
    Sample: A normalized input point with pressure in [0, 1].
    AnnotatedSample: A resampled point with angle, step distance and
        running length.

Example usage:
    Building input for a stroke::

        from freehand.domain.points import Coordinates, CoordinatesWithPressure

        points = [
            Coordinates(0, 0),
            CoordinatesWithPressure(10, 5, 0.7),
        ]
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union


@dataclass(frozen=True)
class Coordinates:
    """Raw input position without pressure."""
    x: float
    y: float


@dataclass(frozen=True)
class CoordinatesWithPressure:
    """Raw input position with the pressure reported by the device."""
    x: float
    y: float
    pressure: float


# Input sum type accepted at the boundary
PointInput = Union[Coordinates, CoordinatesWithPressure]

# Closed polygon: the last point connects back to the first
Outline = List[Tuple[float, float]]


@dataclass(frozen=True)
class Sample:
    """A normalized input point.

    Attributes:
        x: Horizontal position.
        y: Vertical position.
        pressure: Pressure in [0, 1]. Defaults to 0.5 when the input
            did not report one.
    """
    x: float
    y: float
    pressure: float = 0.5

    def to_tuple(self) -> Tuple[float, float, float]:
        """Convert to (x, y, pressure) tuple."""
        return (self.x, self.y, self.pressure)


@dataclass(frozen=True)
class AnnotatedSample:
    """A streamlined sample annotated with local geometry.

    The first sample of a stroke always carries zero angle, distance and
    running length. For later samples the values are measured against the
    previous *resampled* point, not the raw input.

    Attributes:
        x: Resampled horizontal position.
        y: Resampled vertical position.
        pressure: Pressure carried over from the input sample.
        angle: Direction in radians of the vector pointing from this point
            back to the previous one.
        distance: Euclidean step from the previous point.
        running_length: Sum of all step distances up to this point.
    """
    x: float
    y: float
    pressure: float
    angle: float = 0.0
    distance: float = 0.0
    running_length: float = 0.0

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [self.x, self.y, self.pressure, self.angle, self.distance, self.running_length]

    def to_dict(self) -> Dict[str, float]:
        return {
            'x': self.x,
            'y': self.y,
            'pressure': self.pressure,
            'angle': self.angle,
            'distance': self.distance,
            'running_length': self.running_length,
        }
