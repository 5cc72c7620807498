"""Freehand stroke outlines.

Turns the points of a drawing gesture (position plus optional pressure)
into the closed outline polygon of a stroke whose width varies along its
length. The computation is pure and synchronous and is fast enough to
re-run on every pointer event while a stroke is being drawn.

Architecture Overview:
    Data flows through the package in one direction:

    - freehand.stroke normalizes, streamlines and traces points
    - freehand.render turns outlines into path data, optionally removing
      self-overlap with a shapely polygon union
    - freehand.api wraps both behind a service for applications
    - freehand.cli exposes the service on the command line

The package is organized into the following modules:
    domain: Value objects: coordinates, samples, outlines, StrokeOptions.
    utils: Vector helpers and numpy-backed polygon metrics.
    stroke: Normalizer, streamline resampler, radius function and tracer.
    render: Path data and clipping.
    api: Service layer.
    config: Defaults, constants and logging setup.

Example usage:
    Outline and path data::

        from freehand import StrokeOptions, get_stroke, to_path

        options = StrokeOptions(size=16, thinning=0.75)
        outline = get_stroke([(0, 0, 0.5), (12, 4, 0.6), (30, 9, 0.7)], options)
        d = to_path(outline, options)

    Service for a drawing application::

        from freehand import StrokeService

        service = StrokeService()
        d = service.get_path(points, device_type='pen')

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import StrokeService
from .domain import (
    AnnotatedSample,
    Coordinates,
    CoordinatesWithPressure,
    Sample,
    StrokeOptions,
)
from .render import ClipUnavailableError, ShapelyUnion, get_svg_path_from_stroke, to_path
from .stroke import (
    get_stroke,
    get_stroke_outline_points,
    get_stroke_points,
    get_stroke_radius,
    to_samples,
)

__all__ = [
    # Domain objects
    'Coordinates', 'CoordinatesWithPressure', 'Sample', 'AnnotatedSample', 'StrokeOptions',
    # Pipeline
    'get_stroke', 'to_samples', 'get_stroke_points', 'get_stroke_radius', 'get_stroke_outline_points',
    # Output
    'to_path', 'get_svg_path_from_stroke', 'ShapelyUnion', 'ClipUnavailableError',
    # Services
    'StrokeService',
]

__version__ = '1.0.0'
