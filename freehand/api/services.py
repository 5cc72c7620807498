"""Service layer for freehand strokes.

This module provides a high-level service that wraps the stroke pipeline
and the path adapter behind a small, dictionary-based interface suitable
for JSON serialization and for drawing applications that re-trace the
current stroke on every pointer event.

The module contains one service class:
    StrokeService: Builds outlines, path data and outline summaries from
        raw points, applying per-device option overrides.

Example usage:
    Tracing a mark as it is drawn::

        from freehand.api.services import StrokeService
        from freehand.domain import StrokeOptions

        service = StrokeService(StrokeOptions(size=16, thinning=0.75))
        points = [{'x': 10, 'y': 10, 'pressure': 0.4}]

        # Re-run on every pointer move
        points.append({'x': 14, 'y': 12, 'pressure': 0.5})
        d = service.get_path(points, device_type='pen')

    Summarizing a stroke::

        info = service.describe(points, device_type='mouse')
        print(info['bounds'], info['perimeter'])
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from .. import config
from ..domain.options import StrokeOptions
from ..domain.points import Outline
from ..render.clipping import ClipUnavailableError, PolygonUnion, ShapelyUnion
from ..render.path import get_svg_path_from_stroke, to_path
from ..stroke import get_stroke
from ..utils.geometry import polygon_area, polygon_bounds, polygon_perimeter

# Logger for service errors
_logger = logging.getLogger(__name__)

# Device type that reports real pressure
PEN_DEVICE = 'pen'


@dataclass
class StrokeService:
    """Service for stroke outline and path operations.

    Holds the current stroke options and the polygon union used for
    clipping. All methods are pure with respect to the points they are
    given, so one service can be shared across strokes.

    Attributes:
        options: Stroke options applied to every call.
        union: Polygon union used when ``options.clip`` is set, or None
            when clipping is not available.
        precision: Decimal places in path data.

    Example:
        >>> service = StrokeService()
        >>> len(service.get_outline([(0, 0)]))
        22
    """
    options: StrokeOptions = field(default_factory=StrokeOptions)
    union: Optional[PolygonUnion] = field(default_factory=ShapelyUnion)
    precision: int = config.PATH_PRECISION

    def with_options(self, **overrides: Any) -> StrokeService:
        """Return a service whose options have the given fields replaced."""
        return StrokeService(self.options.patch(**overrides), self.union, self.precision)

    def options_for(self, device_type: Optional[str] = None) -> StrokeOptions:
        """Options to use for points captured by ``device_type``.

        Pens report real pressure, so pressure simulation is turned off
        for them and on for every other device. Without a device type the
        options are used as given.
        """
        if device_type is None:
            return self.options
        return self.options.patch(simulate_pressure=device_type != PEN_DEVICE)

    def get_outline(self, points: Iterable[Any], device_type: Optional[str] = None) -> Outline:
        """Outline polygon for raw points.

        Args:
            points: Raw input points (sequences, mappings or coordinates).
            device_type: Device that captured the points ('pen', 'mouse',
                'touch'), or None.

        Returns:
            Closed polygon as a list of (x, y) tuples.
        """
        return get_stroke(points, self.options_for(device_type))

    def get_path(
        self,
        points: Iterable[Any],
        device_type: Optional[str] = None,
        allow_unclipped: bool = False,
    ) -> str:
        """SVG path data for raw points.

        Args:
            points: Raw input points.
            device_type: Device that captured the points, or None.
            allow_unclipped: When clipping is requested but unavailable,
                log a warning and return the unclipped path instead of
                raising.

        Returns:
            SVG path data string, '' for an empty stroke.

        Raises:
            ClipUnavailableError: If clipping fails and ``allow_unclipped``
                is False.
        """
        options = self.options_for(device_type)
        return self._path_for(get_stroke(points, options), options, allow_unclipped)

    def _path_for(self, outline: Outline, options: StrokeOptions, allow_unclipped: bool) -> str:
        """Path data for an already traced outline."""
        try:
            return to_path(outline, options, self.union, self.precision)
        except ClipUnavailableError as e:
            if not allow_unclipped:
                raise
            _logger.warning("Clipping unavailable, drawing unclipped outline: %s", e)
            return get_svg_path_from_stroke(outline, self.precision)

    def describe(self, points: Iterable[Any], device_type: Optional[str] = None) -> Dict[str, Any]:
        """Outline, path and metrics for raw points.

        Args:
            points: Raw input points.
            device_type: Device that captured the points, or None.

        Returns:
            Dictionary containing:
                - 'options' (dict): Options used for the stroke, after clamping
                - 'point_count' (int): Number of input points
                - 'outline' (list): Outline as [x, y] pairs
                - 'outline_count' (int): Number of outline points
                - 'bounds' (list | None): [x_min, y_min, x_max, y_max]
                - 'perimeter' (float): Outline perimeter
                - 'area' (float): Signed outline area
                - 'path' (str): SVG path data, unclipped if clipping failed
        """
        points = list(points)
        options = self.options_for(device_type)
        outline = get_stroke(points, options)
        bounds = polygon_bounds(outline)

        return {
            'options': options.sanitized().to_dict(),
            'point_count': len(points),
            'outline': [[x, y] for x, y in outline],
            'outline_count': len(outline),
            'bounds': list(bounds) if bounds is not None else None,
            'perimeter': polygon_perimeter(outline),
            'area': polygon_area(outline),
            'path': self._path_for(outline, options, allow_unclipped=True),
        }
