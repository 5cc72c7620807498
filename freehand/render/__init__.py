"""Path output for traced outlines.

This module converts outline polygons into path data for renderers and
optionally removes self-overlap through a polygon union first.

The module exports the following:

Path data:
    PathCommand: One drawing command with its coordinates.
    get_path_commands: Commands for a closed curve through an outline.
    format_svg_path: SVG path data for a list of commands.
    get_svg_path_from_stroke: SVG path data for an outline.
    get_flat_svg_path_from_stroke: SVG path data after a polygon union.
    to_path: Path data, clipped when the options ask for it.

Clipping:
    PolygonUnion: Protocol for a polygon union capability.
    ShapelyUnion: shapely-backed union.
    ClipUnavailableError: The union is missing or failed.

Example usage:
    Clipped path data::

        from freehand.domain import StrokeOptions
        from freehand.render import ShapelyUnion, to_path

        d = to_path(outline, StrokeOptions(clip=True), ShapelyUnion())
"""

from .clipping import ClipUnavailableError, PolygonUnion, ShapelyUnion
from .path import (
    PathCommand,
    format_svg_path,
    get_flat_svg_path_from_stroke,
    get_path_commands,
    get_svg_path_from_stroke,
    to_path,
)

__all__ = [
    'PathCommand', 'get_path_commands', 'format_svg_path',
    'get_svg_path_from_stroke', 'get_flat_svg_path_from_stroke', 'to_path',
    'PolygonUnion', 'ShapelyUnion', 'ClipUnavailableError',
]
