"""Path data for traced outlines.

Converts an outline polygon into a smooth closed curve for renderers that
draw paths rather than polygons. Every outline point becomes the control
point of a quadratic segment ending at the midpoint to the next point, so
the curve passes through all edge midpoints and rounds off the corners.

The module provides the following:
    PathCommand: One drawing command (M, Q or Z) with its coordinates.
    get_path_commands: Commands for one outline ring.
    format_svg_path: SVG path data for a list of commands.
    get_svg_path_from_stroke: SVG path data for an outline.
    get_flat_svg_path_from_stroke: SVG path data after removing overlap.
    to_path: Path data for an outline, clipped when options ask for it.

Example usage:
    Building SVG path data::

        from freehand.render.path import get_svg_path_from_stroke

        d = get_svg_path_from_stroke([(0, 0), (10, 0), (10, 10)])
        # 'M 0 0 Q 0 0 5 0 10 0 10 5 10 10 5 5 Z'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .. import config
from ..domain.options import StrokeOptions
from .clipping import ClipUnavailableError, PolygonUnion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathCommand:
    """A path drawing command.

    Attributes:
        op: 'M' (move to), 'Q' (quadratic curve to) or 'Z' (close).
        coords: Flat coordinates: (x, y) for M, (cx, cy, x, y) for Q and
            empty for Z.
    """
    op: str
    coords: Tuple[float, ...] = ()


def get_path_commands(outline: Sequence[Sequence[float]]) -> List[PathCommand]:
    """Commands for a closed curve through the midpoints of an outline.

    Args:
        outline: Closed polygon as a sequence of (x, y) points.

    Returns:
        A move to the first point, one quadratic segment per point and a
        close command. Empty outlines give an empty list.
    """
    if len(outline) == 0:
        return []

    pts = np.asarray(outline, dtype=float).reshape(-1, 2)
    mids = (pts + np.roll(pts, -1, axis=0)) / 2

    commands = [PathCommand('M', (float(pts[0, 0]), float(pts[0, 1])))]
    for (x, y), (mx, my) in zip(pts.tolist(), mids.tolist()):
        commands.append(PathCommand('Q', (x, y, mx, my)))
    commands.append(PathCommand('Z'))
    return commands


def _format_number(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return '0' if text == '-0' else text


def format_svg_path(commands: Sequence[PathCommand], precision: int = config.PATH_PRECISION) -> str:
    """SVG path data for a list of commands.

    Consecutive commands with the same operator are written with the
    operator once, as SVG allows.
    """
    parts = []
    last_op = None
    for cmd in commands:
        if cmd.op != last_op:
            parts.append(cmd.op)
            last_op = cmd.op
        parts.extend(_format_number(v, precision) for v in cmd.coords)
    return ' '.join(parts)


def get_svg_path_from_stroke(outline: Sequence[Sequence[float]], precision: int = config.PATH_PRECISION) -> str:
    """SVG path data for one outline ring, or '' for an empty outline."""
    return format_svg_path(get_path_commands(outline), precision)


def get_flat_svg_path_from_stroke(
    outline: Sequence[Sequence[float]],
    union: Optional[PolygonUnion],
    precision: int = config.PATH_PRECISION,
) -> str:
    """SVG path data for an outline after resolving self-overlap.

    The outline is passed as a single ring to ``union``; each resulting
    ring becomes its own closed sub-path.

    Raises:
        ClipUnavailableError: If no union is supplied or the union fails.
    """
    if union is None:
        raise ClipUnavailableError("Clipping requested but no polygon union is available")
    if len(outline) == 0:
        return ''

    rings = union.union([outline])
    paths = [get_svg_path_from_stroke(ring, precision) for ring in rings if ring]
    return ' '.join(p for p in paths if p)


def to_path(
    outline: Sequence[Sequence[float]],
    options: Optional[StrokeOptions] = None,
    union: Optional[PolygonUnion] = None,
    precision: int = config.PATH_PRECISION,
) -> str:
    """Path data for an outline, clipped when ``options.clip`` is set.

    Raises:
        ClipUnavailableError: If clipping is requested and the union is
            missing or fails. The caller may then draw the unclipped path.
    """
    options = options or StrokeOptions()
    if options.clip:
        return get_flat_svg_path_from_stroke(outline, union, precision)
    return get_svg_path_from_stroke(outline, precision)
