"""Polygon union for removing stroke self-overlap.

A traced outline can cross itself where the stroke loops back over its
own path. The path adapter can hand the outline to a ``PolygonUnion`` to
resolve it into simple rings before converting it to path data.

``ShapelyUnion`` is the shapely-backed implementation. The outline ring
is noded at its self-intersections, the resulting faces are kept where the
ring winds around them (non-zero fill rule) and the kept faces are merged.

Any failure is raised as ``ClipUnavailableError`` so the caller can decide
to draw the unclipped outline instead.

Example usage:
    Clipping an outline::

        from freehand.render.clipping import ShapelyUnion

        rings = ShapelyUnion().union([outline])
        for ring in rings:
            print(len(ring))
"""

from __future__ import annotations

import logging
from typing import List, Protocol, Sequence, Tuple

from shapely.errors import ShapelyError
from shapely.geometry import LineString, Polygon
from shapely.geometry.polygon import orient
from shapely.ops import polygonize, unary_union

from ..utils.geometry import winding_number

logger = logging.getLogger(__name__)

Ring = List[Tuple[float, float]]


class ClipUnavailableError(RuntimeError):
    """The polygon union is missing or failed for this outline."""


class PolygonUnion(Protocol):
    """Boolean union over polygon rings."""

    def union(self, rings: Sequence[Sequence[Tuple[float, float]]]) -> List[Ring]:
        """Return the simple rings covering the union of ``rings``.

        Raises:
            ClipUnavailableError: If the union cannot be computed.
        """
        ...


def _open_ring(coords) -> Ring:
    """Ring coordinates without the repeated closing point."""
    pts = [(float(x), float(y)) for x, y in coords]
    if len(pts) > 1 and pts[0] == pts[-1]:
        pts.pop()
    return pts


def _polygon_rings(geom) -> List[Ring]:
    """Exterior and interior rings of every polygon in ``geom``."""
    if geom.is_empty:
        return []
    if isinstance(geom, Polygon):
        polygons = [geom]
    else:
        polygons = [g for g in getattr(geom, 'geoms', []) if isinstance(g, Polygon)]

    rings = []
    for poly in polygons:
        # Exteriors counter-clockwise, holes clockwise
        poly = orient(poly, sign=1.0)
        rings.append(_open_ring(poly.exterior.coords))
        for interior in poly.interiors:
            rings.append(_open_ring(interior.coords))
    return rings


class ShapelyUnion:
    """Non-zero union of self-intersecting rings using shapely."""

    def union(self, rings: Sequence[Sequence[Tuple[float, float]]]) -> List[Ring]:
        try:
            faces = []
            for ring in rings:
                ring = [(float(p[0]), float(p[1])) for p in ring]
                if len(ring) < 3:
                    continue
                noded = unary_union(LineString(ring + [ring[0]]))
                for face in polygonize(noded):
                    inside = face.representative_point()
                    if winding_number(ring, (inside.x, inside.y)) != 0:
                        faces.append(face)

            if not faces:
                return []
            merged = unary_union(faces)
        except (ShapelyError, ValueError) as e:
            raise ClipUnavailableError(f"Polygon union failed: {e}") from e

        result = _polygon_rings(merged)
        logger.debug("Union of %d ring(s) gave %d ring(s) from %d face(s)",
                     len(rings), len(result), len(faces))
        return result
