"""Pairwise polygon clipping backed by shapely.

Each side is built as a ``shapely.geometry.Polygon`` (outer ring plus
holes), repaired with ``make_valid()`` when invalid, and intersected.
The overlay result is flattened to its areal parts; points and lines
where the inputs merely touch are discarded. Output rings are closed,
outer rings counter-clockwise and holes clockwise.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.polygon import orient
from shapely.validation import make_valid

from geoturf.transformation.intersect._constants import MIN_RING_VERTICES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shapely.geometry.base import BaseGeometry

    from geoturf.transformation.intersect._constants import PolygonRings, Ring

logger = logging.getLogger("geoturf.transformation.intersect")


def intersect_polygons(subject: PolygonRings, clip: PolygonRings) -> list[PolygonRings]:
    """Intersect two polygons given as ``[outer, *holes]`` vertex lists.

    Rings may be open or closed and wound either way. A polygon whose
    outer ring encloses no area contributes nothing.

    Returns:
        Zero or more polygons, each ``[outer, *holes]`` with closed rings,
        outer rings counter-clockwise and holes clockwise.
    """
    a = to_shape(subject)
    b = to_shape(clip)
    if a is None or b is None:
        return []

    overlap = a.intersection(b)
    result = [polygon_to_rings(orient(part, sign=1.0)) for part in areal_parts(overlap)]
    logger.debug(
        "Polygons clipped | overlap=%s | polygons=%d | area=%.6g",
        overlap.geom_type,
        len(result),
        overlap.area,
    )
    return result


def to_shape(polygon: PolygonRings) -> BaseGeometry | None:
    """Build a valid shapely geometry from vertex lists, or ``None`` if it has no area.

    Rings with fewer than three distinct vertices are skipped (a
    degenerate outer ring makes the whole polygon empty).
    """
    rings = [_distinct(ring) for ring in polygon]
    if not rings or len(rings[0]) < MIN_RING_VERTICES:
        return None
    holes = [ring for ring in rings[1:] if len(ring) >= MIN_RING_VERTICES]

    shape: BaseGeometry = ShapelyPolygon(rings[0], holes)
    if not shape.is_valid:
        logger.debug("Invalid input polygon, attempting make_valid() | rings=%d", len(rings))
        shape = make_valid(shape)
    if shape.is_empty or shape.area == 0:
        return None
    return shape


def areal_parts(geometry: BaseGeometry) -> list[ShapelyPolygon]:
    """Flatten an overlay result to its non-empty polygons."""
    if geometry.is_empty:
        return []
    if isinstance(geometry, ShapelyPolygon):
        return [geometry] if geometry.area > 0 else []
    parts: list[ShapelyPolygon] = []
    for member in getattr(geometry, "geoms", ()):
        parts.extend(areal_parts(member))
    return parts


def polygon_to_rings(polygon: ShapelyPolygon) -> PolygonRings:
    """Convert a shapely polygon to closed ``(x, y)`` vertex lists."""
    rings: PolygonRings = [_coords(polygon.exterior.coords)]
    rings.extend(_coords(interior.coords) for interior in polygon.interiors)
    return rings


def _coords(coords: Iterable[tuple[float, ...]]) -> Ring:
    return [(float(c[0]), float(c[1])) for c in coords]


def _distinct(ring: Ring) -> Ring:
    """Drop consecutive duplicates and the closing vertex."""
    cleaned: Ring = []
    for x, y in ring:
        vertex = (float(x), float(y))
        if not cleaned or cleaned[-1] != vertex:
            cleaned.append(vertex)
    while len(cleaned) > 1 and cleaned[0] == cleaned[-1]:
        cleaned.pop()
    return cleaned
