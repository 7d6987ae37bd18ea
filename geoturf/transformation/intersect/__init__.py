"""Polygon intersection.

``intersect`` computes the region common to two polygonal inputs
(Polygon or MultiPolygon, with holes) and returns it as a new feature,
or ``None`` when the inputs share no area.

Module layout:
- ``_normalization``: resolves the accepted input shapes into vertex lists
- ``_clipping``: pairwise polygon intersection on shapely shapes
- ``_measures``: bounding-box and shoelace-area helpers
- ``_constants``: vertex types
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geoturf.models.feature import Feature
from geoturf.models.geometry import Geometry, MultiPolygon, Point, Polygon
from geoturf.transformation.intersect._clipping import intersect_polygons
from geoturf.transformation.intersect._measures import (
    bboxes_intersect,
    ring_bbox,
    union_bbox,
)
from geoturf.transformation.intersect._normalization import PolygonLike, normalize_polygons

if TYPE_CHECKING:
    from geoturf.transformation.intersect._constants import PolygonRings

logger = logging.getLogger("geoturf.transformation.intersect")

__all__ = ["PolygonLike", "intersect"]


def intersect(a: PolygonLike | None, b: PolygonLike | None) -> Feature | None:
    """Intersect two polygonal inputs.

    Every polygon of ``a`` is clipped against every polygon of ``b``;
    holes are honoured on both sides. Pairs whose outer-ring bounding
    boxes do not overlap are skipped without clipping.

    Args:
        a: A Feature, Geometry, Polygon or MultiPolygon.
        b: A Feature, Geometry, Polygon or MultiPolygon.

    Returns:
        A Polygon feature when the common area is one polygon, a
        MultiPolygon feature when it is several, or ``None`` when the
        inputs share no area. The result carries a bounding box and no
        properties.

    Raises:
        InvalidInputError: If either input is ``None`` or of an unsupported type.
        InvalidGeometryTypeError: If either geometry is not polygonal.
        CoordinateFormatError: If raw coordinates are malformed.
    """
    polygons_a = normalize_polygons(a, "a")
    polygons_b = normalize_polygons(b, "b")

    result: list[PolygonRings] = []
    for poly_a in polygons_a:
        if not poly_a or not poly_a[0]:
            continue
        bbox_a = ring_bbox(poly_a[0])
        for poly_b in polygons_b:
            if not poly_b or not poly_b[0]:
                continue
            if not bboxes_intersect(bbox_a, ring_bbox(poly_b[0])):
                continue
            result.extend(intersect_polygons(poly_a, poly_b))

    logger.debug(
        "Intersection computed | polygons_a=%d | polygons_b=%d | result=%d",
        len(polygons_a),
        len(polygons_b),
        len(result),
    )

    if not result:
        return None
    return _to_feature(result)


def _to_feature(polygons: list[PolygonRings]) -> Feature:
    """Wrap clipped polygons as a Polygon or MultiPolygon feature."""
    typed = [Polygon([[Point(x, y) for x, y in ring] for ring in poly]) for poly in polygons]
    if len(typed) == 1:
        geometry = Geometry.from_polygon(typed[0])
    else:
        geometry = Geometry.from_multi_polygon(MultiPolygon(typed))
    bbox = union_bbox(ring_bbox(poly[0]) for poly in polygons)
    return Feature(geometry=geometry, bbox=bbox)
