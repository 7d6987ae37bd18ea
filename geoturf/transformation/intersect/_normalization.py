"""Input resolution for polygon intersection.

``intersect`` accepts four shapes: ``Feature``, ``Geometry``, ``Polygon``
and ``MultiPolygon``. Each is resolved once, at the entry point, into a
list of ``[outer, *holes]`` vertex-list polygons; nothing downstream
inspects input types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from geoturf.core.exceptions import InvalidGeometryTypeError, InvalidInputError
from geoturf.models.feature import Feature
from geoturf.models.geometry import GeoJSONType, Geometry, LineString, MultiPolygon, Point, Polygon

if TYPE_CHECKING:
    from geoturf.transformation.intersect._constants import PolygonRings

PolygonLike = Feature | Geometry | Polygon | MultiPolygon

STAGE = "intersect"

_POLYGONAL = (GeoJSONType.POLYGON, GeoJSONType.MULTI_POLYGON)


def normalize_polygons(value: PolygonLike | None, label: str) -> list[PolygonRings]:
    """Resolve a polygon-like input into a list of vertex-list polygons.

    Args:
        value: The input to resolve.
        label: Argument name used in error messages (``"a"`` or ``"b"``).

    Raises:
        InvalidInputError: If ``value`` is ``None`` or of an unsupported type.
        InvalidGeometryTypeError: If the geometry is neither Polygon nor MultiPolygon.
        CoordinateFormatError: If raw coordinates are malformed.
    """
    if value is None:
        msg = f"Input polygon {label} cannot be None"
        raise InvalidInputError(msg, stage=STAGE)

    if isinstance(value, Polygon):
        return [polygon_rings(value)]
    if isinstance(value, MultiPolygon):
        return [polygon_rings(poly) for poly in value.coordinates]
    if isinstance(value, Feature):
        return _from_geometry(value.geometry, label)
    if isinstance(value, Geometry):
        return _from_geometry(value, label)
    if isinstance(value, Point | LineString):
        msg = f"Input {label} must be a Polygon or MultiPolygon, got {type(value).__name__}"
        raise InvalidGeometryTypeError(msg, stage=STAGE)

    msg = f"Unsupported input type for {label}: {type(value).__name__}"
    raise InvalidInputError(msg, stage=STAGE)


def polygon_rings(polygon: Polygon) -> PolygonRings:
    """Convert a ``Polygon`` into plain ``(lng, lat)`` vertex lists."""
    return [[(p.lng, p.lat) for p in ring] for ring in polygon.coordinates]


def _from_geometry(geometry: Geometry, label: str) -> list[PolygonRings]:
    if geometry.type not in _POLYGONAL:
        msg = f"Input {label} must be a Polygon or MultiPolygon, got {geometry.type.value}"
        raise InvalidGeometryTypeError(msg, stage=STAGE)
    if geometry.type is GeoJSONType.POLYGON:
        return [polygon_rings(geometry.to_polygon())]
    return [polygon_rings(poly) for poly in geometry.to_multi_polygon().coordinates]
