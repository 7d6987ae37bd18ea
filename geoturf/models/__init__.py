"""Data models and schemas.

Defines the data structures used throughout the transformations:
- Geometry: GeoJSON type tag plus raw coordinates, with typed views
- Point / LineString / Polygon / MultiPolygon: parsed geometry values
- Feature: Geometry with bounding box, properties and identifier
"""

from geoturf.models.feature import Feature, ModelValidationError
from geoturf.models.geometry import (
    BBox,
    GeoJSONType,
    Geometry,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = [
    "BBox",
    "Feature",
    "GeoJSONType",
    "Geometry",
    "LineString",
    "ModelValidationError",
    "MultiPolygon",
    "Point",
    "Polygon",
]
