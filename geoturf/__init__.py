"""GeoTurf transformations.

Geometric transformations over GeoJSON-style polygonal data: circle
tessellation around a center point with unit-aware radius conversion,
and boolean intersection of Polygon / MultiPolygon regions.
"""

from geoturf.transformation import (
    CircleOptions,
    circle,
    circle_from_coordinates,
    circle_from_feature,
    circle_from_geometry,
    intersect,
)

__version__ = "0.1.0"

__all__ = [
    "CircleOptions",
    "circle",
    "circle_from_coordinates",
    "circle_from_feature",
    "circle_from_geometry",
    "intersect",
]
