"""Geometric transformations.

- circle: polygon approximation of a circle around a center point
- intersect: boolean intersection of polygonal geometries
"""

from geoturf.transformation.circle import (
    CircleOptions,
    circle,
    circle_from_coordinates,
    circle_from_feature,
    circle_from_geometry,
)
from geoturf.transformation.intersect import PolygonLike, intersect

__all__ = [
    "CircleOptions",
    "PolygonLike",
    "circle",
    "circle_from_coordinates",
    "circle_from_feature",
    "circle_from_geometry",
    "intersect",
]
