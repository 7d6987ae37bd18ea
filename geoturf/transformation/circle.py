"""Circle tessellation.

Builds a closed polygon approximating a circle of a given radius around
a center point. The radius is converted to degrees of arc on a spherical
earth and the vertices are laid out on the planar lng/lat grid, so the
result is an approximation that widens in true ground distance with
latitude. It is not a geodesic buffer.

Entry points:
- ``circle``: from a ``Point``.
- ``circle_from_coordinates``: from a ``[lng, lat]`` pair.
- ``circle_from_feature``: from a Point-typed ``Feature``.
- ``circle_from_geometry``: from a Point-typed ``Geometry``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from geoturf.core.constants import DEFAULT_CIRCLE_STEPS, DEFAULT_UNITS
from geoturf.core.exceptions import InvalidGeometryTypeError, InvalidInputError
from geoturf.models.feature import Feature
from geoturf.models.geometry import GeoJSONType, Geometry, Point, Polygon
from geoturf.utils.conversions import length_to_degrees

if TYPE_CHECKING:
    from collections.abc import Sequence

    from geoturf.core.config import TransformConfig
    from geoturf.models.geometry import BBox

logger = logging.getLogger("geoturf.transformation.circle")

STAGE = "circle"


@dataclass(frozen=True, slots=True)
class CircleOptions:
    """Options for circle tessellation.

    Attributes:
        steps: Number of distinct vertices. Values ``<= 0`` fall back to
            ``DEFAULT_CIRCLE_STEPS``.
        units: Unit of the radius (``kilometers``, ``miles``, ``meters``,
            ``feet``). Empty means kilometres.
        properties: Copied onto the output feature.
    """

    steps: int = DEFAULT_CIRCLE_STEPS
    units: str = DEFAULT_UNITS
    properties: dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_config(
        cls, config: TransformConfig, properties: dict[str, object] | None = None
    ) -> CircleOptions:
        """Build options whose defaults come from a ``TransformConfig``."""
        return cls(
            steps=config.circle_steps,
            units=config.default_units,
            properties=dict(properties or {}),
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def circle(center: Point, radius: float, options: CircleOptions | None = None) -> Feature:
    """Build a Polygon feature approximating a circle around ``center``.

    Args:
        center: Circle center in degrees.
        radius: Radius in ``options.units``. Zero collapses the ring to
            the center; a negative radius yields the same ring as ``abs(radius)``.
        options: Tessellation options; defaults when ``None``.

    Returns:
        A Polygon feature with a single closed ring of ``steps + 1``
        vertices, its bounding box, and a copy of ``options.properties``.

    Raises:
        InvalidInputError: If ``center`` is ``None``.
        UnsupportedUnitError: If ``options.units`` is not supported.
    """
    if center is None:
        msg = "Center point cannot be None"
        raise InvalidInputError(msg, stage=STAGE)

    options = options or CircleOptions()
    steps = options.steps if options.steps > 0 else DEFAULT_CIRCLE_STEPS
    units = options.units or DEFAULT_UNITS

    radius_deg = length_to_degrees(radius, units)
    ring = _circle_ring(center, radius_deg, steps)

    logger.debug(
        "Circle built | center=(%.6f, %.6f) | radius=%s %s | radius_deg=%.6f | steps=%d",
        center.lng,
        center.lat,
        radius,
        units,
        radius_deg,
        steps,
    )

    return Feature(
        geometry=Geometry.from_polygon(Polygon([ring])),
        bbox=_circle_bbox(center, radius_deg),
        properties=dict(options.properties),
    )


def circle_from_coordinates(
    center: Sequence[float], radius: float, options: CircleOptions | None = None
) -> Feature:
    """Build a circle around a ``[lng, lat]`` coordinate pair.

    Raises:
        InvalidInputError: If ``center`` is ``None``, not exactly two
            values, or not numeric.
    """
    if center is None:
        msg = "Center coordinates cannot be None"
        raise InvalidInputError(msg, stage=STAGE)
    if len(center) != 2:
        msg = f"Center must be [lng, lat], got {len(center)} value(s)"
        raise InvalidInputError(msg, stage=STAGE)
    try:
        point = Point(lng=float(center[0]), lat=float(center[1]))
    except (TypeError, ValueError) as exc:
        msg = f"Center must be numeric [lng, lat], got {list(center)!r}"
        raise InvalidInputError(msg, stage=STAGE) from exc
    return circle(point, radius, options)


def circle_from_feature(
    feature: Feature | None, radius: float, options: CircleOptions | None = None
) -> Feature:
    """Build a circle around a Point-typed feature.

    Raises:
        InvalidInputError: If ``feature`` is ``None``.
        InvalidGeometryTypeError: If the feature geometry is not a Point.
        CoordinateFormatError: If the Point coordinates are malformed.
    """
    if feature is None:
        msg = "Feature cannot be None"
        raise InvalidInputError(msg, stage=STAGE)
    return circle(_center_of(feature.geometry, "Feature"), radius, options)


def circle_from_geometry(
    geometry: Geometry | None, radius: float, options: CircleOptions | None = None
) -> Feature:
    """Build a circle around a Point-typed geometry.

    Raises:
        InvalidInputError: If ``geometry`` is ``None``.
        InvalidGeometryTypeError: If the geometry is not a Point.
        CoordinateFormatError: If the Point coordinates are malformed.
    """
    if geometry is None:
        msg = "Geometry cannot be None"
        raise InvalidInputError(msg, stage=STAGE)
    return circle(_center_of(geometry, "Geometry"), radius, options)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _center_of(geometry: Geometry, source: str) -> Point:
    if geometry.type is not GeoJSONType.POINT:
        msg = f"{source} must be a Point, got {geometry.type.value}"
        raise InvalidGeometryTypeError(msg, stage=STAGE)
    return geometry.to_point()


def _circle_ring(center: Point, radius_deg: float, steps: int) -> list[Point]:
    """Lay out ``steps`` vertices counter-clockwise and close the ring."""
    ring: list[Point] = []
    for i in range(steps):
        angle = i * 2 * math.pi / steps
        ring.append(
            Point(
                lng=center.lng + radius_deg * math.cos(angle),
                lat=center.lat + radius_deg * math.sin(angle),
            )
        )
    ring.append(ring[0])
    return ring


def _circle_bbox(center: Point, radius_deg: float) -> BBox:
    """Axis-aligned square circumscribing the circle: (west, south, east, north)."""
    r = abs(radius_deg)
    return (center.lng - r, center.lat - r, center.lng + r, center.lat + r)
