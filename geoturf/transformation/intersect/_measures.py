"""Bounding-box and area helpers for polygon intersection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geoturf.transformation.intersect._constants import MIN_RING_VERTICES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from geoturf.models.geometry import BBox
    from geoturf.transformation.intersect._constants import PolygonRings, Ring


def ring_bbox(ring: Ring) -> BBox:
    """Tight bounding box of a ring; ``(0, 0, 0, 0)`` for an empty ring."""
    if not ring:
        return (0.0, 0.0, 0.0, 0.0)
    xs = [v[0] for v in ring]
    ys = [v[1] for v in ring]
    return (min(xs), min(ys), max(xs), max(ys))


def bboxes_intersect(a: BBox, b: BBox) -> bool:
    """Whether two boxes overlap or touch."""
    return not (a[2] < b[0] or b[2] < a[0] or a[3] < b[1] or b[3] < a[1])


def union_bbox(boxes: Iterable[BBox]) -> BBox:
    """Smallest box containing every box in ``boxes``.

    Raises:
        ValueError: If ``boxes`` is empty.
    """
    boxes = list(boxes)
    if not boxes:
        msg = "Cannot compute the union of zero bounding boxes"
        raise ValueError(msg)
    return (
        min(b[0] for b in boxes),
        min(b[1] for b in boxes),
        max(b[2] for b in boxes),
        max(b[3] for b in boxes),
    )


def signed_ring_area(ring: Ring) -> float:
    """Shoelace area: positive for counter-clockwise rings, negative for clockwise.

    Rings with fewer than 3 vertices have zero area. Closed and open
    rings give the same result.
    """
    n = len(ring)
    if n < MIN_RING_VERTICES:
        return 0.0
    total = 0.0
    for i in range(n):
        x1, y1 = ring[i]
        x2, y2 = ring[(i + 1) % n]
        total += x1 * y2 - x2 * y1
    return total / 2.0


def polygon_area(polygon: PolygonRings) -> float:
    """Unsigned polygon area: outer ring minus holes."""
    if not polygon:
        return 0.0
    area = abs(signed_ring_area(polygon[0]))
    for hole in polygon[1:]:
        area -= abs(signed_ring_area(hole))
    return area
