"""Shared constants and vertex types for polygon intersection."""

from __future__ import annotations

Vertex = tuple[float, float]
Ring = list[Vertex]
PolygonRings = list[Ring]
"""``[outer, *holes]`` as plain vertex lists."""

# Minimum distinct vertices for a ring to enclose any area
MIN_RING_VERTICES = 3
