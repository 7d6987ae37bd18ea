"""Canonical payload contracts for serialised geometries and features.

``TypedDict`` shapes of the dicts produced by ``Geometry.to_dict()`` and
``Feature.to_dict()``. They mirror the GeoJSON members one-to-one so a
payload can be handed straight to ``json.dumps``.
"""

from __future__ import annotations

from typing import Any, NotRequired, TypedDict


class GeometryPayload(TypedDict):
    """Serialised ``Geometry``."""

    type: str
    coordinates: Any


class FeaturePayload(TypedDict):
    """Serialised ``Feature``."""

    type: str
    id: str
    geometry: GeometryPayload
    properties: dict[str, Any]
    bbox: NotRequired[list[float]]
