"""Pydantic documents for GeoJSON Feature (de)serialization.

The documents validate the outer GeoJSON shape (member names, type
tags, bbox arity); coordinate arrays are checked by the geometry
converters so that malformed coordinates always surface as
``CoordinateFormatError``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from geoturf.models.feature import Feature, ModelValidationError
from geoturf.models.geometry import GeoJSONType, Geometry

GeometryTypeName = Literal[
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
]


class GeometryDocument(BaseModel):
    """GeoJSON geometry object.

    Attributes:
        type: GeoJSON geometry type tag.
        coordinates: Raw nested coordinate arrays.
    """

    model_config = ConfigDict(extra="ignore")

    type: GeometryTypeName
    coordinates: list[Any] = Field(default_factory=list)


class FeatureDocument(BaseModel):
    """GeoJSON Feature object.

    Attributes:
        type: Always ``"Feature"``.
        id: Optional feature identifier.
        bbox: Optional ``[min_x, min_y, max_x, max_y]``.
        geometry: The feature geometry.
        properties: Free-form properties (``null`` is accepted as empty).
    """

    model_config = ConfigDict(extra="ignore")

    type: Literal["Feature"] = "Feature"
    id: str | int | None = None
    bbox: Annotated[list[float], Field(min_length=4, max_length=4)] | None = None
    geometry: GeometryDocument
    properties: dict[str, Any] | None = Field(default_factory=dict)


def document_from_feature(feature: Feature) -> FeatureDocument:
    """Build a ``FeatureDocument`` from a ``Feature``."""
    return FeatureDocument(
        id=feature.feature_id or None,
        bbox=list(feature.bbox) if feature.bbox is not None else None,
        geometry=GeometryDocument(
            type=feature.geometry.type.value,
            coordinates=feature.geometry.coordinates,  # type: ignore[arg-type]
        ),
        properties=dict(feature.properties),
    )


def feature_from_document(document: FeatureDocument) -> Feature:
    """Build a ``Feature`` from a validated document, checking its coordinates.

    Raises:
        CoordinateFormatError: If the coordinates do not match the type tag.
        ModelValidationError: If the bbox violates its invariant.
    """
    geometry = Geometry(GeoJSONType(document.geometry.type), document.geometry.coordinates)
    geometry.validate()
    return Feature(
        geometry=geometry,
        bbox=tuple(document.bbox) if document.bbox is not None else None,  # type: ignore[arg-type]
        properties=dict(document.properties or {}),
        feature_id="" if document.id is None else str(document.id),
    )


def parse_feature_document(payload: str | bytes | dict[str, Any]) -> Feature:
    """Validate a GeoJSON Feature (JSON text or decoded dict) into a ``Feature``.

    Raises:
        ModelValidationError: If the payload is not a GeoJSON Feature.
        CoordinateFormatError: If the coordinates are malformed.
    """
    try:
        if isinstance(payload, str | bytes):
            document = FeatureDocument.model_validate_json(payload)
        else:
            document = FeatureDocument.model_validate(payload)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise ModelValidationError(
            "FeatureDocument", location, first.get("input"), first["msg"]
        ) from exc
    return feature_from_document(document)
