"""Data model for a GeoJSON feature.

A Feature owns one geometry, an optional bounding box, a free-form
properties mapping and an identifier. Transformations build a fresh
Feature per call and hand it to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from geoturf.core.exceptions import ValidationError
from geoturf.models.geometry import Geometry

if TYPE_CHECKING:
    from collections.abc import Mapping

    from geoturf.models.contracts import FeaturePayload
    from geoturf.models.geometry import BBox, GeoJSONType, MultiPolygon, Point, Polygon


class ModelValidationError(ValueError, ValidationError):
    """Raised when a domain model is constructed with invalid field values.

    Attributes:
        model: Name of the model class that failed validation.
        field_name: The field that violated the invariant.
        value: The invalid value.
    """

    default_stage = "model_validation"
    default_code = "MODEL_VALIDATION_FAILED"

    def __init__(self, model: str, field_name: str, value: object, message: str) -> None:
        self.model = model
        self.field_name = field_name
        self.value = value
        formatted = f"{model}.{field_name}={value!r}: {message}"
        ValidationError.__init__(self, formatted)


@dataclass(frozen=True, slots=True)
class Feature:
    """A geometry with its bounding box, properties and identifier.

    Attributes:
        geometry: The wrapped geometry.
        bbox: ``(min_x, min_y, max_x, max_y)`` or ``None`` when absent.
        properties: Arbitrary caller-supplied key/value pairs, copied on
            construction and exposed read-only.
        feature_id: GeoJSON ``id`` member (empty when absent).
    """

    geometry: Geometry
    bbox: BBox | None = None
    properties: Mapping[str, object] = field(default_factory=dict)
    feature_id: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        if self.bbox is not None:
            _check_bbox("Feature", "bbox", self.bbox)

    @property
    def type(self) -> GeoJSONType:
        """Type tag of the wrapped geometry."""
        return self.geometry.type

    def to_point(self) -> Point:
        return self.geometry.to_point()

    def to_polygon(self) -> Polygon:
        return self.geometry.to_polygon()

    def to_multi_polygon(self) -> MultiPolygon:
        return self.geometry.to_multi_polygon()

    # -- transport ----------------------------------------------------------

    def to_dict(self) -> FeaturePayload:
        """Serialise to a GeoJSON Feature dict."""
        payload: FeaturePayload = {
            "type": "Feature",
            "id": self.feature_id,
            "geometry": self.geometry.to_dict(),  # type: ignore[typeddict-item]
            "properties": dict(self.properties),
        }
        if self.bbox is not None:
            payload["bbox"] = list(self.bbox)
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Feature:
        """Deserialise from a GeoJSON Feature dict.

        Missing ``properties`` and ``id`` are defaulted rather than
        raising an error.

        Raises:
            TypeError: If field values have unexpected types.
            InvalidGeometryTypeError: If the geometry type is unknown.
            ModelValidationError: If the bbox violates its invariant.
        """
        geometry_raw = data.get("geometry")
        if not isinstance(geometry_raw, dict):
            msg = f"geometry must be a dict, got {type(geometry_raw).__name__}"
            raise TypeError(msg)

        properties_raw = data.get("properties") or {}
        if not isinstance(properties_raw, dict):
            msg = f"properties must be a dict, got {type(properties_raw).__name__}"
            raise TypeError(msg)

        bbox_raw = data.get("bbox")
        if bbox_raw is not None and not isinstance(bbox_raw, list | tuple):
            msg = f"bbox must be a list, got {type(bbox_raw).__name__}"
            raise TypeError(msg)

        feature_id = data.get("id")
        return cls(
            geometry=Geometry.from_dict(geometry_raw),
            bbox=tuple(float(v) for v in bbox_raw) if bbox_raw is not None else None,  # type: ignore[arg-type]
            properties={str(k): v for k, v in properties_raw.items()},
            feature_id="" if feature_id is None else str(feature_id),
        )

    def to_geojson(self) -> str:
        """Serialise to a GeoJSON Feature JSON string."""
        from geoturf.models.geojson import document_from_feature

        document = document_from_feature(self)
        absent = {name for name in ("id", "bbox") if getattr(document, name) is None}
        return document.model_dump_json(exclude=absent)

    @classmethod
    def from_geojson(cls, payload: str | bytes) -> Feature:
        """Parse and validate a GeoJSON Feature JSON document.

        Raises:
            ModelValidationError: If the document does not match the
                GeoJSON Feature shape.
            CoordinateFormatError: If the geometry coordinates are malformed.
        """
        from geoturf.models.geojson import parse_feature_document

        return parse_feature_document(payload)


# ---------------------------------------------------------------------------
# Invariant checks
# ---------------------------------------------------------------------------


def _check_bbox(model: str, field_name: str, value: tuple[float, ...]) -> None:
    """Raise ``ModelValidationError`` unless *value* is a well-ordered 2-D box."""
    if len(value) != 4:
        raise ModelValidationError(model, field_name, value, "must have exactly 4 values")
    min_x, min_y, max_x, max_y = value
    if min_x > max_x or min_y > max_y:
        raise ModelValidationError(model, field_name, value, "min values must not exceed max")
