"""Tests for the Feature model and its GeoJSON (de)serialisation.

Covers:
- Bounding-box invariants (``ModelValidationError``)
- ``to_dict`` / ``from_dict`` transport
- ``to_geojson`` / ``from_geojson`` through the pydantic documents
- Malformed documents and coordinates
"""

from __future__ import annotations

import json

import pytest

from geoturf.core.exceptions import CoordinateFormatError, InvalidGeometryTypeError
from geoturf.models.feature import Feature, ModelValidationError
from geoturf.models.geojson import FeatureDocument, parse_feature_document
from geoturf.models.geometry import GeoJSONType, Geometry, Point, Polygon
from geoturf.transformation.circle import CircleOptions, circle

SQUARE = Polygon([[Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(0, 0)]])


class TestFeatureModel:
    def test_defaults(self) -> None:
        feature = Feature(geometry=Geometry.from_point(Point(1, 2)))
        assert feature.bbox is None
        assert feature.properties == {}
        assert feature.feature_id == ""

    def test_type_follows_geometry(self) -> None:
        feature = Feature(geometry=Geometry.from_polygon(SQUARE))
        assert feature.type is GeoJSONType.POLYGON
        assert feature.to_polygon() == SQUARE

    def test_wrong_view_raises(self) -> None:
        feature = Feature(geometry=Geometry.from_polygon(SQUARE))
        with pytest.raises(InvalidGeometryTypeError):
            feature.to_point()

    def test_is_frozen(self) -> None:
        feature = Feature(geometry=Geometry.from_point(Point(1, 2)))
        with pytest.raises(AttributeError):
            feature.bbox = (0, 0, 1, 1)  # type: ignore[misc]

    def test_properties_read_only(self) -> None:
        feature = Feature(geometry=Geometry.from_point(Point(1, 2)), properties={"a": 1})
        with pytest.raises(TypeError):
            feature.properties["a"] = 2  # type: ignore[index]
        assert feature.properties["a"] == 1

    def test_properties_copied_from_caller(self) -> None:
        source: dict[str, object] = {"a": 1}
        feature = Feature(geometry=Geometry.from_point(Point(1, 2)), properties=source)
        source["a"] = 99
        source["b"] = 2
        assert dict(feature.properties) == {"a": 1}

    def test_equal_properties_compare_equal(self) -> None:
        geometry = Geometry.from_point(Point(1, 2))
        assert Feature(geometry=geometry, properties={"a": 1}) == Feature(
            geometry=geometry, properties={"a": 1}
        )


class TestFeatureBBox:
    """Bounding-box invariants."""

    def test_degenerate_box_allowed(self) -> None:
        feature = Feature(geometry=Geometry.from_point(Point(1, 2)), bbox=(1, 2, 1, 2))
        assert feature.bbox == (1, 2, 1, 2)

    @pytest.mark.parametrize("bbox", [(2, 0, 1, 1), (0, 2, 1, 1)])
    def test_inverted_box_rejected(self, bbox: tuple[float, ...]) -> None:
        with pytest.raises(ModelValidationError, match="min values must not exceed max"):
            Feature(geometry=Geometry.from_point(Point(1, 2)), bbox=bbox)  # type: ignore[arg-type]

    def test_wrong_arity_rejected(self) -> None:
        with pytest.raises(ModelValidationError, match="exactly 4 values") as exc_info:
            Feature(geometry=Geometry.from_point(Point(1, 2)), bbox=(0, 0, 1))  # type: ignore[arg-type]
        assert exc_info.value.model == "Feature"
        assert exc_info.value.field_name == "bbox"


class TestFeatureDict:
    def test_to_dict(self) -> None:
        feature = Feature(
            geometry=Geometry.from_point(Point(1.0, 2.0)),
            bbox=(1.0, 2.0, 1.0, 2.0),
            properties={"name": "p"},
            feature_id="f-1",
        )
        assert feature.to_dict() == {
            "type": "Feature",
            "id": "f-1",
            "geometry": {"type": "Point", "coordinates": [1.0, 2.0]},
            "properties": {"name": "p"},
            "bbox": [1.0, 2.0, 1.0, 2.0],
        }

    def test_round_trip(self) -> None:
        feature = circle(Point(5.0, 5.0), 1.0, CircleOptions(steps=8, properties={"k": "v"}))
        assert Feature.from_dict(feature.to_dict()) == feature

    def test_from_dict_defaults(self) -> None:
        feature = Feature.from_dict({"geometry": {"type": "Point", "coordinates": [0, 0]}})
        assert feature.properties == {}
        assert feature.feature_id == ""
        assert feature.bbox is None

    def test_from_dict_numeric_id(self) -> None:
        feature = Feature.from_dict(
            {"id": 7, "geometry": {"type": "Point", "coordinates": [0, 0]}}
        )
        assert feature.feature_id == "7"

    def test_from_dict_missing_geometry(self) -> None:
        with pytest.raises(TypeError, match="geometry must be a dict"):
            Feature.from_dict({"properties": {}})

    def test_from_dict_bad_properties(self) -> None:
        with pytest.raises(TypeError, match="properties must be a dict"):
            Feature.from_dict(
                {"geometry": {"type": "Point", "coordinates": [0, 0]}, "properties": [1]}
            )

    def test_from_dict_bad_bbox(self) -> None:
        with pytest.raises(TypeError, match="bbox must be a list"):
            Feature.from_dict(
                {"geometry": {"type": "Point", "coordinates": [0, 0]}, "bbox": "0,0,1,1"}
            )

    def test_from_dict_unknown_geometry(self) -> None:
        with pytest.raises(InvalidGeometryTypeError):
            Feature.from_dict({"geometry": {"type": "Circle", "coordinates": []}})


class TestFeatureGeoJSON:
    """JSON documents validated by pydantic."""

    def test_to_geojson(self) -> None:
        feature = Feature(
            geometry=Geometry.from_polygon(SQUARE),
            bbox=(0.0, 0.0, 1.0, 1.0),
            properties={"name": "sq", "note": None},
        )
        decoded = json.loads(feature.to_geojson())
        assert decoded["type"] == "Feature"
        assert decoded["geometry"]["type"] == "Polygon"
        assert decoded["bbox"] == [0.0, 0.0, 1.0, 1.0]
        assert decoded["properties"] == {"name": "sq", "note": None}
        assert "id" not in decoded

    def test_to_geojson_without_bbox(self) -> None:
        decoded = json.loads(Feature(geometry=Geometry.from_point(Point(1, 2))).to_geojson())
        assert "bbox" not in decoded

    def test_round_trip(self) -> None:
        feature = circle(Point(-75.343, 39.984), 5.0, CircleOptions(steps=16))
        assert Feature.from_geojson(feature.to_geojson()) == feature

    def test_from_geojson_bytes(self) -> None:
        payload = b'{"type": "Feature", "geometry": {"type": "Point", "coordinates": [1, 2]}}'
        feature = Feature.from_geojson(payload)
        assert feature.to_point() == Point(1.0, 2.0)

    def test_null_properties_become_empty(self) -> None:
        payload = json.dumps(
            {
                "type": "Feature",
                "properties": None,
                "geometry": {"type": "Point", "coordinates": [1, 2]},
            }
        )
        assert Feature.from_geojson(payload).properties == {}

    def test_extra_members_ignored(self) -> None:
        payload = json.dumps(
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [1, 2], "crs": "x"},
                "foreign": True,
            }
        )
        assert Feature.from_geojson(payload).type is GeoJSONType.POINT

    def test_parse_decoded_dict(self) -> None:
        feature = parse_feature_document(
            {"type": "Feature", "id": 3, "geometry": {"type": "Point", "coordinates": [1, 2]}}
        )
        assert feature.feature_id == "3"

    @pytest.mark.parametrize(
        "document",
        [
            {"type": "FeatureCollection", "geometry": {"type": "Point", "coordinates": [0, 0]}},
            {"type": "Feature"},
            {"type": "Feature", "geometry": {"type": "Circle", "coordinates": [0, 0]}},
            {
                "type": "Feature",
                "bbox": [0, 0, 1],
                "geometry": {"type": "Point", "coordinates": [0, 0]},
            },
        ],
    )
    def test_bad_document_raises(self, document: dict[str, object]) -> None:
        with pytest.raises(ModelValidationError) as exc_info:
            Feature.from_geojson(json.dumps(document))
        assert exc_info.value.model == "FeatureDocument"

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(ModelValidationError):
            Feature.from_geojson("{not json")

    def test_bad_coordinates_raise(self) -> None:
        payload = json.dumps(
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": ["a", "b"]}}
        )
        with pytest.raises(CoordinateFormatError):
            Feature.from_geojson(payload)

    def test_inverted_bbox_raises(self) -> None:
        payload = json.dumps(
            {
                "type": "Feature",
                "bbox": [1, 1, 0, 0],
                "geometry": {"type": "Point", "coordinates": [0, 0]},
            }
        )
        with pytest.raises(ModelValidationError, match="min values"):
            Feature.from_geojson(payload)

    def test_document_defaults(self) -> None:
        document = FeatureDocument.model_validate(
            {"geometry": {"type": "Point", "coordinates": [0, 0]}}
        )
        assert document.type == "Feature"
        assert document.properties == {}
        assert document.bbox is None
