"""GeoJSON geometry value types.

A ``Geometry`` is a type tag plus raw GeoJSON coordinate arrays, as they
arrive from a decoded document. Typed views (``Point``, ``LineString``,
``Polygon``, ``MultiPolygon``) are produced on demand by the fallible
``to_*`` converters, which check the tag and parse the arrays.

Design notes:
- All models are frozen dataclasses. Freezing is shallow: the nested
  coordinate lists are not copied, so callers must not mutate them after
  construction.
- Coordinates are ``(lng, lat)`` in degrees; a third (altitude) element
  in raw input is dropped.
- Type mismatches raise ``InvalidGeometryTypeError``; malformed arrays
  raise ``CoordinateFormatError``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from geoturf.core.exceptions import CoordinateFormatError, InvalidGeometryTypeError

BBox = tuple[float, float, float, float]
"""Axis-aligned box ``(min_x, min_y, max_x, max_y)``."""


class GeoJSONType(enum.Enum):
    """GeoJSON geometry type tags."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"


# ---------------------------------------------------------------------------
# Typed geometries
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Point:
    """A single position in degrees."""

    lng: float
    lat: float

    def to_list(self) -> list[float]:
        return [self.lng, self.lat]


@dataclass(frozen=True, slots=True)
class LineString:
    """An ordered sequence of points."""

    coordinates: list[Point] = field(default_factory=list)

    def to_list(self) -> list[list[float]]:
        return [p.to_list() for p in self.coordinates]


@dataclass(frozen=True, slots=True)
class Polygon:
    """A polygon as a list of rings.

    ``coordinates[0]`` is the outer boundary, ``coordinates[1:]`` are
    holes. An empty ring list is an empty polygon.
    """

    coordinates: list[list[Point]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.coordinates or not self.coordinates[0]

    @property
    def outer(self) -> list[Point]:
        """The outer ring, or an empty list for an empty polygon."""
        return self.coordinates[0] if self.coordinates else []

    @property
    def holes(self) -> list[list[Point]]:
        return self.coordinates[1:]

    def to_list(self) -> list[list[list[float]]]:
        return [[p.to_list() for p in ring] for ring in self.coordinates]


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """An ordered collection of polygons."""

    coordinates: list[Polygon] = field(default_factory=list)

    def to_list(self) -> list[list[list[list[float]]]]:
        return [poly.to_list() for poly in self.coordinates]


# ---------------------------------------------------------------------------
# Tagged geometry
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Geometry:
    """A GeoJSON geometry: type tag plus raw coordinate arrays.

    Attributes:
        type: The GeoJSON type tag.
        coordinates: Nested lists of numbers, shaped according to ``type``.
    """

    type: GeoJSONType
    coordinates: object = field(default_factory=list)

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_point(cls, point: Point) -> Geometry:
        return cls(GeoJSONType.POINT, point.to_list())

    @classmethod
    def from_line_string(cls, line: LineString) -> Geometry:
        return cls(GeoJSONType.LINE_STRING, line.to_list())

    @classmethod
    def from_polygon(cls, polygon: Polygon) -> Geometry:
        return cls(GeoJSONType.POLYGON, polygon.to_list())

    @classmethod
    def from_multi_polygon(cls, multi: MultiPolygon) -> Geometry:
        return cls(GeoJSONType.MULTI_POLYGON, multi.to_list())

    # -- typed views --------------------------------------------------------

    def to_point(self) -> Point:
        """Parse as a Point.

        Raises:
            InvalidGeometryTypeError: If the tag is not ``Point``.
            CoordinateFormatError: If the position is malformed.
        """
        self._expect(GeoJSONType.POINT)
        return parse_position(self.coordinates, "Point")

    def to_line_string(self) -> LineString:
        """Parse as a LineString.

        Raises:
            InvalidGeometryTypeError: If the tag is not ``LineString``.
            CoordinateFormatError: If any position is malformed.
        """
        self._expect(GeoJSONType.LINE_STRING)
        return LineString(parse_positions(self.coordinates, "LineString"))

    def to_polygon(self) -> Polygon:
        """Parse as a Polygon.

        Raises:
            InvalidGeometryTypeError: If the tag is not ``Polygon``.
            CoordinateFormatError: If any ring or position is malformed.
        """
        self._expect(GeoJSONType.POLYGON)
        return parse_polygon(self.coordinates, "Polygon")

    def to_multi_polygon(self) -> MultiPolygon:
        """Parse as a MultiPolygon.

        Raises:
            InvalidGeometryTypeError: If the tag is not ``MultiPolygon``.
            CoordinateFormatError: If any polygon, ring or position is malformed.
        """
        self._expect(GeoJSONType.MULTI_POLYGON)
        raw = _expect_list(self.coordinates, "MultiPolygon")
        return MultiPolygon(
            [parse_polygon(poly, f"MultiPolygon[{idx}]") for idx, poly in enumerate(raw)]
        )

    def validate(self) -> None:
        """Parse the coordinates according to the type tag, discarding the result.

        Raises:
            CoordinateFormatError: If the coordinates do not match the tag.
        """
        if self.type is GeoJSONType.POINT:
            self.to_point()
        elif self.type is GeoJSONType.LINE_STRING:
            self.to_line_string()
        elif self.type is GeoJSONType.POLYGON:
            self.to_polygon()
        elif self.type is GeoJSONType.MULTI_POLYGON:
            self.to_multi_polygon()
        elif self.type is GeoJSONType.MULTI_POINT:
            parse_positions(self.coordinates, "MultiPoint")
        else:
            raw = _expect_list(self.coordinates, "MultiLineString")
            for idx, line in enumerate(raw):
                parse_positions(line, f"MultiLineString[{idx}]")

    # -- transport ----------------------------------------------------------

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON geometry dict."""
        return {"type": self.type.value, "coordinates": self.coordinates}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Geometry:
        """Deserialise from a GeoJSON geometry dict.

        Coordinates are kept raw; call ``validate()`` or a ``to_*``
        converter to check them.

        Raises:
            InvalidGeometryTypeError: If ``type`` is missing or unknown.
        """
        raw_type = data.get("type")
        try:
            geo_type = GeoJSONType(raw_type)
        except ValueError as exc:
            msg = f"Unknown geometry type {raw_type!r}"
            raise InvalidGeometryTypeError(msg, stage="geometry") from exc
        return cls(geo_type, data.get("coordinates", []))

    def _expect(self, expected: GeoJSONType) -> None:
        if self.type is not expected:
            msg = f"Geometry must be a {expected.value}, got {self.type.value}"
            raise InvalidGeometryTypeError(msg, stage="geometry")


# ---------------------------------------------------------------------------
# Raw coordinate parsing
# ---------------------------------------------------------------------------


def parse_position(raw: object, path: str) -> Point:
    """Parse a ``[lng, lat]`` (or ``[lng, lat, alt]``) array into a Point.

    Raises:
        CoordinateFormatError: If the array is malformed.
    """
    if not isinstance(raw, list | tuple):
        msg = f"Malformed coordinate at {path}: expected list/tuple, got {type(raw).__name__}"
        raise CoordinateFormatError(msg, stage="geometry")
    if len(raw) < 2:
        msg = f"Malformed coordinate at {path}: expected at least 2 elements, got {len(raw)}"
        raise CoordinateFormatError(msg, stage="geometry")
    lng, lat = raw[0], raw[1]
    if isinstance(lng, bool) or isinstance(lat, bool):
        msg = f"Malformed coordinate at {path}: booleans are not coordinates"
        raise CoordinateFormatError(msg, stage="geometry")
    try:
        return Point(float(lng), float(lat))
    except (TypeError, ValueError) as exc:
        msg = f"Malformed coordinate at {path}: cannot convert to float (lng={lng!r}, lat={lat!r})"
        raise CoordinateFormatError(msg, stage="geometry") from exc


def parse_positions(raw: object, path: str) -> list[Point]:
    """Parse a list of positions (a LineString or ring)."""
    items = _expect_list(raw, path)
    return [parse_position(item, f"{path}[{idx}]") for idx, item in enumerate(items)]


def parse_polygon(raw: object, path: str) -> Polygon:
    """Parse a list of rings into a Polygon."""
    rings = _expect_list(raw, path)
    return Polygon([parse_positions(ring, f"{path}[{idx}]") for idx, ring in enumerate(rings)])


def _expect_list(raw: object, path: str) -> list[object] | tuple[object, ...]:
    if not isinstance(raw, list | tuple):
        msg = f"Malformed coordinates at {path}: expected list/tuple, got {type(raw).__name__}"
        raise CoordinateFormatError(msg, stage="geometry")
    return raw
