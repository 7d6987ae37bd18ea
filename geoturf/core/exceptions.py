"""Unified transformation exception taxonomy.

Every domain exception inherits from ``GeoTurfError`` and carries
structured context fields (stage, code) so callers can branch on a
stable machine-readable code instead of parsing messages.

Taxonomy
--------
- ``ValidationError``          — input/contract violations (category base).
- ``InvalidInputError``        — a required argument is absent or of an
  unsupported shape.
- ``UnsupportedUnitError``     — a length unit outside the supported set.
- ``InvalidGeometryTypeError`` — the geometry kind is wrong for the
  operation (e.g. a LineString passed to ``intersect``).
- ``CoordinateFormatError``    — malformed raw coordinate arrays.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and API responses.
"""

from __future__ import annotations


class GeoTurfError(Exception):
    """Base exception for all geoturf errors.

    Attributes:
        message: Human-readable error description.
        stage: Operation where the error occurred
            (e.g. ``"circle"``, ``"intersect"``).
        code: Machine-readable error code (e.g. ``"INVALID_INPUT"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeoTurfError):
    """Input or domain-model validation failure."""


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class InvalidInputError(ValidationError):
    """Raised when a required argument is ``None`` or has an unsupported shape."""

    default_code = "INVALID_INPUT"


class UnsupportedUnitError(ValueError, ValidationError):
    """Raised when a length unit is not in the supported set.

    Attributes:
        units: The rejected unit name.
    """

    default_stage = "conversions"
    default_code = "UNSUPPORTED_UNIT"

    def __init__(self, units: str) -> None:
        self.units = units
        ValidationError.__init__(self, f"Unsupported length unit: {units!r}")


class InvalidGeometryTypeError(ValidationError):
    """Raised when a geometry's type tag is wrong for the requested operation."""

    default_code = "INVALID_GEOMETRY_TYPE"


class CoordinateFormatError(ValidationError):
    """Raised when raw coordinate arrays are malformed."""

    default_code = "COORDINATE_FORMAT"
