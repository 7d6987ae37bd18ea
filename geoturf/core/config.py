"""Transformation configuration loaded from environment variables.

All configuration values have sensible defaults matching the constants
in ``geoturf.core.constants``.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value is out of
    its valid range. This catches bad configuration at startup instead
    of on the first circle request.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from geoturf.core.constants import DEFAULT_CIRCLE_STEPS, DEFAULT_UNITS
from geoturf.core.exceptions import GeoTurfError


class ConfigValidationError(GeoTurfError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class TransformConfig:
    """Immutable transformation configuration.

    Attributes:
        circle_steps: Default number of vertices generated by ``circle``.
        default_units: Default length unit for circle radii.
    """

    circle_steps: int = DEFAULT_CIRCLE_STEPS
    default_units: str = DEFAULT_UNITS

    @classmethod
    def from_env(cls) -> TransformConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or names an
                unsupported unit.
            ValueError: If ``GEOTURF_CIRCLE_STEPS`` cannot be parsed as an
                integer.
        """
        config = cls(
            circle_steps=int(os.getenv("GEOTURF_CIRCLE_STEPS", str(DEFAULT_CIRCLE_STEPS))),
            default_units=os.getenv("GEOTURF_DEFAULT_UNITS", DEFAULT_UNITS),
        )
        _validate(config)
        return config


def _validate(config: TransformConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    from geoturf.utils.conversions import UNIT_FACTORS

    if config.circle_steps <= 0:
        raise ConfigValidationError(
            "GEOTURF_CIRCLE_STEPS",
            config.circle_steps,
            "must be > 0 (vertices)",
        )

    if config.default_units not in UNIT_FACTORS:
        raise ConfigValidationError(
            "GEOTURF_DEFAULT_UNITS",
            config.default_units,
            f"must be one of {sorted(UNIT_FACTORS)}",
        )
