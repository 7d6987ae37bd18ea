"""Length-unit conversion helpers.

Lengths measured along the Earth's surface are converted to the angle
they subtend at the Earth's centre, using a spherical earth of mean
radius ``EARTH_RADIUS_M``. The degree value is what circle tessellation
adds to a center coordinate.
"""

from __future__ import annotations

import math

from geoturf.core.constants import (
    DEFAULT_UNITS,
    EARTH_RADIUS_M,
    UNIT_FEET,
    UNIT_KILOMETERS,
    UNIT_KILOMETRES,
    UNIT_METERS,
    UNIT_METRES,
    UNIT_MILES,
)
from geoturf.core.exceptions import UnsupportedUnitError

METRES_PER_MILE = 1609.344
FEET_PER_METRE = 3.28084

#: Earth radius expressed in each supported unit.
UNIT_FACTORS: dict[str, float] = {
    UNIT_KILOMETERS: EARTH_RADIUS_M / 1000.0,
    UNIT_KILOMETRES: EARTH_RADIUS_M / 1000.0,
    UNIT_METERS: EARTH_RADIUS_M,
    UNIT_METRES: EARTH_RADIUS_M,
    UNIT_MILES: EARTH_RADIUS_M / METRES_PER_MILE,
    UNIT_FEET: EARTH_RADIUS_M * FEET_PER_METRE,
}


def length_to_radians(length: float, units: str = DEFAULT_UNITS) -> float:
    """Convert a surface length to radians.

    Args:
        length: Distance along the surface, in ``units``.
        units: One of ``UNIT_FACTORS``. An empty string means kilometres.

    Raises:
        UnsupportedUnitError: If ``units`` is not supported.
    """
    factor = UNIT_FACTORS.get(units or DEFAULT_UNITS)
    if factor is None:
        raise UnsupportedUnitError(units)
    return length / factor


def length_to_degrees(length: float, units: str = DEFAULT_UNITS) -> float:
    """Convert a surface length to degrees of arc.

    Raises:
        UnsupportedUnitError: If ``units`` is not supported.
    """
    return radians_to_degrees(length_to_radians(length, units))


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees, reduced modulo one full turn (sign kept)."""
    return math.degrees(math.fmod(radians, 2 * math.pi))


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians, reduced modulo one full turn (sign kept)."""
    return math.radians(math.fmod(degrees, 360.0))
