"""Shared constants — single source of truth.

Centralises the earth model, unit names and circle defaults used by the
conversions module, the transformations and the configuration loader.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Earth model
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_371_008.8
"""Mean Earth radius in metres."""

# ---------------------------------------------------------------------------
# Length units
# ---------------------------------------------------------------------------

UNIT_KILOMETERS: str = "kilometers"
UNIT_KILOMETRES: str = "kilometres"
UNIT_METERS: str = "meters"
UNIT_METRES: str = "metres"
UNIT_MILES: str = "miles"
UNIT_FEET: str = "feet"

DEFAULT_UNITS: str = UNIT_KILOMETERS
"""Unit assumed when a caller passes no unit (or an empty string)."""

# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

DEFAULT_CIRCLE_STEPS: int = 64
"""Number of distinct vertices generated around a circle."""
