"""Shared pytest fixtures for the geoturf test suite."""

from __future__ import annotations

import pytest

from geometry_builders import ring, square

from geoturf.models.geometry import Polygon

# ---------------------------------------------------------------------------
# Polygon fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_0_10() -> Polygon:
    """Square [0,0]-[10,10], area 100."""
    return Polygon([square(0, 0, 10, 10)])


@pytest.fixture()
def square_5_15() -> Polygon:
    """Square [5,5]-[15,15], overlapping ``square_0_10`` in [5,5]-[10,10]."""
    return Polygon([square(5, 5, 15, 15)])


@pytest.fixture()
def square_with_hole() -> Polygon:
    """Square [0,0]-[10,10] with a centred hole [4,4]-[6,6] (area 96)."""
    return Polygon([square(0, 0, 10, 10), square(4, 4, 6, 6)])


@pytest.fixture()
def l_shape() -> Polygon:
    """Concave L-shaped polygon, area 7."""
    return Polygon([ring((0, 0), (4, 0), (4, 1), (1, 1), (1, 4), (0, 4))])


@pytest.fixture()
def u_shape() -> Polygon:
    """Concave U-shaped polygon open to the north, area 28."""
    return Polygon([ring((0, 0), (6, 0), (6, 6), (4, 6), (4, 2), (2, 2), (2, 6), (0, 6))])
