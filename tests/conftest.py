"""Shared test fixtures for shapescene."""

import matplotlib
import pytest

from shapescene.model import PolygonSpec, SolidSpec

matplotlib.use("Agg")


@pytest.fixture
def cuboid_spec():
    """The 4 x 3 x 5 cm cuboid used throughout the lessons."""
    return SolidSpec(width=4, depth=3, height=5, units="cm")


@pytest.fixture
def hexagon_spec():
    return PolygonSpec(sides=6, radius=100.0)


@pytest.fixture
def pentagon_spec():
    return PolygonSpec(sides=5, radius=100.0)
