"""Shared fixtures for grid system tests."""

import numpy as np
import pytest

from pogo_grid.abstractions.types import GeoPoint
from pogo_grid.grid_systems import BoundsManager, BoundsDefinition, S2Cell


@pytest.fixture
def nyc_point():
    """Lower Manhattan."""
    return GeoPoint(40.7128, -74.0060)


@pytest.fixture
def sample_points():
    """Points spread over every cube face, the poles and the antimeridian."""
    return [
        GeoPoint(0.0, 0.0),
        GeoPoint(40.7128, -74.0060),
        GeoPoint(51.5074, -0.1278),
        GeoPoint(-33.8688, 151.2093),
        GeoPoint(35.6762, 139.6503),
        GeoPoint(-22.9068, -43.1729),
        GeoPoint(64.1466, -21.9426),
        GeoPoint(-77.8463, 166.6682),
        GeoPoint(89.5, 45.0),
        GeoPoint(-89.5, -120.0),
        GeoPoint(10.0, 179.9),
        GeoPoint(-10.0, -179.9),
    ]


@pytest.fixture
def random_points():
    """Reproducible uniformly distributed points on the sphere."""
    rng = np.random.default_rng(20240611)
    lats = np.degrees(np.arcsin(rng.uniform(-1.0, 1.0, 200)))
    lngs = rng.uniform(-180.0, 180.0, 200)
    return [GeoPoint(float(lat), float(lng)) for lat, lng in zip(lats, lngs)]


@pytest.fixture
def nyc_cell(nyc_point):
    return S2Cell.from_point(nyc_point, 14)


@pytest.fixture
def bounds_manager():
    """Create bounds manager instance."""
    return BoundsManager()


@pytest.fixture
def nyc_viewport():
    """A few hundred metres of lower Manhattan."""
    return BoundsDefinition('nyc', (-74.02, 40.70, -73.99, 40.72), category='viewport')
