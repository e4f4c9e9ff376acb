"""Shared fixtures for POI analysis tests."""

import itertools

import pytest

from pogo_grid.grid_systems import S2Cell
from pogo_grid.spatial_analysis import PoiKind, PointOfInterest

_ids = itertools.count()


def pois_around(cell, gyms=0, stops=0, unclassified=0, not_pogo=0, spacing=2e-5):
    """POIs a few metres apart around the centre of a cell."""
    center = cell.center()
    kinds = ([PoiKind.GYM] * gyms + [PoiKind.STOP] * stops +
             [PoiKind.UNCLASSIFIED] * unclassified + [PoiKind.NOT_POGO] * not_pogo)
    pois = []
    for n, kind in enumerate(kinds, start=1):
        offset = n * spacing * (1 if n % 2 else -1)
        pois.append(PointOfInterest(
            id=f"poi-{next(_ids)}",
            lat=center.lat + offset,
            lng=center.lng - offset / 2,
            kind=kind
        ))
    return pois


@pytest.fixture
def gym_cell():
    """Level 14 cell over lower Manhattan."""
    return S2Cell.from_lat_lng(40.7128, -74.0060, 14)


@pytest.fixture
def make_pois():
    return pois_around
