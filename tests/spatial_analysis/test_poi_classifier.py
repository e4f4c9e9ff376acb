"""Tests for grouping POIs by cell."""

from pogo_grid.spatial_analysis import (
    CellGroup, PoiKind, PointOfInterest, find_cell_items, group_by_cell
)


class TestPointOfInterest:

    def test_default_kind(self):
        poi = PointOfInterest('a', 40.7128, -74.0060)
        assert poi.kind is PoiKind.UNCLASSIFIED
        assert poi.name == ''

    def test_cell(self, gym_cell):
        poi = PointOfInterest('a', 40.7128, -74.0060, PoiKind.GYM)
        assert poi.cell(14) == gym_cell
        assert poi.cell(14).key == "F4ij[657,11172]@14"


class TestGroupByCell:
    """Test group_by_cell."""

    def test_split_by_kind(self, gym_cell, make_pois):
        pois = make_pois(gym_cell, gyms=1, stops=3, unclassified=2)
        groups = group_by_cell(pois, 14)

        assert list(groups) == [gym_cell.key]
        group = groups[gym_cell.key]
        assert group.cell == gym_cell
        assert group.key == gym_cell.key
        assert len(group.gyms) == 1
        assert len(group.stops) == 3
        assert len(group.unclassified) == 2

    def test_not_pogo_creates_empty_group(self, gym_cell, make_pois):
        """Test that a cell holding only rejected portals still has a group."""
        groups = group_by_cell(make_pois(gym_cell, not_pogo=2), 14)
        group = groups[gym_cell.key]
        assert group.gyms == [] and group.stops == [] and group.unclassified == []

    def test_separate_cells(self, gym_cell, make_pois):
        far = PointOfInterest('london', 51.5074, -0.1278, PoiKind.STOP)
        groups = group_by_cell(make_pois(gym_cell, stops=2) + [far], 14)

        assert len(groups) == 2
        assert groups[far.cell(14).key].stops == [far]

    def test_finer_level_splits_groups(self, gym_cell, make_pois):
        pois = make_pois(gym_cell, stops=6, spacing=2e-4)
        assert len(group_by_cell(pois, 14)) == 1
        assert len(group_by_cell(pois, 20)) == 6

    def test_empty(self):
        assert group_by_cell([], 14) == {}

    def test_add_keeps_order(self, gym_cell):
        group = CellGroup(gym_cell)
        first = PointOfInterest('1', 0.0, 0.0, PoiKind.STOP)
        second = PointOfInterest('2', 0.0, 0.0, PoiKind.STOP)
        group.add(first)
        group.add(second)
        assert group.stops == [first, second]


class TestFindCellItems:

    def test_filter_by_cell_and_kind(self, gym_cell, make_pois):
        far = PointOfInterest('london', 51.5074, -0.1278, PoiKind.GYM)
        pois = make_pois(gym_cell, gyms=2, stops=1) + [far]

        found = find_cell_items(gym_cell.key, 14, pois)
        assert len(found) == 3
        assert far not in found

        gyms = find_cell_items(gym_cell.key, 14, pois, PoiKind.GYM)
        assert [p.kind for p in gyms] == [PoiKind.GYM, PoiKind.GYM]

    def test_unknown_key(self, gym_cell, make_pois):
        assert find_cell_items("F0ij[0,0]@14", 14, make_pois(gym_cell, stops=2)) == []
