"""Tests for same-level neighbor finding, including cube edge wrapping."""

import pytest

from pogo_grid.abstractions.types import Face
from pogo_grid.grid_systems import DEFAULT_NEIGHBOR_DELTAS, S2Cell
from pogo_grid.grid_systems.projection import wrap_face_ij

LEVEL = 10
MAX_IJ = (1 << LEVEL) - 1
MID = 1 << (LEVEL - 1)

# (cell i, cell j, delta) for the middle cell of each face edge
EDGE_CROSSINGS = {
    'low_i': (0, MID, (-1, 0)),
    'low_j': (MID, 0, (0, -1)),
    'high_i': (MAX_IJ, MID, (1, 0)),
    'high_j': (MID, MAX_IJ, (0, 1)),
}


class TestSameFaceNeighbors:
    """Test neighbors that stay on the cell's face."""

    def test_default_order(self):
        cell = S2Cell.from_face_ij(0, 100, 200, LEVEL)
        neighbors = cell.neighbors()
        assert [n.ij for n in neighbors] == [(99, 200), (100, 199), (101, 200), (100, 201)]
        assert all(n.face == Face.POS_X and n.level == LEVEL for n in neighbors)

    def test_default_deltas(self):
        assert DEFAULT_NEIGHBOR_DELTAS == ((-1, 0), (0, -1), (1, 0), (0, 1))

    def test_custom_deltas(self):
        """Test diagonal and repeated offsets, returned in the order given."""
        cell = S2Cell.from_face_ij(3, 10, 10, 6)
        neighbors = cell.neighbors([(1, 1), (-1, -1), (1, 1)])
        assert [n.ij for n in neighbors] == [(11, 11), (9, 9), (11, 11)]

    def test_empty_deltas(self, nyc_cell):
        assert nyc_cell.neighbors([]) == []

    def test_neighbors_are_distinct(self, nyc_cell):
        neighbors = nyc_cell.neighbors()
        assert len(set(neighbors)) == 4
        assert nyc_cell not in neighbors

    def test_symmetry(self, random_points):
        """Test that adjacency is symmetric for cells off the face edges."""
        max_ij = (1 << 14) - 1
        for point in random_points:
            cell = S2Cell.from_point(point, 14)
            if {0, max_ij} & {cell.i, cell.j}:
                continue
            for neighbor in cell.neighbors():
                assert cell in neighbor.neighbors()


class TestEdgeWrapping:
    """Test neighbors across each of the 24 cube face edges."""

    @pytest.mark.parametrize("face", list(Face))
    @pytest.mark.parametrize("edge", sorted(EDGE_CROSSINGS))
    def test_crossing_lands_on_adjacent_face(self, face, edge):
        i, j, (di, dj) = EDGE_CROSSINGS[edge]
        new_face, new_i, new_j = wrap_face_ij(face, i + di, j + dj, LEVEL)

        assert new_face != face
        assert new_face != face.opposite
        assert 0 <= new_i <= MAX_IJ
        assert 0 <= new_j <= MAX_IJ

    @pytest.mark.parametrize("face", list(Face))
    @pytest.mark.parametrize("edge", sorted(EDGE_CROSSINGS))
    def test_crossing_is_symmetric(self, face, edge):
        """Test that the cell across an edge sees the original cell as a neighbor."""
        i, j, delta = EDGE_CROSSINGS[edge]
        cell = S2Cell.from_face_ij(face, i, j, LEVEL)
        (across,) = cell.neighbors([delta])

        assert across.face != face
        assert cell in across.neighbors()

    @pytest.mark.parametrize("face", list(Face))
    def test_each_edge_reaches_a_different_face(self, face):
        """Test that the four edges of a face lead to its four adjacent faces."""
        reached = set()
        for i, j, (di, dj) in EDGE_CROSSINGS.values():
            reached.add(wrap_face_ij(face, i + di, j + dj, LEVEL)[0])
        assert reached == set(Face) - {face, face.opposite}

    def test_crossing_stays_on_edge_row(self):
        """Test that the wrapped cell sits in the first or last row of its face."""
        cell = S2Cell.from_face_ij(0, 0, MID, LEVEL)
        (across,) = cell.neighbors([(-1, 0)])
        assert across.face == Face.NEG_Y
        assert MAX_IJ in across.ij or 0 in across.ij

    def test_crossing_preserves_centre_distance(self):
        """Test that a wrapped neighbor is as close as a same-face neighbor."""
        cell = S2Cell.from_face_ij(1, MAX_IJ, MID, LEVEL)
        inside, across = cell.neighbors([(-1, 0), (1, 0)])
        center = cell.center()

        def dist(other):
            c = other.center()
            return abs(c.lat - center.lat) + abs(c.lng - center.lng)

        assert dist(across) == pytest.approx(dist(inside), rel=0.2)


class TestCubeCorners:
    """Cube corner cells have three faces meeting; adjacency there may be asymmetric."""

    @pytest.mark.parametrize("face", list(Face))
    def test_corner_neighbors_are_valid_cells(self, face):
        for i, j in [(0, 0), (0, MAX_IJ), (MAX_IJ, 0), (MAX_IJ, MAX_IJ)]:
            cell = S2Cell.from_face_ij(face, i, j, LEVEL)
            neighbors = cell.neighbors()
            assert len(neighbors) == 4
            for neighbor in neighbors:
                assert neighbor.level == LEVEL
                assert 0 <= neighbor.i <= MAX_IJ
                assert 0 <= neighbor.j <= MAX_IJ
                assert neighbor != cell
