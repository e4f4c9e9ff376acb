# pogo_grid/grid_systems/s2_cell.py
"""S2-style cells on the cube-sphere grid.

Unlike the Google S2 library, cells are not packed into 64-bit Hilbert
curve ids. A cell is the plain tuple (face, i, j, level) with i and j in
0 .. 2**level - 1, and its canonical string form ``F<face>ij[<i>,<j>]@<level>``
is what callers use as a dictionary key.
"""

import math
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from pyproj import Geod
from shapely.affinity import translate
from shapely.geometry import Point, Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from ..abstractions.types import Face, GeoPoint, GridCell
from .exceptions import DegenerateInputError
from .projection import (
    as_face, face_ij_outline, face_ij_to_point, face_uv_to_st, point_to_unit_vector,
    st_to_ij, vector_to_face_uv, wrap_face_ij
)

# Edge-adjacent offsets, in the order neighbors are returned
DEFAULT_NEIGHBOR_DELTAS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))

# Corner offsets in rendering winding order
CORNER_OFFSETS: Tuple[Tuple[float, float], ...] = ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0))

_KEY_PATTERN = re.compile(r'^F(\d+)ij\[(-?\d+),(-?\d+)\]@(\d+)$')

_GEOD = Geod(ellps='WGS84')


def _coerce_point(point) -> GeoPoint:
    if isinstance(point, GeoPoint):
        return point
    if hasattr(point, 'lat') and hasattr(point, 'lng'):
        return GeoPoint(float(point.lat), float(point.lng))
    lat, lng = point
    return GeoPoint(float(lat), float(lng))


def _check_level(level: int):
    if level < 0:
        raise ValueError(f"Level must be non-negative, got: {level}")


def _edge_steps(level: int) -> int:
    """Samples per cell edge; coarse cells need more to follow the arcs."""
    return max(2, 32 >> level)


def _expand_pole_corners(lngs: np.ndarray, lats: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Replace a corner sitting on a pole by the pole line between its neighbors."""
    n = len(lats)
    ring_lngs, ring_lats = [], []
    for k in range(n):
        if abs(lats[k]) < 90.0 - 1e-9:
            ring_lngs.append(lngs[k])
            ring_lats.append(lats[k])
        else:
            ring_lngs.extend([lngs[k - 1], lngs[(k + 1) % n]])
            ring_lats.extend([lats[k], lats[k]])
    return np.array(ring_lngs), np.array(ring_lats)


def _polar_polygon(lngs: np.ndarray, lats: np.ndarray, pole: float) -> Polygon:
    """Close a ring that circles a pole along the antimeridian and the pole line."""
    lngs = (lngs + 180.0) % 360.0 - 180.0
    order = np.argsort(lngs, kind='stable')
    lngs, lats = lngs[order], lats[order]

    # latitude where the ring crosses the antimeridian
    span = lngs[0] + 360.0 - lngs[-1]
    fraction = (180.0 - lngs[-1]) / span if span else 1.0
    edge_lat = lats[-1] + fraction * (lats[0] - lats[-1])

    ring = ([(-180.0, edge_lat)] + list(zip(lngs.tolist(), lats.tolist())) +
            [(180.0, edge_lat), (180.0, pole), (-180.0, pole)])
    return Polygon(ring)


def _split_at_antimeridian(polygon: Polygon) -> BaseGeometry:
    """Cut a polygon with unwrapped longitudes back into [-180, 180]."""
    min_lng, _, max_lng, _ = polygon.bounds
    if min_lng >= -180.0 and max_lng <= 180.0:
        return polygon

    pieces = []
    for shift in (-360.0, 0.0, 360.0):
        piece = polygon.intersection(box(-180.0 - shift, -90.0, 180.0 - shift, 90.0))
        if piece.area > 0:
            pieces.append(translate(piece, xoff=shift))
    return unary_union(pieces)


@dataclass(frozen=True)
class S2Cell:
    """Immutable cell value; equality and hashing use (face, i, j, level)."""
    face: Face
    i: int
    j: int
    level: int

    @classmethod
    def from_face_ij(cls, face, i: int, j: int, level: int) -> 'S2Cell':
        """Build a cell from explicit face and grid coordinates."""
        _check_level(level)
        max_size = 1 << level
        if not (0 <= i < max_size and 0 <= j < max_size):
            raise ValueError(f"i, j must be in [0, {max_size - 1}] at level {level}, got: ({i}, {j})")
        return cls(as_face(face), int(i), int(j), int(level))

    @classmethod
    def from_point(cls, point, level: int) -> 'S2Cell':
        """Classify a lat/lng point into its containing cell at level.

        Args:
            point: GeoPoint, anything with ``lat``/``lng`` attributes, or a
                (lat, lng) pair
            level: Subdivision level

        Raises:
            DegenerateInputError: lat or lng is NaN or infinite
        """
        _check_level(level)
        point = _coerce_point(point)
        if not (math.isfinite(point.lat) and math.isfinite(point.lng)):
            raise DegenerateInputError(f"Coordinate must be finite, got: ({point.lat}, {point.lng})")

        face, s, t = face_uv_to_st(vector_to_face_uv(point_to_unit_vector(point)))
        i = st_to_ij(s, level)
        j = st_to_ij(t, level)
        return cls(face, i, j, level)

    @classmethod
    def from_lat_lng(cls, lat: float, lng: float, level: int) -> 'S2Cell':
        return cls.from_point(GeoPoint(lat, lng), level)

    @classmethod
    def from_key(cls, key: str) -> 'S2Cell':
        """Parse a canonical ``F<face>ij[<i>,<j>]@<level>`` key."""
        match = _KEY_PATTERN.match(key.strip())
        if not match:
            raise ValueError(f"Malformed cell key: {key!r}")
        face, i, j, level = (int(part) for part in match.groups())
        if face > 5:
            raise ValueError(f"Malformed cell key: {key!r} (face {face})")
        return cls.from_face_ij(face, i, j, level)

    @property
    def key(self) -> str:
        return f"F{int(self.face)}ij[{self.i},{self.j}]@{self.level}"

    def __str__(self) -> str:
        return self.key

    @property
    def ij(self) -> Tuple[int, int]:
        return (self.i, self.j)

    def center(self) -> GeoPoint:
        return face_ij_to_point(self.face, self.i, self.j, self.level, (0.5, 0.5))

    def corners(self) -> List[GeoPoint]:
        """The four corners, in (0,0), (0,1), (1,1), (1,0) offset order."""
        return [face_ij_to_point(self.face, self.i, self.j, self.level, offset)
                for offset in CORNER_OFFSETS]

    def neighbors(self, deltas: Optional[Iterable[Sequence[int]]] = None) -> List['S2Cell']:
        """Same-level cells at each (di, dj) offset, wrapping across cube edges.

        Offsets must stay within one cell of the face; the edge wrap is not
        valid for larger jumps.
        """
        if deltas is None:
            deltas = DEFAULT_NEIGHBOR_DELTAS

        result = []
        for di, dj in deltas:
            face, i, j = wrap_face_ij(self.face, self.i + di, self.j + dj, self.level)
            result.append(S2Cell(face, i, j, self.level))
        return result

    def parent(self, level: Optional[int] = None) -> 'S2Cell':
        """Ancestor cell at level (defaults to one level up)."""
        if level is None:
            level = self.level - 1
        if level < 0 or level > self.level:
            raise ValueError(f"Parent level must be in [0, {self.level}], got: {level}")
        shift = self.level - level
        return S2Cell(self.face, self.i >> shift, self.j >> shift, level)

    def children(self) -> List['S2Cell']:
        """The four cells one level down."""
        i, j = self.i << 1, self.j << 1
        return [S2Cell(self.face, i + di, j + dj, self.level + 1)
                for di, dj in ((0, 0), (0, 1), (1, 1), (1, 0))]

    def enclosed_pole(self) -> Optional[float]:
        """Latitude of a pole strictly inside the cell, or None.

        Only the two polar faces at level 0 enclose a pole; at finer levels
        the pole is a shared corner.
        """
        if self.level == 0 and self.face == Face.POS_Z:
            return 90.0
        if self.level == 0 and self.face == Face.NEG_Z:
            return -90.0
        return None

    def polygon(self) -> BaseGeometry:
        """Footprint in (lng, lat) order.

        Edges are sampled so the bulge of each great-circle arc between
        corners is kept. Longitudes are unwrapped around the centre and the
        result is split at the antimeridian, giving a MultiPolygon for cells
        that straddle it. Cells on a pole are closed along the pole line.
        """
        lats, lngs = face_ij_outline(self.face, self.i, self.j, self.level,
                                     _edge_steps(self.level))
        pole = self.enclosed_pole()
        if pole is not None:
            return _polar_polygon(lngs, lats, pole)

        lngs, lats = _expand_pole_corners(lngs, lats)
        center_lng = self.center().lng
        lngs = center_lng + (lngs - center_lng + 180.0) % 360.0 - 180.0
        # unwrapping leaves rounding noise on samples that sat on the antimeridian
        on_antimeridian = np.abs(np.abs(lngs) - 180.0) < 1e-9
        lngs = np.where(on_antimeridian, np.copysign(180.0, lngs), lngs)
        return _split_at_antimeridian(Polygon(np.column_stack([lngs, lats])))

    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_lng, min_lat, max_lng, max_lat) of the footprint."""
        return tuple(self.polygon().bounds)

    def area_km2(self) -> float:
        """Geodesic area between the corners on the WGS84 ellipsoid."""
        corners = self.corners()
        area_m2, _ = _GEOD.polygon_area_perimeter([c.lng for c in corners],
                                                  [c.lat for c in corners])
        return abs(area_m2) / 1_000_000

    def to_grid_cell(self) -> GridCell:
        geometry = self.polygon()
        center = self.center()
        return GridCell(
            cell_id=self.key,
            geometry=geometry,
            centroid=Point(center.lng, center.lat),
            area_km2=self.area_km2(),
            bounds=tuple(geometry.bounds),
            metadata={
                'grid_type': 's2',
                'face': int(self.face),
                'i': self.i,
                'j': self.j,
                'level': self.level
            }
        )
