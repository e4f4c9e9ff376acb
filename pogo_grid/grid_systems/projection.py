# pogo_grid/grid_systems/projection.py
"""Cube-sphere projection between lat/lng, cube faces and cell grid coordinates.

The sphere is projected onto the six faces of an inscribed cube:

- lat/lng -> unit vector (x, y, z)
- unit vector -> (face, u, v), u and v in [-1, 1]
- u, v -> s, t in [0, 1] through a quadratic warp that keeps cells close
  to equal area
- s, t -> integer i, j on the 2**level grid of the face

Every function here is pure; none of them log or cache.
"""

import math
from typing import Callable, Dict, Tuple

import numpy as np

from ..abstractions.types import Face, FaceST, FaceUV, GeoPoint, UnitVector3
from .exceptions import InvalidFaceError

_D2R = math.pi / 180.0
_R2D = 180.0 / math.pi

# Per-face (u, v) from a vector whose dominant axis selected the face
_XYZ_TO_UV: Dict[Face, Callable[[float, float, float], Tuple[float, float]]] = {
    Face.POS_X: lambda x, y, z: (y / x, z / x),
    Face.POS_Y: lambda x, y, z: (-x / y, z / y),
    Face.POS_Z: lambda x, y, z: (-x / z, -y / z),
    Face.NEG_X: lambda x, y, z: (z / x, y / x),
    Face.NEG_Y: lambda x, y, z: (z / y, -x / y),
    Face.NEG_Z: lambda x, y, z: (-y / z, -x / z),
}

# Inverse of the table above; the vectors are not normalised
_UV_TO_XYZ: Dict[Face, Callable[[float, float], Tuple[float, float, float]]] = {
    Face.POS_X: lambda u, v: (1.0, u, v),
    Face.POS_Y: lambda u, v: (-u, 1.0, v),
    Face.POS_Z: lambda u, v: (-u, -v, 1.0),
    Face.NEG_X: lambda u, v: (-1.0, -v, -u),
    Face.NEG_Y: lambda u, v: (v, -1.0, -u),
    Face.NEG_Z: lambda u, v: (v, u, -1.0),
}


def as_face(face) -> Face:
    """Coerce an integer into the Face enum, failing hard on anything else."""
    try:
        return Face(face)
    except ValueError:
        raise InvalidFaceError(face) from None


def point_to_unit_vector(point: GeoPoint) -> UnitVector3:
    phi = point.lat * _D2R
    theta = point.lng * _D2R
    cosphi = math.cos(phi)
    return UnitVector3(math.cos(theta) * cosphi, math.sin(theta) * cosphi, math.sin(phi))


def unit_vector_to_point(vector) -> GeoPoint:
    """Convert an (x, y, z) vector of any length back to lat/lng degrees."""
    x, y, z = vector
    lat = math.atan2(z, math.sqrt(x * x + y * y))
    lng = math.atan2(y, x)
    return GeoPoint(lat * _R2D, lng * _R2D)


def largest_abs_component(vector) -> int:
    """Index of the axis with the largest magnitude; ties go to x, then y."""
    # max keeps the first maximum, which gives the x > y > z tie order
    return max(range(3), key=lambda axis: abs(vector[axis]))


def vector_to_face_uv(vector) -> FaceUV:
    """Project a vector onto the cube face it points at."""
    x, y, z = vector
    axis = largest_abs_component(vector)
    face_index = axis + 3 if vector[axis] < 0 else axis
    face = as_face(face_index)
    u, v = _XYZ_TO_UV[face](x, y, z)
    return FaceUV(face, u, v)


def face_uv_to_vector(face, u: float, v: float) -> UnitVector3:
    """Reconstruct an unnormalised vector from face-local (u, v)."""
    return UnitVector3(*_UV_TO_XYZ[as_face(face)](u, v))


def uv_to_st(uv: float) -> float:
    if uv >= 0:
        return 0.5 * math.sqrt(1 + 3 * uv)
    return 1 - 0.5 * math.sqrt(1 - 3 * uv)


def face_uv_to_st(face_uv: FaceUV) -> FaceST:
    face, u, v = face_uv
    return FaceST(face, uv_to_st(u), uv_to_st(v))


def st_to_uv(st: float) -> float:
    if st >= 0.5:
        return (1 / 3.0) * (4 * st * st - 1)
    return (1 / 3.0) * (1 - 4 * (1 - st) * (1 - st))


def st_to_ij(st: float, level: int) -> int:
    """Grid coordinate of s (or t) at level, clamped to the face."""
    max_size = 1 << level
    ij = math.floor(st * max_size)
    return max(0, min(max_size - 1, ij))


def ij_to_st(ij: int, level: int, offset: float) -> float:
    """s (or t) of a grid coordinate; offset 0 is the low edge, 0.5 the centre, 1 the high edge."""
    return (ij + offset) / (1 << level)


def face_ij_to_point(face, i: int, j: int, level: int,
                     offset: Tuple[float, float] = (0.5, 0.5)) -> GeoPoint:
    """Lat/lng of a point inside cell (face, i, j) at the given fractional offset."""
    u = st_to_uv(ij_to_st(i, level, offset[0]))
    v = st_to_uv(ij_to_st(j, level, offset[1]))
    return unit_vector_to_point(face_uv_to_vector(face, u, v))


def wrap_face_ij(face, i: int, j: int, level: int) -> Tuple[Face, int, int]:
    """Normalise (face, i, j) that may sit one step past the edge of its face.

    Coordinates inside the face are returned unchanged. Otherwise the centre
    of the out-of-range cell is pushed through the original face's inverse
    projection and re-projected, which lands it on the adjacent face. Only
    valid for coordinates at most one cell past the boundary.
    """
    face = as_face(face)
    max_size = 1 << level
    if 0 <= i < max_size and 0 <= j < max_size:
        return face, i, j

    u = st_to_uv(ij_to_st(i, level, 0.5))
    v = st_to_uv(ij_to_st(j, level, 0.5))
    new_face, u, v = vector_to_face_uv(face_uv_to_vector(face, u, v))
    return new_face, st_to_ij(uv_to_st(u), level), st_to_ij(uv_to_st(v), level)


def face_ij_outline(face, i: int, j: int, level: int, steps: int) -> Tuple[np.ndarray, np.ndarray]:
    """Lat and lng arrays (degrees) sampled along the edges of cell (face, i, j).

    Each edge contributes ``steps`` points starting at its first corner, and
    the corners are walked in (0,0), (0,1), (1,1), (1,0) order, so corner k
    sits at index ``k * steps``.
    """
    ramp = np.linspace(0.0, 1.0, steps, endpoint=False)
    low = np.zeros(steps)
    high = np.ones(steps)
    s_offsets = np.concatenate([low, ramp, high, 1.0 - ramp])
    t_offsets = np.concatenate([ramp, high, 1.0 - ramp, low])

    size = float(1 << level)
    s = (i + s_offsets) / size
    t = (j + t_offsets) / size
    u = np.where(s >= 0.5, (1 / 3.0) * (4 * s * s - 1), (1 / 3.0) * (1 - 4 * (1 - s) * (1 - s)))
    v = np.where(t >= 0.5, (1 / 3.0) * (4 * t * t - 1), (1 / 3.0) * (1 - 4 * (1 - t) * (1 - t)))

    x, y, z = _UV_TO_XYZ[as_face(face)](u, v)
    lat = np.degrees(np.arctan2(z, np.sqrt(x * x + y * y)))
    lng = np.degrees(np.arctan2(y, x))
    return lat, lng
