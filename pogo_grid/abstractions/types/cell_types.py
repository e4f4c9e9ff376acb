# pogo_grid/abstractions/types/cell_types.py
"""Coordinate value types for the cube-sphere cell engine."""

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple


class Face(IntEnum):
    """The six cube faces. 0-2 face the +x, +y, +z axes, 3-5 the negative ones."""
    POS_X = 0
    POS_Y = 1
    POS_Z = 2
    NEG_X = 3
    NEG_Y = 4
    NEG_Z = 5

    @property
    def opposite(self) -> 'Face':
        return Face((self + 3) % 6)


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude in degrees. Longitude wrapping is left to the caller."""
    lat: float
    lng: float

    def to_tuple(self):
        return (self.lat, self.lng)


class UnitVector3(NamedTuple):
    x: float
    y: float
    z: float


class FaceUV(NamedTuple):
    face: Face
    u: float
    v: float


class FaceST(NamedTuple):
    face: Face
    s: float
    t: float
