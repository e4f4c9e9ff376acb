# pogo_grid/abstractions/types/__init__.py
"""Type definitions for the abstractions layer."""

# Cell engine types
from .cell_types import Face, GeoPoint, UnitVector3, FaceUV, FaceST

# Grid types
from .grid_types import GridCell

__all__ = [
    'Face',
    'GeoPoint',
    'UnitVector3',
    'FaceUV',
    'FaceST',
    'GridCell',
]
