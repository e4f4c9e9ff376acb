"""
S2-style cube-sphere cell indexing for Pokémon Go map overlays.

This package classifies lat/lng coordinates into hierarchical cells,
derives cell corners and neighbors for rendering, and analyses gym and
stop counts per cell.
"""

__version__ = "1.0.0"
__description__ = "Cube-sphere cell indexing for Pokémon Go map overlays"

from .abstractions.types import GeoPoint, Face
from .grid_systems import S2Cell, S2Grid, cover_bounds

__all__ = [
    '__version__',
    '__description__',
    'GeoPoint',
    'Face',
    'S2Cell',
    'S2Grid',
    'cover_bounds',
]
