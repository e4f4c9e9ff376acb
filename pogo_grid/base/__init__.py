"""
Base classes for grid systems.

- BaseGrid: Spatial grid generation and cell management

Usage Example:
    from pogo_grid.base import BaseGrid, GridCell
"""

from .grid import BaseGrid
from ..abstractions.types import GridCell

__all__ = ['BaseGrid', 'GridCell']
