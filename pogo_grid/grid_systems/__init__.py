# pogo_grid/grid_systems/__init__.py
"""Grid system implementations."""

from .bounds_manager import BoundsManager, BoundsDefinition
from .exceptions import (
    GridSystemError,
    DegenerateInputError,
    CoverageLimitError,
    InvalidFaceError
)
from .s2_cell import S2Cell, DEFAULT_NEIGHBOR_DELTAS
from .s2_grid import (
    S2Grid,
    cover_bounds,
    cell_intersects_bounds,
    cell_inside_bounds,
    visible_grid_levels
)

__all__ = [
    'BoundsManager',
    'BoundsDefinition',
    'GridSystemError',
    'DegenerateInputError',
    'CoverageLimitError',
    'InvalidFaceError',
    'S2Cell',
    'DEFAULT_NEIGHBOR_DELTAS',
    'S2Grid',
    'cover_bounds',
    'cell_intersects_bounds',
    'cell_inside_bounds',
    'visible_grid_levels'
]
