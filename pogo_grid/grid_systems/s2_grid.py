# pogo_grid/grid_systems/s2_grid.py
"""S2 grid system: cells of one level covering a lng/lat bounding box."""

from collections import deque
from typing import Optional, Union, List, Tuple, Dict, Any
import logging

from ..abstractions.types import GridCell
from ..base import BaseGrid
from ..config import config
from .bounds_manager import BoundsManager, BoundsDefinition
from .exceptions import CoverageLimitError
from .s2_cell import S2Cell

logger = logging.getLogger(__name__)

BoundsLike = Union[str, Tuple[float, float, float, float], BoundsDefinition]


def _to_bounds_definition(bounds: BoundsLike) -> BoundsDefinition:
    if isinstance(bounds, BoundsDefinition):
        return bounds
    if isinstance(bounds, str):
        return BoundsManager().get_bounds(bounds)
    return BoundsDefinition('custom', tuple(bounds))


def cell_intersects_bounds(bounds: BoundsLike, cell: S2Cell) -> bool:
    """True when the footprint of the cell touches the bounds."""
    return _to_bounds_definition(bounds).intersects(cell.polygon())


def cell_inside_bounds(bounds: BoundsLike, cell: S2Cell) -> bool:
    """True when the footprint of the cell lies within the bounds."""
    return _to_bounds_definition(bounds).covers(cell.polygon())


def cover_bounds(bounds: BoundsLike, level: int,
                 max_cells: Optional[int] = None) -> List[S2Cell]:
    """
    Cells at level whose footprint intersects the bounds.

    Flood fills from the cell under the centre of the bounds, expanding
    through edge neighbors of every cell whose footprint intersects. The
    starting cell is always part of the covering, even for bounds that
    fit inside it.

    Args:
        bounds: Bounds name, (min_lng, min_lat, max_lng, max_lat) or BoundsDefinition
        level: Cell level
        max_cells: Cap on the number of covering cells (config default if None)

    Returns:
        Covering cells in visiting order

    Raises:
        CoverageLimitError: More than max_cells cells intersect the bounds
    """
    bounds_def = _to_bounds_definition(bounds)
    if max_cells is None:
        max_cells = config.get('grids.s2.max_cover_cells', 20000)

    start = S2Cell.from_point(bounds_def.center, level)
    seen = {start.key}
    queue = deque([start])
    covering: List[S2Cell] = []

    while queue:
        cell = queue.popleft()
        if cell != start and not bounds_def.intersects(cell.polygon()):
            continue

        covering.append(cell)
        if len(covering) > max_cells:
            raise CoverageLimitError(
                f"Covering {bounds_def.name} at level {level} needs more than {max_cells} cells"
            )

        for neighbor in cell.neighbors():
            if neighbor.key not in seen:
                seen.add(neighbor.key)
                queue.append(neighbor)

    logger.debug(f"Covered {bounds_def.name} with {len(covering)} level {level} cells "
                 f"({len(seen)} visited)")
    return covering


def visible_grid_levels(zoom: int,
                        overlays: Optional[List[Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
    """
    Overlay grid settings drawn at a map zoom level.

    A grid is drawn when its level is at least the configured minimum and
    below zoom plus the configured offset. Grids are returned in drawing
    order, which is the reverse of their configured order.
    """
    if overlays is None:
        overlays = config.get('grids.s2.overlays', [])
    min_level = config.get('grids.s2.min_overlay_level', 6)
    zoom_offset = config.get('grids.s2.overlay_zoom_offset', 2)

    return [grid for grid in reversed(overlays)
            if min_level <= grid['level'] < zoom + zoom_offset]


class S2Grid(BaseGrid):
    """
    Grid of S2 cells at a single level.

    Efficient for overlays: cells are found by walking neighbors from the
    bounds centre rather than by testing the whole face.
    """

    def __init__(self,
                 level: int,
                 bounds: Optional[BoundsLike] = None,
                 **kwargs):
        """
        Initialize S2 grid.

        Args:
            level: Cell level (0-30)
            bounds: Bounds specification (name, tuple, or BoundsDefinition)
            **kwargs: Additional parameters (e.g. max_cover_cells)
        """
        if level < 0:
            raise ValueError(f"Level must be non-negative, got: {level}")

        if bounds is not None:
            self.bounds_def = _to_bounds_definition(bounds)
        else:
            self.bounds_def = BoundsManager().get_bounds('global')

        super().__init__(
            level=level,
            bounds=self.bounds_def.bounds,
            **kwargs
        )

        max_level = self.config.get('max_level', 30)
        if level > max_level:
            logger.warning(f"Level {level} is above the supported maximum {max_level}")

    def generate_grid(self) -> List[GridCell]:
        """Generate the cells covering the grid bounds."""
        logger.info(f"Generating S2 grid (level {self.level}) for {self.bounds_def.name}")

        cells = cover_bounds(self.bounds_def, self.level,
                             max_cells=self.config.get('max_cover_cells'))
        grid_cells = [cell.to_grid_cell() for cell in cells]

        logger.info(f"Total S2 grid cells generated: {len(grid_cells)}")
        return grid_cells

    def get_cell(self, x: float, y: float) -> S2Cell:
        """Get the S2 cell for a lng/lat coordinate."""
        if not self.bounds_def.contains(x, y):
            raise ValueError(f"Coordinate ({x}, {y}) outside grid bounds")
        return S2Cell.from_lat_lng(y, x, self.level)

    def get_cell_id(self, x: float, y: float) -> str:
        """Get cell ID for a lng/lat coordinate."""
        return self.get_cell(x, y).key

    def get_cell_by_id(self, cell_id: str) -> Optional[GridCell]:
        """Get cell by ID, or None if the ID is malformed or at another level."""
        try:
            cell = S2Cell.from_key(cell_id)
        except ValueError:
            return None

        if cell.level != self.level:
            return None

        return cell.to_grid_cell()

    def get_neighbor_ids(self, cell_id: str) -> List[str]:
        """Get IDs of the four edge-adjacent cells."""
        try:
            cell = S2Cell.from_key(cell_id)
        except ValueError:
            return []

        return [neighbor.key for neighbor in cell.neighbors()]

    def get_cells_at_resolution(self, cell_id: str, target_level: int) -> List[str]:
        """Get descendant or ancestor cell IDs at another level."""
        try:
            cell = S2Cell.from_key(cell_id)
        except ValueError:
            return []

        if target_level < cell.level:
            return [cell.parent(max(target_level, 0)).key]

        cells = [cell]
        for _ in range(target_level - cell.level):
            cells = [child for parent in cells for child in parent.children()]
        return [c.key for c in cells]
