"""Base grid class for spatial grid systems."""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional, Tuple
import logging

from ..abstractions.types import GridCell
from ..config import config

logger = logging.getLogger(__name__)


class BaseGrid(ABC):
    """
    Base class for all grid systems.

    Handles:
    - Grid generation over bounds
    - Cell lookup by coordinate and id
    """

    def __init__(self,
                 level: int,
                 bounds: Optional[Tuple[float, float, float, float]] = None,
                 **kwargs):
        """
        Initialize grid system.

        Args:
            level: Grid subdivision level
            bounds: (min_lng, min_lat, max_lng, max_lat)
            **kwargs: Grid-specific parameters
        """
        self.level = level
        self.bounds = bounds or self._get_default_bounds()
        self.config = self._merge_config(kwargs)

        self._cells: Optional[List[GridCell]] = None

    def _merge_config(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge kwargs with default config."""
        grid_type = self.__class__.__name__.lower().replace('grid', '')
        default_config = config.get(f'grids.{grid_type}', {})
        return {**default_config, **kwargs}

    def _get_default_bounds(self) -> Tuple[float, float, float, float]:
        """Get default bounds from config."""
        return tuple(config.get('grids.default_bounds', [-180, -90, 180, 90]))

    @abstractmethod
    def generate_grid(self) -> List[GridCell]:
        """
        Generate grid cells.

        Returns:
            List of GridCell objects
        """
        pass

    @abstractmethod
    def get_cell_id(self, x: float, y: float) -> str:
        """
        Get cell ID for a coordinate.

        Args:
            x: Longitude
            y: Latitude

        Returns:
            Cell ID
        """
        pass

    @abstractmethod
    def get_cell_by_id(self, cell_id: str) -> Optional[GridCell]:
        """
        Get cell by ID.

        Args:
            cell_id: Cell identifier

        Returns:
            GridCell or None
        """
        pass

    def get_cells(self) -> List[GridCell]:
        """Get all grid cells (generate if needed)."""
        if self._cells is None:
            self._cells = self.generate_grid()
        return self._cells

    def get_cell_count(self) -> int:
        """Get total number of cells."""
        return len(self.get_cells())
