# pogo_grid/abstractions/types/grid_types.py
"""Grid system type definitions."""

from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple
from shapely.geometry import Point
from shapely.geometry.base import BaseGeometry


@dataclass
class GridCell:
    """Standard grid cell representation."""
    cell_id: str
    geometry: BaseGeometry  # Polygon, or MultiPolygon when split at the antimeridian
    centroid: Point
    area_km2: float
    bounds: Tuple[float, float, float, float]  # min_lng, min_lat, max_lng, max_lat
    metadata: Optional[Dict[str, Any]] = None

    def contains_point(self, lng: float, lat: float) -> bool:
        """Check if a lng/lat point falls inside the cell footprint."""
        return self.geometry.covers(Point(lng, lat))
