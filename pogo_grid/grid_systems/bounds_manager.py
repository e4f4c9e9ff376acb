"""Bounds management for map viewports and named regions."""

from typing import Tuple, Dict, List, Optional, cast
from dataclasses import dataclass
from shapely.geometry import MultiPolygon, box
from shapely.geometry.base import BaseGeometry
import logging

from ..config import config

logger = logging.getLogger(__name__)


def _wrap_lng(lng: float) -> float:
    if -180.0 <= lng <= 180.0:
        return lng
    return (lng + 180.0) % 360.0 - 180.0


@dataclass
class BoundsDefinition:
    """Structured lng/lat bounds definition.

    A min_lng larger than max_lng describes a box crossing the antimeridian,
    e.g. ``(170, -10, -170, 10)``.
    """
    name: str
    bounds: Tuple[float, float, float, float]  # min_lng, min_lat, max_lng, max_lat
    category: str = "custom"  # global, region, viewport, custom
    metadata: Optional[Dict] = None

    def __post_init__(self):
        minx, miny, maxx, maxy = self.bounds
        if miny > maxy or (minx > maxx and (minx > 180 or maxx < -180)):
            raise ValueError(f"Invalid bounds for '{self.name}': {self.bounds}")
        self.bounds = (float(minx), float(miny), float(maxx), float(maxy))

    @property
    def crosses_antimeridian(self) -> bool:
        return self.bounds[0] > self.bounds[2]

    @property
    def footprint(self) -> BaseGeometry:
        """Bounds as a geometry, split in two when crossing the antimeridian."""
        minx, miny, maxx, maxy = self.bounds
        if not self.crosses_antimeridian:
            return box(minx, miny, maxx, maxy)
        return MultiPolygon([box(minx, miny, 180.0, maxy), box(-180.0, miny, maxx, maxy)])

    @property
    def center(self) -> Tuple[float, float]:
        """Centre as (lat, lng)."""
        minx, miny, maxx, maxy = self.bounds
        if self.crosses_antimeridian:
            maxx += 360.0
        lng = (minx + maxx) / 2
        if lng > 180.0:
            lng -= 360.0
        return ((miny + maxy) / 2, lng)

    def contains(self, x: float, y: float) -> bool:
        """Check if a lng/lat point is within bounds."""
        minx, miny, maxx, maxy = self.bounds
        if not miny <= y <= maxy:
            return False
        if self.crosses_antimeridian:
            return x >= minx or x <= maxx
        return minx <= x <= maxx

    def intersects(self, geometry: BaseGeometry) -> bool:
        """Check if a lng/lat geometry touches the bounds."""
        return self.footprint.intersects(geometry)

    def covers(self, geometry: BaseGeometry) -> bool:
        """Check if a lng/lat geometry lies entirely within the bounds."""
        return self.footprint.covers(geometry)


class BoundsManager:
    """Manage named bounds: predefined regions, config regions and viewports."""

    def __init__(self):
        """Initialize bounds manager."""
        self.regions: Dict[str, BoundsDefinition] = {}
        self.custom_regions: Dict[str, BoundsDefinition] = {}
        self._load_regions()

    def _load_regions(self):
        """Load regions from config processing_bounds."""
        for name, bounds_config in config.get('processing_bounds', {}).items():
            if name == 'custom':
                continue
            if isinstance(bounds_config, list) and len(bounds_config) == 4:
                category = 'global' if name == 'global' else 'region'
                self.regions[name] = BoundsDefinition(
                    name=name,
                    bounds=cast(Tuple[float, float, float, float], tuple(bounds_config)),
                    category=category
                )

        custom_bounds = config.get('processing_bounds.custom', {}) or {}
        for name, bounds_config in custom_bounds.items():
            if isinstance(bounds_config, list) and len(bounds_config) == 4:
                self.custom_regions[name] = BoundsDefinition(
                    name=name,
                    bounds=cast(Tuple[float, float, float, float], tuple(bounds_config)),
                    category='custom'
                )
            elif isinstance(bounds_config, dict):
                self.custom_regions[name] = BoundsDefinition(
                    name=name,
                    bounds=cast(Tuple[float, float, float, float], tuple(bounds_config['bounds'])),
                    category=bounds_config.get('category', 'custom'),
                    metadata=bounds_config.get('metadata')
                )

    def get_bounds(self, name: str) -> BoundsDefinition:
        """
        Get bounds by name.

        Args:
            name: Region name or 'min_lng,min_lat,max_lng,max_lat' string

        Returns:
            BoundsDefinition object
        """
        if name in self.regions:
            return self.regions[name]

        if name in self.custom_regions:
            return self.custom_regions[name]

        # Try to parse as bounds string
        if ',' in name:
            try:
                parts = [float(x.strip()) for x in name.split(',')]
                if len(parts) == 4:
                    return BoundsDefinition(
                        name='custom_bounds',
                        bounds=cast(Tuple[float, float, float, float], tuple(parts)),
                        category='custom'
                    )
            except ValueError:
                pass

        raise ValueError(f"Unknown bounds: {name}. Available: {self.list_available()}")

    def list_available(self) -> Dict[str, List[str]]:
        """List all available bounds grouped by category."""
        available: Dict[str, List[str]] = {}

        for bounds_name, bounds_def in self.regions.items():
            available.setdefault(bounds_def.category, []).append(bounds_name)

        if self.custom_regions:
            available['custom'] = list(self.custom_regions.keys())

        return available

    @staticmethod
    def viewport(south: float, west: float, north: float, east: float,
                 name: str = 'viewport') -> BoundsDefinition:
        """Bounds of a map view given as south/west/north/east edges.

        Map views report longitudes past 180 once panned across the
        antimeridian; those are wrapped back, giving a crossing box.
        """
        if east - west >= 360.0:
            west, east = -180.0, 180.0
        else:
            west, east = _wrap_lng(west), _wrap_lng(east)
        return BoundsDefinition(name=name, bounds=(west, south, east, north), category='viewport')
