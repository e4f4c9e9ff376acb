# pogo_grid/spatial_analysis/poi_classifier.py
"""Group points of interest by the S2 cell that contains them."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional
import logging

from ..grid_systems import S2Cell

logger = logging.getLogger(__name__)


class PoiKind(Enum):
    """What a portal became in the game."""
    GYM = 'gym'
    STOP = 'stop'
    UNCLASSIFIED = 'unclassified'
    NOT_POGO = 'not_pogo'


@dataclass(frozen=True)
class PointOfInterest:
    """A portal with a known position and game classification."""
    id: str
    lat: float
    lng: float
    kind: PoiKind = PoiKind.UNCLASSIFIED
    name: str = ''

    def cell(self, level: int) -> S2Cell:
        return S2Cell.from_lat_lng(self.lat, self.lng, level)


@dataclass
class CellGroup:
    """The POIs of one cell, split by kind. NOT_POGO items are not listed."""
    cell: S2Cell
    gyms: List[PointOfInterest] = field(default_factory=list)
    stops: List[PointOfInterest] = field(default_factory=list)
    unclassified: List[PointOfInterest] = field(default_factory=list)

    @property
    def key(self) -> str:
        return self.cell.key

    def add(self, poi: PointOfInterest):
        if poi.kind is PoiKind.GYM:
            self.gyms.append(poi)
        elif poi.kind is PoiKind.STOP:
            self.stops.append(poi)
        elif poi.kind is PoiKind.UNCLASSIFIED:
            self.unclassified.append(poi)


def group_by_cell(pois: Iterable[PointOfInterest], level: int) -> Dict[str, CellGroup]:
    """
    Group POIs by their containing cell at level.

    Every POI creates its cell's group, including NOT_POGO ones, so a cell
    that only holds rejected portals still shows up (with empty lists).

    Returns:
        Mapping of canonical cell key to CellGroup
    """
    cells: Dict[str, CellGroup] = {}
    count = 0
    for poi in pois:
        cell = poi.cell(level)
        group = cells.get(cell.key)
        if group is None:
            group = cells[cell.key] = CellGroup(cell)
        group.add(poi)
        count += 1

    logger.debug(f"Grouped {count} POIs into {len(cells)} level {level} cells")
    return cells


def find_cell_items(cell_key: str, level: int,
                    pois: Iterable[PointOfInterest],
                    kind: Optional[PoiKind] = None) -> List[PointOfInterest]:
    """POIs whose cell at level has the given key, optionally of one kind."""
    return [poi for poi in pois
            if (kind is None or poi.kind is kind) and poi.cell(level).key == cell_key]
