# pogo_grid/spatial_analysis/gym_thresholds.py
"""Gym and stop thresholds for gym cells.

A gym cell gets its first gym at 2 POIs, a second at 6 and a third at 20
(gyms plus stops). These functions report how far a cell is from the next
threshold and whether it holds more or fewer gyms than its POI count allows.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence
import logging

from ..config import config
from ..grid_systems import S2Cell, cover_bounds
from ..grid_systems.s2_grid import BoundsLike
from .poi_classifier import CellGroup, PointOfInterest, group_by_cell

logger = logging.getLogger(__name__)


def _cutoffs(cutoffs: Optional[Sequence[int]]) -> Sequence[int]:
    if cutoffs is None:
        cutoffs = config.get('poi_thresholds.gym_cutoffs', [2, 6, 20])
    return cutoffs


def compute_total_pois(group: CellGroup) -> int:
    return len(group.gyms) + len(group.stops)


def compute_missing_stops(group: CellGroup, cutoffs: Optional[Sequence[int]] = None) -> int:
    """Stops that must be added to the cell to get another gym (0 if none can)."""
    gyms = len(group.gyms)
    total = compute_total_pois(group)

    for index, cutoff in enumerate(_cutoffs(cutoffs)):
        if total < cutoff and gyms <= index:
            return cutoff - total

    return 0


def compute_missing_gyms(group: CellGroup, cutoffs: Optional[Sequence[int]] = None) -> int:
    """Expected minus actual gyms. Negative means the cell has extra gyms."""
    total = compute_total_pois(group)
    expected = sum(1 for cutoff in _cutoffs(cutoffs) if total >= cutoff)
    return expected - len(group.gyms)


@dataclass
class CellAnalysis:
    """Threshold figures for one gym cell."""
    group: CellGroup
    missing_gyms: int
    missing_stops: int
    total_pois: int

    @property
    def cell(self) -> S2Cell:
        return self.group.cell

    @property
    def is_full(self) -> bool:
        """No more gyms possible and none missing."""
        return self.missing_stops == 0 and self.missing_gyms <= 0

    def filled_poi_cells(self, level: Optional[int] = None) -> List[S2Cell]:
        """POI-level cells already taken by a gym or stop."""
        if level is None:
            level = config.get('grids.s2.poi_cell_level', 17)
        cells = {poi.cell(level) for poi in self.group.gyms + self.group.stops}
        return sorted(cells, key=lambda c: (c.face, c.i, c.j))


@dataclass
class CandidateCellReport:
    """Analysis of every gym cell with POIs inside a viewport."""
    cells: Dict[str, CellAnalysis] = field(default_factory=dict)
    close_to_threshold: Dict[int, List[S2Cell]] = field(default_factory=dict)

    @property
    def missing_gyms(self) -> List[CellAnalysis]:
        return [a for a in self.cells.values() if a.missing_gyms > 0]

    @property
    def extra_gyms(self) -> List[CellAnalysis]:
        return [a for a in self.cells.values() if a.missing_gyms < 0]

    @property
    def full(self) -> List[CellAnalysis]:
        return [a for a in self.cells.values() if a.is_full]


def analyze_cell(group: CellGroup, cutoffs: Optional[Sequence[int]] = None) -> CellAnalysis:
    return CellAnalysis(
        group=group,
        missing_gyms=compute_missing_gyms(group, cutoffs),
        missing_stops=compute_missing_stops(group, cutoffs),
        total_pois=compute_total_pois(group)
    )


def analyze_candidate_cells(pois: Iterable[PointOfInterest],
                            bounds: BoundsLike,
                            level: Optional[int] = None,
                            cutoffs: Optional[Sequence[int]] = None) -> CandidateCellReport:
    """
    Analyze the gym cells covering bounds.

    Args:
        pois: All known POIs (those outside the bounds are ignored)
        bounds: Viewport bounds
        level: Gym cell level (config default if None)
        cutoffs: POI counts at which gyms appear (config default if None)

    Returns:
        CandidateCellReport keyed by canonical cell key
    """
    if level is None:
        level = config.get('grids.s2.gym_cell_level', 14)

    groups = group_by_cell(pois, level)
    close_levels = config.get('poi_thresholds.close_to_threshold', [1, 2, 3])
    report = CandidateCellReport(close_to_threshold={n: [] for n in close_levels})

    for cell in cover_bounds(bounds, level):
        group = groups.get(cell.key)
        if group is None:
            continue

        analysis = analyze_cell(group, cutoffs)
        report.cells[cell.key] = analysis
        if analysis.missing_stops in report.close_to_threshold:
            report.close_to_threshold[analysis.missing_stops].append(cell)

    logger.info(f"Analyzed {len(report.cells)} gym cells: "
                f"{len(report.missing_gyms)} missing gyms, {len(report.extra_gyms)} with extra gyms")
    return report
