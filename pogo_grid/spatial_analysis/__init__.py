"""POI classification and gym threshold analysis over S2 cells."""

from .poi_classifier import PoiKind, PointOfInterest, CellGroup, group_by_cell, find_cell_items
from .gym_thresholds import (
    compute_total_pois,
    compute_missing_stops,
    compute_missing_gyms,
    CellAnalysis,
    CandidateCellReport,
    analyze_cell,
    analyze_candidate_cells
)

__all__ = [
    'PoiKind',
    'PointOfInterest',
    'CellGroup',
    'group_by_cell',
    'find_cell_items',
    'compute_total_pois',
    'compute_missing_stops',
    'compute_missing_gyms',
    'CellAnalysis',
    'CandidateCellReport',
    'analyze_cell',
    'analyze_candidate_cells'
]
