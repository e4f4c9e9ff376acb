# pogo_grid/config/defaults.py
"""Default configuration values"""

from pathlib import Path

# Project path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / 'logs'

# Cell levels used by the game
GYM_CELL_LEVEL = 14  # gyms are counted per level 14 cell
POI_CELL_LEVEL = 17  # at most one POI per level 17 cell becomes a stop or gym

GRIDS = {
    'default_bounds': [-180, -90, 180, 90],
    's2': {
        'gym_cell_level': GYM_CELL_LEVEL,
        'poi_cell_level': POI_CELL_LEVEL,
        'gym_center_level': 20,
        'max_level': 30,
        # Overlay grids are only drawn from this level on, and below zoom + 2
        'min_overlay_level': 6,
        'overlay_zoom_offset': 2,
        # Safety cap for viewport coverage flood fills
        'max_cover_cells': 20000,
        'overlays': [
            {'level': GYM_CELL_LEVEL, 'width': 5, 'color': '#004D40', 'opacity': 0.5},
            {'level': POI_CELL_LEVEL, 'width': 2, 'color': '#388E3C', 'opacity': 0.5},
        ],
    },
}

# POI count cut-offs in a gym cell where another gym appears
POI_THRESHOLDS = {
    'gym_cutoffs': [2, 6, 20],
    # Cells this many stops short of the next gym are reported as close
    'close_to_threshold': [1, 2, 3],
}

PROCESSING_BOUNDS = {
    'global': [-180, -90, 180, 90],
    'test_tiny': [0.0, 0.0, 1.0, 1.0],  # Tiny 1x1 degree subset for quick testing
    'europe': [-25.0, 35.0, 50.0, 75.0],
    'north_america': [-170.0, 15.0, -50.0, 75.0],
    'south_america': [-85.0, -60.0, -30.0, 15.0],
    'africa': [-25.0, -40.0, 55.0, 40.0],
    'asia': [60.0, -15.0, 180.0, 75.0],
    'oceania': [110.0, -50.0, 180.0, -10.0],
    'custom': {}
}

LOGGING = {
    'level': 'INFO',
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    'file': LOGS_DIR / 'pogo_grid.log',
    'max_file_size': 10 * 1024 * 1024,
    'backup_count': 3,
}
