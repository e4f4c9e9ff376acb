# pogo_grid/config/config.py

import copy
import logging
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from . import defaults

logger = logging.getLogger(__name__)


class Config:
    """Configuration manager with YAML override support."""

    def __init__(self, config_file: Optional[Path] = None):
        self.settings = self.load_defaults()

        # Ignore stray config.yml files while the test suite runs
        if config_file is None and not self._is_test_mode():
            config_file = self._find_config_file()

        if config_file is not None:
            config_file = Path(config_file)
            if config_file.exists():
                try:
                    self._load_yaml_config(config_file)
                    logger.debug(f"Loaded configuration from {config_file}")
                except (OSError, yaml.YAMLError) as e:
                    logger.warning(f"Config file loading failed: {e} - using defaults")
            else:
                logger.warning(f"Config file {config_file} not found - using defaults")

    def _find_config_file(self) -> Optional[Path]:
        """Find config.yml with multiple fallback locations."""
        explicit = os.environ.get('POGO_GRID_CONFIG')
        if explicit:
            return Path(explicit)

        project_root = Path(__file__).parent.parent.parent

        potential_locations = [
            project_root / 'config.yml',
            Path.cwd() / 'config.yml',
            Path.home() / '.pogo_grid' / 'config.yml',
        ]

        for location in potential_locations:
            if location.exists() and location.is_file():
                return location

        return None

    def _is_test_mode(self) -> bool:
        """Detect if we're running under pytest or a forced test mode."""
        return (
            os.environ.get('FORCE_TEST_MODE', 'false').lower() == 'true' or
            os.environ.get('PYTEST_CURRENT_TEST') is not None
        )

    def load_defaults(self) -> Dict[str, Any]:
        """Load default configuration settings."""
        return {
            'grids': copy.deepcopy(defaults.GRIDS),
            'poi_thresholds': copy.deepcopy(defaults.POI_THRESHOLDS),
            'processing_bounds': copy.deepcopy(defaults.PROCESSING_BOUNDS),
            'logging': defaults.LOGGING.copy(),
        }

    def _load_yaml_config(self, config_file: Path):
        """Load and merge configuration from a YAML file."""
        with open(config_file, 'r') as file:
            yaml_config = yaml.safe_load(file)
            if yaml_config:
                self._deep_merge(self.settings, yaml_config)

    def _deep_merge(self, base: dict, override: dict):
        """Deep merge override into base dictionary."""
        for key, value in override.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        keys = key.split(".")
        value = self.settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    @property
    def grids(self) -> Dict[str, Any]:
        return self.settings['grids']

    @property
    def s2(self) -> Dict[str, Any]:
        return self.settings['grids']['s2']

    @property
    def poi_thresholds(self) -> Dict[str, Any]:
        return self.settings['poi_thresholds']

    @property
    def processing_bounds(self) -> Dict[str, Any]:
        return self.settings['processing_bounds']

    @property
    def logging(self) -> Dict[str, Any]:
        return self.settings['logging']


# Global configuration instance
config = Config()
