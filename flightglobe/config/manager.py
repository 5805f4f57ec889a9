"""
Configuration Manager for flight globe scenes.

Handles loading and validation of globe configurations from
dictionaries, JSON files and YAML files.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass

from flightglobe.config.settings import GlobeConfig

logger = logging.getLogger(__name__)


@dataclass
class LoadedConfiguration:
    """Container for a loaded and validated configuration.

    Attributes:
        config: The globe configuration
        is_valid: Whether the configuration passed validation
        validation_errors: List of validation error messages
    """
    config: GlobeConfig
    is_valid: bool
    validation_errors: list


class ConfigurationManager:
    """Loads globe configurations.

    Example:
        >>> manager = ConfigurationManager()
        >>> loaded = manager.load_config({
        ...     "flight": {"depart_latitude": 31.0, "depart_longitude": 121.0},
        ...     "solar": {"time_source": "fixed"},
        ... })
        >>> loaded.is_valid
        True
    """

    def __init__(self, base_path: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            base_path: Base path for relative file references.
                      Defaults to current working directory.
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()

    def load_config(
        self,
        config_source: Union[Dict[str, Any], str, Path],
    ) -> LoadedConfiguration:
        """Load and validate a configuration.

        Args:
            config_source: Configuration dictionary, JSON path, or YAML path

        Returns:
            LoadedConfiguration with parsed config and validation result

        Raises:
            FileNotFoundError: If a configuration path does not exist
            ValueError: If the file suffix is not supported
            TypeError: If config_source has an unsupported type
        """
        if isinstance(config_source, dict):
            config = GlobeConfig.from_dict(config_source)
        elif isinstance(config_source, (str, Path)):
            path = self.resolve_path(str(config_source))
            if not path.exists():
                raise FileNotFoundError(f"Configuration file not found: {path}")
            if path.suffix.lower() == '.json':
                config = GlobeConfig.from_json(str(path))
            elif path.suffix.lower() in ('.yaml', '.yml'):
                config = GlobeConfig.from_yaml(str(path))
            else:
                raise ValueError(f"Unsupported config file format: {path.suffix}")
            logger.info(f"Loaded configuration from {path}")
        else:
            raise TypeError(f"Invalid config source type: {type(config_source)}")

        validation_errors = config.validate()
        is_valid = len(validation_errors) == 0

        if not is_valid:
            for error in validation_errors:
                logger.warning(f"Configuration validation error: {error}")

        return LoadedConfiguration(
            config=config,
            is_valid=is_valid,
            validation_errors=validation_errors,
        )

    def resolve_path(self, path: str) -> Path:
        """Resolve a path relative to base_path.

        Args:
            path: Relative or absolute path string

        Returns:
            Resolved absolute Path
        """
        p = Path(path)
        if p.is_absolute():
            return p
        return (self.base_path / p).resolve()

    @staticmethod
    def create_example_config() -> Dict[str, Any]:
        """Create an example configuration dictionary.

        Returns:
            Example configuration (Shanghai PVG -> Dallas DFW)
        """
        return {
            "flight": {
                "depart_name": "PVG",
                "depart_latitude": 31.0,
                "depart_longitude": 121.0,
                "arrive_name": "DFW",
                "arrive_latitude": 33.0,
                "arrive_longitude": -97.0,
                "depart_time": "2025-06-01T02:00:00+00:00",
                "arrive_time": "2025-06-01T15:25:00+00:00",
                "time_scale_factor": 3600.0,
                "marker_radius": 1.01,
            },
            "solar": {
                "time_source": "simulated",
            },
            "atmosphere": {
                "day_color": "#4db2ff",
                "twilight_color": "#bc490b",
            },
            "render": {
                "path_segments": 256,
                "path_radius": 1.02,
                "resolution": 512,
                "camera_position": [-3.0, 3.0, -3.0],
                "output_path": "./output/globe.png",
            },
        }

    def save_example_config(self, output_path: str) -> None:
        """Save an example configuration file (.json, .yaml or .yml).

        Args:
            output_path: Path to save the example to
        """
        config = GlobeConfig.from_dict(self.create_example_config())
        path = self.resolve_path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix.lower() in ('.yaml', '.yml'):
            config.to_yaml(str(path))
        else:
            with open(path, 'w') as f:
                json.dump(self.create_example_config(), f, indent=2)
        logger.info(f"Saved example configuration to {path}")
