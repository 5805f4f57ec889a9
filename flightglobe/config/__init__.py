"""
Configuration management for flight globe scenes.

This module provides:
- GlobeConfig: Data classes for flight, sun, atmosphere and render settings
- ConfigurationManager: Loading and validation of configurations
"""

from flightglobe.config.settings import (
    GlobeConfig,
    FlightConfig,
    SolarConfig,
    AtmosphereConfig,
    RenderConfig,
    SOLAR_TIME_SOURCES,
)
from flightglobe.config.manager import ConfigurationManager, LoadedConfiguration

__all__ = [
    "GlobeConfig",
    "FlightConfig",
    "SolarConfig",
    "AtmosphereConfig",
    "RenderConfig",
    "SOLAR_TIME_SOURCES",
    "ConfigurationManager",
    "LoadedConfiguration",
]
