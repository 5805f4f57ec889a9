"""
flightglobe: Geospatial and solar core for an animated flight globe.

Computes everything a 3D globe view needs each frame, as plain numpy
values: the subsolar point and sun direction, a soft day/night
terminator with atmospheric glow, and a looping great-circle flight
with its local time.

Modules
-------
geometry
    Geographic <-> Cartesian conversion, great-circle interpolation,
    graticule polylines
solar
    Subsolar point, sun direction and the in-place sun-direction uniform
illumination
    Terminator, fresnel limb glow and twilight tint blend factors
flight
    Looping flight progress and whole-hour timezone labels
core
    Owned scene context and the per-frame tick
config
    Scene configuration (dict, JSON, YAML) and validation
visualization
    matplotlib snapshot rendering
"""

__version__ = "0.1.0"
__author__ = "flightglobe Contributors"

from flightglobe.exceptions import ValidationError
from flightglobe.geometry import (
    GeoCoordinate,
    to_direction,
    to_geo_coordinate,
    point_at,
    full_path,
)
from flightglobe.solar import (
    SunState,
    SunDirectionUniform,
    subsolar_longitude,
    subsolar_latitude,
    sun_direction,
    update_sun_direction,
)
from flightglobe.illumination import IlluminationFactors, illumination_factors, composite
from flightglobe.flight import FlightLeg, FlightProgress, FlightTracker, timezone_offset_label
from flightglobe.config import GlobeConfig, ConfigurationManager
from flightglobe.core import FrameState, GlobeContext, build_context

__all__ = [
    "__version__",
    "ValidationError",
    "GeoCoordinate",
    "to_direction",
    "to_geo_coordinate",
    "point_at",
    "full_path",
    "SunState",
    "SunDirectionUniform",
    "subsolar_longitude",
    "subsolar_latitude",
    "sun_direction",
    "update_sun_direction",
    "IlluminationFactors",
    "illumination_factors",
    "composite",
    "FlightLeg",
    "FlightProgress",
    "FlightTracker",
    "timezone_offset_label",
    "GlobeConfig",
    "ConfigurationManager",
    "FrameState",
    "GlobeContext",
    "build_context",
]
