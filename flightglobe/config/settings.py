"""
Globe configuration data structures.

Defines the configuration schema for a flight globe scene: the flight
leg, how the sun is driven, atmosphere colors and render settings.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Dict, List, Any
import json
import math

import yaml
from matplotlib.colors import is_color_like

from flightglobe.solar.position import to_utc_datetime
from flightglobe.utils.constants import (
    ATMOSPHERE_DAY_COLOR,
    ATMOSPHERE_TWILIGHT_COLOR,
    ARCTIC_CIRCLE_LAT,
    BACKGROUND_COLOR,
    CAMERA_POSITION,
    LIT_SURFACE_COLOR,
    MARKER_RADIUS,
    NIGHT_SURFACE_COLOR,
    PATH_RADIUS,
    PATH_SEGMENTS,
)

SOLAR_TIME_SOURCES = ("simulated", "wall", "fixed")


@dataclass
class FlightConfig:
    """Flight leg configuration.

    Attributes:
        depart_name: Label of the departure airport
        depart_latitude: Departure latitude in degrees
        depart_longitude: Departure longitude in degrees
        arrive_name: Label of the arrival airport
        arrive_latitude: Arrival latitude in degrees
        arrive_longitude: Arrival longitude in degrees
        depart_time: ISO-8601 departure time (UTC if no offset given)
        arrive_time: ISO-8601 arrival time; must be after depart_time
        time_scale_factor: Simulated milliseconds per animation-clock unit
        marker_radius: Sphere radius the flight marker travels on
    """
    depart_name: str = "PVG"
    depart_latitude: float = 31.0
    depart_longitude: float = 121.0
    arrive_name: str = "DFW"
    arrive_latitude: float = 33.0
    arrive_longitude: float = -97.0
    depart_time: str = "2025-06-01T02:00:00+00:00"
    arrive_time: str = "2025-06-01T15:25:00+00:00"
    time_scale_factor: float = 3600.0
    marker_radius: float = MARKER_RADIUS


@dataclass
class SolarConfig:
    """Sun placement configuration.

    Attributes:
        time_source: "simulated" follows the flight clock, "wall" follows
            the system clock, "fixed" pins the sun at fixed_latitude /
            fixed_longitude
        fixed_latitude: Subsolar latitude in fixed mode
        fixed_longitude: Subsolar longitude in fixed mode
    """
    time_source: str = "simulated"
    fixed_latitude: float = 23.5
    fixed_longitude: float = -90.0


@dataclass
class AtmosphereConfig:
    """Surface and atmosphere colors (any matplotlib color spec).

    Attributes:
        day_color: Atmosphere color on the day side
        twilight_color: Atmosphere color around the terminator
        night_color: Surface color on the night side
        lit_color: Surface color on the day side
    """
    day_color: str = ATMOSPHERE_DAY_COLOR
    twilight_color: str = ATMOSPHERE_TWILIGHT_COLOR
    night_color: str = NIGHT_SURFACE_COLOR
    lit_color: str = LIT_SURFACE_COLOR


@dataclass
class RenderConfig:
    """Snapshot rendering configuration.

    Attributes:
        path_segments: Segments of the drawn great-circle route
        path_radius: Sphere radius the route is drawn on
        graticule_latitudes: Parallels to draw (equator, arctic circle)
        graticule_longitudes: Meridian great circles to draw
        resolution: Pixel size of the shaded globe image
        camera_position: Camera location in globe coordinates
        background: Background color
        figure_size: Matplotlib figure size in inches
        output_path: Where snapshots are written
    """
    path_segments: int = PATH_SEGMENTS
    path_radius: float = PATH_RADIUS
    graticule_latitudes: List[float] = field(default_factory=lambda: [0.0, ARCTIC_CIRCLE_LAT])
    graticule_longitudes: List[float] = field(default_factory=lambda: [0.0])
    resolution: int = 512
    camera_position: List[float] = field(default_factory=lambda: list(CAMERA_POSITION))
    background: str = BACKGROUND_COLOR
    figure_size: float = 8.0
    output_path: str = "./output/globe.png"


@dataclass
class GlobeConfig:
    """Complete globe scene configuration.

    Example YAML input:
        flight:
          depart_latitude: 31.0
          depart_longitude: 121.0
          arrive_latitude: 33.0
          arrive_longitude: -97.0
          time_scale_factor: 3600
        solar:
          time_source: simulated
        render:
          resolution: 400
    """
    flight: FlightConfig = field(default_factory=FlightConfig)
    solar: SolarConfig = field(default_factory=SolarConfig)
    atmosphere: AtmosphereConfig = field(default_factory=AtmosphereConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "GlobeConfig":
        """Create GlobeConfig from a dictionary.

        Missing sections and keys fall back to defaults.

        Args:
            config_dict: Configuration dictionary

        Returns:
            GlobeConfig instance
        """
        config_dict = config_dict or {}

        flight_dict = config_dict.get("flight", {})
        defaults = FlightConfig()
        flight = FlightConfig(
            depart_name=flight_dict.get("depart_name", defaults.depart_name),
            depart_latitude=flight_dict.get("depart_latitude", defaults.depart_latitude),
            depart_longitude=flight_dict.get("depart_longitude", defaults.depart_longitude),
            arrive_name=flight_dict.get("arrive_name", defaults.arrive_name),
            arrive_latitude=flight_dict.get("arrive_latitude", defaults.arrive_latitude),
            arrive_longitude=flight_dict.get("arrive_longitude", defaults.arrive_longitude),
            depart_time=str(flight_dict.get("depart_time", defaults.depart_time)),
            arrive_time=str(flight_dict.get("arrive_time", defaults.arrive_time)),
            time_scale_factor=flight_dict.get("time_scale_factor", defaults.time_scale_factor),
            marker_radius=flight_dict.get("marker_radius", defaults.marker_radius),
        )

        solar_dict = config_dict.get("solar", {})
        solar = SolarConfig(
            time_source=solar_dict.get("time_source", "simulated"),
            fixed_latitude=solar_dict.get("fixed_latitude", 23.5),
            fixed_longitude=solar_dict.get("fixed_longitude", -90.0),
        )

        atmo_dict = config_dict.get("atmosphere", {})
        atmosphere = AtmosphereConfig(
            day_color=atmo_dict.get("day_color", ATMOSPHERE_DAY_COLOR),
            twilight_color=atmo_dict.get("twilight_color", ATMOSPHERE_TWILIGHT_COLOR),
            night_color=atmo_dict.get("night_color", NIGHT_SURFACE_COLOR),
            lit_color=atmo_dict.get("lit_color", LIT_SURFACE_COLOR),
        )

        render_dict = config_dict.get("render", {})
        render = RenderConfig(
            path_segments=render_dict.get("path_segments", PATH_SEGMENTS),
            path_radius=render_dict.get("path_radius", PATH_RADIUS),
            graticule_latitudes=list(
                render_dict.get("graticule_latitudes", [0.0, ARCTIC_CIRCLE_LAT])
            ),
            graticule_longitudes=list(render_dict.get("graticule_longitudes", [0.0])),
            resolution=render_dict.get("resolution", 512),
            camera_position=list(render_dict.get("camera_position", CAMERA_POSITION)),
            background=render_dict.get("background", BACKGROUND_COLOR),
            figure_size=render_dict.get("figure_size", 8.0),
            output_path=render_dict.get("output_path", "./output/globe.png"),
        )

        return cls(flight=flight, solar=solar, atmosphere=atmosphere, render=render)

    @classmethod
    def from_json(cls, json_path: str) -> "GlobeConfig":
        """Load configuration from a JSON file.

        Args:
            json_path: Path to JSON configuration file

        Returns:
            GlobeConfig instance
        """
        with open(json_path, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "GlobeConfig":
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            GlobeConfig instance
        """
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a nested dictionary."""
        return asdict(self)

    def to_json(self, json_path: str, indent: int = 2) -> None:
        """Save configuration to a JSON file."""
        with open(json_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    def to_yaml(self, yaml_path: str) -> None:
        """Save configuration to a YAML file."""
        with open(yaml_path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self) -> list:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Flight endpoints
        for label, lat, lon in (
            ("depart", self.flight.depart_latitude, self.flight.depart_longitude),
            ("arrive", self.flight.arrive_latitude, self.flight.arrive_longitude),
        ):
            if not -90 <= lat <= 90:
                errors.append(f"{label}_latitude must be between -90 and 90 degrees")
            if not -180 <= lon <= 180:
                errors.append(f"{label}_longitude must be between -180 and 180 degrees")

        # Flight schedule
        try:
            depart = parse_time(self.flight.depart_time)
            arrive = parse_time(self.flight.arrive_time)
        except ValueError as e:
            errors.append(f"invalid flight time: {e}")
        else:
            if arrive <= depart:
                errors.append("arrive_time must be after depart_time")

        if not (math.isfinite(self.flight.time_scale_factor) and self.flight.time_scale_factor > 0):
            errors.append("time_scale_factor must be positive")
        if self.flight.marker_radius <= 0:
            errors.append("marker_radius must be positive")

        # Sun
        if self.solar.time_source not in SOLAR_TIME_SOURCES:
            errors.append(f"Invalid solar time source: {self.solar.time_source}")
        if not -90 <= self.solar.fixed_latitude <= 90:
            errors.append("fixed_latitude must be between -90 and 90 degrees")

        # Colors
        for name in ("day_color", "twilight_color", "night_color", "lit_color"):
            value = getattr(self.atmosphere, name)
            if not is_color_like(value):
                errors.append(f"Invalid color for {name}: {value}")
        if not is_color_like(self.render.background):
            errors.append(f"Invalid background color: {self.render.background}")

        # Rendering
        if self.render.path_segments < 1:
            errors.append("path_segments must be at least 1")
        if self.render.path_radius <= 0:
            errors.append("path_radius must be positive")
        if self.render.resolution < 2:
            errors.append("resolution must be at least 2 pixels")
        if len(self.render.camera_position) != 3:
            errors.append("camera_position must have three components")
        elif math.hypot(*self.render.camera_position) <= 1.0:
            errors.append("camera_position must lie outside the globe")

        return errors

    def depart_datetime(self) -> datetime:
        """Parsed departure time (UTC)."""
        return parse_time(self.flight.depart_time)

    def arrive_datetime(self) -> datetime:
        """Parsed arrival time (UTC)."""
        return parse_time(self.flight.arrive_time)


def parse_time(value: str) -> datetime:
    """Parse an ISO-8601 time; naive values are UTC."""
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return to_utc_datetime(datetime.fromisoformat(text))
