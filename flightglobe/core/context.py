"""
Globe Context and Animation Tick
================================

An explicitly owned context for one globe scene. It holds the flight
tracker, the live sun-direction vector and the list of per-frame
callbacks; the visualization layer creates one context at setup and
calls `tick` once per rendered frame.

Each tick:

1. computes the flight progress for the animation clock
2. writes the sun direction into the owned uniform (in place)
3. derives the marker position, timezone label and local time
4. calls every registered callback, in registration order, with the
   resulting FrameState

Callback exceptions propagate to the caller of `tick`.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from flightglobe.config.settings import GlobeConfig
from flightglobe.exceptions import ValidationError
from flightglobe.flight.timezone import local_time_string, timezone_offset_label
from flightglobe.flight.tracker import FlightLeg, FlightProgress, FlightTracker
from flightglobe.geometry.coordinates import GeoCoordinate, to_geo_coordinate
from flightglobe.solar.position import Instant, SunDirectionUniform, SunState
from flightglobe.utils.constants import MARKER_RADIUS, MS_PER_SECOND

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameState:
    """Everything the visualization layer needs for one frame.

    Attributes:
        clock: Animation clock value of the tick
        progress: Flight progress (ratio and simulated instant)
        position: Flight marker position at marker radius
        coordinate: Geographic position of the marker
        timezone_label: Whole-hour UTC offset at the marker, e.g. "+08"
        local_time: Local time string at the marker
        sun: Sun state written into the uniform this tick
    """
    clock: float
    progress: FlightProgress
    position: np.ndarray
    coordinate: GeoCoordinate
    timezone_label: str
    local_time: str
    sun: SunState


FrameCallback = Callable[[FrameState], None]


class GlobeContext:
    """Owned state of one globe scene.

    Example:
        >>> context = build_context(GlobeConfig())
        >>> seen = []
        >>> context.add_animation_callback(seen.append)
        >>> frame = context.tick(0.0)
        >>> seen[0] is frame
        True
    """

    def __init__(
        self,
        tracker: FlightTracker,
        sun_uniform: Optional[SunDirectionUniform] = None,
        marker_radius: float = MARKER_RADIUS,
        solar_time_source: str = "simulated",
        fixed_sun: Tuple[float, float] = (23.5, -90.0),
    ):
        """Initialize the context.

        Args:
            tracker: Flight progress tracker
            sun_uniform: Live sun-direction vector; created if omitted
            marker_radius: Radius the flight marker travels on
            solar_time_source: "simulated", "wall" or "fixed"
            fixed_sun: (latitude, longitude) of the sun in fixed mode
        """
        if solar_time_source not in ("simulated", "wall", "fixed"):
            raise ValidationError(f"Invalid solar time source: {solar_time_source}")

        self.tracker = tracker
        self.sun_uniform = sun_uniform if sun_uniform is not None else SunDirectionUniform()
        self.marker_radius = marker_radius
        self.solar_time_source = solar_time_source
        self.fixed_sun = fixed_sun
        self._callbacks: List[FrameCallback] = []

        if solar_time_source == "fixed":
            self.sun_uniform.set_position(*fixed_sun)

    @property
    def leg(self) -> FlightLeg:
        """The flight being animated."""
        return self.tracker.leg

    def add_animation_callback(self, callback: FrameCallback) -> None:
        """Register a per-frame callback."""
        self._callbacks.append(callback)

    def remove_animation_callback(self, callback: FrameCallback) -> None:
        """Unregister a callback added with add_animation_callback.

        Raises:
            ValueError: If the callback is not registered
        """
        self._callbacks.remove(callback)

    @property
    def callbacks(self) -> Tuple[FrameCallback, ...]:
        """Registered callbacks in call order."""
        return tuple(self._callbacks)

    def _update_sun(self, progress: FlightProgress, wall_clock: Optional[Instant]) -> SunState:
        if self.solar_time_source == "simulated":
            return self.sun_uniform.update(progress.simulated_instant)
        if self.solar_time_source == "wall":
            if wall_clock is None:
                wall_clock = time.time() * MS_PER_SECOND
            return self.sun_uniform.update(wall_clock)
        return self.sun_uniform.set_position(*self.fixed_sun)

    def tick(self, clock: float, wall_clock: Optional[Instant] = None) -> FrameState:
        """
        Advance the scene to an animation-clock value.

        Parameters
        ----------
        clock : float
            Animation clock (monotonically increasing across frames)
        wall_clock : datetime, float or int, optional
            Wall-clock instant for the "wall" solar mode; the system
            clock is used when omitted

        Returns
        -------
        frame : FrameState
        """
        progress = self.tracker.progress(clock)
        sun = self._update_sun(progress, wall_clock)

        position = self.leg.position(progress.ratio, self.marker_radius)
        coordinate = to_geo_coordinate(position)

        frame = FrameState(
            clock=float(clock),
            progress=progress,
            position=position,
            coordinate=coordinate,
            timezone_label=timezone_offset_label(coordinate.longitude),
            local_time=local_time_string(progress.simulated_instant, coordinate.longitude),
            sun=sun,
        )

        for callback in self._callbacks:
            callback(frame)

        return frame


def build_leg(config: GlobeConfig) -> FlightLeg:
    """Flight leg described by a configuration."""
    return FlightLeg(
        depart=GeoCoordinate(config.flight.depart_latitude, config.flight.depart_longitude),
        arrive=GeoCoordinate(config.flight.arrive_latitude, config.flight.arrive_longitude),
        depart_time=config.depart_datetime(),
        arrive_time=config.arrive_datetime(),
    )


def build_context(config: GlobeConfig) -> GlobeContext:
    """
    Create a GlobeContext from a configuration.

    Raises
    ------
    ValidationError
        If the configuration does not validate
    """
    errors = config.validate()
    if errors:
        raise ValidationError("Invalid globe configuration: " + "; ".join(errors))

    leg = build_leg(config)
    tracker = FlightTracker(leg, time_scale_factor=config.flight.time_scale_factor)
    logger.debug(
        f"Flight {config.flight.depart_name} -> {config.flight.arrive_name}: "
        f"{leg.duration / 60000.0:.0f} min, loop period {tracker.loop_period:.1f} clock units"
    )

    return GlobeContext(
        tracker=tracker,
        marker_radius=config.flight.marker_radius,
        solar_time_source=config.solar.time_source,
        fixed_sun=(config.solar.fixed_latitude, config.solar.fixed_longitude),
    )
