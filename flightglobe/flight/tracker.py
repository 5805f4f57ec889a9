"""
Looping Flight Progress
=======================

Maps a monotonically increasing animation clock onto a repeating flight
along a great circle. The animation clock is scaled by a time-scale
factor into simulated milliseconds and wrapped by the flight duration:

    cycle = (clock * time_scale_factor) mod (arrive_time - depart_time)
    ratio = cycle / duration                     in [0, 1)
    simulated_instant = depart_time + cycle
"""

import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from flightglobe.exceptions import ValidationError
from flightglobe.geometry.coordinates import GeoCoordinate
from flightglobe.geometry.geodesic import point_at
from flightglobe.solar.position import Instant, to_epoch_ms, to_utc_datetime
from flightglobe.utils.constants import MARKER_RADIUS


@dataclass(frozen=True)
class FlightLeg:
    """A single great-circle flight between two airports.

    Attributes:
        depart: Departure position
        arrive: Arrival position
        depart_time: Departure instant (ms since epoch or datetime)
        arrive_time: Arrival instant; must be strictly after depart_time

    Times are stored as milliseconds since the Unix epoch.
    """
    depart: GeoCoordinate
    arrive: GeoCoordinate
    depart_time: float
    arrive_time: float

    def __post_init__(self):
        object.__setattr__(self, "depart_time", to_epoch_ms(self.depart_time))
        object.__setattr__(self, "arrive_time", to_epoch_ms(self.arrive_time))

        if not (math.isfinite(self.depart_time) and math.isfinite(self.arrive_time)):
            raise ValidationError("Flight times must be finite")
        if self.arrive_time <= self.depart_time:
            raise ValidationError(
                f"Arrival ({self.arrive_time} ms) must be after departure "
                f"({self.depart_time} ms)"
            )

    @property
    def duration(self) -> float:
        """Flight duration in milliseconds."""
        return self.arrive_time - self.depart_time

    @property
    def depart_point(self) -> np.ndarray:
        """Unit direction of the departure airport."""
        return self.depart.to_direction()

    @property
    def arrive_point(self) -> np.ndarray:
        """Unit direction of the arrival airport."""
        return self.arrive.to_direction()

    def position(self, ratio: float, radius: float = MARKER_RADIUS) -> np.ndarray:
        """Point on the route at fractional progress `ratio`."""
        return point_at(self.depart_point, self.arrive_point, ratio, radius)


@dataclass(frozen=True)
class FlightProgress:
    """Progress of the looping flight at one animation tick.

    Attributes:
        ratio: Fraction of the flight completed, in [0, 1)
        simulated_instant: Simulated time in ms since epoch
    """
    ratio: float
    simulated_instant: float

    @property
    def simulated_datetime(self) -> datetime:
        """Simulated time as an aware UTC datetime."""
        return to_utc_datetime(self.simulated_instant)


class FlightTracker:
    """Converts animation-clock values into flight progress.

    Example:
        >>> leg = FlightLeg(GeoCoordinate(31, 121), GeoCoordinate(33, -97),
        ...                 depart_time=0, arrive_time=1_500_000)
        >>> tracker = FlightTracker(leg, time_scale_factor=3600)
        >>> tracker.progress(0.0).ratio
        0.0
    """

    def __init__(self, leg: FlightLeg, time_scale_factor: float = 3600.0):
        """Initialize the tracker.

        Args:
            leg: Flight to animate
            time_scale_factor: Simulated milliseconds per animation-clock unit

        Raises:
            ValidationError: If time_scale_factor is not a positive finite number
        """
        if not (math.isfinite(time_scale_factor) and time_scale_factor > 0):
            raise ValidationError(
                f"time_scale_factor must be positive and finite, got {time_scale_factor}"
            )
        self.leg = leg
        self.time_scale_factor = float(time_scale_factor)

    def progress(self, clock: float) -> FlightProgress:
        """
        Flight progress at an animation-clock value.

        Parameters
        ----------
        clock : float
            Animation clock (any sign; negative values wrap too)

        Returns
        -------
        progress : FlightProgress
        """
        duration = self.leg.duration
        scaled_elapsed = float(clock) * self.time_scale_factor

        # Python's float modulo follows the divisor's sign, so the result is
        # non-negative; it can still round up to exactly `duration`.
        cycle = scaled_elapsed % duration
        if cycle >= duration:
            cycle = 0.0

        return FlightProgress(
            ratio=cycle / duration,
            simulated_instant=self.leg.depart_time + cycle,
        )

    def position(self, clock: float, radius: float = MARKER_RADIUS) -> np.ndarray:
        """Flight marker position at an animation-clock value."""
        return self.leg.position(self.progress(clock).ratio, radius)

    @property
    def loop_period(self) -> float:
        """Animation-clock units needed for one full flight."""
        return self.leg.duration / self.time_scale_factor
