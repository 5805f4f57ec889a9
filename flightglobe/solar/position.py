"""
Subsolar Point and Sun Direction
================================

A deliberately simple solar model for visualization:

- subsolar longitude = (12 - UTC hours) * 15 deg, 0 at UTC noon, moving
  west at the Earth's rotation rate
- subsolar latitude  = -23.44 * cos(2 pi (day_of_year + 10) / 365), a
  single-harmonic declination

Accuracy is a few degrees: there is no equation of time, no leap-year
correction and no precession. Seconds are ignored, so the subsolar
longitude changes in quarter-degree steps (one per minute).

Instants are milliseconds since the Unix epoch or datetime objects;
naive datetimes are taken as UTC.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from numbers import Real
from typing import Optional, Union

import numpy as np

from flightglobe.exceptions import ValidationError
from flightglobe.geometry.coordinates import normalize_longitude, to_direction
from flightglobe.utils.constants import (
    AXIAL_TILT_DEG,
    DAYS_PER_YEAR,
    DECLINATION_DAY_OFFSET,
    DEGREES_PER_HOUR,
    MS_PER_SECOND,
)

Instant = Union[datetime, float, int]


@dataclass(frozen=True)
class SunState:
    """Subsolar point and sun direction for one instant.

    Attributes:
        direction: Unit vector from the Earth's center toward the sun
        latitude: Subsolar latitude in degrees
        longitude: Subsolar longitude in degrees
    """
    direction: np.ndarray
    latitude: float
    longitude: float


def to_utc_datetime(instant: Instant) -> datetime:
    """
    Convert an instant to an aware UTC datetime.

    Parameters
    ----------
    instant : datetime, float or int
        Datetime (naive values are treated as UTC) or milliseconds
        since the Unix epoch

    Returns
    -------
    dt : datetime
        Timezone-aware datetime in UTC
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            return instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(timezone.utc)
    if isinstance(instant, Real) and not isinstance(instant, bool):
        return datetime.fromtimestamp(float(instant) / MS_PER_SECOND, tz=timezone.utc)
    raise TypeError(f"Unsupported instant type: {type(instant).__name__}")


def to_epoch_ms(instant: Instant) -> float:
    """Milliseconds since the Unix epoch for an instant."""
    if isinstance(instant, datetime):
        return to_utc_datetime(instant).timestamp() * MS_PER_SECOND
    if isinstance(instant, Real) and not isinstance(instant, bool):
        return float(instant)
    raise TypeError(f"Unsupported instant type: {type(instant).__name__}")


def subsolar_longitude(instant: Instant) -> float:
    """
    Longitude where the sun is overhead.

    Parameters
    ----------
    instant : datetime, float or int
        Time of interest

    Returns
    -------
    longitude : float
        Subsolar longitude in degrees, in [-180, 180). 0 at 12:00 UTC,
        -180 at 00:00 UTC.
    """
    dt = to_utc_datetime(instant)
    hours = dt.hour + dt.minute / 60.0
    return normalize_longitude((12.0 - hours) * DEGREES_PER_HOUR)


def subsolar_latitude(instant: Instant) -> float:
    """
    Latitude where the sun is overhead (approximate solar declination).

    Parameters
    ----------
    instant : datetime, float or int
        Time of interest

    Returns
    -------
    latitude : float
        Subsolar latitude in degrees, in [-23.44, 23.44]
    """
    day_of_year = to_utc_datetime(instant).timetuple().tm_yday
    phase = 2.0 * np.pi * (day_of_year + DECLINATION_DAY_OFFSET) / DAYS_PER_YEAR
    return float(-AXIAL_TILT_DEG * np.cos(phase))


def sun_direction(instant: Instant) -> np.ndarray:
    """Unit vector toward the subsolar point."""
    return to_direction(subsolar_latitude(instant), subsolar_longitude(instant), 1.0)


def sun_state(instant: Instant) -> SunState:
    """Subsolar point and direction for an instant."""
    latitude = subsolar_latitude(instant)
    longitude = subsolar_longitude(instant)
    return SunState(
        direction=to_direction(latitude, longitude, 1.0),
        latitude=latitude,
        longitude=longitude,
    )


def _check_target(target) -> None:
    if not isinstance(target, np.ndarray):
        raise ValidationError(
            f"Sun direction target must be a numpy array, got {type(target).__name__}"
        )
    if target.shape != (3,):
        raise ValidationError(f"Sun direction target must have shape (3,), got {target.shape}")
    if not np.issubdtype(target.dtype, np.floating):
        raise ValidationError(f"Sun direction target must be a float array, got {target.dtype}")
    if not target.flags.writeable:
        raise ValidationError("Sun direction target is read-only")


def update_sun_direction(target: np.ndarray, instant: Instant) -> np.ndarray:
    """
    Write the sun direction for `instant` into `target` in place.

    Parameters
    ----------
    target : ndarray
        Writable float array of shape (3,). Its identity is preserved,
        so anything holding a reference sees the new value.
    instant : datetime, float or int
        Time of interest

    Returns
    -------
    target : ndarray
        The same array object that was passed in
    """
    _check_target(target)
    target[:] = sun_direction(instant)
    return target


class SunDirectionUniform:
    """A long-lived, mutable sun direction vector.

    The vector is allocated once and only ever overwritten, so a shader
    uniform (or any other consumer) bound to `value` stays valid across
    frames.

    Example:
        >>> uniform = SunDirectionUniform()
        >>> handle = uniform.value
        >>> uniform.update(datetime(2025, 6, 21, 12, 0))
        >>> handle is uniform.value
        True
    """

    def __init__(self, initial: Optional[np.ndarray] = None):
        self._value = np.zeros(3, dtype=float)
        self._latitude = 0.0
        self._longitude = 0.0
        if initial is not None:
            self._value[:] = initial
        else:
            self._value[:] = to_direction(0.0, 0.0)

    @property
    def value(self) -> np.ndarray:
        """The owned direction array (never replaced)."""
        return self._value

    @property
    def latitude(self) -> float:
        """Subsolar latitude of the last update in degrees."""
        return self._latitude

    @property
    def longitude(self) -> float:
        """Subsolar longitude of the last update in degrees."""
        return self._longitude

    def update(self, instant: Instant) -> SunState:
        """Recompute the sun direction for `instant` and copy it in."""
        state = sun_state(instant)
        self._value[:] = state.direction
        self._latitude = state.latitude
        self._longitude = state.longitude
        return state

    def set_position(self, latitude_deg: float, longitude_deg: float) -> SunState:
        """Place the sun over a fixed geographic point."""
        self._value[:] = to_direction(latitude_deg, longitude_deg, 1.0)
        self._latitude = float(latitude_deg)
        self._longitude = normalize_longitude(longitude_deg)
        return SunState(
            direction=self._value.copy(),
            latitude=self._latitude,
            longitude=self._longitude,
        )
