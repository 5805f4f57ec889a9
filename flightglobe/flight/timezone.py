"""
Whole-hour timezone offsets derived from longitude.

Every zone is modeled as a whole-hour UTC offset of longitude / 15,
rounded half away from zero; half-hour and 45-minute zones and
political boundaries are not represented.
"""

import math
from datetime import timedelta, timezone

from flightglobe.exceptions import ValidationError
from flightglobe.solar.position import Instant, to_utc_datetime
from flightglobe.utils.constants import DEGREES_PER_HOUR


def offset_hours(longitude_deg: float) -> int:
    """
    Whole-hour UTC offset for a longitude.

    Parameters
    ----------
    longitude_deg : float
        Longitude in degrees, in [-180, 180]

    Returns
    -------
    hours : int
        Offset in hours, in [-12, 12]

    Raises
    ------
    ValidationError
        If the longitude is not finite or lies outside [-180, 180]
    """
    longitude = float(longitude_deg)
    if not math.isfinite(longitude) or not -180.0 <= longitude <= 180.0:
        raise ValidationError(f"Longitude must be within [-180, 180], got {longitude_deg}")

    hours = longitude / DEGREES_PER_HOUR
    return int(math.copysign(math.floor(abs(hours) + 0.5), hours))


def timezone_offset_label(longitude_deg: float) -> str:
    """Signed two-digit offset label such as "+08" or "-05"."""
    hours = offset_hours(longitude_deg)
    sign = "-" if hours < 0 else "+"
    return f"{sign}{abs(hours):02d}"


def local_time_string(
    instant: Instant,
    longitude_deg: float,
    fmt: str = "%Y-%m-%d %H:%M",
) -> str:
    """
    Local wall-clock time at a longitude, for display.

    Parameters
    ----------
    instant : datetime, float or int
        Time of interest (ms since epoch or datetime)
    longitude_deg : float
        Longitude in degrees
    fmt : str
        strftime format for the date/time part

    Returns
    -------
    text : str
        e.g. "2025-06-01 18:05 UTC+08"
    """
    hours = offset_hours(longitude_deg)
    local = to_utc_datetime(instant).astimezone(timezone(timedelta(hours=hours)))
    return f"{local.strftime(fmt)} UTC{timezone_offset_label(longitude_deg)}"
