"""
Solar Position Module
=====================

Subsolar point and sun direction as a pure function of time, plus an
owned mutable sun-direction vector for consumers that bind to it by
reference (shader uniforms).

The model is a visualization-grade approximation: single-harmonic
declination, no equation of time, minute resolution.
"""

from flightglobe.solar.position import (
    Instant,
    SunState,
    SunDirectionUniform,
    to_utc_datetime,
    to_epoch_ms,
    subsolar_longitude,
    subsolar_latitude,
    sun_direction,
    sun_state,
    update_sun_direction,
)

__all__ = [
    "Instant",
    "SunState",
    "SunDirectionUniform",
    "to_utc_datetime",
    "to_epoch_ms",
    "subsolar_longitude",
    "subsolar_latitude",
    "sun_direction",
    "sun_state",
    "update_sun_direction",
]
