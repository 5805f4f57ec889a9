"""
Constants shared across flightglobe.

Constants
---------
AXIAL_TILT_DEG : float
    Amplitude of the declination harmonic (deg)
DEGREES_PER_HOUR : float
    Westward drift of the subsolar point (deg/hour)
DAY_BAND, ATMOSPHERE_DAY_BAND, TWILIGHT_TINT_BAND : tuple
    Smoothstep edges of the illumination model
MARKER_RADIUS, PATH_RADIUS : float
    Sphere radii for the flight marker and the drawn route
"""

from flightglobe.utils.constants import (
    AXIAL_TILT_DEG,
    DAYS_PER_YEAR,
    DECLINATION_DAY_OFFSET,
    DEGREES_PER_HOUR,
    ARCTIC_CIRCLE_LAT,
    MS_PER_SECOND,
    MS_PER_MINUTE,
    MS_PER_HOUR,
    MS_PER_DAY,
    DAY_BAND,
    ATMOSPHERE_DAY_BAND,
    TWILIGHT_TINT_BAND,
    MARKER_RADIUS,
    PATH_RADIUS,
    PATH_SEGMENTS,
)

__all__ = [
    "AXIAL_TILT_DEG",
    "DAYS_PER_YEAR",
    "DECLINATION_DAY_OFFSET",
    "DEGREES_PER_HOUR",
    "ARCTIC_CIRCLE_LAT",
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "DAY_BAND",
    "ATMOSPHERE_DAY_BAND",
    "TWILIGHT_TINT_BAND",
    "MARKER_RADIUS",
    "PATH_RADIUS",
    "PATH_SEGMENTS",
]
