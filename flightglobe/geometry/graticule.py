"""
Graticule polylines: parallels and meridian great circles.
"""

import numpy as np

from flightglobe.exceptions import ValidationError
from flightglobe.geometry.coordinates import to_direction
from flightglobe.utils.constants import PATH_SEGMENTS


def latitude_circle(
    latitude_deg: float = 0.0,
    radius: float = 1.0,
    segments: int = PATH_SEGMENTS,
) -> np.ndarray:
    """
    Closed polyline along a parallel (the equator by default).

    Parameters
    ----------
    latitude_deg : float
        Latitude of the parallel in degrees
    radius : float
        Sphere radius
    segments : int
        Number of line segments

    Returns
    -------
    points : ndarray
        Array of shape (segments + 1, 3); the last point repeats the first
    """
    if segments < 1:
        raise ValidationError(f"segments must be at least 1, got {segments}")

    longitudes = np.linspace(-180.0, 180.0, int(segments) + 1)
    points = to_direction(np.full_like(longitudes, latitude_deg), longitudes, radius)
    points[-1] = points[0]
    return points


def longitude_circle(
    longitude_deg: float = 0.0,
    radius: float = 1.0,
    segments: int = PATH_SEGMENTS,
) -> np.ndarray:
    """
    Closed great circle through both poles.

    The circle contains the meridian at `longitude_deg` and its
    antimeridian, so the default draws the prime meridian together
    with the date line.

    Returns
    -------
    points : ndarray
        Array of shape (segments + 1, 3); the last point repeats the first
    """
    if segments < 1:
        raise ValidationError(f"segments must be at least 1, got {segments}")

    # Walk the colatitude through a full turn: 0..180 on the meridian,
    # 180..360 back up the antimeridian.
    colatitude = np.radians(np.linspace(0.0, 360.0, int(segments) + 1))
    meridian = to_direction(0.0, longitude_deg)
    north = np.array([0.0, 1.0, 0.0])

    points = radius * (
        np.cos(colatitude)[:, None] * north + np.sin(colatitude)[:, None] * meridian
    )
    points[-1] = points[0]
    return points
