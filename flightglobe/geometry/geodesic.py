"""
Great-Circle (Geodesic) Interpolation
=====================================

Shortest-arc interpolation between two points on a sphere. A point at
fractional progress t is obtained by rotating the start direction about
the great-circle axis (start x end) by t times the angular separation,
using Rodrigues' rotation formula.

Degenerate endpoints never produce NaN:

- coincident endpoints: every t returns the start point
- antipodal endpoints: the rotation axis is start x e, where e is the
  world basis vector least aligned with start (ties resolved in x, y, z
  order). Any such great circle is a shortest arc, so the choice is a
  fixed convention rather than a property of the inputs.
"""

import numpy as np

from flightglobe.exceptions import ValidationError
from flightglobe.geometry.coordinates import normalize
from flightglobe.utils.constants import (
    ANTIPARALLEL_CROSS_NORM,
    COINCIDENT_ANGLE_RAD,
    PATH_SEGMENTS,
)


def angular_distance(a, b) -> float:
    """
    Angle between two directions.

    Parameters
    ----------
    a, b : array_like
        Cartesian vectors (need not be unit length)

    Returns
    -------
    angle : float
        Angular separation in radians, in [0, pi]
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    # atan2 form stays accurate for nearly parallel or antiparallel vectors
    return float(np.arctan2(np.linalg.norm(np.cross(a, b)), np.dot(a, b)))


def fallback_axis(start) -> np.ndarray:
    """Deterministic rotation axis perpendicular to `start`.

    Used when the endpoints are antipodal and start x end vanishes.
    """
    start = normalize(start)
    basis = np.eye(3)[int(np.argmin(np.abs(start)))]
    return normalize(np.cross(start, basis))


def rotate_about_axis(vector, axis, angle_rad: float) -> np.ndarray:
    """Rotate `vector` about the unit `axis` by `angle_rad` (Rodrigues)."""
    v = np.asarray(vector, dtype=float)
    k = np.asarray(axis, dtype=float)
    cos_a = np.cos(angle_rad)
    sin_a = np.sin(angle_rad)
    return v * cos_a + np.cross(k, v) * sin_a + k * np.dot(k, v) * (1.0 - cos_a)


def point_at(start, end, t: float, radius: float = 1.0) -> np.ndarray:
    """
    Point at fractional progress along the shortest great-circle arc.

    Parameters
    ----------
    start, end : array_like
        Arc endpoints as Cartesian vectors (any non-zero length)
    t : float
        Fractional progress; 0 gives start, 1 gives end. Values outside
        [0, 1] continue along the same great circle.
    radius : float
        Radius of the returned point

    Returns
    -------
    point : ndarray
        Cartesian point of shape (3,) at distance `radius` from the origin
    """
    a = normalize(start)
    b = normalize(end)

    theta = angular_distance(a, b)
    if theta < COINCIDENT_ANGLE_RAD:
        return a * radius

    axis = np.cross(a, b)
    axis_norm = np.linalg.norm(axis)
    if axis_norm < ANTIPARALLEL_CROSS_NORM:
        axis = fallback_axis(a)
    else:
        axis = axis / axis_norm

    p = rotate_about_axis(a, axis, theta * t)
    return normalize(p) * radius


def full_path(start, end, segments: int = PATH_SEGMENTS, radius: float = 1.0) -> np.ndarray:
    """
    Sample the great-circle arc as a polyline.

    Parameters
    ----------
    start, end : array_like
        Arc endpoints
    segments : int
        Number of line segments; segments + 1 points are returned
    radius : float
        Radius of the returned points

    Returns
    -------
    points : ndarray
        Array of shape (segments + 1, 3), first row at start, last at end

    Raises
    ------
    ValidationError
        If segments is less than 1
    """
    if segments < 1:
        raise ValidationError(f"segments must be at least 1, got {segments}")

    ts = np.linspace(0.0, 1.0, int(segments) + 1)
    return np.array([point_at(start, end, t, radius) for t in ts])
