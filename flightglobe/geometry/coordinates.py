"""
Geographic Coordinate Conversion
================================

Conversion between geographic coordinates (latitude, longitude) and
points on a sphere, using the renderer's y-up axis convention:

- polar angle   phi   = 90 - latitude   (latitude 90 is +Y, the north pole)
- azimuth       theta = longitude + 90  (longitude 0 lies on +X)
- x = r sin(phi) sin(theta), y = r cos(phi), z = r sin(phi) cos(theta)

Longitudes are reported in the half-open interval [-180, 180): an
input of +180 comes back as -180.
"""

from dataclasses import dataclass

import numpy as np

from flightglobe.utils.constants import POLE_EPSILON


@dataclass(frozen=True)
class GeoCoordinate:
    """A geographic position on the unit sphere.

    Attributes:
        latitude: Latitude in degrees (-90 to 90)
        longitude: Longitude in degrees (-180 to 180)
    """
    latitude: float
    longitude: float

    def to_direction(self, radius: float = 1.0) -> np.ndarray:
        """Point on a sphere of the given radius."""
        return to_direction(self.latitude, self.longitude, radius)


def normalize(vector) -> np.ndarray:
    """Return the unit vector along `vector` (a zero vector is returned as is)."""
    v = np.asarray(vector, dtype=float)
    norm = np.linalg.norm(v)
    if norm == 0:
        return v.copy()
    return v / norm


def normalize_longitude(longitude_deg):
    """
    Wrap a longitude into [-180, 180).

    Parameters
    ----------
    longitude_deg : float or array_like
        Longitude in degrees, any range

    Returns
    -------
    longitude : float or ndarray
        Equivalent longitude in [-180, 180)
    """
    wrapped = np.mod(np.asarray(longitude_deg, dtype=float) + 180.0, 360.0) - 180.0
    # np.mod can round a tiny negative operand up to exactly 360
    wrapped = np.where(wrapped >= 180.0, wrapped - 360.0, wrapped)
    if wrapped.ndim == 0:
        return float(wrapped)
    return wrapped


def to_direction(latitude_deg, longitude_deg, radius: float = 1.0) -> np.ndarray:
    """
    Convert geographic coordinates to a point on a sphere.

    Parameters
    ----------
    latitude_deg : float or array_like
        Latitude in degrees
    longitude_deg : float or array_like
        Longitude in degrees
    radius : float
        Sphere radius (1 gives a unit direction)

    Returns
    -------
    point : ndarray
        Cartesian point with shape (..., 3)
    """
    phi = np.radians(90.0 - np.asarray(latitude_deg, dtype=float))
    theta = np.radians(np.asarray(longitude_deg, dtype=float) + 90.0)

    sin_phi = np.sin(phi)

    x = radius * sin_phi * np.sin(theta)
    y = radius * np.cos(phi)
    z = radius * sin_phi * np.cos(theta)

    x, y, z = np.broadcast_arrays(x, y, z)
    return np.stack([x, y, z], axis=-1)


def to_geo_coordinate(direction) -> GeoCoordinate:
    """
    Convert a point on a sphere back to geographic coordinates.

    The sphere radius is irrelevant; only the direction is used.

    Parameters
    ----------
    direction : array_like
        Cartesian vector (x, y, z)

    Returns
    -------
    coordinate : GeoCoordinate
        Latitude in [-90, 90] and longitude in [-180, 180)

    Notes
    -----
    At the poles (and for the zero vector) longitude is undefined; the
    function then reports a longitude of 0.0.
    """
    x, y, z = (float(c) for c in np.asarray(direction, dtype=float))

    horizontal = np.hypot(x, z)
    magnitude = np.hypot(horizontal, y)

    latitude = float(np.degrees(np.arctan2(y, horizontal)))

    if horizontal <= POLE_EPSILON * magnitude or magnitude == 0:
        return GeoCoordinate(latitude=latitude, longitude=0.0)

    longitude = normalize_longitude(np.degrees(np.arctan2(x, z)) - 90.0)
    return GeoCoordinate(latitude=latitude, longitude=longitude)
