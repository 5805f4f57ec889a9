"""
Spherical Geometry Module
=========================

Geometry on a unit sphere for the globe:

- Geographic coordinates <-> Cartesian directions (y-up renderer axes)
- Great-circle interpolation and polyline sampling
- Graticule polylines (parallels and meridians)

The model is a perfect sphere; ellipsoidal geodesy is not attempted.
"""

from flightglobe.geometry.coordinates import (
    GeoCoordinate,
    normalize,
    normalize_longitude,
    to_direction,
    to_geo_coordinate,
)

from flightglobe.geometry.geodesic import (
    angular_distance,
    fallback_axis,
    rotate_about_axis,
    point_at,
    full_path,
)

from flightglobe.geometry.graticule import (
    latitude_circle,
    longitude_circle,
)

__all__ = [
    # Coordinates
    "GeoCoordinate",
    "normalize",
    "normalize_longitude",
    "to_direction",
    "to_geo_coordinate",
    # Great circles
    "angular_distance",
    "fallback_axis",
    "rotate_about_axis",
    "point_at",
    "full_path",
    # Graticule
    "latitude_circle",
    "longitude_circle",
]
