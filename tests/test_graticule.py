"""Tests for graticule polylines."""

import numpy as np
import pytest

from flightglobe.exceptions import ValidationError
from flightglobe.geometry import latitude_circle, longitude_circle, to_direction


class TestLatitudeCircle:
    """Tests for parallels."""

    def test_equator(self):
        points = latitude_circle(0.0, segments=64)
        assert points.shape == (65, 3)
        assert np.allclose(points[:, 1], 0.0, atol=1e-12)
        assert np.allclose(np.linalg.norm(points, axis=1), 1.0)

    def test_arctic_circle_height(self):
        """Test every point of a parallel shares the same height."""
        points = latitude_circle(66.5, radius=1.02)
        assert np.allclose(points[:, 1], 1.02 * np.sin(np.radians(66.5)))

    def test_closed(self):
        points = latitude_circle(30.0, segments=10)
        assert np.array_equal(points[0], points[-1])

    def test_invalid_segments(self):
        with pytest.raises(ValidationError):
            latitude_circle(0.0, segments=0)


class TestLongitudeCircle:
    """Tests for meridian great circles."""

    def test_passes_through_poles(self):
        points = longitude_circle(0.0, segments=8)
        assert np.allclose(points[0], [0.0, 1.0, 0.0])
        assert np.allclose(points[4], [0.0, -1.0, 0.0])

    def test_contains_meridian_and_antimeridian(self):
        """Test the circle crosses the equator at lon and lon + 180."""
        points = longitude_circle(30.0, segments=8)
        assert np.allclose(points[2], to_direction(0.0, 30.0), atol=1e-12)
        assert np.allclose(points[6], to_direction(0.0, -150.0), atol=1e-12)

    def test_radius_and_closure(self):
        points = longitude_circle(-97.0, radius=1.5, segments=32)
        assert np.allclose(np.linalg.norm(points, axis=1), 1.5)
        assert np.array_equal(points[0], points[-1])

    def test_invalid_segments(self):
        with pytest.raises(ValidationError):
            longitude_circle(0.0, segments=-1)
