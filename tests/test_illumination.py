"""Tests for the terminator and atmosphere blend factors."""

import numpy as np
import pytest

from flightglobe.exceptions import ValidationError
from flightglobe.illumination import (
    AtmospherePalette,
    IlluminationFactors,
    atmosphere_day_strength,
    atmosphere_mix,
    atmosphere_tint,
    composite,
    day_strength,
    fresnel,
    illumination_factors,
    mix,
    smoothstep,
)


def _random_unit_vectors(rng, n):
    v = rng.normal(size=(n, 3))
    return v / np.linalg.norm(v, axis=1, keepdims=True)


class TestSmoothstep:
    """Tests for the Hermite step."""

    def test_edges(self):
        assert smoothstep(-1.0, 0.0, 1.0) == 0.0
        assert smoothstep(0.0, 0.0, 1.0) == 0.0
        assert smoothstep(1.0, 0.0, 1.0) == 1.0
        assert smoothstep(2.0, 0.0, 1.0) == 1.0

    def test_midpoint(self):
        assert np.isclose(smoothstep(0.5, 0.0, 1.0), 0.5)

    def test_cubic_shape(self):
        """Test 3t^2 - 2t^3 between the edges."""
        t = 0.25
        assert np.isclose(smoothstep(t, 0.0, 1.0), 3 * t**2 - 2 * t**3)

    def test_monotonic(self):
        y = smoothstep(np.linspace(-1.0, 2.0, 301), -0.25, 0.5)
        assert np.all(np.diff(y) >= 0.0)

    def test_equal_edges_raise(self):
        with pytest.raises(ValidationError):
            smoothstep(0.3, 0.5, 0.5)

    def test_scalar_returns_float(self):
        assert isinstance(smoothstep(0.1, 0.0, 1.0), float)


class TestBlendFactors:
    """Tests for the individual factors."""

    def test_day_strength_band(self):
        assert day_strength(-0.25) == 0.0
        assert day_strength(0.5) == 1.0
        assert np.isclose(day_strength(0.125), 0.5)

    def test_atmosphere_day_band(self):
        assert atmosphere_day_strength(-0.5) == 0.0
        assert atmosphere_day_strength(1.0) == 1.0
        assert np.isclose(atmosphere_day_strength(0.25), 0.5)

    def test_fresnel_facing(self):
        """Test zero glow when looking straight at the surface."""
        n = np.array([0.0, 0.0, 1.0])
        assert fresnel(n, n) == 0.0
        assert fresnel(-n, n) == 0.0

    def test_fresnel_grazing(self):
        assert fresnel([1.0, 0.0, 0.0], [0.0, 0.0, 1.0]) == 1.0

    def test_atmosphere_mix_grazing(self):
        """Test full grazing glow equals the atmosphere day factor."""
        assert np.isclose(atmosphere_mix(0.25, 1.0), atmosphere_day_strength(0.25))
        assert atmosphere_mix(1.0, 0.0) == 0.0

    def test_mix(self):
        assert np.allclose(mix([0, 0, 0], [1, 2, 4], 0.5), [0.5, 1.0, 2.0])


class TestAtmosphereTint:
    """Tests for the twilight/day hue shift."""

    def test_palette_from_hex(self):
        palette = AtmospherePalette()
        assert np.allclose(palette.day_color, (0x4d / 255, 0xb2 / 255, 1.0))
        assert np.allclose(palette.twilight_color, (0xbc / 255, 0x49 / 255, 0x0b / 255))

    def test_palette_named_colors(self):
        palette = AtmospherePalette(day_color="white", twilight_color="red")
        assert palette.day_color == (1.0, 1.0, 1.0)
        assert palette.twilight_color == (1.0, 0.0, 0.0)

    def test_invalid_color(self):
        with pytest.raises(ValueError):
            AtmospherePalette(day_color="not-a-color")

    def test_full_day(self):
        palette = AtmospherePalette()
        assert np.allclose(atmosphere_tint(1.0, palette), palette.day_color)

    def test_deep_night(self):
        palette = AtmospherePalette()
        assert np.allclose(atmosphere_tint(-1.0, palette), palette.twilight_color)

    def test_shape(self):
        assert atmosphere_tint(np.zeros((4, 5))).shape == (4, 5, 3)


class TestIlluminationFactors:
    """Tests for the combined factors and compositing."""

    def test_bounds_for_random_vectors(self):
        """Test every factor stays within [0, 1]."""
        rng = np.random.default_rng(7)
        normal = _random_unit_vectors(rng, 1000)
        view = _random_unit_vectors(rng, 1000)
        sun = _random_unit_vectors(rng, 1000)

        factors = illumination_factors(normal, view, sun)

        for values in (factors.day_strength, factors.atmosphere_mix, factors.atmosphere_tint):
            assert np.all(np.isfinite(values))
            assert np.all(values >= 0.0)
            assert np.all(values <= 1.0)
        assert factors.atmosphere_tint.shape == (1000, 3)

    def test_subsolar_point_fully_lit(self):
        n = np.array([1.0, 0.0, 0.0])
        factors = illumination_factors(n, n, n)
        assert factors.day_strength == 1.0
        assert factors.atmosphere_mix == 0.0

    def test_antisolar_point_dark(self):
        n = np.array([1.0, 0.0, 0.0])
        factors = illumination_factors(n, n, -n)
        assert factors.day_strength == 0.0

    def test_single_sun_broadcasts(self):
        rng = np.random.default_rng(3)
        normal = _random_unit_vectors(rng, 12).reshape(3, 4, 3)
        factors = illumination_factors(normal, normal, np.array([0.0, 1.0, 0.0]))
        assert factors.day_strength.shape == (3, 4)
        assert factors.atmosphere_mix.shape == (3, 4)
        assert factors.atmosphere_tint.shape == (3, 4, 3)


class TestComposite:
    """Tests for the final color blend."""

    NIGHT = np.array([0.0, 0.0, 0.1])
    LIT = np.array([0.2, 0.4, 0.6])
    TINT = np.array([1.0, 0.5, 0.0])

    def _factors(self, day, atm):
        return IlluminationFactors(
            day_strength=np.asarray(day),
            atmosphere_mix=np.asarray(atm),
            atmosphere_tint=self.TINT,
        )

    def test_night_only(self):
        assert np.allclose(composite(self.NIGHT, self.LIT, self._factors(0.0, 0.0)), self.NIGHT)

    def test_lit_only(self):
        assert np.allclose(composite(self.NIGHT, self.LIT, self._factors(1.0, 0.0)), self.LIT)

    def test_atmosphere_over_everything(self):
        """Test a full atmosphere mix hides the surface on both sides."""
        for day in (0.0, 1.0):
            assert np.allclose(composite(self.NIGHT, self.LIT, self._factors(day, 1.0)), self.TINT)

    def test_blend_order(self):
        """Test the day/night blend happens before the tint."""
        result = composite(self.NIGHT, self.LIT, self._factors(0.5, 0.5))
        base = 0.5 * (self.NIGHT + self.LIT)
        assert np.allclose(result, 0.5 * (base + self.TINT))
