"""
Day/Night Terminator and Atmosphere Glow
========================================

Blend factors for compositing a lit surface, a night surface and an
atmospheric tint. All inputs are unit vectors:

- N : surface normal
- S : direction toward the sun
- V : direction from the surface toward the camera

Bands, in terms of the sun alignment N . S:

- day strength           smoothstep over [-0.25, 0.5]   (soft terminator)
- atmosphere day factor  smoothstep over [-0.5, 1.0]
- twilight -> day tint   smoothstep over [-0.25, 0.75]

The tint band is offset from the day band so that a warm twilight ring
sits just past the terminator.

Every function broadcasts over leading array dimensions, so a full
image of normals of shape (H, W, 3) can be shaded in one call.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np
from matplotlib.colors import to_rgb

from flightglobe.exceptions import ValidationError
from flightglobe.utils.constants import (
    ATMOSPHERE_DAY_BAND,
    ATMOSPHERE_DAY_COLOR,
    ATMOSPHERE_TWILIGHT_COLOR,
    DAY_BAND,
    TWILIGHT_TINT_BAND,
)

RGB = Tuple[float, float, float]


# =============================================================================
# Interpolation Primitives
# =============================================================================

def smoothstep(x, edge0: float, edge1: float):
    """
    Cubic Hermite step between two edges.

    Parameters
    ----------
    x : float or array_like
        Input value(s)
    edge0, edge1 : float
        Lower and upper edge; must differ

    Returns
    -------
    y : float or ndarray
        0 at or below edge0, 1 at or above edge1, 3t^2 - 2t^3 between

    Raises
    ------
    ValidationError
        If edge0 == edge1
    """
    if edge0 == edge1:
        raise ValidationError(f"smoothstep edges must differ, got {edge0} and {edge1}")

    t = np.clip((np.asarray(x, dtype=float) - edge0) / (edge1 - edge0), 0.0, 1.0)
    y = t * t * (3.0 - 2.0 * t)
    if y.ndim == 0:
        return float(y)
    return y


def mix(a, b, t):
    """Linear interpolation a + (b - a) * t (GLSL `mix`)."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return a + (b - a) * t


def _dot(u, v):
    return np.sum(np.asarray(u, dtype=float) * np.asarray(v, dtype=float), axis=-1)


# =============================================================================
# Blend Factors
# =============================================================================

def sun_alignment(normal, sun):
    """Cosine between the surface normal and the sun direction (N . S)."""
    return _dot(normal, sun)


def day_strength(alignment):
    """Lit fraction across the soft terminator."""
    return smoothstep(alignment, *DAY_BAND)


def atmosphere_day_strength(alignment):
    """Atmosphere brightness across a wider band than the terminator."""
    return smoothstep(alignment, *ATMOSPHERE_DAY_BAND)


def fresnel(view, normal):
    """Grazing-angle factor 1 - |V . N|, clamped to [0, 1]."""
    return np.clip(1.0 - np.abs(_dot(view, normal)), 0.0, 1.0)


def atmosphere_mix(alignment, fresnel_term):
    """Atmosphere opacity: day factor times fresnel squared, clamped."""
    return np.clip(atmosphere_day_strength(alignment) * np.square(fresnel_term), 0.0, 1.0)


@dataclass(frozen=True)
class AtmospherePalette:
    """Atmosphere colors at twilight and in full daylight.

    Colors accept any matplotlib color specification (hex string,
    named color or RGB tuple) and are stored as RGB floats in [0, 1].
    """
    day_color: RGB = field(default=ATMOSPHERE_DAY_COLOR)
    twilight_color: RGB = field(default=ATMOSPHERE_TWILIGHT_COLOR)

    def __post_init__(self):
        object.__setattr__(self, "day_color", to_rgb(self.day_color))
        object.__setattr__(self, "twilight_color", to_rgb(self.twilight_color))


def atmosphere_tint(alignment, palette: Optional[AtmospherePalette] = None):
    """
    Atmosphere color shifting from twilight to day hue.

    Parameters
    ----------
    alignment : float or array_like
        Sun alignment N . S
    palette : AtmospherePalette, optional
        Colors to blend (defaults to blue day / orange twilight)

    Returns
    -------
    rgb : ndarray
        Color with shape alignment.shape + (3,)
    """
    palette = palette or AtmospherePalette()
    weight = np.asarray(smoothstep(alignment, *TWILIGHT_TINT_BAND))[..., None]
    return mix(palette.twilight_color, palette.day_color, weight)


@dataclass(frozen=True)
class IlluminationFactors:
    """Blend factors for one shaded point (or an array of points).

    Attributes:
        day_strength: Lit fraction in [0, 1]
        atmosphere_mix: Atmosphere opacity in [0, 1]
        atmosphere_tint: Atmosphere RGB color
    """
    day_strength: np.ndarray
    atmosphere_mix: np.ndarray
    atmosphere_tint: np.ndarray


def illumination_factors(
    normal,
    view,
    sun,
    palette: Optional[AtmospherePalette] = None,
) -> IlluminationFactors:
    """
    Compute all blend factors for surface point(s).

    Parameters
    ----------
    normal : array_like
        Unit surface normal(s), shape (..., 3)
    view : array_like
        Unit direction(s) from surface toward camera, shape (..., 3)
    sun : array_like
        Unit sun direction, shape (3,) or (..., 3)
    palette : AtmospherePalette, optional
        Atmosphere colors

    Returns
    -------
    factors : IlluminationFactors
    """
    alignment = sun_alignment(normal, sun)
    return IlluminationFactors(
        day_strength=np.asarray(day_strength(alignment)),
        atmosphere_mix=np.asarray(atmosphere_mix(alignment, fresnel(view, normal))),
        atmosphere_tint=atmosphere_tint(alignment, palette),
    )


def composite(night_rgb, lit_rgb, factors: IlluminationFactors) -> np.ndarray:
    """
    Final surface color.

    The day/night blend happens first and the atmosphere tint is laid
    over the result, so the limb glow tints both hemispheres.

    Parameters
    ----------
    night_rgb, lit_rgb : array_like
        Night-side and lit-side appearance, shape (3,) or (..., 3)
    factors : IlluminationFactors
        Output of illumination_factors

    Returns
    -------
    rgb : ndarray
        Composited color, shape (..., 3)
    """
    base = mix(night_rgb, lit_rgb, factors.day_strength[..., None])
    return mix(base, factors.atmosphere_tint, factors.atmosphere_mix[..., None])
