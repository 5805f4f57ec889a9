"""
Illumination Module
===================

Soft day/night terminator, fresnel limb glow and twilight tint, as pure
functions of the surface normal, view direction and sun direction.

Functions
---------
smoothstep, mix
    GLSL-style interpolation primitives
sun_alignment, day_strength, atmosphere_day_strength, fresnel, atmosphere_mix
    Scalar blend factors
atmosphere_tint
    Twilight-to-day atmosphere color
illumination_factors
    All factors for a shaded point
composite
    Night/day blend followed by the atmosphere tint
"""

from flightglobe.illumination.terminator import (
    AtmospherePalette,
    IlluminationFactors,
    smoothstep,
    mix,
    sun_alignment,
    day_strength,
    atmosphere_day_strength,
    fresnel,
    atmosphere_mix,
    atmosphere_tint,
    illumination_factors,
    composite,
)

__all__ = [
    "AtmospherePalette",
    "IlluminationFactors",
    "smoothstep",
    "mix",
    "sun_alignment",
    "day_strength",
    "atmosphere_day_strength",
    "fresnel",
    "atmosphere_mix",
    "atmosphere_tint",
    "illumination_factors",
    "composite",
]
