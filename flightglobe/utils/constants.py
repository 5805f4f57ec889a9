"""
Constants for the globe model.

Angles are in degrees and times in milliseconds unless noted.
"""

# =============================================================================
# Earth Model
# =============================================================================

# Obliquity of the ecliptic used by the declination harmonic [deg]
AXIAL_TILT_DEG = 23.44

# Days per year in the declination harmonic (no leap-year correction)
DAYS_PER_YEAR = 365.0

# Day-of-year phase offset: the December solstice falls ~10 days before Jan 1
DECLINATION_DAY_OFFSET = 10.0

# Earth rotation rate as seen by the subsolar point [deg/hour]
DEGREES_PER_HOUR = 15.0

# Latitude of the arctic circle [deg]
ARCTIC_CIRCLE_LAT = 66.5

# =============================================================================
# Time
# =============================================================================

MS_PER_SECOND = 1000.0
MS_PER_MINUTE = 60.0 * MS_PER_SECOND
MS_PER_HOUR = 60.0 * MS_PER_MINUTE
MS_PER_DAY = 24.0 * MS_PER_HOUR

# =============================================================================
# Numerical Tolerances
# =============================================================================

# Angular separation below which two directions are treated as coincident [rad]
COINCIDENT_ANGLE_RAD = 1e-9

# |a x b| below which two directions are treated as antiparallel
ANTIPARALLEL_CROSS_NORM = 1e-10

# Horizontal magnitude (relative) below which a direction sits on a pole
POLE_EPSILON = 1e-12

# =============================================================================
# Illumination Bands (sun alignment, i.e. cosine of the solar zenith angle)
# =============================================================================

DAY_BAND = (-0.25, 0.5)
ATMOSPHERE_DAY_BAND = (-0.5, 1.0)
TWILIGHT_TINT_BAND = (-0.25, 0.75)

# =============================================================================
# Default Colors
# =============================================================================

ATMOSPHERE_DAY_COLOR = "#4db2ff"
ATMOSPHERE_TWILIGHT_COLOR = "#bc490b"
NIGHT_SURFACE_COLOR = "#070b1a"
LIT_SURFACE_COLOR = "#2f6fa8"
BACKGROUND_COLOR = "#000011"

# =============================================================================
# Default Scene Geometry
# =============================================================================

MARKER_RADIUS = 1.01
PATH_RADIUS = 1.02
PATH_SEGMENTS = 256
CAMERA_POSITION = (-3.0, 3.0, -3.0)
