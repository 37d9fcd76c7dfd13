"""
Constants for the gazehull package.

This module contains the mathematical and algorithmic constants used by the
hull geometry and the series aggregation. Constants are grouped by purpose
and documented with their units where applicable.
"""

# =============================================================================
# ANGLE CONSTANTS (all in degrees)
# =============================================================================

FULL_CIRCLE_DEGREES = 360
COMPASS_OFFSET_DEGREES = 90  # Rotates the math angle so 0 points up (+y)

# =============================================================================
# GEOMETRY
# =============================================================================

MIN_POLYGON_VERTICES = 3  # Fewer distinct vertices enclose no area
SHOELACE_CENTROID_FACTOR = 3  # Twice the area times three = 6A

# =============================================================================
# COVERAGE
# =============================================================================

PERCENT_FACTOR = 100

# =============================================================================
# SERIES AGGREGATION (timestamp units, usually milliseconds)
# =============================================================================

DEFAULT_WINDOW_PERIOD = 5000  # Look-back span of a time-based window
DEFAULT_WINDOW_TIMESTEP = 0  # 0 slides one window per point
