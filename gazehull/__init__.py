"""
gazehull package.

Spatial-temporal coverage metrics over moving windows of timestamped 2D
points, built on the convex hull of each window.

Modules:
    geometry: Point de-duplication, coordinate conversion and polygon primitives
    hull: Window hulls and series aggregation
    models: Point and window metric data structures
    validation: Error types and input validation
"""

from gazehull.hull import WindowHull, HullSeries
from gazehull.models import Point, TimestampedPoint, WindowMetrics
from gazehull.validation import (
    ValidationError,
    NoSeriesPointsError,
    NoStimulusAreaError,
    InvalidTrailLengthError
)

__all__ = [
    'WindowHull',
    'HullSeries',
    'Point',
    'TimestampedPoint',
    'WindowMetrics',
    'ValidationError',
    'NoSeriesPointsError',
    'NoStimulusAreaError',
    'InvalidTrailLengthError',
]
