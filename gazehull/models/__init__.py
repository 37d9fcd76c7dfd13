"""
Models package.

Plain data structures shared by the hull geometry and the series aggregation.
"""

from .point import (
    Point,
    TimestampedPoint,
    points_from_records,
    points_from_dataframe,
    points_to_dataframe
)
from .window_metrics import WindowMetrics, metrics_to_dataframe

__all__ = [
    'Point',
    'TimestampedPoint',
    'points_from_records',
    'points_from_dataframe',
    'points_to_dataframe',
    'WindowMetrics',
    'metrics_to_dataframe',
]
