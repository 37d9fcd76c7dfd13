"""
Window metrics data models.

This module defines a flat snapshot of the metrics derived from a single
window hull, suitable for tabular export.
"""

from dataclasses import dataclass
from typing import Optional, List, Dict, Any
import pandas as pd


@dataclass
class WindowMetrics:
    """
    Metrics of one window over a point series.

    A window is a contiguous index range of the series; the geometric
    metrics come from the convex hull of its points.
    """
    # Index boundaries in the original series
    start_index: int
    end_index: int

    # Time boundaries (timestamp units)
    start_time: Optional[int]
    end_time: Optional[int]

    point_count: int

    # Hull geometry
    area: float
    coverage: Optional[float]  # None when there is no stimulus area to divide by
    centroid_x: Optional[float]
    centroid_y: Optional[float]

    # Motion between the last two points
    azimuth: Optional[float]  # Compass degrees (0-360), None with a single point
    velocity: float

    # Time spans
    duration: int  # Until the next series sample after the window
    period: int  # Covered by the window itself

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary for DataFrame creation."""
        return {
            'start_index': self.start_index,
            'end_index': self.end_index,
            'start_time': self.start_time,
            'end_time': self.end_time,
            'point_count': self.point_count,
            'area': self.area,
            'coverage': self.coverage,
            'centroid_x': self.centroid_x,
            'centroid_y': self.centroid_y,
            'azimuth': self.azimuth,
            'velocity': self.velocity,
            'duration': self.duration,
            'period': self.period
        }

    @property
    def coverage_percent(self) -> Optional[float]:
        """Coverage as a percentage of the stimulus area."""
        if self.coverage is None:
            return None
        from gazehull.constants import PERCENT_FACTOR
        return self.coverage * PERCENT_FACTOR


def metrics_to_dataframe(metrics: List[WindowMetrics]) -> pd.DataFrame:
    """
    Convert a list of window metrics to a pandas DataFrame.

    Args:
        metrics: List of WindowMetrics objects

    Returns:
        pandas DataFrame with one row per window
    """
    if not metrics:
        return pd.DataFrame()

    data = [item.to_dict() for item in metrics]
    return pd.DataFrame(data)
