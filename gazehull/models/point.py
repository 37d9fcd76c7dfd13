"""
Point data models.

This module defines the planar points consumed and produced by the hull
geometry, and conversions between point series and pandas DataFrames.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

import pandas as pd

from gazehull.validation import ValidationError

POINT_COLUMNS = ['x', 'y', 'timestamp']


@dataclass(frozen=True)
class Point:
    """A vertex in the plane, as returned by the convex hull."""
    x: float
    y: float


@dataclass(frozen=True)
class TimestampedPoint:
    """
    A sample of a series, e.g. a gaze fixation.

    Immutable once created. Timestamps are integers >= 0 and are expected
    (not enforced) to be non-decreasing along a series.
    """
    x: float
    y: float
    timestamp: int

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> 'TimestampedPoint':
        """Build a point from a mapping with 'x', 'y' and 'timestamp' keys."""
        return cls(x=record['x'], y=record['y'], timestamp=record['timestamp'])

    def to_dict(self) -> Dict[str, Any]:
        """Convert point to dictionary for DataFrame creation."""
        return {
            'x': self.x,
            'y': self.y,
            'timestamp': self.timestamp
        }


def points_from_records(records: Iterable[Dict[str, Any]]) -> List[TimestampedPoint]:
    """
    Convert plain records into a series of timestamped points.

    Args:
        records: Iterable of mappings with 'x', 'y', 'timestamp' keys

    Returns:
        List of TimestampedPoint objects, in input order
    """
    return [TimestampedPoint.from_dict(record) for record in records]


def points_from_dataframe(df: pd.DataFrame) -> List[TimestampedPoint]:
    """
    Convert a pandas DataFrame into a series of timestamped points.

    Args:
        df: DataFrame with 'x', 'y', 'timestamp' columns

    Returns:
        List of TimestampedPoint objects, in row order

    Raises:
        ValidationError: If a required column is missing
    """
    missing_columns = [col for col in POINT_COLUMNS if col not in df.columns]
    if missing_columns:
        raise ValidationError(f"Point data: Missing required columns: {missing_columns}")

    points = []
    for _, row in df.iterrows():
        points.append(TimestampedPoint(
            x=float(row['x']),
            y=float(row['y']),
            timestamp=int(row['timestamp'])
        ))

    return points


def points_to_dataframe(points: Iterable[TimestampedPoint]) -> pd.DataFrame:
    """
    Convert a series of timestamped points to a pandas DataFrame.

    Args:
        points: Iterable of TimestampedPoint objects

    Returns:
        pandas DataFrame with 'x', 'y', 'timestamp' columns
    """
    data = [point.to_dict() for point in points]
    if not data:
        return pd.DataFrame(columns=POINT_COLUMNS)

    return pd.DataFrame(data, columns=POINT_COLUMNS)
