"""
Hull package.

Window hulls over a point series and their aggregation across the series.
"""

from .window import WindowHull
from .series import HullSeries

__all__ = [
    'WindowHull',
    'HullSeries',
]
