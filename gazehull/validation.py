"""
Input validation utilities and error types.

This module defines the exceptions raised by the hull geometry and the
validators that guard construction of windows and series aggregations.
Only these conditions raise; everything else degrades to a well-defined
value (0 or None) so partial windows never abort an aggregation.
"""

import logging
from typing import Any, Optional, Sequence

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


class NoSeriesPointsError(ValidationError):
    """Raised when a window or series is built without any points."""
    pass


class NoStimulusAreaError(ValidationError):
    """Raised when coverage is requested for a nonzero hull over a zero stimulus area."""
    pass


class InvalidTrailLengthError(ValidationError):
    """Raised when a negative point trail length is requested."""
    pass


def validate_series_points(series_points: Optional[Sequence[Any]], context: str = "Series") -> Sequence[Any]:
    """
    Validate that a point series exists and is not empty.

    Args:
        series_points: Ordered sequence of timestamped points
        context: Context description for error messages

    Returns:
        The series, unchanged

    Raises:
        NoSeriesPointsError: If the series is None or empty
    """
    if series_points is None:
        raise NoSeriesPointsError(f"{context}: no series points given")

    if len(series_points) == 0:
        raise NoSeriesPointsError(f"{context}: series points are empty")

    return series_points


def check_window_indices(start_index: int, end_index: int, series_length: int) -> None:
    """
    Log suspicious window indices without modifying them.

    A window is expected to satisfy 0 <= start_index <= end_index < series_length.
    Anything else is tolerated (slicing simply yields fewer points) but logged.
    """
    if start_index < 0 or end_index >= series_length or start_index > end_index:
        logger.warning(f"Window indices [{start_index}, {end_index}] are outside "
                       f"a series of {series_length} points")


def check_stimulus_area(width: float, height: float) -> None:
    """Log negative stimulus dimensions without modifying them."""
    if width < 0 or height < 0:
        logger.warning(f"Negative stimulus dimensions: width={width}, height={height}")


def validate_trail_length(length: int) -> int:
    """
    Validate a point trail length.

    Raises:
        InvalidTrailLengthError: If the length is negative
    """
    if length < 0:
        raise InvalidTrailLengthError(f"Trail length must be >= 0, got {length}")
    return length


def validate_series_parameters(
    period: Optional[float] = None,
    timestep: Optional[float] = None,
    point_trail_length: Optional[int] = None
) -> None:
    """
    Validate parameter ranges for series aggregation.

    Args:
        period: Look-back span of a time-based window
        timestep: Minimum spacing between emitted windows (0 slides)
        point_trail_length: Number of points in a trail-based window

    Raises:
        ValidationError: If period or timestep is negative
        InvalidTrailLengthError: If the trail length is negative
    """
    if period is not None and period < 0:
        raise ValidationError(f"Period must be >= 0, got {period}")

    if timestep is not None and timestep < 0:
        raise ValidationError(f"Timestep must be >= 0, got {timestep}")

    if point_trail_length is not None:
        validate_trail_length(point_trail_length)
