"""
Hull series aggregation.

This module steps a window across a whole point series, builds one window
hull per window and aggregates their coverage. Windows are either
time-based (every point within `period` of the window's last sample) or
trail-based (the last `point_trail_length` points).
"""

import logging
from typing import Any, List, Optional, Sequence

import pandas as pd

from gazehull.config.settings import HullConfig
from gazehull.hull.window import WindowHull
from gazehull.models.window_metrics import metrics_to_dataframe
from gazehull.validation import validate_series_points, validate_series_parameters

logger = logging.getLogger(__name__)


class HullSeries:
    """
    Sequence of window hulls over a point series.

    A window ending at index i is complete once it spans a full trail or a
    full period since the first sample; incomplete leading windows are only
    kept with `include_incomplete`. A timestep of 0 slides the window point
    by point, a positive timestep only emits a window once its end is at
    least that far past the previously emitted one.
    """

    def __init__(self,
                 points: Sequence[Any],
                 period: float = HullConfig.PERIOD,
                 timestep: float = HullConfig.TIMESTEP,
                 point_trail_length: Optional[int] = None,
                 include_incomplete: bool = HullConfig.INCLUDE_INCOMPLETE,
                 width: float = HullConfig.WIDTH,
                 height: float = HullConfig.HEIGHT):
        validate_series_points(points, context="Hull series")
        validate_series_parameters(
            period=period,
            timestep=timestep,
            point_trail_length=point_trail_length
        )

        self.points = points
        self.period = period
        self.timestep = timestep
        self.point_trail_length = point_trail_length
        self.include_incomplete = include_incomplete
        self.width = width
        self.height = height

        self.hulls: Optional[List[WindowHull]] = None
        self.average_coverage: Optional[float] = None

    def get_hulls(self) -> List[WindowHull]:
        """Build the window hulls, once."""
        if self.hulls is None:
            self.hulls = self._build_hulls()
            logger.debug(f"Built {len(self.hulls)} hulls from {len(self.points)} points")
        return self.hulls

    def get_total_duration(self) -> int:
        return sum(hull.duration() for hull in self.get_hulls())

    def get_average_coverage(self) -> float:
        """
        Duration-weighted average coverage of all hulls.

        Each hull's coverage is weighted by the time until the next sample.
        Without hulls, or when they span no time, the average is 0 and no
        coverage is evaluated. A value already stored in `average_coverage`
        is returned unchanged.

        Returns:
            Sum of coverage * duration over the total duration
        """
        if self.average_coverage is not None:
            return self.average_coverage

        hulls = self.get_hulls()
        total_duration = self.get_total_duration()

        if not hulls or total_duration == 0:
            self.average_coverage = 0
        else:
            total_coverage_duration = sum(hull.coverage_duration() for hull in hulls)
            self.average_coverage = total_coverage_duration / total_duration

        logger.info(f"Average coverage: {self.average_coverage} over {len(hulls)} hulls "
                    f"and duration {total_duration}")
        return self.average_coverage

    def to_dataframe(self) -> pd.DataFrame:
        """Metrics of every hull, one row per window."""
        return metrics_to_dataframe([hull.to_metrics() for hull in self.get_hulls()])

    def window_start(self, end_index: int) -> int:
        """First index of the window ending at `end_index`."""
        if self.point_trail_length is not None:
            return max(end_index + 1 - self.point_trail_length, 0)

        threshold = self.points[end_index].timestamp - self.period
        start_index = end_index
        while start_index > 0 and self.points[start_index - 1].timestamp >= threshold:
            start_index -= 1
        return start_index

    def is_complete(self, end_index: int) -> bool:
        """Whether the window ending at `end_index` spans a full trail or period."""
        if self.point_trail_length is not None:
            return end_index + 1 >= self.point_trail_length

        return self.points[end_index].timestamp - self.points[0].timestamp >= self.period

    def _build_hulls(self) -> List[WindowHull]:
        hulls = []
        last_end_time = None

        for end_index in range(len(self.points)):
            if not self.include_incomplete and not self.is_complete(end_index):
                continue

            end_time = self.points[end_index].timestamp
            if self.timestep > 0 and last_end_time is not None:
                if end_time - last_end_time < self.timestep:
                    continue

            hulls.append(WindowHull(
                self.points,
                start_index=self.window_start(end_index),
                end_index=end_index,
                width=self.width,
                height=self.height
            ))
            last_end_time = end_time

        return hulls
