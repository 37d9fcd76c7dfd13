"""
Tests for HullSeries aggregation.
"""

import pandas as pd
import pytest

from gazehull.hull import HullSeries
from gazehull.models.point import TimestampedPoint
from gazehull.validation import (
    ValidationError,
    NoSeriesPointsError,
    InvalidTrailLengthError,
)


def zigzag_points(timestamps=None):
    """Fifteen points sweeping back and forth across a 1000x1000 stimulus."""
    coordinates = [
        (100, 400), (200, 300), (300, 200), (400, 100), (500, 700),
        (600, 600), (700, 500), (800, 400), (900, 300), (100, 200),
        (200, 100), (300, 400), (400, 300), (500, 200), (600, 100),
    ]
    if timestamps is None:
        timestamps = [i * 1000 for i in range(len(coordinates))]
    return [TimestampedPoint(x, y, t) for (x, y), t in zip(coordinates, timestamps)]


class TestGetAverageCoverage:
    """Tests for get_average_coverage method."""

    def test_no_coverage_when_no_hull_has_duration(self):
        points = [
            TimestampedPoint(100, 100, 0),
            TimestampedPoint(100, 100, 1000),
        ]
        series = HullSeries(points, period=100, include_incomplete=False)
        assert series.get_average_coverage() == 0

    def test_average_coverage(self):
        """
        Windows ending at 5000..13000 last 1000 each, the last one 0.

        Coverages: 0.14 (x4), 0.18 (x2), 0.165, 0.14, 0.115
        Total coverage duration: 1340, total duration: 9000
        """
        series = HullSeries(zigzag_points(), period=5000, timestep=0, width=1000, height=1000)
        assert series.get_average_coverage() == 1340 / 9000

    def test_no_duration_means_zero_average(self):
        """All samples at one instant span no time, so the average is 0, not NaN."""
        points = zigzag_points(timestamps=[0] * 15)[:5]
        series = HullSeries(points, period=5000, timestep=0)
        assert series.get_average_coverage() == 0

    def test_no_duration_with_incomplete_windows_skips_coverage(self):
        """Hulls with area but no stimulus are not evaluated without duration."""
        points = zigzag_points(timestamps=[0] * 15)[:5]
        series = HullSeries(points, period=5000, include_incomplete=True)
        assert len(series.get_hulls()) == 5
        assert series.get_average_coverage() == 0

    def test_previously_saved_average_coverage(self):
        series = HullSeries(zigzag_points(timestamps=[0] * 15), period=5000, timestep=0)
        series.average_coverage = 1337
        assert series.get_average_coverage() == 1337

    def test_average_coverage_is_memoized(self):
        series = HullSeries(zigzag_points(), period=5000, width=1000, height=1000)
        first = series.get_average_coverage()
        assert series.average_coverage == first
        assert series.get_average_coverage() == first


class TestGetHulls:
    """Tests for window construction in get_hulls."""

    def test_time_windows_skip_incomplete(self):
        series = HullSeries(zigzag_points(), period=5000)
        hulls = series.get_hulls()

        assert [hull.end_index for hull in hulls] == list(range(5, 15))
        assert [hull.start_index for hull in hulls] == list(range(0, 10))

    def test_window_coverages(self):
        series = HullSeries(zigzag_points(), period=5000, width=1000, height=1000)
        coverages = [hull.get_coverage() for hull in series.get_hulls()]
        assert coverages[:9] == [0.14, 0.14, 0.14, 0.14, 0.18, 0.18, 0.165, 0.14, 0.115]

    def test_include_incomplete(self):
        series = HullSeries(zigzag_points(), period=5000, include_incomplete=True)
        hulls = series.get_hulls()

        assert len(hulls) == 15
        assert (hulls[0].start_index, hulls[0].end_index) == (0, 0)

    def test_trail_windows(self):
        """A six point trail matches a 5000 period on a 1000 spaced series."""
        series = HullSeries(zigzag_points(), point_trail_length=6, width=1000, height=1000)
        hulls = series.get_hulls()

        assert [hull.end_index for hull in hulls] == list(range(5, 15))
        assert all(len(hull.get_points()) == 6 for hull in hulls)
        assert series.get_average_coverage() == 1340 / 9000

    def test_stepped_windows(self):
        series = HullSeries(zigzag_points(), period=5000, timestep=2000)
        assert [hull.end_index for hull in series.get_hulls()] == [5, 7, 9, 11, 13]

    def test_hulls_share_series(self):
        points = zigzag_points()
        series = HullSeries(points, period=5000)
        hull = series.get_hulls()[0]
        assert hull.duration() == 1000
        assert hull.elapsed_time() == 5000

    def test_hulls_built_once(self):
        series = HullSeries(zigzag_points(), period=5000)
        assert series.get_hulls() is series.get_hulls()

    def test_total_duration(self):
        series = HullSeries(zigzag_points(), period=5000)
        assert series.get_total_duration() == 9000


class TestValidation:
    """Tests for HullSeries parameter validation."""

    def test_empty_points_raise(self):
        with pytest.raises(NoSeriesPointsError):
            HullSeries([])

    def test_negative_period_raises(self):
        with pytest.raises(ValidationError):
            HullSeries(zigzag_points(), period=-1)

    def test_negative_timestep_raises(self):
        with pytest.raises(ValidationError):
            HullSeries(zigzag_points(), timestep=-1)

    def test_negative_trail_length_raises(self):
        with pytest.raises(InvalidTrailLengthError):
            HullSeries(zigzag_points(), point_trail_length=-1)


class TestToDataFrame:
    """Tests for to_dataframe method."""

    def test_one_row_per_hull(self):
        series = HullSeries(zigzag_points(), period=5000, width=1000, height=1000)
        df = series.to_dataframe()

        assert isinstance(df, pd.DataFrame)
        assert len(df) == 10
        assert list(df['end_index']) == list(range(5, 15))
        assert list(df['duration']) == [1000] * 9 + [0]
        assert df.iloc[0]['coverage'] == 0.14

    def test_no_hulls_gives_empty_frame(self):
        points = [TimestampedPoint(0, 0, 0)]
        df = HullSeries(points, period=5000).to_dataframe()
        assert df.empty
