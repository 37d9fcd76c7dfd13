"""
Window hull.

A window hull is a read-only view over a contiguous index range of a point
series. It derives the convex hull of the windowed points and the metrics
built on it (area, coverage, centroid) along with the motion and timing of
the most recent samples (distance, velocity, azimuth, timestep, duration).

Hull derived values are computed on first access and memoized. Calls that
pass explicit points (or stimulus dimensions) always recompute and never
touch the memo.
"""

import math
import logging
from typing import Any, List, Optional, Sequence

from gazehull.constants import MIN_POLYGON_VERTICES, PERCENT_FACTOR
from gazehull.geometry import (
    distinct_points, xy_to_coordinates, coordinates_to_xy,
    convex_hull, polygon_area, polygon_centroid, compass_bearing
)
from gazehull.models.point import Point
from gazehull.models.window_metrics import WindowMetrics
from gazehull.validation import (
    NoStimulusAreaError, validate_series_points, validate_trail_length,
    check_window_indices, check_stimulus_area
)

logger = logging.getLogger(__name__)

# Marks a memo slot that has not been computed yet (None is a valid centroid)
_UNSET = object()


def _project(points: Sequence[Any], which: Optional[str]) -> List[Any]:
    """Return the points, or a single coordinate of each when `which` is given."""
    if which is not None:
        return [getattr(point, which) for point in points]
    return list(points)


class WindowHull:
    """
    Convex hull and motion metrics of a window over a point series.

    The series is referenced, not copied: `points` is a snapshot taken at
    construction, while duration(), elapsed_time() and point_trail() read the
    live series for samples outside the window.
    """

    def __init__(self,
                 series_points: Sequence[Any],
                 start_index: int = 0,
                 end_index: Optional[int] = None,
                 width: float = 0,
                 height: float = 0):
        """
        Args:
            series_points: Non-empty ordered sequence of points with
                x, y and timestamp attributes
            start_index: First index of the window (inclusive)
            end_index: Last index of the window (inclusive), or None for the
                last index of the series
            width: Width of the stimulus area, used for coverage
            height: Height of the stimulus area, used for coverage

        Raises:
            NoSeriesPointsError: If series_points is None or empty
        """
        validate_series_points(series_points, context="Window hull")

        if end_index is None:
            end_index = len(series_points) - 1

        check_window_indices(start_index, end_index, len(series_points))
        check_stimulus_area(width, height)

        self.width = width
        self.height = height
        self.start_index = start_index
        self.end_index = end_index
        self._series_points = series_points
        self.points = tuple(self.get_sliced_points())

        self._polygon = _UNSET
        self._area = _UNSET
        self._centroid = _UNSET
        self._coverage = _UNSET

    def __repr__(self) -> str:
        return (f"WindowHull(start_index={self.start_index}, end_index={self.end_index}, "
                f"points={len(self.points)})")

    # -------------------------------------------------------------------------
    # Points
    # -------------------------------------------------------------------------

    def get_points(self, which: Optional[str] = None) -> List[Any]:
        """Return the window's points, or one coordinate of each ('x', 'y', 'timestamp')."""
        return _project(self.points, which)

    def get_sliced_points(self, which: Optional[str] = None) -> List[Any]:
        """Slice the live series with the window's indices."""
        points = self._series_points[self.start_index:self.end_index + 1]
        return _project(points, which)

    def point_trail(self, length: int, which: Optional[str] = None) -> List[Any]:
        """
        Return the `length` most recent series points ending at the window's end.

        The trail is clamped at the start of the series, so it may be shorter.

        Raises:
            InvalidTrailLengthError: If length is negative
        """
        validate_trail_length(length)

        trail_start = max(self.end_index + 1 - length, 0)
        trail_end = self.end_index + 1
        return _project(self._series_points[trail_start:trail_end], which)

    def last_point(self) -> Optional[Any]:
        """Last point of the window, or None when the window is empty."""
        if not self.points:
            return None
        return self.points[-1]

    # -------------------------------------------------------------------------
    # Hull geometry
    # -------------------------------------------------------------------------

    def get_polygon(self, points: Optional[Sequence[Any]] = None, which: Optional[str] = None) -> List[Any]:
        """
        Compute the convex hull polygon of a point set.

        Args:
            points: Points to enclose; the window's points when None
            which: 'x' or 'y' to return a single coordinate of each vertex

        Returns:
            Hull vertices as a closed ring of Point objects (first vertex
            repeated last), or the projected coordinates
        """
        if points is not None:
            return _project(self._compute_polygon(points), which)

        if self._polygon is _UNSET:
            self._polygon = self._compute_polygon(self.points)

        return _project(self._polygon, which)

    def get_area(self, points: Optional[Sequence[Any]] = None) -> float:
        """
        Area of the convex hull; 0 when fewer than 3 distinct vertices remain.

        Memoized only when `points` is not given.
        """
        if points is not None:
            return self._compute_area(self.get_polygon(points))

        if self._area is _UNSET:
            self._area = self._compute_area(self.get_polygon())
            logger.debug(f"{self!r}: area {self._area}")

        return self._area

    def get_centroid(self, which: Optional[str] = None) -> Any:
        """
        Centroid of the window's hull polygon, memoized.

        One distinct vertex yields that vertex, two yield their midpoint and
        three or more the area-weighted polygon centroid.

        Args:
            which: 'x' or 'y' to return a single coordinate

        Returns:
            Point, a coordinate, or None for a window without points
        """
        if self._centroid is _UNSET:
            self._centroid = self._compute_centroid()

        if self._centroid is None or which is None:
            return self._centroid

        return getattr(self._centroid, which)

    def get_coverage(self,
                     points: Optional[Sequence[Any]] = None,
                     width: Optional[float] = None,
                     height: Optional[float] = None) -> float:
        """
        Fraction of the stimulus area covered by the hull.

        Args:
            points: Points to enclose; the window's points when None
            width: Stimulus width; the instance's width when None
            height: Stimulus height; the instance's height when None

        Returns:
            area / (width * height), or 0 when the hull has no area

        Raises:
            NoStimulusAreaError: If the hull has area but width * height is 0
        """
        if points is None and width is None and height is None:
            if self._coverage is _UNSET:
                self._coverage = self._compute_coverage(self.get_area(), self.width, self.height)
            return self._coverage

        area = self.get_area(points)
        return self._compute_coverage(
            area,
            self.width if width is None else width,
            self.height if height is None else height
        )

    def coverage_duration(self) -> float:
        """Coverage weighted by the time until the next sample."""
        return self.get_coverage() * self.duration()

    def coverage_percent(self, points: Optional[Sequence[Any]] = None) -> float:
        return self.get_coverage(points) * PERCENT_FACTOR

    # -------------------------------------------------------------------------
    # Motion between the last two points
    # -------------------------------------------------------------------------

    def distance(self, which: Optional[str] = None) -> float:
        """
        Displacement between the last two points.

        With `which` the signed difference along that axis, otherwise the
        Euclidean length. 0 with fewer than two points.
        """
        if which is not None:
            if len(self.points) > 1:
                return getattr(self.points[-1], which) - getattr(self.points[-2], which)
            return 0

        dx = self.distance('x')
        dy = self.distance('y')
        return math.sqrt(dx * dx + dy * dy)

    def velocity(self, which: Optional[str] = None) -> float:
        """Distance over timestep; 0 when either is zero."""
        timestep = self.timestep()
        if timestep > 0 and self.distance() > 0:
            return self.distance(which) / timestep
        return 0

    def azimuth(self) -> Optional[float]:
        """
        Compass bearing from the second-to-last to the last point.

        Returns:
            Degrees in [0, 360), 0 up the +y axis and clockwise. 0 when the two
            points coincide and None with fewer than two points.
        """
        if len(self.points) < 2:
            return None

        start = self.points[-2]
        end = self.points[-1]
        if start.x == end.x and start.y == end.y:
            return 0

        return compass_bearing(start, end)

    # -------------------------------------------------------------------------
    # Time
    # -------------------------------------------------------------------------

    def start_time(self) -> Optional[int]:
        """Timestamp of the window's first point, or None when the window is empty."""
        if not self.points:
            return None
        return self.points[0].timestamp

    def end_time(self) -> Optional[int]:
        if not self.points:
            return None
        return self.points[-1].timestamp

    def timestep(self) -> int:
        """Time between the last two points; 0 with fewer than two."""
        if len(self.points) > 1:
            return self.points[-1].timestamp - self.points[-2].timestamp
        return 0

    def duration(self) -> int:
        """Time from the window's end to the next series sample; 0 at the series end."""
        if not self.points:
            return 0

        next_index = self.end_index + 1
        if next_index < len(self._series_points):
            return self._series_points[next_index].timestamp - self.end_time()
        return 0

    def period(self) -> int:
        """Time spanned by the window's own points."""
        if not self.points:
            return 0
        return self.end_time() - self.start_time()

    def elapsed_time(self) -> int:
        """Time from the first sample of the whole series to the window's end."""
        if not self.points:
            return 0
        return self.end_time() - self._series_points[0].timestamp

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def to_metrics(self) -> WindowMetrics:
        """
        Snapshot the window's metrics.

        Coverage is None when the hull has area but there is no stimulus area
        to relate it to.
        An empty window has no start or end time and spans no time.
        """
        area = self.get_area()
        has_stimulus = self.width * self.height != 0
        centroid = self.get_centroid()

        return WindowMetrics(
            start_index=self.start_index,
            end_index=self.end_index,
            start_time=self.start_time(),
            end_time=self.end_time(),
            point_count=len(self.points),
            area=area,
            coverage=self.get_coverage() if (area == 0 or has_stimulus) else None,
            centroid_x=centroid.x if centroid is not None else None,
            centroid_y=centroid.y if centroid is not None else None,
            azimuth=self.azimuth(),
            velocity=self.velocity(),
            duration=self.duration(),
            period=self.period()
        )

    # -------------------------------------------------------------------------
    # Computation
    # -------------------------------------------------------------------------

    @staticmethod
    def _compute_polygon(points: Sequence[Any]) -> List[Point]:
        return coordinates_to_xy(convex_hull(xy_to_coordinates(points)))

    @staticmethod
    def _compute_area(polygon: Sequence[Point]) -> float:
        perimeter_points = distinct_points(polygon)
        if len(perimeter_points) < MIN_POLYGON_VERTICES:
            return 0
        return polygon_area(xy_to_coordinates(perimeter_points))

    def _compute_centroid(self) -> Optional[Point]:
        perimeter_points = distinct_points(self.get_polygon())

        if not perimeter_points:
            return None

        if len(perimeter_points) == 1:
            return Point(x=perimeter_points[0].x, y=perimeter_points[0].y)

        if len(perimeter_points) == 2:
            first, second = perimeter_points
            return Point(x=(first.x + second.x) / 2, y=(first.y + second.y) / 2)

        return polygon_centroid(perimeter_points)

    @staticmethod
    def _compute_coverage(area: float, width: float, height: float) -> float:
        if area == 0:
            return 0

        stimulus_area = width * height
        if stimulus_area == 0:
            raise NoStimulusAreaError(
                f"Hull area {area} cannot be related to a stimulus of {width}x{height}"
            )

        return area / stimulus_area
