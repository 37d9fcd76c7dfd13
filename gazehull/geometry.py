"""
Shared geometry module.

This module contains the planar geometry used by window hulls: point
de-duplication, conversion between point records and coordinate pairs,
the convex hull and polygon area primitives, and the polygon centroid.
All functions are pure and keep no state.
"""

import math
import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from gazehull.constants import (
    FULL_CIRCLE_DEGREES, COMPASS_OFFSET_DEGREES, MIN_POLYGON_VERTICES,
    SHOELACE_CENTROID_FACTOR
)
from gazehull.models.point import Point

logger = logging.getLogger(__name__)

Coordinate = Tuple[float, float]


# =============================================================================
# POINT SETS
# =============================================================================

def distinct_points(points: Iterable[Any]) -> List[Any]:
    """
    Remove points with duplicate coordinates.

    Equality is exact on (x, y), with no floating point tolerance. The first
    occurrence of each coordinate is kept and input order is preserved.
    """
    seen = set()
    distinct = []
    for point in points:
        key = (point.x, point.y)
        if key not in seen:
            seen.add(key)
            distinct.append(point)
    return distinct


def xy_to_coordinates(points: Iterable[Any]) -> List[Coordinate]:
    """Convert point records to ordered (x, y) pairs."""
    return [(point.x, point.y) for point in points]


def coordinates_to_xy(coordinates: Iterable[Sequence[float]]) -> List[Point]:
    """Convert ordered (x, y) pairs back to Point records."""
    return [Point(x=coordinate[0], y=coordinate[1]) for coordinate in coordinates]


# =============================================================================
# POLYGON PRIMITIVES
# =============================================================================

def _is_collinear(coordinates: np.ndarray) -> bool:
    """Check whether every coordinate lies on the line through the first two."""
    origin = coordinates[0]
    direction = coordinates[1] - origin
    offsets = coordinates - origin
    cross = direction[0] * offsets[:, 1] - direction[1] * offsets[:, 0]
    return bool(np.all(cross == 0))


def _line_extremes(coordinates: np.ndarray) -> List[Coordinate]:
    """Return the two end points of a collinear coordinate set."""
    order = np.lexsort((coordinates[:, 1], coordinates[:, 0]))
    first = coordinates[order[0]]
    last = coordinates[order[-1]]
    return [(float(first[0]), float(first[1])), (float(last[0]), float(last[1]))]


def convex_hull(coordinates: Sequence[Coordinate]) -> List[Coordinate]:
    """
    Compute the convex hull of a set of coordinate pairs.

    No simplification is applied: every extreme vertex is kept. The hull is
    returned as a closed ring, the first vertex repeated at the end.

    Degenerate inputs do not raise:
    - no coordinates: empty list
    - one or two distinct coordinates: those coordinates, closed
    - collinear coordinates: the two extreme points, closed

    Args:
        coordinates: Sequence of (x, y) pairs

    Returns:
        List of (x, y) pairs, counter-clockwise for a proper polygon
    """
    unique = list(dict.fromkeys((float(x), float(y)) for x, y in coordinates))
    if not unique:
        return []

    if len(unique) < MIN_POLYGON_VERTICES:
        ring = unique
    else:
        array = np.asarray(unique, dtype=float)
        if _is_collinear(array):
            ring = _line_extremes(array)
        else:
            try:
                hull = ConvexHull(array)
            except QhullError as e:
                # Qhull rejects sets that are flat within its own precision
                logger.debug(f"Treating {len(unique)} nearly collinear points as a line: {e}")
                ring = _line_extremes(array)
            else:
                ring = [(float(array[i, 0]), float(array[i, 1])) for i in hull.vertices]

    return ring + [ring[0]]


def polygon_area(coordinates: Sequence[Coordinate]) -> float:
    """
    Calculate the area of a simple polygon with the shoelace formula.

    Accepts open or closed rings in either orientation.
    """
    ring = np.asarray(coordinates, dtype=float)
    if len(ring) > 1 and np.array_equal(ring[0], ring[-1]):
        ring = ring[:-1]
    if len(ring) < MIN_POLYGON_VERTICES:
        return 0.0

    x, y = ring[:, 0], ring[:, 1]
    twice_area = np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)
    return float(abs(twice_area) / 2)


def polygon_centroid(points: Sequence[Any]) -> Optional[Point]:
    """
    Calculate the centroid of a polygon with at least three vertices.

    Uses the signed-area weighted shoelace formula, so the result is the
    centre of mass of the enclosed region, not the mean of the vertices.

    Args:
        points: Polygon vertices with x/y attributes, open or closed ring

    Returns:
        Point at the centroid, or None if the polygon encloses no area
    """
    ring = np.asarray(xy_to_coordinates(points), dtype=float)
    x, y = ring[:, 0], ring[:, 1]
    next_x, next_y = np.roll(x, -1), np.roll(y, -1)

    cross = x * next_y - next_x * y
    twice_area = cross.sum()
    if twice_area == 0:
        logger.warning(f"Polygon with {len(points)} vertices encloses no area, no centroid")
        return None

    factor = twice_area * SHOELACE_CENTROID_FACTOR
    return Point(
        x=float(((x + next_x) * cross).sum() / factor),
        y=float(((y + next_y) * cross).sum() / factor)
    )


# =============================================================================
# DIRECTION
# =============================================================================

def compass_bearing(start: Any, end: Any) -> float:
    """
    Calculate the compass bearing of the vector from start to end in degrees.

    0 points up the +y axis and angles grow clockwise, in the range 0-360.
    """
    bearing = COMPASS_OFFSET_DEGREES - math.atan2(end.y - start.y, end.x - start.x) * 180 / math.pi

    if bearing < 0:
        bearing = bearing + FULL_CIRCLE_DEGREES

    # Tiny negative bearings round up to a full circle
    if bearing >= FULL_CIRCLE_DEGREES:
        bearing = 0.0

    return bearing
