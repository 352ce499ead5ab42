"""Geometric primitives for wheel segments: circle points, parallel lines and intersections"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from wheelpath.common import (
    DegenerateLineError,
    Line,
    NoIntersectionError,
    Point,
)
from wheelpath.consts import COORDINATE_DECIMALS, INTERSECTION_EPSILON, ORIGIN

PointLike = Union[Point, Sequence[float]]


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to circle and line geometry.

    Lines are bounded segments from their start to their end point.
    All angles are in radians, 0 along the +x axis and increasing towards +y
    (which is clockwise on a screen with the y-axis pointing down).
    """

    @staticmethod
    def _vec(point: PointLike) -> NDArray[np.float64]:
        return np.asarray(point, dtype=np.float64)

    @staticmethod
    def _cross(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
        return float(a[0] * b[1] - a[1] * b[0])

    @staticmethod
    def round_coordinate(value: float, decimals: int = COORDINATE_DECIMALS) -> float:
        """
        Round _value_ half-up to the given number of _decimals_.

        Halves are rounded towards positive infinity (0.125 -> 0.13, -0.125 -> -0.12)
        which differs from Python's built-in round() on purpose.

        Args:
            value (float): the value to round
            decimals (int, optional): number of decimal places. Defaults to 2.

        Returns:
            float: the rounded value
        """
        factor = 10**decimals
        return math.floor(value * factor + 0.5) / factor

    @staticmethod
    def round_point(point: PointLike, decimals: Optional[int] = COORDINATE_DECIMALS) -> Point:
        """Round both coordinates of _point_, or just convert it if _decimals_ is None."""
        if decimals is None:
            return Point(float(point[0]), float(point[1]))
        return Point(
            GeomMath.round_coordinate(float(point[0]), decimals),
            GeomMath.round_coordinate(float(point[1]), decimals),
        )

    @staticmethod
    def point_on_circle(angle: float, radius: float, center: PointLike = ORIGIN) -> Point:
        """
        Get the point on a circle at the specified angle.

        Args:
            angle (float): the angle in radians
            radius (float): the radius of the circle
            center (Point, optional): the center of the circle. Defaults to the origin.

        Returns:
            Point: center + radius * (cos(angle), sin(angle))
        """
        return Point(
            float(center[0]) + radius * math.cos(angle),
            float(center[1]) + radius * math.sin(angle),
        )

    @staticmethod
    def perpendicular_offset(start: PointLike, end: PointLike, offset: float) -> Tuple[float, float]:
        """
        Get the X and Y displacement for points perpendicular to the line _start_ -> _end_.

        The returned (offset_x, offset_y) is the reversed line direction scaled to length
        _offset_; swapping the components as done by the parallel-line functions gives
        the perpendicular displacement.

        Args:
            start (Point): the starting point of the line
            end (Point): the end point of the line
            offset (float): the distance perpendicular to the line

        Raises:
            DegenerateLineError: if start equals end

        Returns:
            Tuple[float, float]: (offset_x, offset_y)
        """
        difference = GeomMath._vec(start) - GeomMath._vec(end)
        distance = float(np.hypot(difference[0], difference[1]))
        if distance == 0.0:
            raise DegenerateLineError(f"Line from {tuple(start)} to {tuple(end)} has zero length")
        offset_x, offset_y = difference * offset / distance
        return float(offset_x), float(offset_y)

    @staticmethod
    def left_parallel_line(start: PointLike, end: PointLike, offset: float) -> Line:
        """
        Get the line parallel at distance _offset_ left of the line _start_ -> _end_.

        Args:
            start (Point): the starting point of the line
            end (Point): the end point of the line
            offset (float): the distance of the parallel to the given line

        Returns:
            Line: the parallel line
        """
        offset_x, offset_y = GeomMath.perpendicular_offset(start, end, offset)
        return Line(
            Point(float(start[0]) - offset_y, float(start[1]) + offset_x),
            Point(float(end[0]) - offset_y, float(end[1]) + offset_x),
        )

    @staticmethod
    def right_parallel_line(start: PointLike, end: PointLike, offset: float) -> Line:
        """
        Get the line parallel at distance _offset_ right of the line _start_ -> _end_.

        Args:
            start (Point): the starting point of the line
            end (Point): the end point of the line
            offset (float): the distance of the parallel to the given line

        Returns:
            Line: the parallel line
        """
        offset_x, offset_y = GeomMath.perpendicular_offset(start, end, offset)
        return Line(
            Point(float(start[0]) + offset_y, float(start[1]) - offset_x),
            Point(float(end[0]) + offset_y, float(end[1]) - offset_x),
        )

    @staticmethod
    def line_circle_intersect(
        line: Line,
        center: PointLike,
        radius: float,
        decimals: Optional[int] = COORDINATE_DECIMALS,
    ) -> Point:
        """
        Get the intersection point of the segment _line_ and a circle.

        The segment is parametrised as start + t * (end - start) with t in [0, 1].
        If the segment crosses the circle twice, the crossing with the larger t
        (the one nearer the segment's end point) is returned. A tangent touch
        counts as a single crossing.

        Args:
            line (Line): the line segment
            center (Point): the center of the circle
            radius (float): the radius of the circle
            decimals (Optional[int], optional): round coordinates to this precision,
                None keeps them exact. Defaults to 2.

        Raises:
            DegenerateLineError: if the line has zero length
            NoIntersectionError: if the segment does not reach the circle

        Returns:
            Point: the intersection point
        """
        start = GeomMath._vec(line.start)
        direction = GeomMath._vec(line.end) - start
        to_start = start - GeomMath._vec(center)

        a = float(np.dot(direction, direction))
        if a == 0.0:
            raise DegenerateLineError(f"Line from {tuple(line.start)} to {tuple(line.end)} has zero length")
        b = 2.0 * float(np.dot(to_start, direction))
        c = float(np.dot(to_start, to_start)) - radius * radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < -INTERSECTION_EPSILON * max(1.0, b * b):
            raise NoIntersectionError(f"Line {tuple(line)} misses circle at {tuple(center)} with radius {radius}")
        root = math.sqrt(max(0.0, discriminant))

        candidates = [
            t
            for t in ((-b + root) / (2.0 * a), (-b - root) / (2.0 * a))
            if -INTERSECTION_EPSILON <= t <= 1.0 + INTERSECTION_EPSILON
        ]
        if not candidates:
            raise NoIntersectionError(
                f"Line {tuple(line)} does not reach circle at {tuple(center)} with radius {radius}"
            )
        return GeomMath.round_point(start + max(candidates) * direction, decimals)

    @staticmethod
    def line_line_intersect(
        line_a: Line,
        line_b: Line,
        decimals: Optional[int] = COORDINATE_DECIMALS,
    ) -> Point:
        """
        Get the intersection point of two line segments.

        Parallel segments only intersect if they share their start point,
        which is then returned.

        Args:
            line_a (Line): the first line segment
            line_b (Line): the second line segment
            decimals (Optional[int], optional): round coordinates to this precision,
                None keeps them exact. Defaults to 2.

        Raises:
            DegenerateLineError: if one of the lines has zero length
            NoIntersectionError: if the segments are parallel or do not cross

        Returns:
            Point: the intersection point
        """
        start_a = GeomMath._vec(line_a.start)
        start_b = GeomMath._vec(line_b.start)
        direction_a = GeomMath._vec(line_a.end) - start_a
        direction_b = GeomMath._vec(line_b.end) - start_b

        length_a = float(np.hypot(direction_a[0], direction_a[1]))
        length_b = float(np.hypot(direction_b[0], direction_b[1]))
        if length_a == 0.0 or length_b == 0.0:
            raise DegenerateLineError(f"Lines {tuple(line_a)} and {tuple(line_b)} must not have zero length")

        denominator = GeomMath._cross(direction_a, direction_b)
        if abs(denominator) <= INTERSECTION_EPSILON * length_a * length_b:
            if np.allclose(start_a, start_b, rtol=0.0, atol=INTERSECTION_EPSILON):
                return GeomMath.round_point(start_a, decimals)
            raise NoIntersectionError(f"Lines {tuple(line_a)} and {tuple(line_b)} are parallel")

        between = start_b - start_a
        t_a = GeomMath._cross(between, direction_b) / denominator
        t_b = GeomMath._cross(between, direction_a) / denominator
        for t in (t_a, t_b):
            if not -INTERSECTION_EPSILON <= t <= 1.0 + INTERSECTION_EPSILON:
                raise NoIntersectionError(f"Lines {tuple(line_a)} and {tuple(line_b)} do not cross")
        return GeomMath.round_point(start_a + t_a * direction_a, decimals)


###############################################################################
# Module level functions
###############################################################################
point_on_circle = GeomMath.point_on_circle
perpendicular_offset = GeomMath.perpendicular_offset
left_parallel_line = GeomMath.left_parallel_line
right_parallel_line = GeomMath.right_parallel_line
line_circle_intersect = GeomMath.line_circle_intersect
line_line_intersect = GeomMath.line_line_intersect
