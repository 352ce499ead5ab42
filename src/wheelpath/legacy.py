"""Degree based wheel segment functions.

Angles are given in degrees and measured from the top of the circle instead of
the +x axis. Each function converts its angles and calls the radian based
implementation in wheelpath.geom, wheelpath.sector and wheelpath.wheel.
"""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

import numpy as np

from wheelpath.common import Point
from wheelpath.consts import (
    DEFAULT_ANGLE_OFFSET,
    DEFAULT_INNER_RADIUS,
    DEFAULT_SPOKE_WIDTH,
    ORIGIN,
)
from wheelpath.geom import GeomMath
from wheelpath.sector import (
    annulus_sector_arc_text_path,
    annulus_sector_line_text_path,
    annulus_sector_path,
)
from wheelpath.wheel import SectorPathFunc, check_sector_count

logger = logging.getLogger(__name__)

get_left_parallel_line = GeomMath.left_parallel_line
get_right_parallel_line = GeomMath.right_parallel_line


def deg_to_rad(deg: float) -> float:
    """
    Convert a wheel angle in degrees (0 = top) to radians (0 = +x axis).

    The remainder keeps the sign of _deg_, so -30 stays -30 before the
    quarter turn is subtracted.

    Args:
        deg (float): an angle in degrees

    Returns:
        float: the angle in radians
    """
    return (math.fmod(deg, 360) - 90) / 180 * math.pi


def _sector_angles_to_rad(start_angle: float, end_angle: float) -> Tuple[float, float]:
    """Convert both angles, keeping the end angle on the same turn as the start angle.

    deg_to_rad folds 360 to 0, so the end angle is moved by whole turns until
    its distance to the start angle equals the span given in degrees. This
    keeps the middle angle of a sector ending at 360 inside the sector.
    """
    start_rad = deg_to_rad(start_angle)
    end_rad = deg_to_rad(end_angle)
    expected_end_rad = start_rad + math.radians(end_angle - start_angle)
    turns = round((expected_end_rad - end_rad) / (2 * math.pi))
    if turns:
        end_rad += turns * 2 * math.pi
    logger.debug(
        "Converted segment %f..%f deg to %f..%f rad (%d turns added)", start_angle, end_angle, start_rad, end_rad, turns
    )
    return start_rad, end_rad


def get_point_on_circle(angle: float, radius: float, origin: Point = ORIGIN) -> Point:
    """Get the point on a circle at _angle_ degrees, measured clockwise from the top."""
    return GeomMath.point_on_circle(deg_to_rad(angle), radius, origin)


def get_wheel_segment_path(
    start_angle: float,
    end_angle: float,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    origin: Point = ORIGIN,
) -> str:
    """
    Get the path of a segment of a wheel.

    Args:
        start_angle (float): the start angle of the segment in degrees
        end_angle (float): the end angle of the segment in degrees
        outer_radius (float): the outer radius of the segment
        inner_radius (float, optional): the inner radius of the segment. Defaults to 0.
        spoke_width (float, optional): the width of the space between the segments. Defaults to 0.
        origin (Point, optional): the center of the wheel. Defaults to the origin.

    Returns:
        str: the path data
    """
    start_rad, end_rad = _sector_angles_to_rad(start_angle, end_angle)
    return annulus_sector_path(start_rad, end_rad, outer_radius, inner_radius, spoke_width, origin)


def get_wheel_segment_arc_text_path(
    start_angle: float,
    end_angle: float,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    origin: Point = ORIGIN,
) -> str:
    """Get the arc text path of a segment of a wheel, angles in degrees."""
    start_rad, end_rad = _sector_angles_to_rad(start_angle, end_angle)
    return annulus_sector_arc_text_path(start_rad, end_rad, outer_radius, inner_radius, spoke_width, origin)


def get_wheel_segment_line_text_path(
    start_angle: float,
    end_angle: float,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    origin: Point = ORIGIN,
) -> str:
    """Get the line text path of a segment of a wheel, angles in degrees."""
    start_rad, end_rad = _sector_angles_to_rad(start_angle, end_angle)
    return annulus_sector_line_text_path(start_rad, end_rad, outer_radius, inner_radius, spoke_width, origin)


def _wheel_segment_paths(
    segment_path_func: SectorPathFunc,
    segment_count: int,
    outer_radius: float,
    inner_radius: float,
    spoke_width: float,
    angle_offset: float,
    origin: Point,
) -> List[str]:
    check_sector_count(segment_count)
    segment_length = 360 / segment_count
    logger.debug(
        "Dividing wheel into %d segments of %f deg starting at %f deg", segment_count, segment_length, angle_offset
    )

    paths = []
    for start_angle in angle_offset + np.arange(segment_count) * segment_length:
        start_angle = float(start_angle)
        end_angle = start_angle + segment_length
        paths.append(segment_path_func(start_angle, end_angle, outer_radius, inner_radius, spoke_width, origin))
    return paths


def get_wheel_segment_paths(
    segment_count: int,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    angle_offset: float = DEFAULT_ANGLE_OFFSET,
    origin: Point = ORIGIN,
) -> List[str]:
    """
    Get the paths of a given number of equal segments of a wheel.

    Args:
        segment_count (int): the number of segments to divide the wheel in
        outer_radius (float): the outer radius of the wheel
        inner_radius (float, optional): the inner radius of the wheel. Defaults to 0.
        spoke_width (float, optional): the width of the space between the segments. Defaults to 0.
        angle_offset (float, optional): the starting angle of the first segment in degrees,
            starting from the top. Defaults to 0.
        origin (Point, optional): the center of the wheel. Defaults to the origin.

    Returns:
        List[str]: the path data of each segment
    """
    return _wheel_segment_paths(
        get_wheel_segment_path, segment_count, outer_radius, inner_radius, spoke_width, angle_offset, origin
    )


def get_wheel_segment_arc_text_paths(
    segment_count: int,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    angle_offset: float = DEFAULT_ANGLE_OFFSET,
    origin: Point = ORIGIN,
) -> List[str]:
    """Get the arc text paths of a given number of equal segments of a wheel, angles in degrees."""
    return _wheel_segment_paths(
        get_wheel_segment_arc_text_path, segment_count, outer_radius, inner_radius, spoke_width, angle_offset, origin
    )


def get_wheel_segment_line_text_paths(
    segment_count: int,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    angle_offset: float = DEFAULT_ANGLE_OFFSET,
    origin: Point = ORIGIN,
) -> List[str]:
    """Get the line text paths of a given number of equal segments of a wheel, angles in degrees."""
    return _wheel_segment_paths(
        get_wheel_segment_line_text_path, segment_count, outer_radius, inner_radius, spoke_width, angle_offset, origin
    )
