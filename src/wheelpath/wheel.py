"""Path data of all segments of a wheel divided into equal sectors"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Callable, List, Tuple

import numpy as np

from wheelpath.common import InvalidParameterError, Point
from wheelpath.consts import (
    DEFAULT_ANGLE_OFFSET,
    DEFAULT_INNER_RADIUS,
    DEFAULT_SPOKE_WIDTH,
    ORIGIN,
)
from wheelpath.sector import (
    annulus_sector_arc_text_path,
    annulus_sector_line_text_path,
    annulus_sector_path,
)

logger = logging.getLogger(__name__)

SectorPathFunc = Callable[[float, float, float, float, float, Point], str]


def check_sector_count(sector_count: int) -> None:
    """Raise InvalidParameterError unless _sector_count_ is an integer >= 1."""
    if isinstance(sector_count, bool) or not isinstance(sector_count, numbers.Integral):
        raise InvalidParameterError(f"sector_count must be an integer, got {sector_count!r}")
    if sector_count < 1:
        raise InvalidParameterError(f"sector_count must be at least 1, got {sector_count}")


def sector_angles(sector_count: int, angle_offset: float = DEFAULT_ANGLE_OFFSET) -> List[Tuple[float, float]]:
    """
    Divide the full turn starting at _angle_offset_ into _sector_count_ equal spans.

    Args:
        sector_count (int): the number of sectors
        angle_offset (float, optional): the start angle of the first sector in radians. Defaults to 0.

    Raises:
        InvalidParameterError: if sector_count is not an integer >= 1

    Returns:
        List[Tuple[float, float]]: (start angle, end angle) of each sector, in order
    """
    check_sector_count(sector_count)
    span = 2 * math.pi / sector_count
    start_angles = angle_offset + np.arange(sector_count) * span
    logger.debug("Dividing wheel into %d sectors of %f rad starting at %f rad", sector_count, span, angle_offset)
    return [(float(start), float(start) + span) for start in start_angles]


def _sector_paths(
    sector_path_func: SectorPathFunc,
    sector_count: int,
    outer_radius: float,
    inner_radius: float,
    spoke_width: float,
    angle_offset: float,
    center: Point,
) -> List[str]:
    return [
        sector_path_func(start_angle, end_angle, outer_radius, inner_radius, spoke_width, center)
        for start_angle, end_angle in sector_angles(sector_count, angle_offset)
    ]


def annulus_sector_paths(
    sector_count: int,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    angle_offset: float = DEFAULT_ANGLE_OFFSET,
    center: Point = ORIGIN,
) -> List[str]:
    """
    Get the path data of a given number of equal segments of a wheel.

    Item i of the result is the i-th segment counted from _angle_offset_.

    Args:
        sector_count (int): the number of segments to divide the wheel in
        outer_radius (float): the outer radius of the wheel
        inner_radius (float, optional): the inner radius of the wheel. Defaults to 0.
        spoke_width (float, optional): the width of the gap between segments. Defaults to 0.
        angle_offset (float, optional): the start angle of the first segment in radians. Defaults to 0.
        center (Point, optional): the center of the wheel. Defaults to the origin.

    Raises:
        InvalidParameterError: if sector_count is not an integer >= 1

    Returns:
        List[str]: the path data of each segment
    """
    return _sector_paths(
        annulus_sector_path, sector_count, outer_radius, inner_radius, spoke_width, angle_offset, center
    )


def annulus_sector_arc_text_paths(
    sector_count: int,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    angle_offset: float = DEFAULT_ANGLE_OFFSET,
    center: Point = ORIGIN,
) -> List[str]:
    """Get the arc text path data of all segments, see annulus_sector_paths for the arguments."""
    return _sector_paths(
        annulus_sector_arc_text_path, sector_count, outer_radius, inner_radius, spoke_width, angle_offset, center
    )


def annulus_sector_line_text_paths(
    sector_count: int,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    angle_offset: float = DEFAULT_ANGLE_OFFSET,
    center: Point = ORIGIN,
) -> List[str]:
    """Get the line text path data of all segments, see annulus_sector_paths for the arguments."""
    return _sector_paths(
        annulus_sector_line_text_path, sector_count, outer_radius, inner_radius, spoke_width, angle_offset, center
    )


###############################################################################
# WheelParams
###############################################################################
@dataclass(frozen=True)
class WheelParams:
    """
    The dimensions of a wheel shared by all its segments.

    Attributes:
        outer_radius (float): the outer radius of the wheel
        inner_radius (float): the inner radius of the wheel. Defaults to 0.
        spoke_width (float): the width of the gap between segments. Defaults to 0.
        angle_offset (float): the start angle of the first segment in radians. Defaults to 0.
        center (Point): the center of the wheel. Defaults to the origin.
    """

    outer_radius: float
    inner_radius: float = DEFAULT_INNER_RADIUS
    spoke_width: float = DEFAULT_SPOKE_WIDTH
    angle_offset: float = DEFAULT_ANGLE_OFFSET
    center: Point = ORIGIN

    def sector_angles(self, sector_count: int) -> List[Tuple[float, float]]:
        """(start angle, end angle) of each of _sector_count_ equal segments."""
        return sector_angles(sector_count, self.angle_offset)

    def sector_paths(self, sector_count: int) -> List[str]:
        """Path data of _sector_count_ equal segments."""
        return annulus_sector_paths(sector_count, *self.builder_args())

    def arc_text_paths(self, sector_count: int) -> List[str]:
        """Arc text path data of _sector_count_ equal segments."""
        return annulus_sector_arc_text_paths(sector_count, *self.builder_args())

    def line_text_paths(self, sector_count: int) -> List[str]:
        """Line text path data of _sector_count_ equal segments."""
        return annulus_sector_line_text_paths(sector_count, *self.builder_args())

    def builder_args(self) -> Tuple[float, float, float, float, Point]:
        """(outer_radius, inner_radius, spoke_width, angle_offset, center) as passed to the batch builders."""
        return (self.outer_radius, self.inner_radius, self.spoke_width, self.angle_offset, self.center)

    @classmethod
    def from_dict(cls, data: dict) -> WheelParams:
        """Create a WheelParams instance from a dictionary, missing keys get their defaults."""
        if "outer_radius" not in data:
            raise InvalidParameterError("outer_radius is required")
        center = data.get("center", ORIGIN)
        if isinstance(center, dict):
            center = (center.get("x", 0.0), center.get("y", 0.0))
        return cls(
            outer_radius=data["outer_radius"],
            inner_radius=data.get("inner_radius", DEFAULT_INNER_RADIUS),
            spoke_width=data.get("spoke_width", DEFAULT_SPOKE_WIDTH),
            angle_offset=data.get("angle_offset", DEFAULT_ANGLE_OFFSET),
            center=Point(float(center[0]), float(center[1])),
        )

    def to_dict(self) -> dict:
        """Convert the WheelParams instance to a dictionary."""
        return {
            "outer_radius": self.outer_radius,
            "inner_radius": self.inner_radius,
            "spoke_width": self.spoke_width,
            "angle_offset": self.angle_offset,
            "center": {"x": self.center[0], "y": self.center[1]},
        }


###############################################################################
# Functions taking WheelParams
###############################################################################
def annulus_sector_paths_from_params(params: WheelParams, sector_count: int) -> List[str]:
    """
    Get the path data of _sector_count_ equal segments of the wheel described by _params_.

    Args:
        params (WheelParams): the dimensions of the wheel
        sector_count (int): the number of segments to divide the wheel in

    Raises:
        InvalidParameterError: if sector_count is not an integer >= 1

    Returns:
        List[str]: the path data of each segment
    """
    return annulus_sector_paths(sector_count, *params.builder_args())


def annulus_sector_arc_text_paths_from_params(params: WheelParams, sector_count: int) -> List[str]:
    """Get the arc text path data of all segments, see annulus_sector_paths_from_params."""
    return annulus_sector_arc_text_paths(sector_count, *params.builder_args())


def annulus_sector_line_text_paths_from_params(params: WheelParams, sector_count: int) -> List[str]:
    """Get the line text path data of all segments, see annulus_sector_paths_from_params."""
    return annulus_sector_line_text_paths(sector_count, *params.builder_args())
