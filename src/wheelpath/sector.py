"""Path data of a single annulus sector (wheel segment) and its text guide paths"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from wheelpath.common import Line, Point, SweepFlag
from wheelpath.consts import (
    DEFAULT_INNER_RADIUS,
    DEFAULT_SPOKE_WIDTH,
    ORIGIN,
    OUTER_RADIUS_OVERSHOOT,
)
from wheelpath.geom import GeomMath
from wheelpath.svgpath import SvgPath

logger = logging.getLogger(__name__)


###############################################################################
# AnnulusSector
###############################################################################
@dataclass(frozen=True)
class AnnulusSector:
    """
    A slice of a wheel bounded by two concentric arcs and two straight edges.

    The straight edges are moved inwards by half the spoke width each, so two
    neighbouring sectors are separated by a gap of _spoke_width_.

    Attributes:
        start_angle (float): the start angle in radians
        end_angle (float): the end angle in radians
        outer_radius (float): the radius of the outer arc
        inner_radius (float): the radius of the inner arc
        spoke_width (float): the width of the gap between two sectors
        center (Point): the common center of both arcs
    """

    start_angle: float
    end_angle: float
    outer_radius: float
    inner_radius: float = DEFAULT_INNER_RADIUS
    spoke_width: float = DEFAULT_SPOKE_WIDTH
    center: Point = ORIGIN

    @property
    def middle_angle(self) -> float:
        """float: The angle halfway between start and end angle."""
        return (self.start_angle + self.end_angle) / 2

    @property
    def middle_radius(self) -> float:
        """float: The radius halfway between inner and outer radius."""
        return (self.inner_radius + self.outer_radius) / 2

    @property
    def is_collapsed(self) -> bool:
        """bool: True if the straight edges meet before they reach the inner arc."""
        return self.inner_radius <= self.spoke_width

    def boundary_lines(self, radius: float) -> Tuple[Line, Line]:
        """
        Get the straight edges of the sector, running from the center out to _radius_.

        The start edge is the radial line at the start angle moved right (towards the
        end angle) by half the spoke width, the end edge is the radial line at the
        end angle moved left.

        Args:
            radius (float): distance from the center to the far end of the unshifted radial lines

        Returns:
            Tuple[Line, Line]: (start edge, end edge)
        """
        half_spoke = self.spoke_width / 2
        start_edge = GeomMath.right_parallel_line(
            self.center,
            GeomMath.point_on_circle(self.start_angle, radius, self.center),
            half_spoke,
        )
        end_edge = GeomMath.left_parallel_line(
            self.center,
            GeomMath.point_on_circle(self.end_angle, radius, self.center),
            half_spoke,
        )
        return start_edge, end_edge

    def outline(self) -> SvgPath:
        """
        The closed outline of the sector.

        The outer arc is drawn clockwise (sweep 1) and the inner arc back
        counter-clockwise (sweep 0). If the inner radius does not exceed the spoke
        width the edges are joined at their intersection point instead of an inner arc.

        Returns:
            SvgPath: M A L Z (collapsed) or M A L A Z
        """
        start_edge, end_edge = self.boundary_lines(self.outer_radius + OUTER_RADIUS_OVERSHOOT)

        outer_arc_start = GeomMath.line_circle_intersect(start_edge, self.center, self.outer_radius)
        outer_arc_end = GeomMath.line_circle_intersect(end_edge, self.center, self.outer_radius)

        path = SvgPath().move_to(outer_arc_start).arc_to(self.outer_radius, SweepFlag.CLOCKWISE, outer_arc_end)

        if self.is_collapsed:
            apex = GeomMath.line_line_intersect(start_edge, end_edge)
            logger.debug("Sector %s collapses into apex %s", self, apex)
            return path.line_to(apex).close()

        inner_arc_start = GeomMath.line_circle_intersect(end_edge, self.center, self.inner_radius)
        inner_arc_end = GeomMath.line_circle_intersect(start_edge, self.center, self.inner_radius)

        return (
            path.line_to(inner_arc_start)
            .arc_to(self.inner_radius, SweepFlag.COUNTER_CLOCKWISE, inner_arc_end)
            .close()
        )

    def arc_text_guide(self) -> SvgPath:
        """
        An open arc along the middle radius between the sector's edges.

        The arc always runs from its left to its right end point so text placed
        on it reads left-to-right.

        Returns:
            SvgPath: M A
        """
        start_edge, end_edge = self.boundary_lines(self.outer_radius)
        middle_radius = self.middle_radius

        guide_start = GeomMath.line_circle_intersect(start_edge, self.center, middle_radius)
        guide_end = GeomMath.line_circle_intersect(end_edge, self.center, middle_radius)

        if guide_start.x > guide_end.x:
            return SvgPath().move_to(guide_end).arc_to(middle_radius, SweepFlag.COUNTER_CLOCKWISE, guide_start)
        return SvgPath().move_to(guide_start).arc_to(middle_radius, SweepFlag.CLOCKWISE, guide_end)

    def line_text_guide(self) -> SvgPath:
        """
        A straight line along the middle angle from the inner to the outer arc.

        The spoke width does not affect the guide. The line always runs from its
        left to its right end point.

        Returns:
            SvgPath: M L
        """
        radial_line = Line(
            Point(float(self.center[0]), float(self.center[1])),
            GeomMath.point_on_circle(self.middle_angle, self.outer_radius + OUTER_RADIUS_OVERSHOOT, self.center),
        )

        guide_start = GeomMath.line_circle_intersect(radial_line, self.center, self.inner_radius)
        guide_end = GeomMath.line_circle_intersect(radial_line, self.center, self.outer_radius)

        if guide_start.x > guide_end.x:
            return SvgPath().move_to(guide_end).line_to(guide_start)
        return SvgPath().move_to(guide_start).line_to(guide_end)


###############################################################################
# Functions
###############################################################################
def annulus_sector_path(
    start_angle: float,
    end_angle: float,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    center: Point = ORIGIN,
) -> str:
    """
    Get the path data of a wheel segment.

    Args:
        start_angle (float): the start angle of the segment in radians
        end_angle (float): the end angle of the segment in radians
        outer_radius (float): the outer radius of the segment
        inner_radius (float, optional): the inner radius of the segment. Defaults to 0.
        spoke_width (float, optional): the width of the gap between segments. Defaults to 0.
        center (Point, optional): the center of the wheel. Defaults to the origin.

    Returns:
        str: the path data
    """
    return AnnulusSector(start_angle, end_angle, outer_radius, inner_radius, spoke_width, center).outline().to_string()


def annulus_sector_arc_text_path(
    start_angle: float,
    end_angle: float,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    center: Point = ORIGIN,
) -> str:
    """Get the arc text path data of a wheel segment, see annulus_sector_path for the arguments."""
    sector = AnnulusSector(start_angle, end_angle, outer_radius, inner_radius, spoke_width, center)
    return sector.arc_text_guide().to_string()


def annulus_sector_line_text_path(
    start_angle: float,
    end_angle: float,
    outer_radius: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    spoke_width: float = DEFAULT_SPOKE_WIDTH,
    center: Point = ORIGIN,
) -> str:
    """Get the line text path data of a wheel segment, see annulus_sector_path for the arguments."""
    sector = AnnulusSector(start_angle, end_angle, outer_radius, inner_radius, spoke_width, center)
    return sector.line_text_guide().to_string()
