"""Central module for consts and default values"""

from __future__ import annotations

from wheelpath.common import Point

ORIGIN = Point(0.0, 0.0)  # default center of a wheel

DEFAULT_INNER_RADIUS = 0.0
DEFAULT_SPOKE_WIDTH = 0.0
DEFAULT_ANGLE_OFFSET = 0.0

# boundary lines reach this far beyond the outer radius so they always cross the outer circle
OUTER_RADIUS_OVERSHOOT = 1.0

COORDINATE_DECIMALS = 2  # precision of intersection points

INTERSECTION_EPSILON = 1e-9  # tolerance for segment parameters and determinants
