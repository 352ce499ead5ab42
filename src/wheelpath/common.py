"""Central module containing types and errors for wheel path geometry."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

###############################################################################
# Types
###############################################################################


class Point(NamedTuple):
    """A point (x, y) in the SVG plane."""

    x: float
    y: float


class Line(NamedTuple):
    """A directed line segment from _start_ to _end_."""

    start: Point
    end: Point


class SweepFlag(IntEnum):
    """SVG arc sweep flag: direction in which an arc is drawn between its end points."""

    COUNTER_CLOCKWISE = 0
    CLOCKWISE = 1


###############################################################################
# Errors
###############################################################################


class WheelGeometryError(ValueError):
    """Base exception for errors raised while computing wheel paths."""


class DegenerateLineError(WheelGeometryError):
    """Raised when a line has zero length, i.e. start equals end."""


class NoIntersectionError(WheelGeometryError):
    """Raised when a line does not intersect a circle or another line."""


class InvalidParameterError(WheelGeometryError):
    """Raised when a wheel parameter is out of its valid range."""
