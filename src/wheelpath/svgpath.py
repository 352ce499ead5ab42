"""Building and serializing SVG path data"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, List, Literal, Tuple

from wheelpath.common import Point, SweepFlag

# Commands emitted for wheel paths; uppercase = absolute coordinates.
WheelPathCmds = Literal[
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    # Arc (7) - draw an elliptical arc (rx ry x-axis-rotation large-arc-flag sweep-flag x y)
    "A",
    # ClosePath (0) - close subpath by drawing a line from the current point to start point
    "Z",
]


def format_number(value: float) -> str:
    """
    Format a number for path data.

    Integral values are written without decimal part, negative zero as "0"
    and all other values by their shortest round-tripping representation.

    Args:
        value (float): the number

    Returns:
        str: the textual representation
    """
    value = float(value)
    if value == 0.0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class SvgPathCmd:
    """A single path command: its letter and its numeric operands."""

    letter: WheelPathCmds
    args: Tuple[float, ...] = ()

    def __str__(self) -> str:
        return " ".join([self.letter] + [format_number(arg) for arg in self.args])


@dataclass
class SvgPath:
    """
    A sequence of SVG path commands, serialized on demand.

    The add-methods return the path itself so commands can be chained:
        SvgPath().move_to(p0).line_to(p1).close()
    """

    commands: List[SvgPathCmd] = field(default_factory=list)

    # Command letters:
    SVG_CMDS: ClassVar[str] = "MmLlHhVvCcSsQqTtAaZz"
    # Definition of a number:
    SVG_ARGS: ClassVar[str] = r"[-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?"

    def move_to(self, point: Point) -> SvgPath:
        """Start a new subpath at _point_."""
        self.commands.append(SvgPathCmd("M", (point[0], point[1])))
        return self

    def line_to(self, point: Point) -> SvgPath:
        """Draw a straight line to _point_."""
        self.commands.append(SvgPathCmd("L", (point[0], point[1])))
        return self

    def arc_to(self, radius: float, sweep: SweepFlag, point: Point) -> SvgPath:
        """
        Draw a circular arc with _radius_ to _point_.

        x-axis-rotation and large-arc-flag are always 0: wheel arcs never span
        more than half a circle between their end points.

        Args:
            radius (float): radius of the arc (used as rx and ry)
            sweep (SweepFlag): direction of the arc
            point (Point): end point of the arc

        Returns:
            SvgPath: self
        """
        self.commands.append(SvgPathCmd("A", (radius, radius, 0, 0, int(sweep), point[0], point[1])))
        return self

    def close(self) -> SvgPath:
        """Close the current subpath."""
        self.commands.append(SvgPathCmd("Z"))
        return self

    def to_string(self) -> str:
        """Serialize the commands to path data with single spaces as separators."""
        return " ".join(str(command) for command in self.commands)

    def __str__(self) -> str:
        return self.to_string()

    @staticmethod
    def split_commands(path_string: str) -> List[Tuple[str, List[float]]]:
        """
        Split a SVG _path_string_ into its commands.

        Args:
            path_string (str): a SVG path string

        Returns:
            List[Tuple[str, List[float]]]: (command letter, arguments) for each command
        """
        org_commands = re.findall(f"[{SvgPath.SVG_CMDS}][^{SvgPath.SVG_CMDS}]*", path_string)
        return [
            (command[0], [float(arg) for arg in re.findall(SvgPath.SVG_ARGS, command[1:])])
            for command in org_commands
        ]

    @staticmethod
    def command_letters(path_string: str) -> str:
        """Return the command letters of _path_string_, e.g. "MALZ"."""
        return "".join(letter for letter, _ in SvgPath.split_commands(path_string))
