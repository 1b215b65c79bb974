"""Supporting utilities for AvPath.

This module contains command metadata and the functions replaying, mapping
and measuring a sequence of drawing commands. They are used by the core path
implementation, the path group and the path-data parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Type

import numpy as np

from avpath.commands import (
    ClosePath,
    CubicTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticTo,
    SmoothCubicTo,
    SmoothQuadraticTo,
    VerticalLineTo,
)
from avpath.common import AvPoint
from avpath.geom import AvBox, CoordinateMapping

###############################################################################
# PathCommandInfo
###############################################################################


@dataclass(frozen=True)
class PathCommandInfo:
    """Metadata for SVG path commands.

    Attributes:
        command_type: Class representing the command
        consumes_values: Number of values this command consumes in path data
    """

    command_type: Type[PathCommand]
    consumes_values: int


# Command registry with metadata
COMMAND_INFO = {
    "M": PathCommandInfo(MoveTo, 2),  # MoveTo - starts a subpath
    "L": PathCommandInfo(LineTo, 2),
    "H": PathCommandInfo(HorizontalLineTo, 1),
    "V": PathCommandInfo(VerticalLineTo, 1),
    "Q": PathCommandInfo(QuadraticTo, 4),
    "C": PathCommandInfo(CubicTo, 6),
    "T": PathCommandInfo(SmoothQuadraticTo, 2),
    "S": PathCommandInfo(SmoothCubicTo, 4),
    "Z": PathCommandInfo(ClosePath, 0),  # ClosePath - no values
}


###############################################################################
# PathCommandProcessor
###############################################################################


class PathCommandProcessor:
    """Handles command sequence processing operations."""

    @staticmethod
    def get_value_consumption(cmd: str) -> int:
        """Return number of values consumed by command."""
        return COMMAND_INFO[cmd].consumes_values

    @staticmethod
    def create_command(cmd: str, values: List[float]) -> PathCommand:
        """Create the command for letter _cmd_ from its path-data _values_."""
        info = COMMAND_INFO[cmd]
        if len(values) != info.consumes_values:
            raise ValueError(f"Command '{cmd}' needs {info.consumes_values} values, got {len(values)}")
        return info.command_type(*values)

    @staticmethod
    def current_point(commands: Iterable[PathCommand]) -> AvPoint:
        """Return the pen position after replaying all _commands_.

        M sets the current point and the start of a new subpath.
        L, T, Q, C and S move the current point to their end point.
        H only updates x, V only updates y.
        Z moves the current point back to the start of the active subpath.
        No commands at all result in the origin (0, 0).

        Args:
            commands: the command sequence to replay

        Returns:
            AvPoint: the current point
        """
        x = y = 0.0
        start_x = start_y = 0.0

        for cmd in commands:
            if isinstance(cmd, MoveTo):
                x, y = cmd.x, cmd.y
                start_x, start_y = x, y
            elif isinstance(cmd, (LineTo, SmoothQuadraticTo, QuadraticTo, CubicTo, SmoothCubicTo)):
                x, y = cmd.x, cmd.y
            elif isinstance(cmd, HorizontalLineTo):
                x = cmd.x
            elif isinstance(cmd, VerticalLineTo):
                y = cmd.y
            elif isinstance(cmd, ClosePath):
                x, y = start_x, start_y
            else:
                raise TypeError(f"Unknown command {cmd!r}")

        return AvPoint(x, y)

    @staticmethod
    def map_command(cmd: PathCommand, fn: CoordinateMapping) -> PathCommand:
        """Apply the coordinate mapping _fn_ to every point of a single command.

        Control points are mapped by the same function as end points.
        H is mapped as (x, 0) and keeps only the resulting x,
        V is mapped as (0, y) and keeps only the resulting y.
        """
        if isinstance(cmd, (MoveTo, LineTo, SmoothQuadraticTo)):
            x, y = fn(cmd.x, cmd.y)
            return type(cmd)(x, y)
        if isinstance(cmd, HorizontalLineTo):
            x, _ = fn(cmd.x, 0.0)  # only x matters
            return HorizontalLineTo(x)
        if isinstance(cmd, VerticalLineTo):
            _, y = fn(0.0, cmd.y)  # only y matters
            return VerticalLineTo(y)
        if isinstance(cmd, QuadraticTo):
            x1, y1 = fn(cmd.x1, cmd.y1)
            x, y = fn(cmd.x, cmd.y)
            return QuadraticTo(x1, y1, x, y)
        if isinstance(cmd, CubicTo):
            x1, y1 = fn(cmd.x1, cmd.y1)
            x2, y2 = fn(cmd.x2, cmd.y2)
            x, y = fn(cmd.x, cmd.y)
            return CubicTo(x1, y1, x2, y2, x, y)
        if isinstance(cmd, SmoothCubicTo):
            x2, y2 = fn(cmd.x2, cmd.y2)
            x, y = fn(cmd.x, cmd.y)
            return SmoothCubicTo(x2, y2, x, y)
        if isinstance(cmd, ClosePath):
            return cmd
        raise TypeError(f"Unknown command {cmd!r}")

    @staticmethod
    def map_commands(commands: Iterable[PathCommand], fn: CoordinateMapping) -> List[PathCommand]:
        """Return a new command list with _fn_ applied to every coordinate of _commands_."""
        return [PathCommandProcessor.map_command(cmd, fn) for cmd in commands]

    @staticmethod
    def bounding_box(commands: Iterable[PathCommand]) -> AvBox:
        """
        Returns the axis-aligned bounding box of all coordinates of the given commands.

        Control points are included as they are (no curve flattening), so the box
        encloses the control polygon and may be larger than the drawn curve.
        An empty sequence results in the degenerate box (0, 0, 0, 0).
        An axis without any coordinate (e.g. only H commands) collapses to 0.
        """
        xs: List[float] = []
        ys: List[float] = []

        for cmd in commands:
            if isinstance(cmd, (MoveTo, LineTo, SmoothQuadraticTo)):
                xs.append(cmd.x)
                ys.append(cmd.y)
            elif isinstance(cmd, HorizontalLineTo):
                xs.append(cmd.x)
            elif isinstance(cmd, VerticalLineTo):
                ys.append(cmd.y)
            elif isinstance(cmd, QuadraticTo):
                xs.extend((cmd.x1, cmd.x))
                ys.extend((cmd.y1, cmd.y))
            elif isinstance(cmd, CubicTo):
                xs.extend((cmd.x1, cmd.x2, cmd.x))
                ys.extend((cmd.y1, cmd.y2, cmd.y))
            elif isinstance(cmd, SmoothCubicTo):
                xs.extend((cmd.x2, cmd.x))
                ys.extend((cmd.y2, cmd.y))
            elif not isinstance(cmd, ClosePath):
                raise TypeError(f"Unknown command {cmd!r}")

        if not xs and not ys:
            return AvBox.empty()

        points_x = np.asarray(xs, dtype=np.float64)
        points_y = np.asarray(ys, dtype=np.float64)
        x_min, x_max = (points_x.min(), points_x.max()) if points_x.size else (0.0, 0.0)
        y_min, y_max = (points_y.min(), points_y.max()) if points_y.size else (0.0, 0.0)
        return AvBox(x_min, y_min, x_max, y_max)
