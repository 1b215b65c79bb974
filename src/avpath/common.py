"""Central module containing types and definitions shared by the path modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Literal, NamedTuple

###############################################################################
# Types
###############################################################################


AvPathCmds = Literal[  # Type-Definition for SvgPath-Commands used in AvPath (absolute coordinates only)
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    # Horizontal LineTo (1) - draw a horizontal line to the given x coordinate (y stays unchanged)
    "H",
    # Vertical LineTo (1) - draw a vertical line to the given y coordinate (x stays unchanged)
    "V",
    # Quadratic Bezier To (4) - draw a quadratic Bezier curve with one control point and an endpoint (x,y)
    "Q",
    # Cubic Bezier To (6) - draw a cubic Bezier curve with two control points and an endpoint (x,y)
    "C",
    # Smooth quadratic Bezier To (2) - control point is the reflection of the previous control point
    "T",
    # Smooth cubic Bezier To (4) - first control point is the reflection of the previous second one
    "S",
    # ClosePath (0) - close subpath by drawing a line from the current point to start point
    "Z",
]

CornerSide = Literal["tl", "tr", "br", "bl"]


class AvPoint(NamedTuple):
    """A 2D point (x, y)."""

    x: float
    y: float


###############################################################################
# Enums and Consts
###############################################################################


class CornerKind(Enum):
    """Enum to define how a rectangle corner is drawn."""

    SHARP = auto()
    ROUNDED = auto()
    CHAMFER = auto()


@dataclass(frozen=True)
class AvCorner:
    """Style of one rectangle corner.

    Attributes:
        kind: sharp corner, rounded by a quadratic curve or cut by a straight chamfer.
        rx: horizontal radius (or chamfer offset). Ignored for sharp corners.
        ry: vertical radius (or chamfer offset). Ignored for sharp corners.
    """

    kind: CornerKind = CornerKind.SHARP
    rx: float = 0.0
    ry: float = 0.0

    @classmethod
    def sharp(cls) -> AvCorner:
        """Create a sharp corner."""
        return cls(CornerKind.SHARP)

    @classmethod
    def rounded(cls, rx: float, ry: float) -> AvCorner:
        """Create a corner rounded by a quadratic curve."""
        return cls(CornerKind.ROUNDED, rx, ry)

    @classmethod
    def chamfer(cls, rx: float, ry: float) -> AvCorner:
        """Create a corner cut by a straight line."""
        return cls(CornerKind.CHAMFER, rx, ry)


###############################################################################
# Functions
###############################################################################


def format_number(value: float) -> str:
    """Format a coordinate for path data.

    Uses the shortest representation which parses back to the same float.
    Integral values are written without a trailing ".0".

    Args:
        value (float): the number to format

    Returns:
        str: textual representation of _value_
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text
