"""Immutable drawing commands of a path.

Every command uses absolute coordinates. Elliptical arcs are not part of
this set: they are converted into cubic curves when they are added.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import ClassVar, Tuple, Union

from avpath.common import AvPathCmds, format_number


@dataclass(frozen=True)
class _Command:
    """Common base of all drawing commands."""

    letter: ClassVar[AvPathCmds]

    @property
    def values(self) -> Tuple[float, ...]:
        """The coordinate values of this command in path-data order."""
        return astuple(self)

    def to_svg(self) -> str:
        """Return this command as path-data token, e.g. "L 3 4"."""
        return " ".join([self.letter] + [format_number(value) for value in self.values])


@dataclass(frozen=True)
class MoveTo(_Command):
    """M: start a new subpath at (x, y)."""

    letter: ClassVar[AvPathCmds] = "M"
    x: float
    y: float


@dataclass(frozen=True)
class LineTo(_Command):
    """L: straight line to (x, y)."""

    letter: ClassVar[AvPathCmds] = "L"
    x: float
    y: float


@dataclass(frozen=True)
class HorizontalLineTo(_Command):
    """H: horizontal line to x. Carries no y coordinate."""

    letter: ClassVar[AvPathCmds] = "H"
    x: float


@dataclass(frozen=True)
class VerticalLineTo(_Command):
    """V: vertical line to y. Carries no x coordinate."""

    letter: ClassVar[AvPathCmds] = "V"
    y: float


@dataclass(frozen=True)
class QuadraticTo(_Command):
    """Q: quadratic Bezier curve with control point (x1, y1) to (x, y)."""

    letter: ClassVar[AvPathCmds] = "Q"
    x1: float
    y1: float
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo(_Command):
    """C: cubic Bezier curve with control points (x1, y1), (x2, y2) to (x, y)."""

    letter: ClassVar[AvPathCmds] = "C"
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class SmoothQuadraticTo(_Command):
    """T: quadratic curve to (x, y); the control point is implied by reflection."""

    letter: ClassVar[AvPathCmds] = "T"
    x: float
    y: float


@dataclass(frozen=True)
class SmoothCubicTo(_Command):
    """S: cubic curve with second control point (x2, y2) to (x, y).

    The first control point is the reflection of the previous curve's second
    control point and is never stored.
    """

    letter: ClassVar[AvPathCmds] = "S"
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class ClosePath(_Command):
    """Z: close the current subpath."""

    letter: ClassVar[AvPathCmds] = "Z"


PathCommand = Union[
    MoveTo,
    LineTo,
    HorizontalLineTo,
    VerticalLineTo,
    QuadraticTo,
    CubicTo,
    SmoothQuadraticTo,
    SmoothCubicTo,
    ClosePath,
]
