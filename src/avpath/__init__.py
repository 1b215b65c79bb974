"""Builder, parser and transform engine for SVG-style vector path data."""

from avpath.arc import AvArc
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
from avpath.common import AvCorner, AvPoint, CornerKind
from avpath.geom import AvBox, GeomMath
from avpath.page import AvSvgPage
from avpath.path import AvPath
from avpath.path_group import AvPathGroup
from avpath.path_support import PathCommandProcessor
from avpath.svgpath import AvPathParseError, AvSvgPath

__all__ = [
    "AvArc",
    "AvBox",
    "AvCorner",
    "AvPath",
    "AvPathGroup",
    "AvPathParseError",
    "AvPoint",
    "AvSvgPage",
    "AvSvgPath",
    "ClosePath",
    "CornerKind",
    "CubicTo",
    "GeomMath",
    "HorizontalLineTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "PathCommandProcessor",
    "QuadraticTo",
    "SmoothCubicTo",
    "SmoothQuadraticTo",
    "VerticalLineTo",
]
