"""SVG path building and geometric operations for vector graphics processing."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

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
from avpath.common import AvCorner, AvPoint, CornerKind, CornerSide
from avpath.consts import DEFAULT_DESIGN_SIZE, ELLIPSE_KAPPA
from avpath.geom import AvBox, CoordinateMapping, GeomMath
from avpath.path_support import PathCommandProcessor
from avpath.svgpath import AvSvgPath

logger = logging.getLogger(__name__)

_SCALAR_SEPARATOR_RE = re.compile(r"[\s,]+")


###############################################################################
# AvPath
###############################################################################


@dataclass
class AvPath:
    """SVG path represented by an ordered list of drawing commands.

    The path owns its command list. It is changed by appending commands (builder
    methods, path data) or by remapping all coordinates at once (transformations).
    Every builder and transformation returns the path itself for chaining:

        AvPath(24).move_to(2, 2).line_to(22, 2).line_to(12, 20).close().fit(12, 12)

    Attributes:
        _width: width of the design space the path is authored in (e.g. an icon grid)
        _height: height of the design space
        _commands: the drawing commands using absolute coordinates
    """

    _width: float
    _height: float
    _commands: List[PathCommand]

    def __init__(
        self,
        width: float = DEFAULT_DESIGN_SIZE,
        height: Optional[float] = None,
        commands: Optional[Sequence[PathCommand]] = None,
    ):
        """
        Initialize an AvPath.

        Args:
            width: width of the design space. Defaults to 24.
            height: height of the design space. Defaults to _width_.
            commands: initial drawing commands (copied).
        """
        self._width = width
        self._height = width if height is None else height
        self._commands = [] if commands is None else list(commands)

    @property
    def width(self) -> float:
        """The width of the design space."""
        return self._width

    @property
    def height(self) -> float:
        """The height of the design space."""
        return self._height

    @property
    def commands(self) -> Tuple[PathCommand, ...]:
        """
        The commands of this path (snapshot, the path itself stays unchanged).
        """
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(tuple(self._commands))

    ###########################################################################
    # Building
    ###########################################################################

    def move_to(self, x: float, y: float) -> AvPath:
        """Move the pen to (x, y) without drawing, starting a new subpath."""
        self._commands.append(MoveTo(x, y))
        return self

    def line_to(self, x: float, y: float) -> AvPath:
        """Draw a straight line from the current point to (x, y)."""
        self._commands.append(LineTo(x, y))
        return self

    def horizontal_to(self, x: float) -> AvPath:
        """Draw a horizontal line from the current point to _x_."""
        self._commands.append(HorizontalLineTo(x))
        return self

    def vertical_to(self, y: float) -> AvPath:
        """Draw a vertical line from the current point to _y_."""
        self._commands.append(VerticalLineTo(y))
        return self

    def quadratic_to(self, x1: float, y1: float, x: float, y: float) -> AvPath:
        """Draw a quadratic Bezier curve with control point (x1, y1) to (x, y)."""
        self._commands.append(QuadraticTo(x1, y1, x, y))
        return self

    def cubic_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> AvPath:
        """Draw a cubic Bezier curve with control points (x1, y1) and (x2, y2) to (x, y)."""
        self._commands.append(CubicTo(x1, y1, x2, y2, x, y))
        return self

    def smooth_quadratic_to(self, x: float, y: float) -> AvPath:
        """Draw a smooth quadratic Bezier curve to (x, y).

        The control point is the reflection of the previous quadratic control point
        and is resolved by whoever draws the path.
        """
        self._commands.append(SmoothQuadraticTo(x, y))
        return self

    def smooth_cubic_to(self, x2: float, y2: float, x: float, y: float) -> AvPath:
        """Draw a smooth cubic Bezier curve with second control point (x2, y2) to (x, y).

        The first control point is the reflection of the previous cubic control point.
        """
        self._commands.append(SmoothCubicTo(x2, y2, x, y))
        return self

    def arc_to(
        self,
        rx: float,
        ry: float,
        x_axis_rotation: float,
        large_arc_flag: int,
        sweep_flag: int,
        x: float,
        y: float,
    ) -> AvPath:
        """Draw an elliptical arc from the current point to (x, y).

        The arc is converted into cubic Bezier curves right away,
        so no arc command is stored.

        Args:
            rx: x radius of the ellipse
            ry: y radius of the ellipse
            x_axis_rotation: rotation of the ellipse's x-axis in degrees
            large_arc_flag: 0 = smaller arc, 1 = larger arc
            sweep_flag: 0 = counter-clockwise, 1 = clockwise
            x: x of the end point
            y: y of the end point
        """
        x0, y0 = self.current_point()
        self._commands.extend(AvArc.arc_to_cubics(x0, y0, rx, ry, x_axis_rotation, large_arc_flag, sweep_flag, x, y))
        return self

    def close(self) -> AvPath:
        """Close the current subpath."""
        self._commands.append(ClosePath())
        return self

    def append_path_string(self, path_string: str) -> AvPath:
        """Append the commands of the given SVG path data.

        The path data is parsed completely before anything is appended,
        so a parse error leaves this path unchanged.

        Raises:
            AvPathParseError: if the path data is malformed
        """
        self._commands.extend(AvSvgPath.parse(path_string, self._commands))
        return self

    ###########################################################################
    # Building from scalar strings
    ###########################################################################

    @staticmethod
    def _parse_scalars(text: str, count: int, letter: str) -> List[float]:
        """Split _text_ at whitespace and commas into exactly _count_ numbers.

        Raises:
            ValueError: if the number of values is wrong or a value is not a number
        """
        parts = _SCALAR_SEPARATOR_RE.split(text.strip())
        if len(parts) != count:
            raise ValueError(f"Invalid coordinates string for {letter}: '{text}' (expected {count} values)")
        try:
            values = [float(part) for part in parts]
        except ValueError as err:
            raise ValueError(f"Invalid numeric values in {letter} string: '{text}'") from err
        if any(math.isnan(value) for value in values):
            raise ValueError(f"Invalid numeric values in {letter} string: '{text}'")
        return values

    def move_to_str(self, coords: str) -> AvPath:
        """Like move_to() using a string "x y"."""
        return self.move_to(*self._parse_scalars(coords, 2, "M"))

    def line_to_str(self, coords: str) -> AvPath:
        """Like line_to() using a string "x y"."""
        return self.line_to(*self._parse_scalars(coords, 2, "L"))

    def quadratic_to_str(self, coords: str) -> AvPath:
        """Like quadratic_to() using a string "x1 y1 x y" or "x1,y1,x,y"."""
        return self.quadratic_to(*self._parse_scalars(coords, 4, "Q"))

    def cubic_to_str(self, coords: str) -> AvPath:
        """Like cubic_to() using a string "x1 y1 x2 y2 x y" or "x1,y1,x2,y2,x,y"."""
        return self.cubic_to(*self._parse_scalars(coords, 6, "C"))

    def smooth_quadratic_to_str(self, coords: str) -> AvPath:
        """Like smooth_quadratic_to() using a string "x y"."""
        return self.smooth_quadratic_to(*self._parse_scalars(coords, 2, "T"))

    def smooth_cubic_to_str(self, coords: str) -> AvPath:
        """Like smooth_cubic_to() using a string "x2 y2 x y"."""
        return self.smooth_cubic_to(*self._parse_scalars(coords, 4, "S"))

    def arc_to_str(self, params: str) -> AvPath:
        """Like arc_to() using a string "rx ry x-axis-rotation large-arc-flag sweep-flag x y".

        Raises:
            ValueError: if the string is malformed or a flag is neither 0 nor 1
        """
        rx, ry, rotation, large_arc, sweep, x, y = self._parse_scalars(params, 7, "A")
        if large_arc not in (0, 1) or sweep not in (0, 1):
            raise ValueError(f"Invalid arc flags in A string: '{params}'")
        return self.arc_to(rx, ry, rotation, int(large_arc), int(sweep), x, y)

    ###########################################################################
    # Shapes
    ###########################################################################

    def rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        rx: Optional[float] = None,
        ry: Optional[float] = None,
        corners: Optional[Dict[CornerSide, AvCorner]] = None,
    ) -> AvPath:
        """
        Append a rectangular subpath, equivalent to an SVG <rect>.

        Each corner may be styled individually by _corners_ (keys "tl", "tr", "br", "bl").
        Corners without an individual style use the global radii _rx_/_ry_;
        if both are 0 they are sharp. _ry_ defaults to _rx_, and the global radii
        are clamped to half the width/height as for SVG <rect>.

        Args:
            x: left edge
            y: top edge
            width: width of the rectangle
            height: height of the rectangle
            rx: global horizontal corner radius. Defaults to 0.
            ry: global vertical corner radius. Defaults to _rx_.
            corners: individual corner styles overriding the global radii
        """
        rx = 0.0 if rx is None else rx
        ry = rx if ry is None else ry
        rx = min(rx, width / 2)
        ry = min(ry, height / 2)
        corners = corners or {}

        def resolve(side: CornerSide) -> AvCorner:
            if side in corners:
                return corners[side]
            if rx == 0 and ry == 0:
                return AvCorner.sharp()
            return AvCorner.rounded(rx, ry)

        top_left = resolve("tl")

        if top_left.kind is CornerKind.SHARP:
            self.move_to(x, y)
        else:
            self.move_to(x + top_left.rx, y)

        self.corner("tr", x + width, y, resolve("tr"))
        self.corner("br", x + width, y + height, resolve("br"))
        self.corner("bl", x, y + height, resolve("bl"))
        self.corner("tl", x, y, top_left)

        return self.close()

    def corner(self, side: CornerSide, x: float, y: float, corner: AvCorner) -> AvPath:
        """
        Append the drawing of one rectangle corner located at (x, y).

        A rounded corner is a line to the inset point followed by a quadratic curve
        around (x, y), a chamfered corner is a line to the inset point followed by a
        diagonal line, and a sharp corner is a line to (x, y).
        The rectangle is drawn clockwise: tl -> tr -> br -> bl.

        Args:
            side: which corner is drawn ("tl", "tr", "br", "bl")
            x: x of the corner
            y: y of the corner
            corner: style of the corner
        """
        if corner.kind is CornerKind.SHARP:
            return self.line_to(x, y)

        # (inset point before the corner, point after the corner) for each side
        if side == "tr":
            before, after = (x - corner.rx, y), (x, y + corner.ry)
        elif side == "br":
            before, after = (x, y - corner.ry), (x - corner.rx, y)
        elif side == "bl":
            before, after = (x + corner.rx, y), (x, y - corner.ry)
        elif side == "tl":
            before, after = (x, y + corner.ry), (x + corner.rx, y)
        else:
            raise ValueError(f"Unknown corner side '{side}'")

        self.line_to(*before)
        if corner.kind is CornerKind.ROUNDED:
            return self.quadratic_to(x, y, *after)
        return self.line_to(*after)

    def rounded_corner(self, side: CornerSide, x: float, y: float, rx: float, ry: float) -> AvPath:
        """Append a corner rounded by a quadratic curve, see corner()."""
        return self.corner(side, x, y, AvCorner.rounded(rx, ry))

    def chamfer_corner(self, side: CornerSide, x: float, y: float, rx: float, ry: float) -> AvPath:
        """Append a corner cut by a diagonal line, see corner()."""
        return self.corner(side, x, y, AvCorner.chamfer(rx, ry))

    def ellipse(self, cx: float, cy: float, rx: float, ry: float) -> AvPath:
        """
        Append an elliptical subpath, equivalent to an SVG <ellipse>.

        The ellipse is approximated by four cubic Bezier curves starting at the
        leftmost point (kappa = 4 * (sqrt(2) - 1) / 3).
        """
        ox = rx * ELLIPSE_KAPPA
        oy = ry * ELLIPSE_KAPPA

        left = cx - rx
        right = cx + rx
        top = cy - ry
        bottom = cy + ry

        self.move_to(left, cy)
        self.cubic_to(left, cy - oy, cx - ox, top, cx, top)
        self.cubic_to(cx + ox, top, right, cy - oy, right, cy)
        self.cubic_to(right, cy + oy, cx + ox, bottom, cx, bottom)
        self.cubic_to(cx - ox, bottom, left, cy + oy, left, cy)
        return self.close()

    def circle(self, cx: float, cy: float, r: float) -> AvPath:
        """Append a circular subpath, equivalent to an SVG <circle>."""
        return self.ellipse(cx, cy, r, r)

    ###########################################################################
    # Queries
    ###########################################################################

    def bounding_box(self) -> AvBox:
        """
        Returns the bounding box of all coordinates including curve control points.
        An empty path has the box (0, 0, 0, 0).
        """
        return PathCommandProcessor.bounding_box(self._commands)

    def center_point(self) -> AvPoint:
        """The midpoint of the bounding box."""
        return self.bounding_box().centroid

    def canvas_bounds(self) -> AvBox:
        """The design space as box from (0, 0) to (width, height)."""
        return AvBox(0.0, 0.0, self._width, self._height)

    def canvas_center(self) -> AvPoint:
        """The midpoint of the design space."""
        return AvPoint(self._width / 2, self._height / 2)

    def current_point(self) -> AvPoint:
        """The current pen position, (0, 0) for an empty path."""
        return PathCommandProcessor.current_point(self._commands)

    ###########################################################################
    # Transformations
    ###########################################################################

    def map_coords(self, fn: CoordinateMapping) -> AvPath:
        """Replace every coordinate (x, y) by fn(x, y), control points included."""
        self._commands = PathCommandProcessor.map_commands(self._commands, fn)
        return self

    def translate(self, dx: float, dy: float) -> AvPath:
        """Move the path by (dx, dy)."""
        return self.map_coords(GeomMath.translation(dx, dy))

    def scale(
        self,
        sx: float,
        sy: Optional[float] = None,
        cx: Optional[float] = None,
        cy: Optional[float] = None,
    ) -> AvPath:
        """
        Scale the path around the pivot (cx, cy).

        Args:
            sx: scale factor in x
            sy: scale factor in y. Defaults to _sx_.
            cx: x of the pivot. Defaults to the center of the current bounding box.
            cy: y of the pivot. Defaults to the center of the current bounding box.
        """
        sy = sx if sy is None else sy
        if cx is None or cy is None:
            center = self.center_point()
            cx = center.x if cx is None else cx
            cy = center.y if cy is None else cy
        return self.map_coords(GeomMath.scaling(sx, sy, cx, cy))

    def rotate(self, angle: float, cx: float = 0.0, cy: float = 0.0) -> AvPath:
        """Rotate the path by _angle_ (radians) around (cx, cy), by default around the origin."""
        return self.map_coords(GeomMath.rotation(angle, cx, cy))

    def rotate_deg(self, angle_deg: float, cx: float = 0.0, cy: float = 0.0) -> AvPath:
        """Rotate the path by _angle_deg_ (degrees) around (cx, cy), by default around the origin."""
        return self.rotate(math.radians(angle_deg), cx, cy)

    def flip_x(self, width: Optional[float] = None) -> AvPath:
        """Mirror horizontally: x becomes (width - x). _width_ defaults to the design width."""
        return self.map_coords(GeomMath.mirror_x(self._width if width is None else width))

    def flip_y(self, height: Optional[float] = None) -> AvPath:
        """Mirror vertically: y becomes (height - y). _height_ defaults to the design height."""
        return self.map_coords(GeomMath.mirror_y(self._height if height is None else height))

    def transform_affine(self, affine_trafo: Sequence[Union[int, float]]) -> AvPath:
        """Transform the path by the affine transformation [a00, a01, a10, a11, b0, b1].

        See GeomMath.transform_point() for the definition.
        """
        return self.map_coords(GeomMath.affine_mapping(affine_trafo))

    def center(
        self,
        xmin: float = 0.0,
        ymin: float = 0.0,
        xmax: Optional[float] = None,
        ymax: Optional[float] = None,
    ) -> AvPath:
        """
        Move the path so that its bounding box is centered in the target box.

        The target box defaults to the design space (0, 0) -> (width, height).
        The box is used as given (xmax < xmin is not corrected).
        """
        xmax = self._width if xmax is None else xmax
        ymax = self._height if ymax is None else ymax
        box = self.bounding_box()

        dx = xmin + ((xmax - xmin) - box.width) / 2 - box.xmin
        dy = ymin + ((ymax - ymin) - box.height) / 2 - box.ymin
        return self.translate(dx, dy)

    def fit(
        self,
        target_width: Optional[float] = None,
        target_height: Optional[float] = None,
        preserve_aspect: bool = True,
    ) -> AvPath:
        """
        Scale the path around its bounding box center to fit into target_width x target_height.

        The path is not moved. A path with a bounding box of zero width or height stays
        unchanged.

        Args:
            target_width: width to fit into. Defaults to the design width.
            target_height: height to fit into. Defaults to the design height.
            preserve_aspect: scale both axes by the smaller factor ("contain"). Defaults to True.
        """
        target_width = self._width if target_width is None else target_width
        target_height = self._height if target_height is None else target_height
        box = self.bounding_box()

        if box.width == 0 or box.height == 0:
            logger.debug("fit skipped, bounding box has zero size: %s", box)
            return self

        sx = target_width / box.width
        sy = target_height / box.height
        if preserve_aspect:
            sx = sy = min(sx, sy)

        return self.scale(sx, sy)

    ###########################################################################
    # Conversion
    ###########################################################################

    def to_path_string(self) -> str:
        """Return the SVG path data of this path, e.g. "M 0 0 L 10 0 Z"."""
        return AvSvgPath.serialize(self._commands)

    @classmethod
    def from_path_string(
        cls, path_string: str, width: float = DEFAULT_DESIGN_SIZE, height: Optional[float] = None
    ) -> AvPath:
        """Create a path from SVG path data. Arcs are converted into cubic curves.

        Raises:
            AvPathParseError: if the path data is malformed
        """
        return cls(width, height, AvSvgPath.parse(path_string))

    def clone(self) -> AvPath:
        """Return a copy with its own command list."""
        return AvPath(self._width, self._height, self._commands)

    @classmethod
    def merge(
        cls, paths: Sequence[AvPath], width: float = DEFAULT_DESIGN_SIZE, height: Optional[float] = None
    ) -> AvPath:
        """Create a new path containing the commands of all _paths_ one after another.

        No coordinates are changed, all paths are expected to share one coordinate space.
        """
        merged = cls(width, height)
        for path in paths:
            merged._commands.extend(path.commands)
        return merged

    @classmethod
    def from_dict(cls, data: dict) -> AvPath:
        """Create an AvPath instance from a dictionary."""
        width = data.get("width", DEFAULT_DESIGN_SIZE)
        return cls.from_path_string(data.get("path", ""), width, data.get("height", width))

    def to_dict(self) -> dict:
        """Convert the AvPath instance to a dictionary."""
        return {
            "width": self._width,
            "height": self._height,
            "path": self.to_path_string(),
        }
