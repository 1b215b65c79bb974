"""Handling geometries: bounding boxes and coordinate mappings"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple, Union

from avpath.common import AvPoint

# A mapping of one (x, y) coordinate pair onto another
CoordinateMapping = Callable[[float, float], Tuple[float, float]]


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def transform_point(
        affine_trafo: Sequence[Union[int, float]], point: Sequence[Union[int, float]]
    ) -> Tuple[float, float]:
        """
        Perform an affine transformation on the given 2D point.

        The given _affine_trafo_ is a list of 6 floats, performing an affine transformation.
        The transformation is defined as:
            | x' | = | a00 a01 b0 |   | x |
            | y' | = | a10 a11 b1 | * | y |
            | 1  | = |  0   0  1  |   | 1 |
        with
            affine_trafo = [a00, a01, a10, a11, b0, b1]

        Args:
            affine_trafo (Tuple/List[float]): Affine transformation - [a00, a01, a10, a11, b0, b1]
            point (Tuple/List[float]): 2D point - (x, y)

        Returns:
            Tuple[float, float]: the transformed point
        """
        x_new = float(affine_trafo[0] * point[0] + affine_trafo[1] * point[1] + affine_trafo[4])
        y_new = float(affine_trafo[2] * point[0] + affine_trafo[3] * point[1] + affine_trafo[5])
        return (x_new, y_new)

    @staticmethod
    def affine_mapping(affine_trafo: Sequence[Union[int, float]]) -> CoordinateMapping:
        """Return a coordinate mapping performing the given affine transformation."""
        if len(affine_trafo) != 6:
            raise ValueError(f"Affine transformation needs 6 values, got {len(affine_trafo)}")
        return lambda x, y: GeomMath.transform_point(affine_trafo, (x, y))

    @staticmethod
    def translation(dx: float, dy: float) -> CoordinateMapping:
        """Return a coordinate mapping shifting each point by (dx, dy)."""
        return lambda x, y: (x + dx, y + dy)

    @staticmethod
    def scaling(sx: float, sy: float, cx: float, cy: float) -> CoordinateMapping:
        """Return a coordinate mapping scaling by (sx, sy) around the pivot (cx, cy)."""

        def scale(x: float, y: float) -> Tuple[float, float]:
            return ((x - cx) * sx + cx, (y - cy) * sy + cy)

        return scale

    @staticmethod
    def rotation(angle: float, cx: float = 0.0, cy: float = 0.0) -> CoordinateMapping:
        """Return a coordinate mapping rotating by _angle_ (radians) around the pivot (cx, cy)."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)

        def rotate(x: float, y: float) -> Tuple[float, float]:
            # move pivot to origin, rotate, move back
            dx = x - cx
            dy = y - cy
            return (dx * cos_a - dy * sin_a + cx, dx * sin_a + dy * cos_a + cy)

        return rotate

    @staticmethod
    def mirror_x(width: float) -> CoordinateMapping:
        """Return a coordinate mapping mirroring x within a design space of the given _width_."""
        return lambda x, y: (width - x, y)

    @staticmethod
    def mirror_y(height: float) -> CoordinateMapping:
        """Return a coordinate mapping mirroring y within a design space of the given _height_."""
        return lambda x, y: (x, height - y)


###############################################################################
# AvBox
###############################################################################
@dataclass
class AvBox:
    """
    Represents a rectangular box with coordinates and dimensions.

    Attributes:
        xmin (float): The minimum x-coordinate.
        ymin (float): The minimum y-coordinate.
        xmax (float): The maximum x-coordinate.
        ymax (float): The maximum y-coordinate.
    """

    _xmin: float
    _ymin: float
    _xmax: float
    _ymax: float

    def __init__(self, xmin: float, ymin: float, xmax: float, ymax: float):
        """Initialize AvBox with coordinates.

        Args:
            xmin: The minimum x-coordinate
            ymin: The minimum y-coordinate
            xmax: The maximum x-coordinate
            ymax: The maximum y-coordinate
        """
        self._xmin = float(xmin)
        self._ymin = float(ymin)
        self._xmax = float(xmax)
        self._ymax = float(ymax)

        # Normalize coordinates to ensure xmin <= xmax and ymin <= ymax
        if self._xmin > self._xmax:
            self._xmin, self._xmax = self._xmax, self._xmin
        if self._ymin > self._ymax:
            self._ymin, self._ymax = self._ymax, self._ymin

    @classmethod
    def empty(cls) -> AvBox:
        """The degenerate zero box, used for empty command sequences."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @property
    def xmin(self) -> float:
        """float: The minimum x-coordinate."""
        return self._xmin

    @property
    def ymin(self) -> float:
        """float: The minimum y-coordinate."""
        return self._ymin

    @property
    def xmax(self) -> float:
        """float: The maximum x-coordinate."""
        return self._xmax

    @property
    def ymax(self) -> float:
        """float: The maximum y-coordinate."""
        return self._ymax

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the box as Tuple (xmin, ymin, xmax, ymax)."""
        return self._xmin, self._ymin, self._xmax, self._ymax

    @property
    def width(self) -> float:
        """float: The width of the box (difference between xmax and xmin)."""

        return self._xmax - self._xmin

    @property
    def height(self) -> float:
        """float: The height of the box (difference between ymax and ymin)."""

        return self._ymax - self._ymin

    @property
    def centroid(self) -> AvPoint:
        """
        The centroid of the box.

        Returns:
            AvPoint: The coordinates of the centroid as (x, y)
        """
        return AvPoint((self._xmin + self._xmax) / 2, (self._ymin + self._ymax) / 2)

    def __str__(self):
        """Returns a string representation of the AvBox instance."""
        return (
            f"AvBox(xmin={self.xmin}, ymin={self.ymin}, "
            f"xmax={self.xmax}, ymax={self.ymax}, "
            f"width={self.width}, height={self.height})"
        )
