"""Conversion of SVG elliptical arcs into cubic Bezier curves."""

from __future__ import annotations

import math
from typing import List, Tuple

from avpath.commands import CubicTo
from avpath.consts import ARC_MAX_SEGMENT_ANGLE


###############################################################################
# AvArc
###############################################################################
class AvArc:
    """Static methods to approximate elliptical arcs by cubic Bezier curves.

    Implements the endpoint to center parameterization of the SVG implementation notes
    (https://www.w3.org/TR/SVG/implnote.html#ArcImplementationNotes).
    """

    @staticmethod
    def arc_to_cubics(
        x0: float,
        y0: float,
        rx: float,
        ry: float,
        x_axis_rotation: float,
        large_arc_flag: int,
        sweep_flag: int,
        x: float,
        y: float,
    ) -> List[CubicTo]:
        """Convert the elliptical arc from (x0, y0) to (x, y) into cubic Bezier curves.

        The arc is split into the minimum number of equal segments spanning at most 90 degrees
        each. Every segment becomes one cubic curve with control points placed on the tangents
        at distance alpha = 4/3 * tan(delta / 4).

        Degenerate cases:
            - identical start and end point: no curve at all (empty list)
            - a radius of zero: one straight cubic with control points on the end points
            - end points closer than float precision can resolve: the same straight cubic

        The last curve ends exactly at (x, y).

        Args:
            x0 (float): x of the start point (current point)
            y0 (float): y of the start point (current point)
            rx (float): x radius of the ellipse
            ry (float): y radius of the ellipse
            x_axis_rotation (float): rotation of the ellipse's x-axis in degrees
            large_arc_flag (int): 0 = smaller arc, 1 = larger arc
            sweep_flag (int): 0 = counter-clockwise (negative angle), 1 = clockwise (positive angle)
            x (float): x of the end point
            y (float): y of the end point

        Returns:
            List[CubicTo]: the cubic curves in drawing order
        """
        if x0 == x and y0 == y:
            return []

        if rx == 0 or ry == 0:
            return [CubicTo(x0, y0, x, y, x, y)]

        phi = math.radians(x_axis_rotation)
        cos_phi = math.cos(phi)
        sin_phi = math.sin(phi)

        # Step 1: start point in ellipse space (midpoint of the chord moved to the origin)
        dx2 = (x0 - x) / 2
        dy2 = (y0 - y) / 2
        x1p = cos_phi * dx2 + sin_phi * dy2
        y1p = -sin_phi * dx2 + cos_phi * dy2

        # Correct out-of-range radii
        rx = abs(rx)
        ry = abs(ry)
        lambda_sq = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
        if lambda_sq > 1:
            radius_scale = math.sqrt(lambda_sq)
            rx *= radius_scale
            ry *= radius_scale

        # Step 2: center in ellipse space
        rx_sq = rx * rx
        ry_sq = ry * ry
        x1p_sq = x1p * x1p
        y1p_sq = y1p * y1p

        radicand = rx_sq * ry_sq - rx_sq * y1p_sq - ry_sq * x1p_sq
        radicand = max(radicand, 0.0)  # rounding errors
        denominator = rx_sq * y1p_sq + ry_sq * x1p_sq
        if denominator == 0:
            # half distance of the end points underflows: the arc is its chord
            return [CubicTo(x0, y0, x, y, x, y)]
        radicand /= denominator
        coef = math.sqrt(radicand) * (-1 if large_arc_flag == sweep_flag else 1)

        cxp = coef * rx * y1p / ry
        cyp = coef * -ry * x1p / rx

        # Step 3: center in user space
        cx = cos_phi * cxp - sin_phi * cyp + (x0 + x) / 2
        cy = sin_phi * cxp + cos_phi * cyp + (y0 + y) / 2

        # Step 4: start angle and angular span
        v1x = (x1p - cxp) / rx
        v1y = (y1p - cyp) / ry
        v2x = (-x1p - cxp) / rx
        v2y = (-y1p - cyp) / ry

        theta1 = AvArc._vector_angle(1.0, 0.0, v1x, v1y)
        delta_theta = AvArc._vector_angle(v1x, v1y, v2x, v2y)

        if not sweep_flag and delta_theta > 0:
            delta_theta -= 2 * math.pi
        elif sweep_flag and delta_theta < 0:
            delta_theta += 2 * math.pi

        num_segments = max(math.ceil(abs(delta_theta) / ARC_MAX_SEGMENT_ANGLE), 1)
        segment_theta = delta_theta / num_segments

        cubics: List[CubicTo] = []
        for index in range(num_segments):
            theta2 = theta1 + segment_theta
            p1x, p1y, d1x, d1y = AvArc._ellipse_point(cx, cy, rx, ry, cos_phi, sin_phi, theta1)
            p2x, p2y, d2x, d2y = AvArc._ellipse_point(cx, cy, rx, ry, cos_phi, sin_phi, theta2)
            end_x, end_y = (x, y) if index == num_segments - 1 else (p2x, p2y)

            alpha = 4 / 3 * math.tan((theta2 - theta1) / 4)
            cubics.append(
                CubicTo(
                    p1x + alpha * d1x,
                    p1y + alpha * d1y,
                    p2x - alpha * d2x,
                    p2y - alpha * d2y,
                    end_x,
                    end_y,
                )
            )
            theta1 = theta2

        return cubics

    @staticmethod
    def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
        """Signed angle between the unit vectors u and v (sign taken from the cross product)."""
        sign = -1.0 if ux * vy - uy * vx < 0 else 1.0
        dot = min(max(ux * vx + uy * vy, -1.0), 1.0)
        return sign * math.acos(dot)

    @staticmethod
    def _ellipse_point(
        cx: float, cy: float, rx: float, ry: float, cos_phi: float, sin_phi: float, theta: float
    ) -> Tuple[float, float, float, float]:
        """Point and derivative of the rotated ellipse at parameter angle _theta_.

        Returns:
            Tuple[float, float, float, float]: (px, py, dx, dy)
        """
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        px = cx + rx * cos_phi * cos_t - ry * sin_phi * sin_t
        py = cy + rx * sin_phi * cos_t + ry * cos_phi * sin_t
        dx = -rx * cos_phi * sin_t - ry * sin_phi * cos_t
        dy = -rx * sin_phi * sin_t + ry * cos_phi * cos_t
        return px, py, dx, dy
