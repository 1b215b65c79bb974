"""Central module for consts and definitions"""

from __future__ import annotations

import math

# Default design space (icon grid) of a path in both directions
DEFAULT_DESIGN_SIZE: float = 24.0

# Control point distance for a quarter ellipse approximated by one cubic Bezier curve:
# 4 * (sqrt(2) - 1) / 3
ELLIPSE_KAPPA: float = 0.5522847498307936

# An arc is split into cubic segments spanning at most this angle (radians)
ARC_MAX_SEGMENT_ANGLE: float = math.pi / 2

# Tolerance for float comparisons in geometric checks
EPSILON: float = 1e-9
