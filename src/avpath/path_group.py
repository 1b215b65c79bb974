"""Group of paths transformed together as one shape."""

from __future__ import annotations

import itertools
import logging
from typing import List, Optional, Sequence

from avpath.geom import AvBox
from avpath.path import AvPath
from avpath.path_support import PathCommandProcessor

logger = logging.getLogger(__name__)


###############################################################################
# AvPathGroup
###############################################################################


class AvPathGroup:
    """
    A collection of AvPath instances which are transformed together as if they
    were a single merged path, without merging their commands.

    The group only references its paths. Every transformation is forwarded to
    each path using the same factors and the same pivot (derived from the
    combined bounding box), so the relative positions of the paths are kept:

        group = AvPathGroup([path1, path2])
        group.scale(2)         # scales around the center of the combined box
        group.fit(200, 200)    # fits the combined box into 200 x 200
    """

    def __init__(self, paths: Sequence[AvPath], width: Optional[float] = None, height: Optional[float] = None):
        """
        Initialize the group.

        Args:
            paths: the member paths (referenced, not copied)
            width: width of the design space of the group. Optional.
            height: height of the design space of the group. Defaults to _width_.
        """
        self._paths: List[AvPath] = list(paths)
        self._width = width
        self._height = width if height is None else height

    @property
    def paths(self) -> List[AvPath]:
        """The member paths."""
        return list(self._paths)

    @property
    def width(self) -> Optional[float]:
        """The width of the design space, None if not declared."""
        return self._width

    @property
    def height(self) -> Optional[float]:
        """The height of the design space, None if not declared."""
        return self._height

    def bounding_box(self) -> AvBox:
        """
        Returns the bounding box of the commands of all paths taken together.

        An axis is only measured over the paths having coordinates on it, so a path
        of H commands only does not pull the y range to 0. Without any commands at
        all the result is the degenerate box (0, 0, 0, 0).
        """
        return PathCommandProcessor.bounding_box(itertools.chain.from_iterable(path.commands for path in self._paths))

    def translate(self, dx: float, dy: float) -> AvPathGroup:
        """Move all paths by (dx, dy)."""
        for path in self._paths:
            path.translate(dx, dy)
        return self

    def scale(
        self,
        sx: float,
        sy: Optional[float] = None,
        cx: Optional[float] = None,
        cy: Optional[float] = None,
    ) -> AvPathGroup:
        """
        Scale all paths by the same factors around one shared pivot.

        Args:
            sx: scale factor in x
            sy: scale factor in y. Defaults to _sx_.
            cx: x of the pivot. Defaults to the center of the combined bounding box.
            cy: y of the pivot. Defaults to the center of the combined bounding box.
        """
        sy = sx if sy is None else sy
        center = self.bounding_box().centroid
        cx = center.x if cx is None else cx
        cy = center.y if cy is None else cy

        for path in self._paths:
            path.scale(sx, sy, cx, cy)
        return self

    def rotate(self, angle: float, cx: float = 0.0, cy: float = 0.0) -> AvPathGroup:
        """Rotate all paths by _angle_ (radians) around (cx, cy), by default around the origin."""
        for path in self._paths:
            path.rotate(angle, cx, cy)
        return self

    def rotate_deg(self, angle_deg: float, cx: float = 0.0, cy: float = 0.0) -> AvPathGroup:
        """Rotate all paths by _angle_deg_ (degrees) around (cx, cy), by default around the origin."""
        for path in self._paths:
            path.rotate_deg(angle_deg, cx, cy)
        return self

    def flip_x(self, width: Optional[float] = None) -> AvPathGroup:
        """
        Mirror all paths horizontally: x becomes (width - x).

        _width_ defaults to the declared group width, else to the width of the
        combined bounding box.
        """
        if width is None:
            width = self._width if self._width is not None else self.bounding_box().width
        for path in self._paths:
            path.flip_x(width)
        return self

    def flip_y(self, height: Optional[float] = None) -> AvPathGroup:
        """
        Mirror all paths vertically: y becomes (height - y).

        _height_ defaults to the declared group height, else to the height of the
        combined bounding box.
        """
        if height is None:
            height = self._height if self._height is not None else self.bounding_box().height
        for path in self._paths:
            path.flip_y(height)
        return self

    def center(
        self,
        xmin: float = 0.0,
        ymin: float = 0.0,
        xmax: Optional[float] = None,
        ymax: Optional[float] = None,
    ) -> AvPathGroup:
        """
        Move all paths so that the combined bounding box is centered in the target box.

        _xmax_/_ymax_ default to the declared design size of the group, else to the
        maximum of the combined bounding box.
        """
        box = self.bounding_box()
        if xmax is None:
            xmax = self._width if self._width is not None else box.xmax
        if ymax is None:
            ymax = self._height if self._height is not None else box.ymax

        dx = xmin + ((xmax - xmin) - box.width) / 2 - box.xmin
        dy = ymin + ((ymax - ymin) - box.height) / 2 - box.ymin
        return self.translate(dx, dy)

    def fit(
        self,
        target_width: Optional[float] = None,
        target_height: Optional[float] = None,
        preserve_aspect: bool = True,
    ) -> AvPathGroup:
        """
        Scale all paths together so that the combined bounding box fits into
        target_width x target_height. The pivot is the center of the combined box.

        Args:
            target_width: width to fit into. Defaults to the declared group width.
            target_height: height to fit into. Defaults to the declared group height.
            preserve_aspect: scale both axes by the smaller factor. Defaults to True.

        Raises:
            ValueError: if no target size is given and the group has no declared size
        """
        target_width = self._width if target_width is None else target_width
        target_height = self._height if target_height is None else target_height
        if target_width is None or target_height is None:
            raise ValueError("fit needs a target size or a group with declared width/height")

        box = self.bounding_box()
        if box.width == 0 or box.height == 0:
            logger.debug("fit skipped, combined bounding box has zero size: %s", box)
            return self

        sx = target_width / box.width
        sy = target_height / box.height
        if preserve_aspect:
            sx = sy = min(sx, sy)

        return self.scale(sx, sy)
