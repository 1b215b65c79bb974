"""SVG document output for paths."""

from __future__ import annotations

import gzip
import io
from typing import Any

import svgwrite
import svgwrite.container
import svgwrite.path
from svgwrite.extensions import Inkscape

from avpath.path import AvPath


class AvSvgPage:
    """A SVG document with a viewbox (0, 0) -> (width, height) to draw paths into.

    The paths are added to an Inkscape layer named "main".
    The coordinate system is the one of SVG: left-to-right and top-to-bottom.
    """

    drawing: svgwrite.Drawing
    main_layer: svgwrite.container.Group

    def __init__(self, width: float, height: float, unit: str = ""):
        """
        Initialize the SVG page.

        Args:
            width (float): width of the viewbox (and of the document in _unit_)
            height (float): height of the viewbox (and of the document in _unit_)
            unit (str, optional): unit of the document size, e.g. "mm". Defaults to user units.
        """
        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(
            size=(f"{width}{unit}", f"{height}{unit}"),
            viewBox=f"0 0 {width} {height}",
            profile="full",
        )
        self._inkscape = Inkscape(self.drawing)
        self.main_layer = self._inkscape.layer(label="main", locked=False)
        self.drawing.add(self.main_layer)

    @classmethod
    def from_path(cls, path: AvPath, **attribs: Any) -> AvSvgPage:
        """Create a page of the design size of _path_ containing _path_."""
        page = cls(path.width, path.height)
        page.add_path(path, **attribs)
        return page

    def add_path(self, path: AvPath, **attribs: Any) -> svgwrite.path.Path:
        """Add _path_ as <path> element to the main layer.

        Args:
            path (AvPath): the path to draw
            **attribs: further SVG attributes, e.g. fill="none", stroke="black"

        Returns:
            svgwrite.path.Path: the added element
        """
        return self.main_layer.add(self.drawing.path(d=path.to_path_string(), **attribs))

    def tostring(self) -> str:
        """The SVG document as string."""
        return self.drawing.tostring()

    def save_as(
        self,
        filename: str,
        pretty: bool = False,
        indent: int = 2,
        compressed: bool = False,
    ):
        """Save as SVG file

        Args:
            filename (str): path and filename
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
            compressed (bool, optional): Save as compressed svgz-file. Defaults to False.
        """
        svg_buffer = io.StringIO()
        self.drawing.write(svg_buffer, pretty=pretty, indent=indent)
        output_data = svg_buffer.getvalue().encode("utf-8")
        if compressed:
            output_data = gzip.compress(output_data)

        with open(filename, "wb") as svg_file:
            svg_file.write(output_data)
