"""Tests for PathCommandProcessor: pen position, coordinate mapping and bounds."""

import pytest

from avpath.commands import (
    ClosePath,
    CubicTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    QuadraticTo,
    SmoothCubicTo,
    SmoothQuadraticTo,
    VerticalLineTo,
)
from avpath.geom import AvBox, GeomMath
from avpath.path_support import COMMAND_INFO, PathCommandProcessor


class TestPathCommandInfoRegistry:
    """Tests for COMMAND_INFO registry."""

    def test_all_commands_registered(self):
        """All stored command kinds are in the registry, arcs are not."""
        assert set(COMMAND_INFO.keys()) == set("MLHVQCTSZ")

    def test_value_consumption(self):
        """Verify the number of path-data values for each command."""
        consumption = {cmd: PathCommandProcessor.get_value_consumption(cmd) for cmd in COMMAND_INFO}
        assert consumption == {"M": 2, "L": 2, "H": 1, "V": 1, "Q": 4, "C": 6, "T": 2, "S": 4, "Z": 0}

    def test_create_command(self):
        """create_command builds the command class of the letter."""
        assert PathCommandProcessor.create_command("Q", [1, 2, 3, 4]) == QuadraticTo(1, 2, 3, 4)
        assert PathCommandProcessor.create_command("Z", []) == ClosePath()

    def test_create_command_wrong_count(self):
        """A wrong number of values is rejected."""
        with pytest.raises(ValueError):
            PathCommandProcessor.create_command("L", [1])


class TestCurrentPoint:
    """Tests for replaying the pen position."""

    def test_empty_is_origin(self):
        """No commands: the pen is at the origin."""
        assert PathCommandProcessor.current_point([]) == (0.0, 0.0)

    def test_horizontal_and_vertical_update_one_axis(self):
        """H only changes x, V only changes y."""
        commands = [MoveTo(1, 2), LineTo(3, 4), HorizontalLineTo(7)]
        assert PathCommandProcessor.current_point(commands) == (7, 4)
        commands.append(VerticalLineTo(9))
        assert PathCommandProcessor.current_point(commands) == (7, 9)

    def test_close_returns_to_subpath_start(self):
        """Z moves the pen back to the last M."""
        commands = [MoveTo(1, 2), LineTo(5, 5), ClosePath()]
        assert PathCommandProcessor.current_point(commands) == (1, 2)

        commands += [MoveTo(10, 10), CubicTo(11, 11, 12, 12, 20, 20), ClosePath()]
        assert PathCommandProcessor.current_point(commands) == (10, 10)

    def test_curves_end_at_their_end_point(self):
        """Curves move the pen to their end point, not to a control point."""
        for cmd in (QuadraticTo(9, 9, 1, 2), SmoothQuadraticTo(1, 2), SmoothCubicTo(9, 9, 1, 2)):
            assert PathCommandProcessor.current_point([MoveTo(0, 0), cmd]) == (1, 2)

    def test_unknown_command(self):
        """Unknown objects in the sequence are rejected."""
        with pytest.raises(TypeError):
            PathCommandProcessor.current_point([MoveTo(0, 0), "L 1 1"])


class TestMapCommands:
    """Tests for applying a coordinate mapping to commands."""

    def test_control_points_are_mapped(self):
        """All points of a curve use the same mapping."""
        shift = GeomMath.translation(1, 10)
        result = PathCommandProcessor.map_commands(
            [MoveTo(0, 0), QuadraticTo(1, 1, 2, 2), CubicTo(1, 2, 3, 4, 5, 6), SmoothCubicTo(1, 2, 3, 4)], shift
        )
        assert result == [
            MoveTo(1, 10),
            QuadraticTo(2, 11, 3, 12),
            CubicTo(2, 12, 4, 14, 6, 16),
            SmoothCubicTo(2, 12, 4, 14),
        ]

    def test_horizontal_line_uses_x_only(self):
        """H x is mapped as the point (x, 0)."""
        result = PathCommandProcessor.map_command(HorizontalLineTo(4), GeomMath.mirror_x(24))
        assert result == HorizontalLineTo(20)

        # a translation in y has no effect on H
        result = PathCommandProcessor.map_command(HorizontalLineTo(4), GeomMath.translation(1, 100))
        assert result == HorizontalLineTo(5)

    def test_vertical_line_uses_y_only(self):
        """V y is mapped as the point (0, y)."""
        result = PathCommandProcessor.map_command(VerticalLineTo(4), GeomMath.translation(100, 1))
        assert result == VerticalLineTo(5)

    def test_close_is_unchanged(self):
        """Z carries no coordinates."""
        close = ClosePath()
        assert PathCommandProcessor.map_command(close, GeomMath.translation(3, 3)) is close

    def test_unknown_command(self):
        """Unknown objects are rejected."""
        with pytest.raises(TypeError):
            PathCommandProcessor.map_command(object(), GeomMath.translation(0, 0))


class TestBoundingBox:
    """Tests for the bounds of a command sequence."""

    def test_empty(self):
        """No commands: the degenerate box at the origin."""
        assert PathCommandProcessor.bounding_box([]).extent == (0.0, 0.0, 0.0, 0.0)

    def test_only_close(self):
        """Z alone contributes no coordinates."""
        assert PathCommandProcessor.bounding_box([ClosePath()]) == AvBox(0, 0, 0, 0)

    def test_control_points_included(self):
        """Control points are part of the box even if the curve does not reach them."""
        box = PathCommandProcessor.bounding_box([MoveTo(0, 0), QuadraticTo(5, -5, 10, 0)])
        assert box.extent == (0, -5, 10, 0)

    def test_horizontal_only_collapses_y(self):
        """An axis without any coordinate collapses to 0."""
        box = PathCommandProcessor.bounding_box([HorizontalLineTo(3), HorizontalLineTo(-1)])
        assert box.extent == (-1, 0, 3, 0)

    def test_horizontal_and_vertical(self):
        """H contributes x values and V contributes y values."""
        box = PathCommandProcessor.bounding_box([MoveTo(2, 2), HorizontalLineTo(8), VerticalLineTo(-4), ClosePath()])
        assert box.extent == (2, -4, 8, 2)
