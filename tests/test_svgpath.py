"""Test module for avpath.svgpath

The tests are run using pytest.
They cover parsing, serializing and beautifying SVG path data.
"""

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
from avpath.consts import EPSILON
from avpath.svgpath import AvPathParseError, AvSvgPath

###############################################################################
# Parsing
###############################################################################


class TestParse:
    """Tests for AvSvgPath.parse"""

    def test_all_commands(self):
        """Each supported letter results in its command."""
        result = AvSvgPath.parse("M0 0 L1 2 H5 V6 Q1 1 2 0 C1 2 3 4 5 6 T4 0 S5 1 6 0 Z")

        assert result == [
            MoveTo(0, 0),
            LineTo(1, 2),
            HorizontalLineTo(5),
            VerticalLineTo(6),
            QuadraticTo(1, 1, 2, 0),
            CubicTo(1, 2, 3, 4, 5, 6),
            SmoothQuadraticTo(4, 0),
            SmoothCubicTo(5, 1, 6, 0),
            ClosePath(),
        ]

    def test_empty_and_blank(self):
        """Empty path data results in no commands."""
        assert AvSvgPath.parse("") == []
        assert AvSvgPath.parse("  \n\t ") == []

    def test_commas_and_whitespace(self):
        """Commas and any whitespace separate numbers."""
        assert AvSvgPath.parse("M 1,2\nL\t3 , 4") == [MoveTo(1, 2), LineTo(3, 4)]

    def test_implicit_repetition(self):
        """Several argument groups repeat the command."""
        result = AvSvgPath.parse("C1,2,3,4,5,6 7 8 9 10 11 12")

        assert result == [CubicTo(1, 2, 3, 4, 5, 6), CubicTo(7, 8, 9, 10, 11, 12)]

    def test_pairs_after_move_are_lines(self):
        """Additional pairs after M are line-to commands."""
        result = AvSvgPath.parse("M0 0 10 0 10 10Z")

        assert result == [MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10), ClosePath()]

    def test_minified_numbers(self):
        """A sign or a second decimal point starts a new number."""
        result = AvSvgPath.parse("M1-2.5L.5.5.25-1e1")

        assert result == [MoveTo(1, -2.5), LineTo(0.5, 0.5), LineTo(0.25, -10)]

    def test_exponents(self):
        """Numbers may have an exponent."""
        assert AvSvgPath.parse("M1e2 -2.5E-1") == [MoveTo(100, -0.25)]

    def test_arc_is_converted(self):
        """An arc becomes cubic curves, radii are enlarged to reach the end point."""
        result = AvSvgPath.parse("M5.1 0.21A2 2.5 0 0123.54 74")

        assert result[0] == MoveTo(5.1, 0.21)
        assert len(result) == 3
        assert all(isinstance(cmd, CubicTo) for cmd in result[1:])
        assert (result[-1].x, result[-1].y) == pytest.approx((23.54, 74))

    def test_arc_flags_run_together(self):
        """Each arc flag is a single digit, separators are optional."""
        compact = AvSvgPath.parse("M0 0A5 5 0 1110 0")
        spaced = AvSvgPath.parse("M0,0 A5,5,0,1,1,10,0")

        assert compact == spaced
        assert (compact[-1].x, compact[-1].y) == pytest.approx((10, 0), abs=EPSILON)

    def test_arc_repetition(self):
        """Repeated arc groups continue from the end of the previous arc."""
        result = AvSvgPath.parse("M0 0A5 5 0 0 1 10 0 5 5 0 0 1 20 0")

        ends = [(cmd.x, cmd.y) for cmd in result if isinstance(cmd, CubicTo)]
        assert ends[-1] == pytest.approx((20, 0), abs=EPSILON)
        assert any(abs(x - 10) < 1e-9 and abs(y) < 1e-9 for x, y in ends)

    def test_arc_to_start_point_is_dropped(self):
        """An arc ending at the current point draws nothing."""
        assert AvSvgPath.parse("M10 10A5 5 0 0 1 10 10") == [MoveTo(10, 10)]

    def test_arc_after_close_starts_at_subpath_start(self):
        """After Z the arc starts at the last M."""
        result = AvSvgPath.parse("M0 0L10 0ZA5 5 0 0 1 10 0")

        assert result[:3] == [MoveTo(0, 0), LineTo(10, 0), ClosePath()]
        # half circle from (0, 0) to (10, 0): the radius fits exactly
        assert len(result) == 5

    def test_arc_uses_preceding_commands(self):
        """The start point of a leading arc comes from the preceding commands."""
        result = AvSvgPath.parse("A10 10 0 0 1 0 10", preceding=[MoveTo(10, 0)])

        assert len(result) == 1
        assert (result[0].x1, result[0].y1) == pytest.approx((10, 5.522847498307936))

    def test_arc_without_preceding_starts_at_origin(self):
        """Without any preceding command an arc starts at (0, 0)."""
        result = AvSvgPath.parse("A5 5 0 0 1 10 0")

        assert len(result) == 2
        assert result[0].x1 == pytest.approx(0)


class TestParseErrors:
    """Tests for malformed path data."""

    @pytest.mark.parametrize(
        "path_string",
        [
            "M 10",
            "L 1 2 3",
            "M 1 x",
            "m 1 2",
            "M0 0 l 5 5",
            "10 20",
            "M0 0A5 5 0 2 1 10 0",
            "M0 0A5 5 0 0 1 10",
            "Z 1",
            "Q 1 2 3",
        ],
    )
    def test_malformed(self, path_string):
        """Malformed path data raises AvPathParseError, which is a ValueError."""
        with pytest.raises(AvPathParseError):
            AvSvgPath.parse(path_string)
        with pytest.raises(ValueError):
            AvSvgPath.parse(path_string)

    def test_error_names_command_and_raw_text(self):
        """The error carries the command letter and its raw text."""
        with pytest.raises(AvPathParseError) as excinfo:
            AvSvgPath.parse("M0 0 L 1 Z")

        assert excinfo.value.command == "L"
        assert excinfo.value.raw == "L 1"
        assert "L 1" in str(excinfo.value)

    def test_unsupported_relative_command(self):
        """Lower-case commands are reported by their letter."""
        with pytest.raises(AvPathParseError) as excinfo:
            AvSvgPath.parse("M0 0 c1 1 2 2 3 3")

        assert excinfo.value.command == "c"
        assert "unsupported" in str(excinfo.value)


###############################################################################
# Serializing
###############################################################################


class TestSerialize:
    """Tests for AvSvgPath.serialize and AvSvgPath.beautify_commands"""

    def test_serialize(self):
        """Commands are joined by spaces, integral numbers have no fraction."""
        result = AvSvgPath.serialize([MoveTo(0, 0), LineTo(2.5, 3), HorizontalLineTo(-1), ClosePath()])

        assert result == "M 0 0 L 2.5 3 H -1 Z"

    def test_serialize_empty(self):
        """No commands result in empty path data."""
        assert AvSvgPath.serialize([]) == ""

    def test_round_trip(self):
        """Parsing serialized commands gives back identical commands."""
        commands = [
            MoveTo(0.1, -2.5),
            LineTo(1e-7, 3),
            HorizontalLineTo(1 / 3),
            VerticalLineTo(-1e21),
            QuadraticTo(1, 2, 3, 4),
            CubicTo(0.5, 0.25, -0.125, 7, 8, 9),
            SmoothQuadraticTo(2, 2),
            SmoothCubicTo(1, 1, 2, 2),
            ClosePath(),
            MoveTo(5, 5),
        ]

        assert AvSvgPath.parse(AvSvgPath.serialize(commands)) == commands

    def test_beautify_normalizes(self):
        """Without a rounding function the path data is only normalized."""
        assert AvSvgPath.beautify_commands("M1,2L3.50,4.0Z") == "M 1 2 L 3.5 4 Z"

    def test_beautify_rounds(self):
        """Each coordinate is passed through the rounding function."""
        result = AvSvgPath.beautify_commands("M1.234 2.345L3.456,4.567", round)

        assert result == "M 1 2 L 3 5"

    def test_beautify_one_decimal(self):
        """Rounding to one decimal."""
        result = AvSvgPath.beautify_commands("M1.234 2.345 H 7.77", lambda v: round(v, 1))

        assert result == "M 1.2 2.3 H 7.8"
