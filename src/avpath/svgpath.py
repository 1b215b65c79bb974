"""Handling SVG path data: parsing and serializing command sequences"""

from __future__ import annotations

import itertools
import logging
import re
from typing import Callable, ClassVar, Iterable, List, Optional, Tuple

from avpath.arc import AvArc
from avpath.commands import PathCommand
from avpath.path_support import PathCommandProcessor

logger = logging.getLogger(__name__)


class AvPathParseError(ValueError):
    """Malformed SVG path data.

    Attributes:
        command: the command letter whose arguments could not be parsed
        raw: the raw substring of the path data belonging to that command
    """

    def __init__(self, command: str, raw: str, reason: str = ""):
        self.command = command
        self.raw = raw
        message = f"Invalid path data for '{command}' command: '{raw}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class AvSvgPath:
    """
    This class provides a collection of static methods for reading and writing SVG path data.
    Only absolute (uppercase) commands are supported.
    Commands (command : number of values : command-character):
        MoveTo:           2: M
        LineTo:           2: L   1: H(x)   1: V(y)
        CubicBezier:      6: C   4: S
        QuadraticBezier:  4: Q   2: T
        ArcCurve:         7: A   (converted into cubic Bezier curves)
        ClosePath:        0: Z
    """

    # Command letters:
    SVG_CMDS: ClassVar[str] = "MLHVQCTSAZ"
    # Definition of a number (the longest match is taken, a second "." or a sign starts a new number):
    SVG_ARGS: ClassVar[str] = r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
    # Separators between numbers and commands:
    SVG_SEPARATORS: ClassVar[str] = " \t\r\n\f,"

    _NUMBER_RE: ClassVar[re.Pattern] = re.compile(SVG_ARGS)
    _COMMAND_RE: ClassVar[re.Pattern] = re.compile(f"[{SVG_CMDS}]?[^{SVG_CMDS}]*")

    ARC_VALUES: ClassVar[int] = 7
    ARC_FLAG_INDICES: ClassVar[Tuple[int, int]] = (3, 4)

    @staticmethod
    def parse(path_string: str, preceding: Iterable[PathCommand] = ()) -> List[PathCommand]:
        """Parse SVG path data into a list of commands.

        Numbers may run together wherever the SVG grammar allows it ("M1-2.5.5" is
        M 1 -2.5 0.5). A command letter followed by several argument groups repeats
        the command for each group; additional pairs after M are line-to commands.
        The two arc flags consist of exactly one digit each ("A2 2 0 0123 74" has the
        flags 0 and 1 followed by x=23). Arcs are converted into cubic curves, so the
        result never contains an arc.

        Args:
            path_string (str): SVG path data using absolute commands
            preceding (Iterable[PathCommand], optional): commands drawn before _path_string_,
                used to determine the start point of an arc. Defaults to no commands.

        Returns:
            List[PathCommand]: the parsed commands

        Raises:
            AvPathParseError: if the path data is malformed. Nothing is returned in this case.
        """
        preceding = list(preceding)
        commands: List[PathCommand] = []
        length = len(path_string)
        last_letter: Optional[str] = None
        pos = AvSvgPath._skip_separators(path_string, 0)

        while pos < length:
            letter = path_string[pos]
            if letter not in AvSvgPath.SVG_CMDS:
                raw = AvSvgPath._raw_command(path_string, pos)
                if letter.isalpha():
                    raise AvPathParseError(letter, raw, "unsupported command")
                raise AvPathParseError(last_letter or "", raw, "expected a command letter")
            cmd_start = pos
            last_letter = letter
            pos = AvSvgPath._skip_separators(path_string, pos + 1)

            if letter == "Z":
                commands.append(PathCommandProcessor.create_command("Z", []))
                continue

            group_letter = letter
            num_groups = 0
            while num_groups == 0 or (pos < length and not path_string[pos].isalpha()):
                values, pos = AvSvgPath._read_values(path_string, pos, letter, cmd_start)
                if group_letter == "A":
                    x0, y0 = PathCommandProcessor.current_point(itertools.chain(preceding, commands))
                    commands.extend(AvArc.arc_to_cubics(x0, y0, *values))
                else:
                    commands.append(PathCommandProcessor.create_command(group_letter, values))
                if group_letter == "M":
                    group_letter = "L"  # implicit line-to after move-to
                num_groups += 1
                pos = AvSvgPath._skip_separators(path_string, pos)

        logger.debug("parsed %d commands from %d characters of path data", len(commands), length)
        return commands

    @staticmethod
    def serialize(commands: Iterable[PathCommand]) -> str:
        """Serialize _commands_ to SVG path data, e.g. "M 0 0 L 3 4 Z"."""
        return " ".join(cmd.to_svg() for cmd in commands)

    @staticmethod
    def beautify_commands(path_string: str, round_func: Optional[Callable[[float], float]] = None) -> str:
        """
        Takes the given _path_string_ and rounds (mathematical) each coordinate of the path
            by using the given _round_func_.
            If _round_func_ is None the path data is just normalized.

        Args:
            path_string (str): a SVG path string
            round_func (Optional[Callable], optional):
                a function that takes a float and returns a float. Defaults to None.

        Returns:
            str: the beautified path_string
        """
        commands = AvSvgPath.parse(path_string)
        if round_func is not None:
            commands = PathCommandProcessor.map_commands(commands, lambda x, y: (round_func(x), round_func(y)))
        return AvSvgPath.serialize(commands)

    @staticmethod
    def _skip_separators(path_string: str, pos: int) -> int:
        """Return the position of the next character which is not a separator."""
        while pos < len(path_string) and path_string[pos] in AvSvgPath.SVG_SEPARATORS:
            pos += 1
        return pos

    @staticmethod
    def _raw_command(path_string: str, pos: int) -> str:
        """Return the raw text of the command starting at _pos_ (up to the next command letter)."""
        match = AvSvgPath._COMMAND_RE.match(path_string, pos)
        return match.group(0).strip() if match else path_string[pos:].strip()

    @staticmethod
    def _read_values(path_string: str, pos: int, letter: str, cmd_start: int) -> Tuple[List[float], int]:
        """Read one argument group of command _letter_ starting at _pos_.

        Returns:
            Tuple[List[float], int]: the values and the position after the last value
        """
        num_values = AvSvgPath.ARC_VALUES if letter == "A" else PathCommandProcessor.get_value_consumption(letter)
        values: List[float] = []

        for index in range(num_values):
            pos = AvSvgPath._skip_separators(path_string, pos)
            if pos >= len(path_string) or path_string[pos] in AvSvgPath.SVG_CMDS:
                raise AvPathParseError(
                    letter,
                    AvSvgPath._raw_command(path_string, cmd_start),
                    f"expected {num_values} values, got {index}",
                )

            if letter == "A" and index in AvSvgPath.ARC_FLAG_INDICES:
                flag = path_string[pos]
                if flag not in "01":
                    raise AvPathParseError(
                        letter, AvSvgPath._raw_command(path_string, cmd_start), f"invalid arc flag '{flag}'"
                    )
                values.append(int(flag))
                pos += 1
                continue

            match = AvSvgPath._NUMBER_RE.match(path_string, pos)
            if match is None:
                raise AvPathParseError(
                    letter,
                    AvSvgPath._raw_command(path_string, cmd_start),
                    f"invalid number at '{path_string[pos:pos + 10]}'",
                )
            values.append(float(match.group(0)))
            pos = match.end()

        return values, pos
