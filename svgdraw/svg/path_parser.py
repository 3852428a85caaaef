"""Path data parser for the basic SVG subset.

Supported commands: M/m (moveto), L/l (lineto), C/c (cubic Bézier), with
Z/z accepted as a close marker. Bare numbers after a complete command repeat
it; after a moveto they repeat as lineto. The output is always absolute.
"""

from __future__ import annotations

import enum
import re
from dataclasses import replace

from svgdraw.errors import PathParseError
from svgdraw.svg.document import ARG_SLOTS, PathSegment

ARG_COUNTS: dict[str, int] = {"M": 2, "m": 2, "L": 2, "l": 2, "C": 6, "c": 6}

# Only the first moveto moves; bare pairs after it are linetos.
_IMPLICIT_REPEAT = {"M": "L", "m": "l"}

_CLOSE_MARKERS = frozenset("Zz")

# Handle permitted constructions like "100L200,230"
_COMMAND_RE = re.compile(r"([MmLlCcZz])")


class ParserState(enum.Enum):
    EXPECT_COMMAND = "expect_command"
    CONSUMING_ARGS = "consuming_args"


def normalize_path_data(d: str) -> str:
    """Turn commas into spaces and give every command letter its own field."""
    return _COMMAND_RE.sub(r" \1 ", d.replace(",", " "))


def is_polygon_path(d: str) -> bool:
    stripped = d.strip()
    return bool(stripped) and stripped[-1] in _CLOSE_MARKERS


def _looks_numeric(token: str) -> bool:
    return token[0] in "+-.0123456789"


class PathTokenizer:
    """Explicit state machine over whitespace-separated path fields.

    ``feed`` performs one transition and returns a segment whenever the
    current command has received all of its arguments.
    """

    def __init__(self, class_name: str = "") -> None:
        self.class_name = class_name
        self.state = ParserState.EXPECT_COMMAND
        self.cmd: str | None = None
        self.remaining = 0
        self._args: list[float] = []
        self._index = -1

    @property
    def repeatable(self) -> bool:
        return self.cmd is not None

    def feed(self, token: str) -> PathSegment | None:
        self._index += 1
        if self.state is ParserState.EXPECT_COMMAND:
            if not _looks_numeric(token):
                self._command(token)
                return None
            if not self.repeatable:
                raise PathParseError(
                    f"expecting SVG path command at first position, got {token}",
                    token=token,
                    index=self._index,
                )
            self._begin(_IMPLICIT_REPEAT.get(self.cmd, self.cmd))
        return self._argument(token)

    def finish(self) -> None:
        if self.state is ParserState.CONSUMING_ARGS:
            raise PathParseError(
                f"expecting additional ({self.remaining}) numeric arguments",
                index=self._index,
            )

    def _command(self, token: str) -> None:
        if token in _CLOSE_MARKERS:
            return
        if token not in ARG_COUNTS:
            raise PathParseError(
                f"unsupported SVG path command {token!r} at position {self._index}",
                token=token,
                index=self._index,
            )
        self._begin(token)

    def _begin(self, cmd: str) -> None:
        self.cmd = cmd
        self.remaining = ARG_COUNTS[cmd]
        self._args = []
        self.state = ParserState.CONSUMING_ARGS

    def _argument(self, token: str) -> PathSegment | None:
        try:
            value = float(token)
        except ValueError:
            raise PathParseError(
                f"invalid numeric argument {token!r} for command {self.cmd} at position {self._index}",
                token=token,
                index=self._index,
            ) from None
        self._args.append(value)
        self.remaining -= 1
        if self.remaining:
            return None
        self.state = ParserState.EXPECT_COMMAND
        args = self._args + [0.0] * (ARG_SLOTS - len(self._args))
        return PathSegment(cmd=self.cmd, args=tuple(args), class_name=self.class_name)


def tokenize_path(d: str, class_name: str = "") -> list[PathSegment]:
    """Split path data into segments, keeping relative commands as written."""
    tokenizer = PathTokenizer(class_name)
    segments: list[PathSegment] = []
    for token in normalize_path_data(d).split():
        seg = tokenizer.feed(token)
        if seg is not None:
            segments.append(seg)
    tokenizer.finish()
    return segments


def absolutize(segments: list[PathSegment]) -> list[PathSegment]:
    """Resolve relative commands against a running cursor starting at the origin.

    All three points of a relative ``c`` are offset from the same cursor.
    A leading ``m`` is already the absolute start point.
    """
    x = y = 0.0
    resolved: list[PathSegment] = []
    for j, seg in enumerate(segments):
        cmd = seg.cmd
        args = list(seg.args)
        if j == 0 and cmd == "m":
            cmd = "M"
        if cmd in ("m", "l"):
            args[0] += x
            args[1] += y
            cmd = cmd.upper()
        elif cmd == "c":
            for pos in (0, 2, 4):
                args[pos] += x
                args[pos + 1] += y
            cmd = "C"
        if cmd in ("M", "L"):
            x, y = args[0], args[1]
        elif cmd == "C":
            x, y = args[4], args[5]
        resolved.append(replace(seg, cmd=cmd, args=tuple(args)))
    return resolved


def parse_path(d: str, class_name: str = "") -> list[PathSegment]:
    """Parse a path ``d`` attribute into absolute M/L/C segments.

    Raises PathParseError on malformed data.
    """
    is_polygon = is_polygon_path(d)
    segments = absolutize(tokenize_path(d, class_name))
    return [replace(seg, is_polygon=is_polygon) for seg in segments]
