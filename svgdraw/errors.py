"""Exceptions raised while decoding basic SVG documents."""

from __future__ import annotations


class SvgParseError(ValueError):
    """Document could not be decoded into an SvgBasicDocument."""


class ExtentError(SvgParseError):
    def __init__(self, width: float, height: float) -> None:
        super().__init__(f"unacceptable values for basic SVG extent: {width:.2f} x {height:.2f}")
        self.width = width
        self.height = height


class PathParseError(SvgParseError):
    """Malformed path data. Scoped to a single <path> element."""

    def __init__(self, message: str, *, token: str | None = None, index: int | None = None) -> None:
        super().__init__(message)
        self.token = token
        self.index = index
