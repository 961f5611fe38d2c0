from __future__ import annotations

import os
import re

from ._exceptions import FSMSegmentError
from ._match import compile_pattern


class LiteralSegment:
    """A path segment used verbatim."""

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value: str = value

    def __repr__(self) -> str:
        return f"LiteralSegment({self.value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LiteralSegment) and other.value == self.value

    def __hash__(self) -> int:
        return hash((LiteralSegment, self.value))


class PatternSegment:
    """A path segment resolved against the entries of the directory above it."""

    __slots__ = ("pattern",)

    def __init__(self, pattern: re.Pattern[str] | str) -> None:
        self.pattern: re.Pattern[str] = compile_pattern(pattern)

    def __repr__(self) -> str:
        return f"PatternSegment({self.pattern.pattern!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PatternSegment) and other.pattern == self.pattern

    def __hash__(self) -> int:
        return hash((PatternSegment, self.pattern))


Segment = LiteralSegment | PatternSegment


def as_segment(value: object, index: int = 0) -> Segment:
    """Convert a raw segment argument.

    ``str`` and ``os.PathLike`` values become literals, compiled regular
    expressions become patterns.  Anything else raises :class:`FSMSegmentError`;
    callers must stringify numbers themselves.
    """
    if isinstance(value, (LiteralSegment, PatternSegment)):
        return value
    if isinstance(value, re.Pattern):
        if not isinstance(value.pattern, str):
            raise FSMSegmentError(index, value, "Patterns must match str names.")
        return PatternSegment(value)
    if isinstance(value, (str, os.PathLike)):
        literal = os.fspath(value)
        if isinstance(literal, str):
            return LiteralSegment(literal)
    raise FSMSegmentError(index, value)
