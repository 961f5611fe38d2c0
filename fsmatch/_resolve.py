from __future__ import annotations

import logging
import os
import re

from ._checks import directory_exists
from ._exceptions import FSMSegmentError
from ._match import Pattern, compile_pattern, highest_first, matches
from ._path import join_resolved
from ._segments import LiteralSegment, PatternSegment, as_segment

logger = logging.getLogger(__name__)

SegmentArg = str | os.PathLike[str] | re.Pattern[str] | LiteralSegment | PatternSegment


def resolve_matches(directory: str | os.PathLike[str], pattern: Pattern) -> list[str]:
    """Return the subdirectory names of *directory* matching *pattern*, highest number first.

    Files are ignored even when their name matches.  Ties keep listing order.
    """
    compiled = compile_pattern(pattern)
    candidates = [
        name
        for name in os.listdir(directory)
        if matches(compiled, name)
        and os.path.isdir(os.path.abspath(os.path.join(directory, name)))
    ]
    candidates.sort(key=highest_first)
    return candidates


def maximise_path(*segments: SegmentArg) -> str | None:
    """Resolve *segments* into an existing path, picking the highest-numbered matches.

    The first segment is the anchor and must be a literal.  Every later
    pattern segment is replaced by the highest ranked subdirectory of the
    path resolved so far whose name matches it.  Returns the absolute,
    normalised path, or ``None`` when a prefix is not a directory or a
    pattern has no candidate.

    >>> maximise_path("/opt/sdk", re.compile(r"^v\\d+$"), "bin")  # doctest: +SKIP
    '/opt/sdk/v10/bin'
    """
    if not segments:
        raise ValueError("maximise_path() requires at least one segment.")
    parsed = [as_segment(value, index) for index, value in enumerate(segments)]
    anchor = parsed[0]
    if not isinstance(anchor, LiteralSegment):
        raise FSMSegmentError(0, segments[0], "The anchor segment must be a literal.")

    resolved: list[str] = [anchor.value]
    for segment in parsed[1:]:
        directory = join_resolved(resolved)
        if not directory_exists(directory):
            logger.debug("maximise_path: %s is not a directory", directory)
            return None
        if isinstance(segment, PatternSegment):
            candidates = resolve_matches(directory, segment.pattern)
            if not candidates:
                logger.debug(
                    "maximise_path: nothing in %s matches %r",
                    directory,
                    segment.pattern.pattern,
                )
                return None
            resolved.append(candidates[0])
        else:
            resolved.append(segment.value)

    return join_resolved(resolved)


def first_existing_directory(*candidates: str | os.PathLike[str]) -> str | None:
    """Return the first candidate, normalised, that is an existing directory."""
    for candidate in candidates:
        normalized = os.path.normpath(os.fspath(candidate))
        if directory_exists(normalized):
            return normalized
    return None
