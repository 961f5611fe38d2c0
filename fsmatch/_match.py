import re
from functools import cmp_to_key

from ._exceptions import FSMPatternError

Pattern = re.Pattern[str] | str

_NUMERIC_RUN = re.compile(r"[.\d]+")
# Leading float prefix, the part of a run that parseFloat would accept.
_FLOAT_PREFIX = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def compile_pattern(pattern: Pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        return re.compile(pattern)
    raise FSMPatternError(pattern)


def matches(pattern: re.Pattern[str], name: str) -> bool:
    return pattern.search(name) is not None


def numeric_rank(name: str) -> float | None:
    """Return the numeric value of the first digit/dot run in *name*.

    ``"v1.2.3"`` ranks ``1.2``, ``"build-.5"`` ranks ``0.5``.  ``None`` means
    the name carries no parseable number.
    """
    run = _NUMERIC_RUN.search(name)
    if run is None:
        return None
    prefix = _FLOAT_PREFIX.match(run.group())
    if prefix is None:
        return None
    return float(prefix.group())


def compare_higher(a: str, b: str) -> int:
    """Order names by descending numeric rank.

    Returns -1 when *a* ranks higher, 1 when *b* ranks higher and 0 on a tie.
    Names without a number rank below every name that has one.
    """
    rank_a = numeric_rank(a)
    rank_b = numeric_rank(b)
    if rank_a == rank_b:
        return 0
    if rank_a is None:
        return 1
    if rank_b is None:
        return -1
    return -1 if rank_a > rank_b else 1


highest_first = cmp_to_key(compare_higher)
