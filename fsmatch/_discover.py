from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator

logger = logging.getLogger(__name__)


def find_subdirectories_containing(
    base: str | os.PathLike[str], filename: str, max_depth: int | None = None
) -> list[str]:
    """Return every directory at or below *base* that directly contains *filename*.

    Results are depth-first: a directory comes before its subdirectories,
    siblings follow listing order.  The marker is only tested for existence,
    so a directory named *filename* counts too.  A missing *base* gives an
    empty list.
    """
    return list(iter_subdirectories_containing(base, filename, max_depth=max_depth))


def iter_subdirectories_containing(
    base: str | os.PathLike[str], filename: str, max_depth: int | None = None
) -> Iterator[str]:
    """Lazily yield the directories found by :func:`find_subdirectories_containing`.

    Each directory is entered once per search, identified by device and inode
    of its followed stat, so symlink loops terminate.  ``max_depth`` limits
    how many levels below *base* are searched (``0`` checks *base* only).
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}.")
    yield from _search(os.fspath(base), filename, max_depth)


def _search(base: str, filename: str, max_depth: int | None) -> Iterator[str]:
    visited: set[tuple[int, int]] = set()
    # (path, levels left below it); children are pushed reversed so they
    # pop in listing order.
    stack: list[tuple[str, int | None]] = [(base, max_depth)]
    while stack:
        directory, remaining = stack.pop()
        # Entries that cannot be stat-ed count as absent, as in directory_exists().
        try:
            st = os.stat(directory)
        except OSError:
            continue
        if not stat.S_ISDIR(st.st_mode):
            continue
        key = (st.st_dev, st.st_ino)
        if key in visited:
            logger.debug("skip %s: directory already visited", directory)
            continue
        visited.add(key)

        if os.path.exists(os.path.join(directory, filename)):
            yield directory
        if remaining == 0:
            continue
        child_remaining = None if remaining is None else remaining - 1
        children = [
            (os.path.join(directory, name), child_remaining)
            for name in os.listdir(directory)
        ]
        stack.extend(reversed(children))
