from __future__ import annotations

import errno
import logging
import os
import tempfile

from ._match import Pattern, compile_pattern, matches

logger = logging.getLogger(__name__)

PathArg = str | os.PathLike[str]


def copy_file(source: PathArg, destination: PathArg) -> None:
    """Copy the whole content of *source* over *destination*.

    The source is read fully into memory.  The destination is created or
    truncated; its parent directory must exist.
    """
    with open(source, "rb") as f:
        data = f.read()
    with open(destination, "wb") as f:
        f.write(data)


def _matching_names(pattern: Pattern, directory: PathArg) -> list[str]:
    compiled = compile_pattern(pattern)
    return [
        name
        for name in os.listdir(directory)
        if matches(compiled, os.path.basename(name))
    ]


def copy_matching_files(
    pattern: Pattern, source_dir: PathArg, destination_dir: PathArg
) -> list[str]:
    """Copy every entry of *source_dir* whose name matches into *destination_dir*.

    Only immediate entries are considered.  A matching directory is still
    copied as a file, so the platform's ``IsADirectoryError`` (or
    ``PermissionError``) propagates; the first failure stops the batch.
    Returns the copied names in listing order.
    """
    names = _matching_names(pattern, source_dir)
    for name in names:
        logger.debug("copy %s from %s to %s", name, source_dir, destination_dir)
        copy_file(os.path.join(source_dir, name), os.path.join(destination_dir, name))
    return names


def delete_matching_files(pattern: Pattern, directory: PathArg) -> list[str]:
    """Remove every immediate entry of *directory* whose name matches."""
    names = _matching_names(pattern, directory)
    for name in names:
        logger.debug("remove %s from %s", name, directory)
        os.unlink(os.path.join(directory, name))
    return names


def replace_matching_files(
    pattern: Pattern,
    source_dir: PathArg,
    destination_dir: PathArg,
    atomic: bool = False,
) -> list[str]:
    """Replace the matching entries of *destination_dir* with those of *source_dir*.

    By default this is :func:`delete_matching_files` followed by
    :func:`copy_matching_files`.  It is not atomic: when the copy fails part
    way the destination keeps only the files copied so far.

    With ``atomic=True`` the matching source files are first staged next to
    their targets with the permissions a plain copy would create.  The
    destination is modified only when every file staged successfully and no
    matching destination entry is a directory; otherwise the staged files are
    discarded and the error propagates.
    """
    if not atomic:
        delete_matching_files(pattern, destination_dir)
        return copy_matching_files(pattern, source_dir, destination_dir)
    return _replace_atomic(compile_pattern(pattern), source_dir, destination_dir)


def _new_file_mode() -> int:
    """Permission bits ``open(path, "wb")`` gives a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _discard(paths: list[str]) -> None:
    for tmp_path in paths:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def _replace_atomic(
    pattern: Pattern, source_dir: PathArg, destination_dir: PathArg
) -> list[str]:
    names = _matching_names(pattern, source_dir)
    # Fail before staging when the destination cannot be listed.
    stale = _matching_names(pattern, destination_dir)
    # Directories can be neither unlinked nor replaced by a file.
    for name in dict.fromkeys(stale + names):
        target = os.path.join(destination_dir, name)
        if os.path.isdir(target) and not os.path.islink(target):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), target)

    mode = _new_file_mode()
    staged: list[tuple[str, str]] = []
    try:
        for name in names:
            fd, tmp_path = tempfile.mkstemp(
                prefix=".fsmatch-", suffix=".tmp", dir=destination_dir
            )
            os.close(fd)
            staged.append((name, tmp_path))
            copy_file(os.path.join(source_dir, name), tmp_path)
            os.chmod(tmp_path, mode)
    except BaseException:
        _discard([tmp_path for _, tmp_path in staged])
        raise

    incoming = set(names)
    pending = list(staged)
    try:
        for name in stale:
            if name not in incoming:
                logger.debug("remove %s from %s", name, destination_dir)
                os.unlink(os.path.join(destination_dir, name))
        while pending:
            name, tmp_path = pending[0]
            logger.debug("replace %s in %s", name, destination_dir)
            os.replace(tmp_path, os.path.join(destination_dir, name))
            pending.pop(0)
    except BaseException:
        _discard([tmp_path for _, tmp_path in pending])
        raise
    return names
