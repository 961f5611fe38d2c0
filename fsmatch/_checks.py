from __future__ import annotations

import logging
import os

from ._typing import FSMValidation

logger = logging.getLogger(__name__)


def directory_exists(path: str | os.PathLike[str]) -> bool:
    """Return True when *path* exists and is a directory."""
    try:
        return os.path.isdir(path)
    except (TypeError, ValueError):
        return False


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True when *path* exists and is a regular file."""
    try:
        return os.path.isfile(path)
    except (TypeError, ValueError):
        return False


def _default_message(operation: str, kind: str, path: object) -> str:
    return f"Error {operation}() the {kind} path is not valid {path}"


def check_directory(
    path: str | os.PathLike[str], message: str | None = None
) -> FSMValidation:
    valid = directory_exists(path)
    return FSMValidation(
        valid=valid,
        path=str(path),
        kind="directory",
        message=None if valid else (
            message or _default_message("validate_directory", "directory", path)
        ),
    )


def check_file(
    path: str | os.PathLike[str], message: str | None = None
) -> FSMValidation:
    valid = file_exists(path)
    return FSMValidation(
        valid=valid,
        path=str(path),
        kind="file",
        message=None if valid else (
            message or _default_message("validate_file", "file", path)
        ),
    )


def _report(result: FSMValidation, log: logging.Logger | None) -> bool:
    if not result["valid"]:
        (log or logger).error(result["message"])
    return result["valid"]


def validate_directory(
    path: str | os.PathLike[str],
    message: str | None = None,
    logger: logging.Logger | None = None,
) -> bool:
    """Check that *path* is a directory, logging *message* at ERROR when it is not.

    Never raises.  Without logging configuration the message reaches stderr
    through the logging module's last-resort handler.
    """
    return _report(check_directory(path, message), logger)


def validate_file(
    path: str | os.PathLike[str],
    message: str | None = None,
    logger: logging.Logger | None = None,
) -> bool:
    """Check that *path* is a regular file, logging *message* at ERROR when it is not."""
    return _report(check_file(path, message), logger)
