import os

_SEPARATORS = os.sep + (os.altsep or "")


def join_resolved(parts: list[str]) -> str:
    """Join *parts* below the first one and return the absolute, normalised path.

    Only the first part may be absolute: leading separators of the later
    parts are stripped so that ``["/a", "/b"]`` resolves to ``/a/b``.
    """
    if not parts:
        raise ValueError("At least one path part is required.")
    head, *tail = parts
    relative = [p.lstrip(_SEPARATORS) for p in tail]
    joined = os.path.join(head, *[p for p in relative if p])
    return os.path.abspath(joined or os.curdir)
