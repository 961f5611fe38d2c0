"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["fsmatch._pytest_plugin"]

This makes the ``make_tree`` fixture automatically available::

    def test_something(make_tree):
        root = make_tree({"v1/": None, "v2/bin/tool": b"x"})
        assert maximise_path(root, re.compile(r"^v\\d+$")).endswith("v2")
"""

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

TreeLayout = Mapping[str, bytes | None]


def build_tree(root: Path, layout: TreeLayout) -> str:
    """Lay out the entries of *layout* below *root* and return *root* as a string.

    Keys are ``/``-separated relative paths.  A ``None`` value (or a key
    ending in ``/``) creates a directory, ``bytes`` create a file with
    that content.  Parent directories are created as needed.
    """
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in layout.items():
        target = root.joinpath(*[p for p in rel.split("/") if p])
        if content is None or rel.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
    return str(root)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., str]:
    """Factory fixture that lays out directory trees below ``tmp_path``.

    ``make_tree(layout)`` builds in ``tmp_path/"tree"``; pass ``name=`` to build
    additional, separate trees in the same test.
    """
    def _make(layout: TreeLayout, name: str = "tree") -> str:
        return build_tree(tmp_path / name, layout)

    return _make
