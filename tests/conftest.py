import pytest

pytest_plugins = ["fsmatch._pytest_plugin"]


@pytest.fixture
def versions_root(make_tree) -> str:
    """A root holding versioned subdirectories plus a decoy file."""
    return make_tree(
        {
            "v1/": None,
            "v2/": None,
            "v10/bin/tool": b"#!/bin/sh\n",
            "v99.txt": b"not a directory",
            "latest/": None,
        },
        name="versions",
    )
