"""Toolchain lookup use case: pick the newest installed SDK from several roots."""
import os
import re

from fsmatch import first_existing_directory, maximise_path, validate_file


def test_newest_sdk_under_first_available_root(make_tree, tmp_path):
    install = make_tree(
        {
            "sdk/android-28/platform-tools/adb": b"28",
            "sdk/android-33/platform-tools/adb": b"33",
            "sdk/android-9/platform-tools/adb": b"9",
            "sdk/android-preview/": None,
        },
        name="install",
    )
    home = first_existing_directory(
        str(tmp_path / "opt" / "missing"),
        os.path.join(install, "sdk"),
    )
    assert home == os.path.join(install, "sdk")

    adb = maximise_path(home, re.compile(r"^android-\d+$"), "platform-tools", "adb")
    assert adb == os.path.join(os.path.abspath(home), "android-33", "platform-tools", "adb")
    assert validate_file(adb)
    with open(adb, "rb") as f:
        assert f.read() == b"33"


def test_fallback_when_no_sdk_installed(make_tree):
    home = make_tree({"sdk/README": b""}, name="install")
    assert maximise_path(home, "sdk", re.compile(r"^android-\d+$"), "platform-tools") is None


def test_decimal_versions(make_tree):
    root = make_tree({"ndk-1.5/": None, "ndk-1.25/": None, "ndk-1.10/": None})
    # Numbers compare as decimals, so 1.5 beats 1.25 and 1.10.
    assert maximise_path(root, re.compile(r"^ndk-")) == os.path.join(
        os.path.abspath(root), "ndk-1.5"
    )
