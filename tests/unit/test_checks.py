import logging

from fsmatch import (
    check_directory,
    check_file,
    directory_exists,
    file_exists,
    validate_directory,
    validate_file,
)


def test_file_is_file_not_directory(tmp_path):
    f = tmp_path / "f.bin"
    f.write_bytes(b"x")
    assert file_exists(f) is True
    assert directory_exists(f) is False


def test_directory_is_directory_not_file(tmp_path):
    assert directory_exists(tmp_path) is True
    assert file_exists(tmp_path) is False


def test_missing_path_is_neither(tmp_path):
    missing = tmp_path / "nope"
    assert directory_exists(missing) is False
    assert file_exists(missing) is False


def test_invalid_path_value_is_false():
    assert directory_exists("bad\0path") is False
    assert file_exists("bad\0path") is False


def test_check_directory_valid_has_no_message(tmp_path):
    result = check_directory(tmp_path)
    assert result == {
        "valid": True,
        "path": str(tmp_path),
        "kind": "directory",
        "message": None,
    }


def test_check_directory_default_message(tmp_path):
    missing = str(tmp_path / "nope")
    result = check_directory(missing)
    assert result["valid"] is False
    assert result["message"] == (
        "Error validate_directory() the directory path is not valid " + missing
    )


def test_check_file_default_message(tmp_path):
    result = check_file(tmp_path)
    assert result["valid"] is False
    assert result["kind"] == "file"
    assert result["message"] == (
        "Error validate_file() the file path is not valid " + str(tmp_path)
    )


def test_check_custom_message(tmp_path):
    result = check_file(tmp_path / "x", "config missing")
    assert result["message"] == "config missing"


def test_validate_directory_logs_on_failure(tmp_path, caplog):
    missing = str(tmp_path / "nope")
    with caplog.at_level(logging.ERROR, logger="fsmatch"):
        assert validate_directory(missing) is False
    assert caplog.messages == [
        "Error validate_directory() the directory path is not valid " + missing
    ]
    assert caplog.records[0].levelno == logging.ERROR


def test_validate_directory_silent_on_success(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG, logger="fsmatch"):
        assert validate_directory(tmp_path) is True
    assert caplog.records == []


def test_validate_file_custom_message(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="fsmatch"):
        assert validate_file(tmp_path / "missing.cfg", "no config") is False
    assert caplog.messages == ["no config"]


def test_validate_file_success(tmp_path):
    f = tmp_path / "a.cfg"
    f.write_text("x")
    assert validate_file(f) is True


def test_validate_uses_injected_logger(tmp_path, caplog):
    injected = logging.getLogger("myapp.setup")
    with caplog.at_level(logging.ERROR, logger="myapp.setup"):
        validate_file(tmp_path / "missing", logger=injected)
    assert [r.name for r in caplog.records] == ["myapp.setup"]
