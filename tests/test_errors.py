"""Tests for fileref.errors."""

from fileref.errors import FileRefError, InvalidFileMapError, MalformedUrlError


def test_file_ref_error_is_exception() -> None:
    assert issubclass(FileRefError, Exception)


def test_invalid_file_map_error_is_value_error() -> None:
    assert issubclass(InvalidFileMapError, FileRefError)
    assert issubclass(InvalidFileMapError, ValueError)


def test_invalid_file_map_error_carries_payload_copy() -> None:
    payload = {"name": "a.txt"}
    err = InvalidFileMapError("one of filePath is required", payload)
    payload["extra"] = 1
    assert err.payload == {"name": "a.txt"}
    assert err.reason == "one of filePath is required"
    assert "one of filePath is required" in str(err)
    assert "'name'" in str(err)


def test_malformed_url_error_carries_url() -> None:
    err = MalformedUrlError("http://[::1")
    assert err.url == "http://[::1"
    assert isinstance(err, ValueError)
    assert "http://[::1" in str(err)
