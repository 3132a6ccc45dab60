import base64
from types import MappingProxyType

import pytest

from fileref.serde import as_str_object_dict, decode_bytes, encode_bytes, optional_int, optional_string


def test_as_str_object_dict_normalizes_keys() -> None:
    assert as_str_object_dict(MappingProxyType({1: "a"}), field_name="x") == {"1": "a"}


def test_as_str_object_dict_rejects_non_mapping() -> None:
    with pytest.raises(TypeError, match="payload must be a mapping"):
        as_str_object_dict(["a"], field_name="payload")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param(None, None, id="none"),
        pytest.param("", None, id="empty"),
        pytest.param("abc", "abc", id="string"),
    ],
)
def test_optional_string(value: object, expected: str | None) -> None:
    assert optional_string(value, field_name="f") == expected


def test_optional_string_rejects_other_types() -> None:
    with pytest.raises(TypeError, match="f must be a string or None"):
        optional_string(3, field_name="f")


def test_optional_int_rejects_bool() -> None:
    assert optional_int(5, field_name="n") == 5
    assert optional_int(None, field_name="n") is None
    with pytest.raises(TypeError, match="n must be an int or None"):
        optional_int(True, field_name="n")


def test_encode_bytes() -> None:
    assert encode_bytes(None) is None
    assert encode_bytes(b"hi") == "aGk="
    assert encode_bytes(b"") == ""


def test_decode_bytes_accepts_base64_string() -> None:
    data = bytes(range(256))
    assert decode_bytes(base64.b64encode(data).decode("ascii"), field_name="b") == data


def test_decode_bytes_accepts_legacy_int_list() -> None:
    assert decode_bytes([104, 105], field_name="b") == b"hi"


def test_decode_bytes_rejects_invalid_base64() -> None:
    with pytest.raises(ValueError, match="b is not valid Base64"):
        decode_bytes("not base64!", field_name="b")


def test_decode_bytes_rejects_out_of_range_ints() -> None:
    with pytest.raises(TypeError, match="range"):
        decode_bytes([1, 256], field_name="b")


def test_decode_bytes_rejects_other_types() -> None:
    with pytest.raises(TypeError, match="b must be a Base64 string"):
        decode_bytes(3.5, field_name="b")
