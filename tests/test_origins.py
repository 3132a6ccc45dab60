import pytest

from fileref.origins import AssetPath, ByteContent, LocalPath, NetworkUrl


def test_origins_are_frozen() -> None:
    origin = LocalPath("/tmp/a.txt")
    with pytest.raises(AttributeError):
        origin.path = "/tmp/b.txt"  # type: ignore[misc]


@pytest.mark.parametrize("cls", [LocalPath, NetworkUrl, AssetPath])
def test_string_origins_reject_empty(cls: type) -> None:
    with pytest.raises(ValueError, match="cannot be empty"):
        cls("")


@pytest.mark.parametrize("cls", [LocalPath, NetworkUrl, AssetPath])
def test_string_origins_reject_non_string(cls: type) -> None:
    with pytest.raises(TypeError, match="must be a string"):
        cls(b"x")


@pytest.mark.parametrize(
    "value",
    [
        pytest.param(bytearray(b"ab"), id="bytearray"),
        pytest.param(memoryview(b"ab"), id="memoryview"),
        pytest.param([97, 98], id="int-list"),
    ],
)
def test_byte_content_normalizes_to_bytes(value: object) -> None:
    origin = ByteContent(value)  # type: ignore[arg-type]
    assert origin.data == b"ab"
    assert type(origin.data) is bytes


def test_byte_content_rejects_bad_values() -> None:
    with pytest.raises(TypeError, match="range"):
        ByteContent([300])  # type: ignore[list-item]
    with pytest.raises(TypeError, match="bytes-like"):
        ByteContent("text")  # type: ignore[arg-type]


def test_byte_content_allows_empty_buffer() -> None:
    assert ByteContent(b"").data == b""


def test_byte_content_repr_hides_payload() -> None:
    assert repr(ByteContent(b"secret")) == "ByteContent(<6 bytes>)"


def test_byte_content_equality_is_by_value() -> None:
    assert ByteContent(b"x") == ByteContent(bytearray(b"x"))
