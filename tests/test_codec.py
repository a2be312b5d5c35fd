"""Tests for data URL conversions."""

import asyncio
import base64

import pytest

from product_studio.domain.errors import DecodeError
from product_studio.services.codec import (
    decode_data_url,
    encode_to_data_url,
    is_image_type,
    load_original_image,
    to_data_url,
)
from tests.conftest import FakeUpload


def test_encode_to_data_url_round_trips_bytes() -> None:
    content = bytes(range(256)) * 3
    upload = FakeUpload(content=content, content_type="image/jpeg")

    url = asyncio.run(encode_to_data_url(upload))

    header, payload = url.split(",", 1)
    assert header == "data:image/jpeg;base64"
    assert base64.b64decode(payload) == content


def test_to_data_url_accepts_empty_content() -> None:
    assert to_data_url(b"", "image/png") == "data:image/png;base64,"


def test_to_data_url_defaults_mime_type() -> None:
    assert to_data_url(b"x", None).startswith("data:application/octet-stream;base64,")


def test_decode_data_url_returns_mime_and_bytes() -> None:
    mime_type, data = decode_data_url(to_data_url(b"\x89PNG rest", "image/png"))

    assert mime_type == "image/png"
    assert data == b"\x89PNG rest"


@pytest.mark.parametrize(
    "value",
    ["not a url", "data:image/png,plain", "data:image/png;base64,@@@"],
)
def test_decode_data_url_rejects_malformed_input(value: str) -> None:
    with pytest.raises(DecodeError):
        decode_data_url(value)


def test_read_failure_raises_decode_error() -> None:
    upload = FakeUpload(error=OSError("disk gone"))

    with pytest.raises(DecodeError):
        asyncio.run(encode_to_data_url(upload))


def test_load_original_image_enforces_size_limit() -> None:
    upload = FakeUpload(content=b"x" * 11)

    with pytest.raises(DecodeError):
        asyncio.run(load_original_image(upload, max_bytes=10))


def test_load_original_image_keeps_file_details() -> None:
    upload = FakeUpload(content=b"abc", content_type="image/webp", filename="a.webp")

    original = asyncio.run(load_original_image(upload))

    assert original.file.data == b"abc"
    assert original.file.filename == "a.webp"
    assert original.data_url == "data:image/webp;base64,YWJj"


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [("image/png", True), ("IMAGE/JPEG", True), ("text/plain", False), (None, False)],
)
def test_is_image_type(content_type: str | None, expected: bool) -> None:
    assert is_image_type(content_type) is expected
