"""Tests for the enhancement service."""

import asyncio

import pytest

from product_studio.domain.enhancement import (
    EnhancementRefusal,
    EnhancementSuccess,
    ImagePart,
    TextPart,
)
from product_studio.domain.errors import RemoteError
from product_studio.services.enhancement import REFUSAL_FALLBACK, EnhancementService
from tests.conftest import FakeEnhancementClient


def _service(client: FakeEnhancementClient) -> EnhancementService:
    return EnhancementService(
        client=client, model="gemini-2.5-flash-image", prompt="Studio shot."
    )


def test_enhance_sends_image_and_prompt() -> None:
    client = FakeEnhancementClient()

    asyncio.run(_service(client).enhance(b"raw", "image/jpeg"))

    assert client.calls == [
        {
            "model": "gemini-2.5-flash-image",
            "image_bytes": b"raw",
            "mime_type": "image/jpeg",
            "prompt": "Studio shot.",
        }
    ]


def test_single_image_part_is_success() -> None:
    client = FakeEnhancementClient(parts=[ImagePart(mime_type="image/png", data=b"ok")])

    result = asyncio.run(_service(client).enhance(b"raw", "image/png"))

    assert result == EnhancementSuccess(image_data_url="data:image/png;base64,b2s=")


def test_first_image_wins_and_text_is_kept() -> None:
    client = FakeEnhancementClient(
        parts=[
            TextPart(text="Here you go"),
            ImagePart(mime_type="image/png", data=b"first"),
            ImagePart(mime_type="image/jpeg", data=b"second"),
            TextPart(text="Enjoy"),
        ]
    )

    result = asyncio.run(_service(client).enhance(b"raw", "image/png"))

    assert isinstance(result, EnhancementSuccess)
    assert result.image_data_url == "data:image/png;base64,Zmlyc3Q="
    assert result.diagnostic_text == "Here you go\nEnjoy"


def test_text_only_response_is_refusal() -> None:
    client = FakeEnhancementClient(parts=[TextPart(text="content policy violation")])

    result = asyncio.run(_service(client).enhance(b"raw", "image/png"))

    assert result == EnhancementRefusal(diagnostic_text="content policy violation")


def test_empty_response_uses_fallback_message() -> None:
    client = FakeEnhancementClient(parts=[])

    result = asyncio.run(_service(client).enhance(b"raw", "image/png"))

    assert result == EnhancementRefusal(diagnostic_text=REFUSAL_FALLBACK)


def test_transport_failure_is_wrapped() -> None:
    cause = ConnectionResetError("connection reset by peer")
    client = FakeEnhancementClient(error=cause)

    with pytest.raises(RemoteError) as excinfo:
        asyncio.run(_service(client).enhance(b"raw", "image/png"))

    assert str(excinfo.value) == "Gemini API Error: connection reset by peer"
    assert excinfo.value.__cause__ is cause
