"""Shared test fixtures."""

import asyncio
import io
from dataclasses import dataclass, field

import pytest
from PIL import Image

from product_studio.config import Settings
from product_studio.containers import AppContainer, build_session_store
from product_studio.domain.enhancement import ImagePart, ResponsePart, TextPart
from product_studio.services.enhancement import EnhancementClient, EnhancementService
from product_studio.services.studio import StudioSession


def make_png(
    size: tuple[int, int] = (4, 4), color: tuple[int, ...] = (200, 30, 30, 128)
) -> bytes:
    """Return a tiny RGBA PNG."""
    buffer = io.BytesIO()
    Image.new("RGBA", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@dataclass
class FakeUpload:
    """Upload stand-in with the same shape as FastAPI's UploadFile."""

    content: bytes = b"fake-image-bytes"
    content_type: str | None = "image/png"
    filename: str | None = "product.png"
    error: Exception | None = None
    gate: asyncio.Event | None = None

    async def read(self, size: int = -1) -> bytes:
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.content


@dataclass
class FakeEnhancementClient(EnhancementClient):
    """Fake image model that returns canned parts and records calls."""

    parts: list[ResponsePart] = field(
        default_factory=lambda: [ImagePart(mime_type="image/png", data=make_png())]
    )
    error: Exception | None = None
    gate: asyncio.Event | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(
        self,
        *,
        model: str,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
    ) -> list[ResponsePart]:
        self.calls.append(
            {
                "model": model,
                "image_bytes": image_bytes,
                "mime_type": mime_type,
                "prompt": prompt,
            }
        )
        if self.gate is not None:
            await self.gate.wait()
        else:
            await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.parts


def refusal_client(text: str) -> FakeEnhancementClient:
    return FakeEnhancementClient(parts=[TextPart(text=text)])


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="gemini-key")


@pytest.fixture
def enhancement_client() -> FakeEnhancementClient:
    return FakeEnhancementClient()


@pytest.fixture
def enhancement_service(
    settings: Settings, enhancement_client: FakeEnhancementClient
) -> EnhancementService:
    return EnhancementService(
        client=enhancement_client,
        model=settings.gemini_model,
        prompt="Make it shine.",
    )


@pytest.fixture
def studio(enhancement_service: EnhancementService) -> StudioSession:
    return StudioSession(enhancement_service=enhancement_service)


@pytest.fixture
def container(
    settings: Settings, enhancement_service: EnhancementService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        enhancement_service=enhancement_service,
        session_store=build_session_store(settings, enhancement_service),
        close_resources=close_resources,
    )
