"""Product photo enhancement via a generative image model."""

import logging
from dataclasses import dataclass
from typing import Protocol

from product_studio.domain.enhancement import (
    EnhancementRefusal,
    EnhancementResult,
    EnhancementSuccess,
    ImagePart,
    ResponsePart,
    TextPart,
)
from product_studio.domain.errors import RemoteError
from product_studio.services.codec import to_data_url

logger = logging.getLogger(__name__)

REFUSAL_FALLBACK = (
    "The model did not return an image. It may have refused the request."
)


class EnhancementClient(Protocol):
    """Interface for the remote image model."""

    async def generate(
        self,
        *,
        model: str,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
    ) -> list[ResponsePart]:
        """Return the content parts produced for an image and an instruction."""


@dataclass
class EnhancementService:
    """Service that sends product photos to the image model."""

    client: EnhancementClient
    model: str
    prompt: str

    async def enhance(self, image_bytes: bytes, mime_type: str) -> EnhancementResult:
        """Ask the model for a studio version of the photo.

        Returns ``EnhancementSuccess`` when an image came back and
        ``EnhancementRefusal`` when the model only answered with text (or
        nothing). Transport, auth and protocol failures raise ``RemoteError``.
        """
        try:
            parts = await self.client.generate(
                model=self.model,
                image_bytes=image_bytes,
                mime_type=mime_type,
                prompt=self.prompt,
            )
        except Exception as exc:
            logger.exception("Image model call failed")
            raise RemoteError(f"Gemini API Error: {exc}") from exc
        return _unpack(parts)


def _unpack(parts: list[ResponsePart]) -> EnhancementResult:
    """Take the first inline image and collect every text part."""
    image: ImagePart | None = None
    texts: list[str] = []
    for part in parts:
        if isinstance(part, ImagePart):
            if image is None:
                image = part
        elif isinstance(part, TextPart) and part.text.strip():
            texts.append(part.text.strip())
    diagnostic = "\n".join(texts) or None
    if image is None:
        logger.warning("Image model returned no image (%d text parts)", len(texts))
        return EnhancementRefusal(diagnostic_text=diagnostic or REFUSAL_FALLBACK)
    return EnhancementSuccess(
        image_data_url=to_data_url(image.data, image.mime_type or "image/png"),
        diagnostic_text=diagnostic,
    )
