"""Gemini image generation client."""

from dataclasses import dataclass

from google import genai
from google.genai import types

from product_studio.domain.enhancement import ImagePart, ResponsePart, TextPart
from product_studio.services.enhancement import EnhancementClient


@dataclass
class GeminiImageClient(EnhancementClient):
    """Enhancement client backed by the Gemini generate_content API."""

    client: genai.Client

    @classmethod
    def create(cls, api_key: str, timeout_seconds: int = 120) -> "GeminiImageClient":
        """Create a Gemini client."""
        return cls(
            client=genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
            )
        )

    async def generate(
        self,
        *,
        model: str,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
    ) -> list[ResponsePart]:
        """Send the image and instruction, return the first candidate's parts."""
        response = await self.client.aio.models.generate_content(
            model=model,
            contents=[
                types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                types.Part.from_text(text=prompt),
            ],
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE", "TEXT"],
            ),
        )
        return _response_parts(response)

    async def close(self) -> None:
        """Close the underlying HTTP sessions."""
        await self.client.aio.aclose()


def _response_parts(response: types.GenerateContentResponse) -> list[ResponsePart]:
    """Convert a Gemini response into domain parts."""
    if not response.candidates:
        feedback = response.prompt_feedback
        if feedback is not None and feedback.block_reason:
            reason = feedback.block_reason_message or str(feedback.block_reason)
            return [TextPart(text=f"Request blocked: {reason}")]
        return []

    content = response.candidates[0].content
    parts: list[ResponsePart] = []
    for part in (content.parts if content else None) or []:
        if part.inline_data is not None and part.inline_data.data:
            parts.append(
                ImagePart(
                    mime_type=part.inline_data.mime_type or "image/png",
                    data=part.inline_data.data,
                )
            )
        elif part.text:
            parts.append(TextPart(text=part.text))
    return parts
