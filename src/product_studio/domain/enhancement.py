"""Models for image model responses and enhancement outcomes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImagePart:
    """Inline image returned by the image model."""

    mime_type: str
    data: bytes


@dataclass(frozen=True)
class TextPart:
    """Free text returned by the image model."""

    text: str


ResponsePart = ImagePart | TextPart


@dataclass(frozen=True)
class EnhancementSuccess:
    """The model produced an image."""

    image_data_url: str
    diagnostic_text: str | None = None


@dataclass(frozen=True)
class EnhancementRefusal:
    """The model answered without an image."""

    diagnostic_text: str


EnhancementResult = EnhancementSuccess | EnhancementRefusal
