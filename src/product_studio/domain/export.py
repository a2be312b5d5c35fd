"""Models for downloading the enhanced image."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field

EXPORT_BASE_NAME = "professional-photo"
DEFAULT_JPEG_QUALITY = 92


class ExportFormat(StrEnum):
    """Supported download formats."""

    PNG = "png"
    JPEG = "jpeg"

    @property
    def media_type(self) -> str:
        return f"image/{self.value}"

    @property
    def is_lossy(self) -> bool:
        return self is ExportFormat.JPEG


class ExportSettings(BaseModel):
    """User-chosen output format and JPEG quality."""

    format: ExportFormat = ExportFormat.PNG
    quality: int = Field(default=DEFAULT_JPEG_QUALITY, ge=1, le=100)


@dataclass(frozen=True)
class ExportedImage:
    """Encoded image ready to be sent as a download."""

    filename: str
    media_type: str
    content: bytes
