"""Domain models for uploaded images."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageFile:
    """Raw upload held in memory for the lifetime of a session."""

    filename: str | None
    content_type: str
    data: bytes


@dataclass(frozen=True)
class OriginalImage:
    """Accepted upload and its display data URL."""

    data_url: str
    file: ImageFile
