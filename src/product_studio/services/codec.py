"""Conversions between uploaded files, raw bytes and base64 data URLs."""

import base64
import binascii
from typing import Protocol

from product_studio.domain.errors import DecodeError, InvalidInputType
from product_studio.domain.images import ImageFile, OriginalImage

_DEFAULT_MIME_TYPE = "application/octet-stream"


class UploadedFile(Protocol):
    """Interface for a file handed over by the browser."""

    filename: str | None
    content_type: str | None

    async def read(self, size: int = -1) -> bytes:
        """Return the file content."""


def is_image_type(content_type: str | None) -> bool:
    """Return True when a declared content type names an image."""
    return (content_type or "").lower().startswith("image/")


def require_image_type(content_type: str | None) -> None:
    """Raise InvalidInputType unless the content type names an image."""
    if not is_image_type(content_type):
        raise InvalidInputType(f"Unsupported content type {content_type!r}")


def to_data_url(data: bytes, mime_type: str | None) -> str:
    """Encode bytes as a self-describing base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or _DEFAULT_MIME_TYPE};base64,{encoded}"


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Split a base64 data URL into its MIME type and raw bytes."""
    header, separator, payload = data_url.partition(",")
    if not separator or not header.startswith("data:") or not header.endswith(
        ";base64"
    ):
        raise DecodeError("Not a base64 data URL")
    mime_type = header[len("data:") : -len(";base64")] or _DEFAULT_MIME_TYPE
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Invalid base64 payload: {exc}") from exc


async def read_upload(upload: UploadedFile, max_bytes: int | None = None) -> ImageFile:
    """Read the whole upload into memory."""
    try:
        data = await upload.read()
    except (OSError, ValueError, RuntimeError) as exc:
        raise DecodeError(f"Could not read {upload.filename or 'upload'}") from exc
    if max_bytes is not None and len(data) > max_bytes:
        raise DecodeError(f"Upload exceeds {max_bytes} bytes")
    return ImageFile(
        filename=upload.filename,
        content_type=upload.content_type or _DEFAULT_MIME_TYPE,
        data=data,
    )


async def encode_to_data_url(upload: UploadedFile) -> str:
    """Read an upload and return it as a data URL."""
    image = await read_upload(upload)
    return to_data_url(image.data, image.content_type)


async def load_original_image(
    upload: UploadedFile, max_bytes: int | None = None
) -> OriginalImage:
    """Read an upload once and keep both its bytes and its preview data URL."""
    image = await read_upload(upload, max_bytes=max_bytes)
    return OriginalImage(
        data_url=to_data_url(image.data, image.content_type),
        file=image,
    )
