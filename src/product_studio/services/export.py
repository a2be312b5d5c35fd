"""Re-encode the enhanced image for download."""

import io

from PIL import Image, UnidentifiedImageError

from product_studio.domain.errors import DecodeError
from product_studio.domain.export import (
    EXPORT_BASE_NAME,
    ExportedImage,
    ExportFormat,
    ExportSettings,
)
from product_studio.services.codec import decode_data_url

_JPEG_BACKGROUND = (255, 255, 255)
_PNG_MODES = frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"})


def export_image(data_url: str, settings: ExportSettings) -> ExportedImage:
    """Decode a data URL and encode it in the requested download format."""
    _, raw = decode_data_url(data_url)
    try:
        with Image.open(io.BytesIO(raw)) as image, io.BytesIO() as output:
            if settings.format.is_lossy:
                with _flatten(image) as rgb:
                    rgb.save(
                        output, format="JPEG", quality=settings.quality, optimize=True
                    )
            else:
                with _png_compatible(image) as png:
                    png.save(output, format="PNG", optimize=True)
            content = output.getvalue()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise DecodeError(f"Could not decode the enhanced image: {exc}") from exc
    return ExportedImage(
        filename=export_filename(settings.format),
        media_type=settings.format.media_type,
        content=content,
    )


def export_filename(export_format: ExportFormat) -> str:
    """Return the download file name for a format."""
    return f"{EXPORT_BASE_NAME}.{export_format.value}"


def _flatten(image: Image.Image) -> Image.Image:
    """Return an RGB copy with any transparency composited onto white."""
    if image.mode in {"RGBA", "LA"} or "transparency" in image.info:
        with image.convert("RGBA") as rgba:
            background = Image.new("RGB", rgba.size, _JPEG_BACKGROUND)
            background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    return image.convert("RGB")


def _png_compatible(image: Image.Image) -> Image.Image:
    """Return a copy in a mode PNG can store."""
    if image.mode in _PNG_MODES:
        return image.copy()
    return image.convert("RGBA")
