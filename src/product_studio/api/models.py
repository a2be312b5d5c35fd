"""Pydantic models for the studio HTTP API."""

from pydantic import BaseModel

from product_studio.domain.studio import ErrorKind, Phase, SessionSnapshot


class SessionView(BaseModel):
    """Session state rendered by the browser page."""

    phase: Phase
    original_image: str | None = None
    original_filename: str | None = None
    enhanced_image: str | None = None
    error_message: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def from_snapshot(cls, snapshot: SessionSnapshot) -> "SessionView":
        original = snapshot.original_image
        return cls(
            phase=snapshot.phase,
            original_image=original.data_url if original else None,
            original_filename=original.file.filename if original else None,
            enhanced_image=snapshot.enhanced_image,
            error_message=snapshot.error_message,
            error_kind=snapshot.error_kind,
        )
