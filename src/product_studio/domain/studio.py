"""Domain models for the studio state machine."""

from dataclasses import dataclass
from enum import StrEnum

from product_studio.domain.images import OriginalImage


class Phase(StrEnum):
    """Screen currently shown to the user."""

    IDLE = "idle"
    PROCESSING = "processing"
    PREVIEW = "preview"
    RESULT = "result"
    ERROR = "error"


class ErrorKind(StrEnum):
    """Why the last attempt ended in the error phase."""

    INVALID_INPUT_TYPE = "invalid_input_type"
    DECODE_ERROR = "decode_error"
    REFUSAL = "refusal"
    REMOTE_ERROR = "remote_error"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a studio session."""

    phase: Phase = Phase.IDLE
    original_image: OriginalImage | None = None
    enhanced_image: str | None = None
    error_message: str | None = None
    error_kind: ErrorKind | None = None
