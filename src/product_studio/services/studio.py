"""State machine driving one upload-to-download studio session."""

import logging
from dataclasses import dataclass, field, replace

from product_studio.domain.enhancement import EnhancementRefusal, EnhancementResult
from product_studio.domain.errors import DecodeError, InvalidInputType, RemoteError
from product_studio.domain.images import OriginalImage
from product_studio.domain.studio import ErrorKind, Phase, SessionSnapshot
from product_studio.services.codec import (
    UploadedFile,
    load_original_image,
    require_image_type,
)
from product_studio.services.enhancement import EnhancementService

logger = logging.getLogger(__name__)

INVALID_FILE_MESSAGE = "Please select a valid image file."
LOAD_FAILED_MESSAGE = "Failed to load image. Please try again."
PROCESSING_FAILED_PREFIX = "Processing Failed: "


@dataclass(frozen=True)
class FileSelected:
    """User picked or dropped a file."""

    file: UploadedFile


@dataclass(frozen=True)
class EnhancementRequested:
    """User asked for the professional version of the loaded image."""


@dataclass(frozen=True)
class ResetRequested:
    """User asked to start over."""


StudioEvent = FileSelected | EnhancementRequested | ResetRequested

_ENHANCEABLE_PHASES = frozenset({Phase.PREVIEW, Phase.RESULT})
_FILE_SELECTABLE_PHASES = frozenset({Phase.IDLE, Phase.ERROR})


@dataclass
class StudioSession:
    """Single source of truth for which screen is shown and which images exist.

    Every awaited step (reading the upload, calling the image model) records
    the generation it started in. Its outcome is applied only when nothing
    else moved the session in the meantime, so a late answer cannot overwrite
    a session the user already reset.
    """

    enhancement_service: EnhancementService
    max_upload_bytes: int | None = None
    _state: SessionSnapshot = field(default_factory=SessionSnapshot, init=False)
    _generation: int = field(default=0, init=False)

    def current_phase(self) -> Phase:
        """Return the active phase."""
        return self._state.phase

    def snapshot(self) -> SessionSnapshot:
        """Return the current session fields."""
        return self._state

    async def dispatch(self, event: StudioEvent) -> SessionSnapshot:
        """Apply a user event and return the resulting snapshot."""
        if isinstance(event, ResetRequested):
            self._reset()
        elif isinstance(event, FileSelected):
            await self._select_file(event.file)
        elif isinstance(event, EnhancementRequested):
            await self._enhance()
        else:
            raise TypeError(f"Unsupported event: {event!r}")
        return self._state

    def _reset(self) -> None:
        self._generation += 1
        if self._state.phase is not Phase.IDLE:
            logger.info("Session reset from %s", self._state.phase)
        self._state = SessionSnapshot()

    async def _select_file(self, upload: UploadedFile) -> None:
        if self._state.phase not in _FILE_SELECTABLE_PHASES:
            logger.info("Ignoring file selection in %s", self._state.phase)
            return
        if self._state.phase is Phase.ERROR:
            self._reset()

        try:
            require_image_type(upload.content_type)
        except InvalidInputType as exc:
            logger.info("Rejected upload: %s", exc)
            self._fail(INVALID_FILE_MESSAGE, ErrorKind.INVALID_INPUT_TYPE)
            return

        token = self._begin_processing()
        try:
            original = await load_original_image(upload, self.max_upload_bytes)
        except DecodeError:
            logger.exception("Failed to load upload")
            if self._is_current(token):
                self._fail(LOAD_FAILED_MESSAGE, ErrorKind.DECODE_ERROR)
            return
        if not self._is_current(token):
            logger.warning("Dropping stale upload result")
            return
        self._state = SessionSnapshot(phase=Phase.PREVIEW, original_image=original)
        logger.info(
            "Loaded %s (%d bytes)",
            original.file.content_type,
            len(original.file.data),
        )

    async def _enhance(self) -> None:
        original = self._state.original_image
        if original is None or self._state.phase not in _ENHANCEABLE_PHASES:
            logger.info("Ignoring enhancement request in %s", self._state.phase)
            return

        token = self._begin_processing()
        try:
            result = await self.enhancement_service.enhance(
                original.file.data, original.file.content_type
            )
        except RemoteError as exc:
            if self._is_current(token):
                self._fail(PROCESSING_FAILED_PREFIX + str(exc), ErrorKind.REMOTE_ERROR)
            else:
                logger.warning("Dropping stale enhancement failure")
            return
        if not self._is_current(token):
            logger.warning("Dropping stale enhancement result")
            return
        self._apply_result(original, result)

    def _apply_result(self, original: OriginalImage, result: EnhancementResult) -> None:
        if isinstance(result, EnhancementRefusal):
            self._fail(
                PROCESSING_FAILED_PREFIX + result.diagnostic_text, ErrorKind.REFUSAL
            )
            return
        self._state = SessionSnapshot(
            phase=Phase.RESULT,
            original_image=original,
            enhanced_image=result.image_data_url,
        )
        logger.info("Enhancement finished")

    def _begin_processing(self) -> int:
        self._generation += 1
        self._state = replace(
            self._state,
            phase=Phase.PROCESSING,
            error_message=None,
            error_kind=None,
        )
        return self._generation

    def _is_current(self, token: int) -> bool:
        return token == self._generation and self._state.phase is Phase.PROCESSING

    def _fail(self, message: str, kind: ErrorKind) -> None:
        self._state = replace(
            self._state,
            phase=Phase.ERROR,
            error_message=message,
            error_kind=kind,
        )
