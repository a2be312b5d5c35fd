"""FastAPI application factory."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import (
    FastAPI,
    File,
    HTTPException,
    Query,
    Request,
    Response,
    UploadFile,
    status,
)
from fastapi.responses import HTMLResponse

from product_studio.api.models import SessionView
from product_studio.api.page import STUDIO_PAGE_HTML
from product_studio.app_logging import configure_logging
from product_studio.containers import AppContainer
from product_studio.domain.errors import DecodeError
from product_studio.domain.export import (
    DEFAULT_JPEG_QUALITY,
    ExportFormat,
    ExportSettings,
)
from product_studio.domain.studio import SessionSnapshot
from product_studio.services.export import export_image
from product_studio.services.studio import (
    EnhancementRequested,
    FileSelected,
    ResetRequested,
    StudioSession,
)

SESSION_COOKIE = "studio_session"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Product studio using model %s", container.settings.gemini_model)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    def existing_session(request: Request) -> StudioSession | None:
        state_container: AppContainer = request.app.state.container
        return state_container.session_store.get(request.cookies.get(SESSION_COOKIE))

    def studio_session(request: Request, response: Response) -> StudioSession:
        state_container: AppContainer = request.app.state.container
        cookie_id = request.cookies.get(SESSION_COOKIE)
        session_id, session = state_container.session_store.get_or_create(cookie_id)
        if session_id != cookie_id:
            response.set_cookie(
                SESSION_COOKIE,
                session_id,
                max_age=state_container.settings.session_ttl_seconds,
                httponly=True,
                samesite="lax",
                secure=state_container.settings.session_cookie_secure,
            )
        return session

    @app.get("/", response_class=HTMLResponse)
    async def studio_page() -> HTMLResponse:
        """Browser UI that drives the session API."""
        return HTMLResponse(STUDIO_PAGE_HTML)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/session")
    async def get_session(request: Request) -> SessionView:
        """Return the current session state."""
        session = existing_session(request)
        if session is None:
            return SessionView.from_snapshot(SessionSnapshot())
        return SessionView.from_snapshot(session.snapshot())

    @app.post("/api/session/image")
    async def select_image(
        request: Request, response: Response, file: UploadFile = File(...)
    ) -> SessionView:
        """Accept an uploaded product photo."""
        session = studio_session(request, response)
        snapshot = await session.dispatch(FileSelected(file))
        return SessionView.from_snapshot(snapshot)

    @app.post("/api/session/enhance")
    async def enhance(request: Request) -> SessionView:
        """Send the loaded photo to the image model and wait for the outcome."""
        session = existing_session(request)
        if session is None:
            return SessionView.from_snapshot(SessionSnapshot())
        snapshot = await session.dispatch(EnhancementRequested())
        return SessionView.from_snapshot(snapshot)

    @app.post("/api/session/reset")
    async def reset(request: Request) -> SessionView:
        """Return the session to its initial state."""
        session = existing_session(request)
        if session is None:
            return SessionView.from_snapshot(SessionSnapshot())
        snapshot = await session.dispatch(ResetRequested())
        return SessionView.from_snapshot(snapshot)

    @app.get("/api/session/download")
    async def download(
        request: Request,
        export_format: ExportFormat = Query(default=ExportFormat.PNG, alias="format"),
        quality: int = Query(default=DEFAULT_JPEG_QUALITY, ge=1, le=100),
    ) -> Response:
        """Download the enhanced image in the chosen format."""
        session = existing_session(request)
        enhanced = None if session is None else session.snapshot().enhanced_image
        if enhanced is None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No enhanced image to download.",
            )
        settings = ExportSettings(format=export_format, quality=quality)
        try:
            exported = await asyncio.to_thread(export_image, enhanced, settings)
        except DecodeError as exc:
            logger.exception("Failed to export enhanced image")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return Response(
            content=exported.content,
            media_type=exported.media_type,
            headers={
                "Content-Disposition": f'attachment; filename="{exported.filename}"'
            },
        )

    return app