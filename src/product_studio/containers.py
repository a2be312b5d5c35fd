"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from product_studio.adapters.gemini_image_client import GeminiImageClient
from product_studio.config import Settings, load_enhancement_prompt
from product_studio.services.enhancement import EnhancementService
from product_studio.services.studio import StudioSession
from product_studio.services.studio_sessions import StudioSessionStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    enhancement_service: EnhancementService
    session_store: StudioSessionStore
    close_resources: Callable[[], Awaitable[None]]


def build_session_store(
    settings: Settings, enhancement_service: EnhancementService
) -> StudioSessionStore:
    """Create the per-browser session registry."""

    def new_session() -> StudioSession:
        return StudioSession(
            enhancement_service=enhancement_service,
            max_upload_bytes=settings.max_upload_bytes,
        )

    return StudioSessionStore(
        factory=new_session,
        ttl_seconds=settings.session_ttl_seconds,
        max_sessions=settings.max_sessions,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    gemini_client = GeminiImageClient.create(
        resolved_settings.gemini_api_key,
        timeout_seconds=resolved_settings.gemini_timeout_seconds,
    )
    enhancement_service = EnhancementService(
        client=gemini_client,
        model=resolved_settings.gemini_model,
        prompt=load_enhancement_prompt(resolved_settings),
    )
    session_store = build_session_store(resolved_settings, enhancement_service)

    async def close_resources() -> None:
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        enhancement_service=enhancement_service,
        session_store=session_store,
        close_resources=close_resources,
    )
