"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from product_studio.prompts import PROFESSIONAL_PROMPT

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    gemini_api_key: str
    gemini_model: str = "gemini-2.5-flash-image"
    gemini_timeout_seconds: int = 120
    enhancement_prompt_file: Path | None = None
    max_upload_bytes: int = 20 * 1024 * 1024
    session_ttl_seconds: int = 3600
    max_sessions: int = 100
    session_cookie_secure: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def load_enhancement_prompt(settings: Settings) -> str:
    """Return the prompt sent with every enhancement request."""
    if settings.enhancement_prompt_file is None:
        return PROFESSIONAL_PROMPT
    text = settings.enhancement_prompt_file.read_text(encoding="utf-8").strip()
    return text or PROFESSIONAL_PROMPT
