"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The Gemini credential comes from GEMINI_API_KEY only (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - A missing credential does not fail startup; the relay rejects per request

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Origin allow-list is a setting, defaults match the two published sites
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Gemini
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    # None → httpx transport default
    gemini_timeout_seconds: float | None = None

    # CORS
    allowed_origins: list[str] = [
        "https://educadug.github.io",
        "https://mrguevaracga.github.io",
    ]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
