"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Mentora"
    app_version: str = "4.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]

    # Alle AI completion provider
    # Leave unset to run in fallback mode (every completion uses canned text)
    alleai_api_key: str | None = None
    alleai_base_url: str = "https://api.alle.ai"
    alleai_chat_path: str = "/chat"
    llm_models: list[str] = ["gpt-4o"]
    llm_timeout_seconds: float = 60.0

    # Sampling
    chat_temperature: float = 0.7
    creative_temperature: float = 0.9
    chat_max_tokens: int = 1000
    story_temperature: float = 0.8
    story_max_tokens: int = 1200

    # Conversation / context limits
    conversation_retention: int = 20
    file_context_max_chars: int = 1500
    file_preview_chars: int = 300

    # Uploads
    max_upload_size_bytes: int = 50 * 1024 * 1024  # 50MB

    # Auth / JWT
    # Override in .env for anything other than local development
    jwt_secret_key: str = "mentora-dev-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7  # 7 days

    # Google OAuth - when set, id tokens are verified against Google
    google_client_id: str | None = None

    # Set to true when frontend and backend are on different domains
    cookie_cross_domain: bool = False

    @computed_field
    @property
    def provider_configured(self) -> bool:
        """Whether an API key for the completion provider is present."""
        return bool(self.alleai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def sanitize_error(error: Exception, *, generic_message: str = "An internal error occurred.") -> str:
    """
    Return a user-safe error message.

    In development, returns the full exception string for debugging.
    In staging/production, returns a generic message to avoid leaking internals.
    """
    settings = get_settings()
    if settings.environment == "development":
        return str(error)
    return generic_message
