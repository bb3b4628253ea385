"""Configuration management using Pydantic Settings.

Values are read from environment variables first, then from a local .env
file. The same settings object serves the Streamlit front end (where to
reach the generation service) and the FastAPI service (which model to call).
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Generation service client
    api_url: str = "http://localhost:8000"
    generation_function: str = "generate-content"
    request_timeout: float = 120.0  # LLM calls are slow

    log_level: str = "INFO"

    # Google Cloud / Vertex AI
    google_project_id: str | None = None
    google_location: str = "us-central1"
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.7

    @property
    def generation_url(self) -> str:
        """Full URL of the generate-content function."""
        return f"{self.api_url.rstrip('/')}/{self.generation_function.lstrip('/')}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Default settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an entry point.

    Args:
        level: Override for settings.log_level.
    """
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
