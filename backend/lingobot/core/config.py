from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (parent of backend/) for .env loading when running from backend/
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Provider keys are optional at startup; a missing key only fails the
    requests that need that provider.
    """

    # Core app settings
    app_name: str = Field(default="lingobot-gateway")
    environment: str = Field(default="development")  # development | staging | production

    # HTTP server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # Observability
    log_level: str = Field(default="INFO")

    # Provider credentials
    cohere_key: Optional[str] = Field(
        default=None,
        description="Cohere API key. Required by /cohere and force_cohere.",
    )
    groq_key: Optional[str] = Field(
        default=None,
        description="Groq API key. Required by /groq and force_groq.",
    )
    openrouter_key: Optional[str] = Field(
        default=None,
        description="OpenRouter API key. Required by /openrouter.",
    )
    google_gemini_api_key1: Optional[str] = Field(
        default=None,
        description="Google Gemini API key. Required by /gemini and /ai.",
    )
    mistral_key: Optional[str] = Field(
        default=None,
        description="Mistral API key. Required by /mistral and the /ai fallback.",
    )

    # OpenRouter app attribution headers
    openrouter_referer: str = Field(default="https://lingobot-api.onrender.com")
    openrouter_title: str = Field(default="Lingobot Gateway")

    # Shared outbound HTTP client
    http_max_connections: int = Field(default=1000)
    http_keepalive_expiry_seconds: float = Field(default=90.0)
    http_connect_timeout_seconds: float = Field(default=10.0)
    http_read_timeout_seconds: float = Field(default=30.0)
    http_write_timeout_seconds: float = Field(default=30.0)

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return a cached settings instance for use as a dependency.
    """
    return Settings()
