"""
Configuration module for the Trip Planner backend.

Loads environment variables and validates required settings.
"""
import logging
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

logger = logging.getLogger(__name__)


class Settings:
    """Application settings loaded from environment variables."""

    # Upstream chat-completion provider (A4F, OpenAI-compatible)
    A4F_API_KEY: str = os.getenv("A4F_API_KEY", "")
    UPSTREAM_BASE_URL: str = os.getenv("UPSTREAM_BASE_URL", "https://api.a4f.co/v1")
    UPSTREAM_MODEL: str = os.getenv("UPSTREAM_MODEL", "provider-1/chatgpt-4o-latest")
    UPSTREAM_TEMPERATURE: float = float(os.getenv("UPSTREAM_TEMPERATURE", "0.7"))
    UPSTREAM_MAX_TOKENS: int = int(os.getenv("UPSTREAM_MAX_TOKENS", "500"))

    # Server
    PORT: int = int(os.getenv("PORT", "3000"))

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (only consulted in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @property
    def chat_completions_url(self) -> str:
        """Full URL of the upstream chat-completions endpoint."""
        return f"{self.UPSTREAM_BASE_URL.rstrip('/')}/chat/completions"

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "A4F_API_KEY": cls.A4F_API_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"


# Create a singleton instance
settings = Settings()

# A missing API key never stops the proxy from starting: every upstream call
# will be rejected by the provider instead. Warn once here, not per request.
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        logger.warning(f"{e} Upstream calls will fail until it is set.")
