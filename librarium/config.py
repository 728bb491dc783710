"""
Configuration module for Librarium search.
Loads settings from environment variables or .env file.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file from project root (parent of librarium/ directory)
_project_root = Path(__file__).parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


def _optional_path(value: str) -> Optional[Path]:
    return Path(value) if value else None


class Config:
    """Application configuration."""

    # Type-ahead search settings
    SEARCH_DEBOUNCE_SECONDS: float = float(os.getenv("SEARCH_DEBOUNCE_SECONDS", "0.3"))
    SEARCH_RESULT_LIMIT: int = int(os.getenv("SEARCH_RESULT_LIMIT", "8"))
    SEARCH_MAX_SESSIONS: int = int(os.getenv("SEARCH_MAX_SESSIONS", "100"))

    # Remote search provider
    # Supported providers: "google_books", "offline"
    SEARCH_REMOTE_PROVIDER: str = os.getenv("SEARCH_REMOTE_PROVIDER", "offline")
    REMOTE_TIMEOUT_SECONDS: float = float(os.getenv("REMOTE_TIMEOUT_SECONDS", "10.0"))

    # Google Books settings
    GOOGLE_BOOKS_BASE_URL: str = os.getenv(
        "GOOGLE_BOOKS_BASE_URL", "https://www.googleapis.com/books/v1"
    )
    GOOGLE_BOOKS_API_KEY: str = os.getenv("GOOGLE_BOOKS_API_KEY", "")

    # Catalogue seed file (YAML or JSON), optional
    LIBRARY_PATH: Optional[Path] = _optional_path(os.getenv("LIBRARY_PATH", ""))

    # API settings
    API_HOST: str = os.getenv("API_HOST", "127.0.0.1")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    REMOTE_PROVIDERS: tuple = ("google_books", "offline")

    @classmethod
    def validate(cls) -> None:
        """Validate search configuration."""
        if cls.SEARCH_DEBOUNCE_SECONDS < 0:
            raise ValueError(
                f"SEARCH_DEBOUNCE_SECONDS must not be negative. "
                f"Current value: {cls.SEARCH_DEBOUNCE_SECONDS}"
            )
        if cls.SEARCH_RESULT_LIMIT < 1:
            raise ValueError(
                f"SEARCH_RESULT_LIMIT must be at least 1. "
                f"Current value: {cls.SEARCH_RESULT_LIMIT}"
            )
        if cls.SEARCH_MAX_SESSIONS < 1:
            raise ValueError(
                f"SEARCH_MAX_SESSIONS must be at least 1. "
                f"Current value: {cls.SEARCH_MAX_SESSIONS}"
            )

        provider = cls.SEARCH_REMOTE_PROVIDER.lower()
        if provider not in cls.REMOTE_PROVIDERS:
            raise ValueError(
                f"SEARCH_REMOTE_PROVIDER must be one of: {', '.join(cls.REMOTE_PROVIDERS)}. "
                f"Got: {provider}"
            )

    @classmethod
    def get_remote_config(cls) -> dict:
        """Get configuration for the active remote search provider."""
        provider = cls.SEARCH_REMOTE_PROVIDER.lower()

        base_config = {
            "provider": provider,
            "limit": cls.SEARCH_RESULT_LIMIT,
        }

        if provider == "google_books":
            return {
                **base_config,
                "base_url": cls.GOOGLE_BOOKS_BASE_URL,
                "api_key": cls.GOOGLE_BOOKS_API_KEY,
                "timeout": cls.REMOTE_TIMEOUT_SECONDS,
            }
        elif provider == "offline":
            return base_config

        raise ValueError(f"Unknown remote search provider: {provider}")


# Singleton config instance
config = Config()
