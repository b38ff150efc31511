"""
NoteFlow Backend — Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before app starts.

Environment is the only configuration surface: there are no CLI flags.
Every value has a development default, so `noteflow` starts with no setup
and writes its notes to ./data/notes.json.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Storage ───────────────────────────────────────────────────────────
    # What: Which persistence mechanism backs the note collection
    # Options: json (single file, default), sqlite (embedded database),
    #          memory (lost on restart; useful for demos and tests)
    storage_backend: str = Field(default="json")

    # What: Path of the JSON file holding the note array
    # Why relative: Works in both Docker (mounted volume) and local development
    data_file: str = Field(default="./data/notes.json")

    # What: Async SQLAlchemy URL used when storage_backend=sqlite
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/notes.db",
        description="Async SQLAlchemy connection URL for the embedded database",
    )

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, v: str) -> str:
        """Ensures the storage backend is one we know how to build."""
        valid = {"json", "sqlite", "memory"}
        lower = v.lower()
        if lower not in valid:
            raise ValueError(f"Invalid storage_backend '{v}'. Must be one of: {valid}")
        return lower

    # ── Note Defaults ─────────────────────────────────────────────────────
    # Applied at creation when the client leaves a field empty
    default_title: str = Field(default="Untitled")
    default_color: str = Field(default="#ffffff")

    # ── CORS ──────────────────────────────────────────────────────────────
    # What: Allowed origins for cross-origin requests
    # Format: Comma-separated URLs (split by cors_origins_list)
    cors_origins: str = Field(default="http://localhost:5173,http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Rate Limiting ─────────────────────────────────────────────────────
    # What: Per-IP sliding window rate limit
    # Off by default: when on, any /api/notes call can also answer 429
    rate_limit_enabled: bool = Field(default=False)
    rate_limit_requests: int = Field(default=1000, ge=10, le=100000)
    rate_limit_window: int = Field(default=3600, ge=60, le=86400)  # seconds

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATA_FILE and data_file both work
    }


# Singleton instance — imported throughout the application
settings = Settings()
