"""
Notes API — Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, the entry point, and the test suite.
When:  Loaded once at module import time.

The only setting the service strictly needs is PORT (default 3000). The rest
tune logging, the bind address, the static asset root, and CORS.
"""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Static assets bundled with the package (index.html, app.js, style.css)
DEFAULT_PUBLIC_DIR = Path(__file__).resolve().parent / "public"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development; an empty
    environment starts the server on port 3000.
    """

    # ── Server ────────────────────────────────────────────────────────────
    port: int = Field(default=3000, ge=1, le=65535, description="Listening port")
    host: str = Field(default="0.0.0.0", description="Bind address")

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

    # ── Static Assets ─────────────────────────────────────────────────────
    # Served at "/" after the API routes; a missing directory yields 404s
    public_dir: Path = Field(default=DEFAULT_PUBLIC_DIR)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "env_ignore_empty": True,  # PORT= behaves as unset
        "extra": "ignore",
    }


# Singleton instance used by the module-level app and the entry point
settings = Settings()
