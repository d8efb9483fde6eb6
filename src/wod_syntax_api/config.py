"""Configuration settings for the WOD syntax API."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    try:
        return int(value) if value else default
    except ValueError:
        return default


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # Input bounds applied before parsing
    WOD_MAX_CHARS: int = 50000
    WOD_MAX_LINES: int = 1000

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        # Input bounds
        self.WOD_MAX_CHARS = _int_env("WOD_MAX_CHARS", Settings.WOD_MAX_CHARS)
        self.WOD_MAX_LINES = _int_env("WOD_MAX_LINES", Settings.WOD_MAX_LINES)

        # CORS
        origins = os.getenv("CORS_ORIGINS")
        if origins:
            self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            self.CORS_ORIGINS = list(Settings.CORS_ORIGINS)


settings = Settings()
