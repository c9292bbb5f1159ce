"""
Homebase — Centralized configuration.

Loads all settings from .env and validates them.
This module is the foundation for every other module in the project.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

# Load .env from project root (one level up from homebase/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_ENV_PATH)

_STORE_BACKENDS = ("memory", "sqlite")


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Document store: "memory" | "sqlite"
    STORE_BACKEND: str = "sqlite"
    DATABASE_PATH: str = "data/homebase.db"

    # Single default family
    FAMILY_ID: str = "defaultFamily123"
    FAMILY_NAME: str = "Sample Family"

    # Connectivity probe (HEAD request target for the retry action)
    CONNECTIVITY_PROBE_URL: str = "https://www.google.com/favicon.ico"
    CONNECTIVITY_TIMEOUT_SECONDS: float = 5.0

    LOG_LEVEL: str = "INFO"

    @field_validator("STORE_BACKEND", mode="before")
    @classmethod
    def parse_backend(cls, v: str) -> str:
        backend = (v or "sqlite").strip().lower()
        if backend not in _STORE_BACKENDS:
            raise ValueError(
                f"STORE_BACKEND must be one of {_STORE_BACKENDS}, got {v!r}"
            )
        return backend

    @field_validator("CONNECTIVITY_TIMEOUT_SECONDS", mode="before")
    @classmethod
    def parse_timeout(cls, v: str | float) -> float:
        return float(v)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()


def _load_settings() -> Settings:
    """Load settings from environment."""
    return Settings(
        STORE_BACKEND=os.getenv("STORE_BACKEND", "sqlite"),
        DATABASE_PATH=os.getenv("DATABASE_PATH", "data/homebase.db"),
        FAMILY_ID=os.getenv("FAMILY_ID", "defaultFamily123"),
        FAMILY_NAME=os.getenv("FAMILY_NAME", "Sample Family"),
        CONNECTIVITY_PROBE_URL=os.getenv(
            "CONNECTIVITY_PROBE_URL", "https://www.google.com/favicon.ico"
        ),
        CONNECTIVITY_TIMEOUT_SECONDS=os.getenv("CONNECTIVITY_TIMEOUT_SECONDS", "5"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
    )


# Singleton — imported by all other modules as:
#   from homebase.config import settings
settings = _load_settings()
