"""
Configuration for the Complexity Gate.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    # Groq Configuration
    GROQ_API_KEY: str = Field(default="")
    GROQ_MODEL: str = Field(default="qwen-2.5-coder-32b")
    GROQ_BASE_URL: str = Field(default="https://api.groq.com/openai/v1/chat/completions")

    # Generation settings
    MAX_TOKENS: int = Field(default=1024)
    TEMPERATURE: float = Field(default=0.1)  # Low for consistent JSON output
    REQUEST_TIMEOUT_SECONDS: float = Field(default=60.0)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


logger = logging.getLogger("complexity-gate")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the CLI and the HTTP API."""
    level = level or get_settings().LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
