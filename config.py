"""Digest configuration — loaded from environment / .env file."""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "gpt-4o-mini"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- LLM provider --------------------------------------------------
    openai_api_key: str = ""  # required; checked per request
    openai_model: str = DEFAULT_MODEL
    openai_base_url: str | None = None  # any OpenAI-compatible endpoint
    temperature: float = 0.4

    # --- Server ---------------------------------------------------------
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    allowed_origins: str = "*"  # comma-separated origins, e.g. "http://localhost:3000,https://app.example.com"

    # --- Summarization --------------------------------------------------
    empty_entries_policy: Literal["placeholder", "reject"] = "placeholder"
    error_format: Literal["text", "json"] = "text"
    timezone: str | None = None  # IANA name; None → server local time
    timestamp_format: str | None = None  # strftime pattern; None → en-US style "1/5/2024, 9:03:00 AM"

    @field_validator("openai_model")
    @classmethod
    def _default_model_when_blank(cls, value: str) -> str:
        return value.strip() or DEFAULT_MODEL


settings = Settings()
