"""Response schemas for the Digest API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SummarizeResponse(BaseModel):
    summary: str = Field(description="Markdown newsletter-style brief.")


class ErrorResponse(BaseModel):
    error: str


class HandlerResponse(BaseModel):
    """Framework-neutral result of the summarize handler."""

    status_code: int = 200
    body: str | dict[str, Any]

    @property
    def is_json(self) -> bool:
        return isinstance(self.body, dict)
