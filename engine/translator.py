"""Maps handler outcomes to boundary responses."""

from __future__ import annotations

import logging
from typing import Literal

from engine.errors import DigestError
from schemas.response import ErrorResponse, HandlerResponse, SummarizeResponse

logger = logging.getLogger("digest.engine.translator")

ErrorFormat = Literal["text", "json"]

GENERIC_ERROR = "Server error"


def success(summary: str) -> HandlerResponse:
    return HandlerResponse(status_code=200, body=SummarizeResponse(summary=summary).model_dump())


def error_response(message: str, status_code: int, *, error_format: ErrorFormat = "text") -> HandlerResponse:
    if error_format == "json":
        return HandlerResponse(status_code=status_code, body=ErrorResponse(error=message).model_dump())
    return HandlerResponse(status_code=status_code, body=message)


def translate_error(exc: Exception, *, error_format: ErrorFormat = "text") -> HandlerResponse:
    """Turn *exc* into a response; unknown exceptions become a 500."""
    if isinstance(exc, DigestError):
        return error_response(exc.message, exc.status_code, error_format=error_format)
    return error_response(str(exc) or GENERIC_ERROR, 500, error_format=error_format)
