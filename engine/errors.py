"""Error taxonomy for the summarize endpoint.

Every error carries the HTTP status it is surfaced with; the translator turns
them into responses at the handler boundary.
"""

from __future__ import annotations


class DigestError(Exception):
    """Base class for all handled summarize errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MethodError(DigestError):
    """Raised for any HTTP verb other than POST."""

    def __init__(self, message: str = "Use POST."):
        super().__init__(message, status_code=405)


class InvalidInputError(DigestError):
    """Raised when required input fields are missing or malformed."""

    def __init__(self, message: str = "Missing entries."):
        super().__init__(message, status_code=400)


class ConfigurationError(DigestError):
    """Raised when a required secret is not configured."""

    def __init__(self, message: str = "OPENAI_API_KEY not set."):
        super().__init__(message, status_code=500)


class UpstreamError(DigestError):
    """Raised when the completion API fails or returns an unusable body."""

    def __init__(self, message: str, upstream_status: int | None = None):
        self.upstream_status = upstream_status
        super().__init__(message, status_code=502)
