"""Request schemas for the Digest API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class Entry(BaseModel):
    """One diary note as sent by the client UI."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    created: datetime | None = Field(
        default=None,
        description="Creation time: epoch seconds/milliseconds or ISO-8601. Missing, falsy or unparseable → stamped at ingestion.",
    )
    title: str | None = None
    text: str | None = None
    topics: str | None = Field(default=None, description="Free-form topic tags, e.g. 'work, health'.")

    @field_validator("topics", mode="before")
    @classmethod
    def _join_topic_list(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v).strip() for v in value if str(v).strip())
        return value

    @field_validator("created", mode="wrap")
    @classmethod
    def _lenient_created(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> datetime | None:
        # Falsy or unparseable values count as missing and get stamped at ingestion.
        if not value:
            return None
        try:
            parsed = handler(value)
        except ValidationError:
            return None
        # Naive datetimes would not compare with epoch-derived (UTC) ones.
        if parsed is not None and parsed.tzinfo is None:
            return parsed.astimezone()
        return parsed
