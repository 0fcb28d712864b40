"""Request normalization — coerces any inbound payload into a corpus."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Any, Literal

from pydantic import ValidationError

from engine.corpus import build_corpus, build_topic_corpus
from engine.errors import InvalidInputError, MethodError
from prompts.system_prompt import ENTRIES_HEADING, TOPICS_HEADING
from schemas.request import Entry

logger = logging.getLogger("digest.engine.normalizer")

EmptyPolicy = Literal["placeholder", "reject"]


@dataclass(frozen=True)
class NormalizedInput:
    corpus: str
    topic_focus: str
    heading: str
    item_count: int

    @property
    def is_empty(self) -> bool:
        return self.item_count == 0


# ── Helpers ────────────────────────────────────────────────────────────

def _focus_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v).strip() for v in value if str(v).strip())
    return str(value).strip()


def coerce_entries(raw: Any, *, now: datetime) -> list[Entry]:
    """Keep the record-like items of *raw*, stamping missing ``created`` with *now*."""
    if not isinstance(raw, list):
        return []

    entries: list[Entry] = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            continue
        try:
            entry = Entry.model_validate(item)
        except ValidationError as exc:
            logger.warning("Dropping entry #%d: %d validation error(s)", index, exc.error_count())
            continue
        if entry.created is None:
            entry = entry.model_copy(update={"created": now})
        entries.append(entry)
    return entries


def _normalize_topics(raw: list[Any]) -> NormalizedInput:
    topics = [t.strip() for t in raw if isinstance(t, str) and t.strip()]
    if not topics or len(topics) != len(raw):
        raise InvalidInputError("Missing topics.")
    return NormalizedInput(
        corpus=build_topic_corpus(topics),
        topic_focus=", ".join(topics),
        heading=TOPICS_HEADING,
        item_count=len(topics),
    )


# ── Public API ─────────────────────────────────────────────────────────

def require_post(method: str | None) -> None:
    """Raise :class:`MethodError` for any verb other than POST (case-insensitive)."""
    if (method or "").upper() != "POST":
        raise MethodError()


def normalize_request(
    body: Any,
    *,
    policy: EmptyPolicy = "placeholder",
    now: datetime | None = None,
    tz: tzinfo | None = None,
    timestamp_format: str | None = None,
) -> NormalizedInput:
    """Coerce *body* into a :class:`NormalizedInput`.

    Parameters
    ----------
    body : Any
        Parsed JSON body.  Anything that is not an object is treated as ``{}``.
    policy : {"placeholder", "reject"}
        What to do with an empty entry list: return an empty input (the
        handler answers with a placeholder summary) or raise a 400.
    now : datetime, optional
        Timestamp for entries without ``created``; captured once per request.
    tz, timestamp_format
        Rendering options for corpus timestamps; no format means en-US style.

    Raises
    ------
    InvalidInputError
        For a malformed ``topics`` list, or an empty entry list under the
        ``"reject"`` policy.
    """
    if not isinstance(body, dict):
        body = {}

    topics = body.get("topics")
    if "entries" not in body and isinstance(topics, list):
        return _normalize_topics(topics)

    stamp = now or datetime.now(timezone.utc)
    if stamp.tzinfo is None:
        stamp = stamp.astimezone()
    entries = coerce_entries(body.get("entries"), now=stamp)
    if not entries and policy == "reject":
        raise InvalidInputError("Missing entries.")

    return NormalizedInput(
        corpus=build_corpus(entries, tz=tz, fmt=timestamp_format),
        topic_focus=_focus_text(topics),
        heading=ENTRIES_HEADING,
        item_count=len(entries),
    )
