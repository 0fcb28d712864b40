"""Corpus rendering — turns diary entries into markdown bullet lines."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from schemas.request import Entry


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Return the zone for *name*, or ``None`` for server local time."""
    return ZoneInfo(name) if name else None


def format_timestamp(created: datetime, *, tz: tzinfo | None = None, fmt: str | None = None) -> str:
    """Render *created* in *tz* with strftime *fmt*.

    Without *fmt* the en-US locale style is used: no zero padding on month,
    day or hour (``1/5/2024, 9:03:00 AM``).
    """
    local = created.astimezone(tz)
    if fmt:
        return local.strftime(fmt)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local:%M:%S} {meridiem}"


def render_entry(
    entry: Entry,
    *,
    tz: tzinfo | None = None,
    fmt: str | None = None,
) -> str:
    """Render one entry as ``- [<timestamp>] (<topics>) <title> — <text>``.

    The parenthetical is dropped when *topics* is blank, and the em-dash only
    joins title and text when both are present.  ``entry.created`` must
    already be stamped.
    """
    stamp = format_timestamp(entry.created, tz=tz, fmt=fmt)
    topics = (entry.topics or "").strip()
    parts = [p for p in ((entry.title or "").strip(), (entry.text or "").strip()) if p]

    line = f"- [{stamp}] "
    if topics:
        line += f"({topics}) "
    line += " — ".join(parts)
    return line.rstrip()


def build_corpus(
    entries: Iterable[Entry],
    *,
    tz: tzinfo | None = None,
    fmt: str | None = None,
) -> str:
    """Sort *entries* by ``created`` (stable) and render one line each."""
    ordered = sorted(entries, key=lambda e: e.created)
    return "\n".join(render_entry(e, tz=tz, fmt=fmt) for e in ordered)


def build_topic_corpus(topics: Iterable[str]) -> str:
    return "\n".join(f"- {t.strip()}" for t in topics)
