"""Prompt templates for the journal digest.

The system prompt asks for a **plain markdown** newsletter-style brief; the
user message carries the topic focus and the rendered corpus.
"""

from __future__ import annotations

from typing import NamedTuple

# ── System prompt ─────────────────────────────────────────────────────

SYSTEM_PROMPT = """
You are an editorial assistant. Summarize journal entries into a newsletter-ready brief:
- Start with a friendly 1–2 sentence intro.
- Then 3–6 bullet highlights (actionable, concrete; one line each).
- Add a short "Themes & Patterns" paragraph.
- End with a "Next steps" checklist (2–5 items) with [ ] checkboxes.
Use plain markdown. If TOPICS are provided, prioritize those.
""".strip()

# ── User message ──────────────────────────────────────────────────────

ENTRIES_HEADING = "ENTRIES (last 7 days)"
TOPICS_HEADING = "TOPICS"
NO_FOCUS = "(none)"

USER_TEMPLATE = """
TOPICS FOCUS: {topic_focus}

{heading}:
{corpus}
""".strip()

# ── Empty-input placeholder ───────────────────────────────────────────

PLACEHOLDER_SUMMARY = "\n".join(
    [
        "No entries found for the last 7 days.",
        "",
        "### Next steps",
        "- [ ] Add a couple of diary notes",
        "- [ ] Tag them with topics you care about",
        "- [ ] Hit Summarize again",
    ]
)


class PromptMessages(NamedTuple):
    system: str
    user: str


def build_messages(corpus: str, topic_focus: str = "", heading: str = ENTRIES_HEADING) -> PromptMessages:
    """Combine *corpus* and *topic_focus* with the fixed instructions."""
    user = USER_TEMPLATE.format(
        topic_focus=topic_focus.strip() or NO_FOCUS,
        heading=heading,
        corpus=corpus,
    )
    return PromptMessages(system=SYSTEM_PROMPT, user=user)
