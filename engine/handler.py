"""Summarize handler — Normalize → Build → Call → Translate."""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Any

import httpx

from config import Settings
from engine.corpus import resolve_timezone
from engine.errors import ConfigurationError, DigestError, MethodError
from engine.normalizer import normalize_request, require_post
from engine.translator import success, translate_error
from prompts.system_prompt import PLACEHOLDER_SUMMARY, build_messages
from schemas.response import HandlerResponse
from services.llm_service import SummaryClient

logger = logging.getLogger("digest.handler")


class SummarizeHandler:
    """Framework-agnostic ``(method, body) → HandlerResponse`` callable.

    Configuration is injected once at construction; the handler keeps no
    per-request state, so one instance serves concurrent requests.
    """

    def __init__(self, settings: Settings, *, http_client: httpx.AsyncClient | None = None):
        self.settings = settings
        self._tz = resolve_timezone(settings.timezone)
        self._client: SummaryClient | None = None
        if settings.openai_api_key:
            self._client = SummaryClient(
                settings.openai_api_key,
                settings.openai_model,
                temperature=settings.temperature,
                base_url=settings.openai_base_url,
                http_client=http_client,
            )

    async def __call__(self, method: str, body: Any, *, now: datetime | None = None) -> HandlerResponse:
        t0 = time.perf_counter()
        try:
            response = await self._handle(method, body, now=now)
        except DigestError as exc:
            if not isinstance(exc, MethodError):
                logger.warning("Summarize rejected (%d): %s", exc.status_code, exc.message[:200])
            response = translate_error(exc, error_format=self.settings.error_format)
        except Exception as exc:
            logger.exception("Summarize failed")
            response = translate_error(exc, error_format=self.settings.error_format)

        logger.info("%s summarize → %d in %.2fs", method, response.status_code, time.perf_counter() - t0)
        return response

    async def _handle(self, method: str, body: Any, *, now: datetime | None) -> HandlerResponse:
        require_post(method)
        if self._client is None:
            raise ConfigurationError()

        normalized = normalize_request(
            body,
            policy=self.settings.empty_entries_policy,
            now=now,
            tz=self._tz,
            timestamp_format=self.settings.timestamp_format,
        )
        if normalized.is_empty:
            logger.info("No entries to summarize; returning placeholder.")
            return success(PLACEHOLDER_SUMMARY)

        messages = build_messages(normalized.corpus, normalized.topic_focus, normalized.heading)
        summary = await self._client.summarize(messages.system, messages.user)
        logger.info("Summarized %d item(s) with model %s", normalized.item_count, self._client.model)
        return success(summary)
