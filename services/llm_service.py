"""Thin wrapper around the OpenAI chat-completion API (or any compatible endpoint)."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from engine.errors import UpstreamError

logger = logging.getLogger("digest.llm")

NO_SUMMARY = "(No summary returned)"


def extract_content(data: Any) -> str:
    """Return ``choices[0].message.content`` or :data:`NO_SUMMARY`."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return NO_SUMMARY
    if not isinstance(content, str) or not content:
        return NO_SUMMARY
    return content


class SummaryClient:
    """Single-attempt chat-completion client.

    Retries are disabled on the underlying SDK client; failures surface as
    :class:`UpstreamError` with the upstream body preserved.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        *,
        temperature: float = 0.4,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.model = model
        self.temperature = temperature
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            http_client=http_client,
        )

    async def summarize(self, system_prompt: str, user_message: str) -> str:
        """Send one chat-completion request and return the assistant's text.

        Parameters
        ----------
        system_prompt : str
            The fixed editorial instruction.
        user_message : str
            Topic focus and corpus.

        Returns
        -------
        str
            The first choice's content, or ``"(No summary returned)"``.

        Raises
        ------
        UpstreamError
            On a non-2xx status, a network failure, or a non-JSON body.
        """
        kwargs: dict[str, Any] = {
            "model": self.model,
            "temperature": self.temperature,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
        }

        try:
            raw = await self._client.chat.completions.with_raw_response.create(**kwargs)
        except APIStatusError as exc:
            body = exc.response.text
            logger.error("OpenAI returned %d: %s", exc.status_code, body[:500])
            raise UpstreamError(f"OpenAI error {exc.status_code}: {body}", upstream_status=exc.status_code) from exc
        except APIConnectionError as exc:
            logger.error("OpenAI request failed: %s", exc)
            raise UpstreamError(f"OpenAI request failed: {exc}") from exc

        txt = raw.http_response.text
        try:
            data = json.loads(txt)
        except json.JSONDecodeError as exc:
            logger.error("OpenAI returned non-JSON body: %s", txt[:500])
            raise UpstreamError(f"OpenAI returned non-JSON: {txt}", upstream_status=raw.status_code) from exc

        return extract_content(data)
