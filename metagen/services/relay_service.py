"""
Relay Service for metagen

Forwards a generation request to the upstream chat completion API with
streaming enabled and hands the generated text back as it arrives.

The relay is a pass-through: every text delta from upstream is encoded as
UTF-8 and yielded immediately, with no buffering or reframing.
"""
from __future__ import annotations
import logging
from typing import Any, AsyncIterator, Optional

import openai
from openai import AsyncOpenAI

from metagen.config import Settings, get_settings, require_credentials
from metagen.exceptions import BadRequest, RequestFailed
from metagen.models.request import GenerationRequest
from metagen.services.prompt_builder import build_payload, build_prompt

logger = logging.getLogger("metagen.relay")


class RelayService:
    """Stateless bridge between POST /api/generate and the upstream model."""

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        self.settings = settings
        require_credentials(settings)

        if client is None:
            # Retries are off: a failure is reported to the caller as-is.
            client = AsyncOpenAI(
                api_key=settings.openai_api_key,
                base_url=settings.ai_base_url,
                timeout=settings.upstream_timeout_seconds,
                max_retries=0,
            )
        self.client = client

    async def handle(self, request: GenerationRequest) -> AsyncIterator[bytes]:
        """Open the upstream stream for a request and return its byte iterator.

        The upstream call is made here, before the caller starts its own
        response, so upstream status and connection failures surface as
        RequestFailed instead of a truncated 200.
        """
        prompt = build_prompt(request)
        if not prompt:
            raise BadRequest("No prompt in the request")
        logger.debug("Prompt: %s", prompt)

        payload = build_payload(prompt, self.settings.ai_model)

        try:
            stream = await self.client.chat.completions.create(**payload)
        except openai.APITimeoutError as e:
            logger.error("Upstream timed out: %s", e)
            raise RequestFailed(504, "Gateway Timeout", "Upstream timed out") from e
        except openai.APIConnectionError as e:
            logger.error("Upstream connection failed: %s", e)
            raise RequestFailed(502, "Bad Gateway", "Upstream connection error") from e
        except openai.APIStatusError as e:
            logger.error("Upstream returned %s: %s", e.status_code, e.message)
            raise RequestFailed(e.status_code, e.response.reason_phrase or "Upstream error", e.message) from e

        return self._relay(stream)

    async def _relay(self, stream: Any) -> AsyncIterator[bytes]:
        """Yield each upstream text delta as UTF-8 bytes, in arrival order."""
        chunks = 0
        try:
            async with stream:
                async for chunk in stream:
                    if not chunk.choices:
                        continue
                    content = chunk.choices[0].delta.content
                    if content:
                        chunks += 1
                        yield content.encode("utf-8")
        except Exception:
            # Headers are already sent; re-raising aborts the connection.
            logger.exception("Upstream stream broke after %d chunks", chunks)
            raise
        logger.info("Relayed %d chunks", chunks)


# =============================================================================
# Module-level Functions
# =============================================================================

_relay_service: Optional[RelayService] = None


def get_relay_service() -> RelayService:
    """Get or create the relay service instance."""
    global _relay_service
    if _relay_service is None:
        _relay_service = RelayService(get_settings())
    return _relay_service


def reset_relay_service() -> None:
    """Drop the cached relay so the next call rebuilds it from settings."""
    global _relay_service
    _relay_service = None
