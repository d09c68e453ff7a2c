"""
Request Composer for metagen

Validates form fields, posts them to the relay and renders the streamed
answer into a DisplayBuffer as it arrives.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Optional, Union

import httpx

from metagen.client.decoder import StreamDecoder
from metagen.client.display import DisplayBuffer
from metagen.config import get_settings
from metagen.exceptions import DecodeError, RequestFailed
from metagen.models.request import GenerationRequest

logger = logging.getLogger("metagen.client")

GENERATE_PATH = "/api/generate"


@dataclass
class Submission:
    """Outcome of one submit() call."""
    generation: int
    status: Literal["complete", "superseded"]
    text: str
    decode_errors: List[DecodeError] = field(default_factory=list)


class Composer:
    """
    Client side of the generation flow.

    One Composer owns one DisplayBuffer. Each submission is tagged with a
    generation id; if a newer submission starts while an older stream is
    still running, the older stream is closed at its next chunk and none of
    its text reaches the buffer.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        buffer: Optional[DisplayBuffer] = None,
    ):
        settings = get_settings()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=base_url or settings.composer_base_url,
            timeout=httpx.Timeout(timeout or settings.composer_timeout_seconds),
        )
        self.buffer = buffer or DisplayBuffer()
        self._generation = 0

    async def __aenter__(self) -> "Composer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    def reset(self) -> None:
        """Clear the buffer and retire any submission still streaming."""
        self._generation += 1
        self.buffer.clear(self._generation)

    async def submit(
        self,
        fields: Union[GenerationRequest, Dict[str, Any]],
        on_chunk: Optional[Callable[[str], None]] = None,
    ) -> Submission:
        """Submit form fields and stream the answer into the buffer.

        Raises pydantic.ValidationError before any network call if the fields
        are invalid, and RequestFailed on a non-success status or a broken
        transport. ``on_chunk`` is called with each decoded piece of text.
        """
        if isinstance(fields, GenerationRequest):
            request = fields
        else:
            request = GenerationRequest.model_validate(fields)

        self._generation += 1
        generation = self._generation
        self.buffer.reset(generation)

        try:
            return await self._stream(request, generation, on_chunk)
        except RequestFailed:
            self.buffer.finish(generation, "failed")
            raise
        except httpx.HTTPError as e:
            self.buffer.finish(generation, "failed")
            logger.error("Generation %d failed: %s", generation, e)
            raise RequestFailed(0, type(e).__name__, str(e) or None) from e
        except BaseException:
            # Cancellation, a failing on_chunk callback or any other error.
            self.buffer.finish(generation, "failed")
            raise

    async def _stream(
        self,
        request: GenerationRequest,
        generation: int,
        on_chunk: Optional[Callable[[str], None]],
    ) -> Submission:
        decoder = StreamDecoder()
        self.buffer.decode_errors = decoder.errors

        async with self.client.stream("POST", GENERATE_PATH, json=request.to_wire()) as response:
            if not response.is_success:
                detail = (await response.aread()).decode("utf-8", errors="replace").strip()
                logger.error("Generation %d rejected: %s %s", generation, response.status_code, detail)
                raise RequestFailed(response.status_code, response.reason_phrase, detail or None)

            # One read at a time, in order; this loop is the only consumer.
            async for chunk in response.aiter_bytes():
                if not self._deliver(generation, decoder.decode(chunk), on_chunk):
                    return self._superseded(generation, decoder)

            if not self._deliver(generation, decoder.flush(), on_chunk):
                return self._superseded(generation, decoder)

        self.buffer.finish(generation, "complete")
        logger.info("Generation %d complete (%d chars)", generation, len(self.buffer.text))
        return Submission(generation, "complete", self.buffer.text, decoder.errors)

    def _deliver(self, generation: int, text: str, on_chunk: Optional[Callable[[str], None]]) -> bool:
        if not self.buffer.is_current(generation):
            return False
        if text:
            self.buffer.append(generation, text)
            if on_chunk is not None:
                on_chunk(text)
        return True

    def _superseded(self, generation: int, decoder: StreamDecoder) -> Submission:
        logger.info("Generation %d superseded by %d, closing its stream", generation, self.buffer.generation)
        return Submission(generation, "superseded", "", decoder.errors)
