from __future__ import annotations

import os
from types import SimpleNamespace
from typing import Any, Iterable

import pytest

# metagen.main reads settings at import time.
os.environ.setdefault("OPENAI_API_KEY", "test-key")

from fastapi.testclient import TestClient  # noqa: E402

from metagen.config import Settings  # noqa: E402
from metagen.main import app  # noqa: E402
from metagen.services.relay_service import RelayService, get_relay_service  # noqa: E402


def _chunk(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=content))])


class FakeStream:
    """Stands in for openai.AsyncStream: async iterable and async context manager."""

    def __init__(self, pieces: Iterable[str], error: Exception | None = None) -> None:
        self.pieces = list(pieces)
        self.error = error
        self.closed = False

    async def __aenter__(self) -> "FakeStream":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.closed = True

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        yield _chunk(None)  # role-only first delta
        for piece in self.pieces:
            yield _chunk(piece)
        if self.error is not None:
            raise self.error
        yield SimpleNamespace(choices=[])  # usage-only trailer


class FakeCompletions:
    def __init__(
        self,
        pieces: Iterable[str] = (),
        error: Exception | None = None,
        stream_error: Exception | None = None,
    ) -> None:
        self.pieces = list(pieces)
        self.error = error
        self.stream_error = stream_error
        self.calls: list[dict[str, Any]] = []
        self.streams: list[FakeStream] = []

    async def create(self, **kwargs: Any) -> FakeStream:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        stream = FakeStream(self.pieces, self.stream_error)
        self.streams.append(stream)
        return stream


class FakeOpenAI:
    def __init__(self, completions: FakeCompletions) -> None:
        self.chat = SimpleNamespace(completions=completions)


@pytest.fixture
def upstream() -> FakeCompletions:
    return FakeCompletions(pieces=['<meta name="description" ', 'content="Amore Ristorante" />'])


@pytest.fixture
def relay(upstream: FakeCompletions) -> RelayService:
    settings = Settings(openai_api_key="test-key", ai_model="test-model")
    return RelayService(settings, client=FakeOpenAI(upstream))


@pytest.fixture
def client(relay: RelayService):
    app.dependency_overrides[get_relay_service] = lambda: relay
    yield TestClient(app)
    app.dependency_overrides.clear()
