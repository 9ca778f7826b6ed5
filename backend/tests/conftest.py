"""
Shared helpers for the gateway tests.

Upstream vendors are simulated with ``httpx.MockTransport``; nothing here
touches the network.
"""
from __future__ import annotations

import asyncio
import json
from collections import defaultdict
from typing import Any, Dict, List, Union

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from lingobot.core.config import Settings
from lingobot.main import create_app

Outcome = Union[httpx.Response, Exception]

GEMINI_HOST = "generativelanguage.googleapis.com"
MISTRAL_HOST = "api.mistral.ai"
COHERE_HOST = "api.cohere.ai"
GROQ_HOST = "api.groq.com"
OPENROUTER_HOST = "openrouter.ai"


def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {
        "cohere_key": "cohere-test-key",
        "groq_key": "groq-test-key",
        "openrouter_key": "openrouter-test-key",
        "google_gemini_api_key1": "gemini-test-key",
        "mistral_key": "mistral-test-key",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeUpstream:
    """
    Replays queued outcomes per upstream host and records every request.

    An outcome is either an ``httpx.Response`` or an exception to raise
    (e.g. ``httpx.ConnectError``).
    """

    def __init__(self) -> None:
        self._outcomes: Dict[str, List[Outcome]] = defaultdict(list)
        self.requests: List[httpx.Request] = []

    def queue(self, host: str, *outcomes: Outcome) -> "FakeUpstream":
        self._outcomes[host].extend(outcomes)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        pending = self._outcomes[request.url.host]
        if not pending:
            raise AssertionError(f"unexpected request to {request.url}")
        outcome = pending.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def calls(self, host: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


class RecordingSleep:
    """Stands in for ``asyncio.sleep`` and remembers requested delays."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def chat_completion(content: str) -> httpx.Response:
    return httpx.Response(
        200,
        json={
            "id": "cmpl-1",
            "object": "chat.completion",
            "choices": [
                {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
            ],
        },
    )


def gemini_reply(text: str) -> httpx.Response:
    return httpx.Response(
        200,
        json={"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]},
    )


def cohere_reply(text: str) -> httpx.Response:
    return httpx.Response(200, json={"response_id": "r-1", "text": text})


def connect_error() -> httpx.ConnectError:
    return httpx.ConnectError("connection refused")


def json_body(request: httpx.Request) -> Dict[str, Any]:
    return json.loads(request.content)


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def call_api(upstream):
    """
    Issue one request against a fresh app wired to the fake upstream.
    """

    def _call(method: str, path: str, settings: Settings | None = None, **kwargs: Any) -> httpx.Response:
        app = create_app(settings or make_settings(), http_client=upstream.client())

        async def _send() -> httpx.Response:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                return await client.request(method, path, **kwargs)

        return run(_send())

    return _call
