"""Pytest fixtures for gateway tests.

Replaces the upstream completion API with an in-process httpx.MockTransport so
that route tests never leave the process.
"""

import asyncio
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from services.completion_client import CompletionClient, get_completion_client

TEST_UPSTREAM_URL = "https://upstream.test/v1/chat/completions"


class FakeUpstream:
    """Records outgoing completion requests and replies with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {"choices": [{"message": {"content": "Fine."}}]}
        self.error = None
        self.delay = 0

    def reply(self, status_code, body):
        self.status_code = status_code
        self.body = body

    def fail_with(self, error_cls):
        self.error = error_cls

    def stall_for(self, seconds):
        self.delay = seconds

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(
            {
                "url": str(request.url),
                "headers": dict(request.headers),
                "json": json.loads(request.content),
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error("upstream unreachable", request=request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last_payload(self):
        return self.requests[-1]["json"]


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def make_completion_client(upstream):
    def _make(timeout=None):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
        return http_client, CompletionClient(
            http_client,
            api_key="sk-test",
            url=TEST_UPSTREAM_URL,
            model="gpt-4o-mini",
            timeout=timeout,
        )

    return _make


@pytest.fixture
def client(make_completion_client):
    async def _override():
        http_client, completion_client = make_completion_client()
        async with http_client:
            yield completion_client

    app.dependency_overrides[get_completion_client] = _override
    yield TestClient(app)
    app.dependency_overrides.clear()
