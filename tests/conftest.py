"""Shared fixtures for notifyme tests."""

import json

import httpx
import pytest

from notifyme.gateways import factory


# ---------------------------------------------------------------------------
# Auto-use fixtures: cleanup global state between tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_gateway():
    """Reset the cached gateway after every test."""
    yield
    factory.reset_gateway()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("NOTIFYME_CAMPFIRE_TOKEN", "NOTIFYME_CAMPFIRE_FROM", "NOTIFYME_CAMPFIRE_TYPE"):
        monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# HTTP recording
# ---------------------------------------------------------------------------

class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 201, content: bytes | str = b"", **kwargs):
        self.status_code = status_code
        self.content = content
        self.kwargs = kwargs
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content, **self.kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def client(recorder):
    with httpx.Client(transport=httpx.MockTransport(recorder)) as c:
        yield c


@pytest.fixture
def config():
    return {"token": "abc", "from": "acme"}
