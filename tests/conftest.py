"""Shared fixtures: settings and clients backed by httpx.MockTransport."""
import json
from typing import Any, Callable

import httpx
import pytest

from mailchimp_oauth import MailchimpClient, MailchimpSettings


def json_response(status_code: int = 200, body: Any = None) -> httpx.Response:
    """Build an httpx.Response with a JSON body."""
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(body).encode() if body is not None else b"",
        headers={"content-type": "application/json"},
    )


class Recorder:
    """Mock transport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response | Callable[[httpx.Request], httpx.Response]):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if callable(self.response):
            return self.response(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> MailchimpSettings:
    return MailchimpSettings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        redirect_uri="https://app.test/mailchimp/callback",
        secret_key="test-secret-key",
    )


@pytest.fixture
def make_client(settings):
    """Return a factory building a client whose requests go to a Recorder."""

    def _make(response) -> tuple[MailchimpClient, Recorder]:
        recorder = Recorder(response)
        return MailchimpClient(settings, transport=httpx.MockTransport(recorder)), recorder

    return _make


@pytest.fixture
def respond():
    """Expose json_response to tests."""
    return json_response
