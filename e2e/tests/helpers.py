"""Shared helpers for the offline harness tests."""

import json
from typing import Any, Callable

import httpx

from petstore_contract import Settings, open_client

TEST_BASE_URL = "https://petstore.test/v2"


def json_response(status_code: int, body: Any = None) -> httpx.Response:
    """Canned response; body=None means an empty payload."""
    if body is None:
        return httpx.Response(status_code)
    return httpx.Response(status_code, json=body)


def mock_client(
    handler: Callable[[httpx.Request], httpx.Response], settings: Settings | None = None
) -> httpx.AsyncClient:
    """AsyncClient whose requests go to `handler` instead of the network."""
    return open_client(
        settings or Settings(base_url=TEST_BASE_URL, timeout=5.0),
        transport=httpx.MockTransport(handler),
    )


class Recorder:
    """MockTransport handler that replays responses in order and keeps requests."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)
