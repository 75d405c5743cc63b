"""HTTP adapter shared by every pet operation.

One call to `send` is one request: no retry, no status checking. Callers
decide what a status means.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from petstore_contract.config import Settings, load_settings
from petstore_contract.errors import TransportFailure
from petstore_contract.models import ApiMessage, Pet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationResult:
    status_code: int
    body: Any = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)

    def pet(self) -> Pet:
        return Pet.model_validate(self.body)

    def pets(self) -> list[Pet]:
        return [Pet.model_validate(item) for item in self.body]

    def message(self) -> ApiMessage:
        return ApiMessage.model_validate(self.body)


def open_client(settings: Settings | None = None, **kwargs: Any) -> httpx.AsyncClient:
    """Return an AsyncClient bound to the configured Pet-store base URL.

    Every request carries the configured `api_key` header, which the
    delete endpoint requires. Extra keyword arguments go straight to
    httpx.AsyncClient (tests pass `transport=` here).
    """
    settings = settings or load_settings()
    return httpx.AsyncClient(
        base_url=settings.base_url,
        headers={"Accept": "application/json", "api_key": settings.api_key},
        timeout=settings.timeout,
        **kwargs,
    )


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return {}


async def send(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    *,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    json: Any = None,
) -> OperationResult:
    """Issue one request relative to the client's base URL."""
    url = str(client.base_url).rstrip("/") + "/" + path.lstrip("/")
    logger.debug("%s %s params=%s", method, url, params)
    try:
        response = await client.request(
            method, path, params=params, headers=headers, json=json
        )
    except httpx.TransportError as exc:
        raise TransportFailure(method, url, exc) from exc
    body = _parse_body(response)
    logger.debug("%s %s -> %d %r", method, url, response.status_code, body)
    return OperationResult(
        status_code=response.status_code,
        body=body,
        headers=dict(response.headers),
    )
