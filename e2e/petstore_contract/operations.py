"""One async function per Pet-store endpoint.

create_pet and find_pets_by_status require a 200 and return parsed
models; their *_result variants return the checked OperationResult with
the body exactly as the service sent it. The others return the raw
OperationResult so negative-path scenarios can inspect whatever the
service answered.
"""

import logging
from typing import Any, Callable, TypeVar

import httpx
from pydantic import ValidationError

from petstore_contract.client import OperationResult, send
from petstore_contract.errors import UnexpectedBody, UnexpectedStatus
from petstore_contract.models import Pet, PetStatus

logger = logging.getLogger(__name__)

PetPayload = Pet | dict[str, Any]
T = TypeVar("T")


def _payload(pet: PetPayload | None) -> dict[str, Any]:
    if pet is None:
        return {}
    if isinstance(pet, Pet):
        return pet.to_payload()
    return dict(pet)


def _require(operation: str, expected: int, result: OperationResult) -> None:
    if result.status_code != expected:
        logger.warning(
            "%s returned %d (expected %d): %r",
            operation, result.status_code, expected, result.body,
        )
        raise UnexpectedStatus(operation, expected, result.status_code, result.body)


def _parse(operation: str, result: OperationResult, parser: Callable[[], T]) -> T:
    try:
        return parser()
    except ValidationError as exc:
        logger.warning("%s returned a malformed body: %r", operation, result.body)
        raise UnexpectedBody(
            operation,
            f"body does not parse: {exc.error_count()} validation error(s)",
            result.status_code,
            result.body,
        ) from exc


async def create_pet_result(
    client: httpx.AsyncClient, pet: PetPayload | None = None
) -> OperationResult:
    """POST /pet. An empty payload lets the service fill in every default."""
    result = await send(client, "POST", "/pet", json=_payload(pet))
    _require("create_pet", 200, result)
    return result


async def create_pet(client: httpx.AsyncClient, pet: PetPayload | None = None) -> Pet:
    result = await create_pet_result(client, pet)
    return _parse("create_pet", result, result.pet)


async def delete_pet(
    client: httpx.AsyncClient, pet_id: int | str, api_key: str | None = None
) -> OperationResult:
    """DELETE /pet/{pet_id}.

    The client built by open_client already carries the configured
    api_key header; pass `api_key` to send a different one.
    """
    headers = None if api_key is None else {"api_key": api_key}
    return await send(client, "DELETE", f"/pet/{pet_id}", headers=headers)


async def find_pets_by_status_result(
    client: httpx.AsyncClient, status: PetStatus | str
) -> OperationResult:
    if isinstance(status, PetStatus):
        status = status.value
    result = await send(client, "GET", "/pet/findByStatus", params={"status": status})
    _require("find_pets_by_status", 200, result)
    if not isinstance(result.body, list):
        raise UnexpectedBody(
            "find_pets_by_status", "expected a list body", result.status_code, result.body
        )
    return result


async def find_pets_by_status(
    client: httpx.AsyncClient, status: PetStatus | str
) -> list[Pet]:
    result = await find_pets_by_status_result(client, status)
    return _parse("find_pets_by_status", result, result.pets)


async def find_pet_by_id(client: httpx.AsyncClient, pet_id: int | str) -> OperationResult:
    return await send(client, "GET", f"/pet/{pet_id}")


async def update_pet(
    client: httpx.AsyncClient, pet_id: int | str, pet: PetPayload
) -> OperationResult:
    """PUT /pet/{pet_id}; an empty pet_id targets /pet/ itself."""
    return await send(client, "PUT", f"/pet/{pet_id}", json=_payload(pet))
