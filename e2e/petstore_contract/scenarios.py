"""Declarative contract scenarios for the Pet-store service.

Each Scenario pairs an action (one or more wrapper calls) with the status
and body the service is documented to return. `run_scenario` executes one
entry and raises ExpectationMismatch on the first difference.

The baseline pet is passed in through ScenarioContext, never stored in
module state, so scenarios stay independent of each other.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

import httpx

from petstore_contract import matchers
from petstore_contract.client import OperationResult
from petstore_contract.errors import ExpectationMismatch, HarnessError
from petstore_contract.models import Category, Pet, PetStatus, Tag
from petstore_contract.operations import (
    create_pet,
    create_pet_result,
    delete_pet,
    find_pet_by_id,
    find_pets_by_status_result,
    update_pet,
)

logger = logging.getLogger(__name__)

BASELINE_NAME = "Fluffy"
UNKNOWN_PET_ID = 999999
MALFORMED_PET_ID = "invalid_id"
UNKNOWN_STATUS = "invalid_status"
UPDATED_FIELDS = {"name": "UpdatedName", "status": "sold"}


@dataclass(frozen=True)
class ScenarioContext:
    pet: Pet

    @property
    def pet_id(self) -> int:
        if self.pet.id is None:
            raise HarnessError(f"baseline pet has no id: {self.pet!r}")
        return self.pet.id


Action = Callable[[httpx.AsyncClient, ScenarioContext], Awaitable[OperationResult]]


@dataclass(frozen=True)
class Scenario:
    name: str
    group: str
    action: Action
    status: int | None = 200
    body: matchers.Matcher | None = None

    def __str__(self) -> str:
        return self.name


async def establish_baseline(client: httpx.AsyncClient) -> ScenarioContext:
    pet = await create_pet(client, Pet(name=BASELINE_NAME, status=PetStatus.available.value))
    logger.info("baseline pet created with id %s", pet.id)
    return ScenarioContext(pet=pet)


async def run_scenario(
    client: httpx.AsyncClient, scenario: Scenario, ctx: ScenarioContext
) -> OperationResult:
    result = await scenario.action(client, ctx)
    if scenario.status is not None and result.status_code != scenario.status:
        raise ExpectationMismatch(
            scenario.name,
            f"expected status {scenario.status}",
            result.status_code,
            result.body,
        )
    if scenario.body is not None:
        problem = scenario.body(result.body)
        if problem:
            raise ExpectationMismatch(scenario.name, problem, result.status_code, result.body)
    logger.debug("scenario %s passed", scenario.name)
    return result


def scenarios_in(group: str) -> list[Scenario]:
    return [s for s in SCENARIOS if s.group == group]


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

FULL_PET = Pet(
    name="Fluffy",
    status=PetStatus.available.value,
    category=Category(id=1, name="cats"),
    photoUrls=["https://example.com/fluffy.jpg"],
    tags=[Tag(id=7, name="fluffy")],
)


def _create_action(payload: Pet | None) -> Action:
    async def action(client: httpx.AsyncClient, ctx: ScenarioContext) -> OperationResult:
        return await create_pet_result(client, payload)
    return action


async def _create_then_fetch(client: httpx.AsyncClient, ctx: ScenarioContext) -> OperationResult:
    created = await create_pet(client, FULL_PET)
    return await find_pet_by_id(client, created.id)


def _delete_action(pet_id: int | None) -> Action:
    async def action(client: httpx.AsyncClient, ctx: ScenarioContext) -> OperationResult:
        return await delete_pet(client, ctx.pet_id if pet_id is None else pet_id)
    return action


def _status_action(status: str) -> Action:
    async def action(client: httpx.AsyncClient, ctx: ScenarioContext) -> OperationResult:
        return await find_pets_by_status_result(client, status)
    return action


def _lookup_action(pet_id: int | str | None) -> Action:
    async def action(client: httpx.AsyncClient, ctx: ScenarioContext) -> OperationResult:
        return await find_pet_by_id(client, ctx.pet_id if pet_id is None else pet_id)
    return action


def _repeated(name: str, step: Action) -> Action:
    """Run `step` twice; the second result must equal the first."""
    async def action(client: httpx.AsyncClient, ctx: ScenarioContext) -> OperationResult:
        first = await step(client, ctx)
        second = await step(client, ctx)
        if (first.status_code, first.body) != (second.status_code, second.body):
            raise ExpectationMismatch(
                name,
                f"first call gave {first.status_code} {first.body!r}",
                second.status_code,
                second.body,
            )
        return second
    return action


def _update_action(pet_id: int | str | None) -> Action:
    async def action(client: httpx.AsyncClient, ctx: ScenarioContext) -> OperationResult:
        target = ctx.pet_id if pet_id is None else pet_id
        return await update_pet(client, target, UPDATED_FIELDS)
    return action


# ---------------------------------------------------------------------------
# Scenario table
# ---------------------------------------------------------------------------

SCENARIOS: list[Scenario] = [
    Scenario(
        "create_with_all_fields",
        "create",
        _create_action(Pet(name="Fluffy", status=PetStatus.available.value)),
        status=200,
        body=matchers.contains({"name": "Fluffy", "status": "available"}),
    ),
    Scenario(
        "create_with_empty_payload_uses_defaults",
        "create",
        _create_action(None),
        status=200,
        body=matchers.contains(
            {"id": matchers.any_instance(int), "photoUrls": [], "tags": []}
        ),
    ),
    Scenario(
        "created_pet_can_be_fetched",
        "create",
        _create_then_fetch,
        status=200,
        body=matchers.contains(FULL_PET.to_payload()),
    ),
    Scenario(
        "delete_unknown_id_returns_404",
        "delete",
        _delete_action(UNKNOWN_PET_ID),
        status=404,
        body=matchers.empty_object(),
    ),
    Scenario(
        "delete_baseline_returns_200",
        "delete",
        _delete_action(None),
        status=200,
    ),
    *[
        Scenario(
            f"find_by_status_{status.value}",
            "find_by_status",
            _status_action(status.value),
            status=200,
            body=matchers.every_item({"status": status.value}),
        )
        for status in PetStatus
    ],
    Scenario(
        "find_by_unknown_status_is_empty",
        "find_by_status",
        _status_action(UNKNOWN_STATUS),
        status=200,
        body=matchers.equals([]),
    ),
    Scenario(
        "find_by_unknown_status_is_repeatable",
        "find_by_status",
        _repeated("find_by_unknown_status_is_repeatable", _status_action(UNKNOWN_STATUS)),
        status=200,
        body=matchers.equals([]),
    ),
    Scenario(
        "find_unknown_id_returns_404",
        "find_by_id",
        _lookup_action(UNKNOWN_PET_ID),
        status=404,
        body=matchers.contains({"message": "Pet not found"}),
    ),
    Scenario(
        "find_malformed_id_returns_404",
        "find_by_id",
        _lookup_action(MALFORMED_PET_ID),
        status=404,
        body=matchers.contains(
            {
                "message": 'java.lang.NumberFormatException: For input string: "'
                + MALFORMED_PET_ID
                + '"'
            }
        ),
    ),
    Scenario(
        "find_baseline_returns_200",
        "find_by_id",
        _lookup_action(None),
        status=200,
    ),
    Scenario(
        "find_by_id_is_repeatable",
        "find_by_id",
        _repeated("find_by_id_is_repeatable", _lookup_action(None)),
        status=200,
    ),
    Scenario(
        "update_baseline_returns_405",
        "update",
        _update_action(None),
        status=405,
        body=matchers.empty_object(),
    ),
    Scenario(
        "update_unknown_id_returns_405",
        "update",
        _update_action(UNKNOWN_PET_ID),
        status=405,
        body=matchers.empty_object(),
    ),
    Scenario(
        "update_without_id_creates_pet",
        "update",
        _update_action(""),
        status=200,
        body=matchers.contains(UPDATED_FIELDS),
    ),
]
