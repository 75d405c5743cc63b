"""Live contract checks against the Pet-store service.

Every entry of SCENARIOS runs once, after the `baseline` fixture has
created a fresh pet. Skipped as a whole when the service is unreachable.
"""

import httpx
import pytest

from petstore_contract import (
    SCENARIOS,
    PetStatus,
    ScenarioContext,
    find_pet_by_id,
    find_pets_by_status,
    run_scenario,
)

pytestmark = pytest.mark.live


@pytest.mark.asyncio
@pytest.mark.parametrize("scenario", SCENARIOS, ids=str)
async def test_scenario(petstore_client: httpx.AsyncClient, baseline: ScenarioContext, scenario):
    await run_scenario(petstore_client, scenario, baseline)


@pytest.mark.asyncio
async def test_baseline_pet_is_available(baseline: ScenarioContext):
    """The fixture pet comes back with a server-assigned id."""
    assert isinstance(baseline.pet_id, int)
    assert baseline.pet.name == "Fluffy"
    assert baseline.pet.status == "available"


@pytest.mark.asyncio
async def test_lookup_matches_baseline(petstore_client: httpx.AsyncClient, baseline: ScenarioContext):
    result = await find_pet_by_id(petstore_client, baseline.pet_id)
    assert result.status_code == 200
    pet = result.pet()
    assert pet.id == baseline.pet_id
    assert pet.name == baseline.pet.name


@pytest.mark.asyncio
@pytest.mark.parametrize("status", list(PetStatus))
async def test_find_by_status_returns_models(petstore_client: httpx.AsyncClient, status: PetStatus):
    pets = await find_pets_by_status(petstore_client, status)
    assert isinstance(pets, list)
    for pet in pets:
        assert pet.status == status.value, f"pet {pet.id} has status {pet.status}"
