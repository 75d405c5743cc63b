from petstore_contract.client import OperationResult, open_client, send
from petstore_contract.config import Settings, load_settings
from petstore_contract.errors import (
    ConfigError,
    ExpectationMismatch,
    HarnessError,
    TransportFailure,
    UnexpectedBody,
    UnexpectedStatus,
)
from petstore_contract.models import ApiMessage, Category, Pet, PetStatus, Tag
from petstore_contract.operations import (
    create_pet,
    create_pet_result,
    delete_pet,
    find_pet_by_id,
    find_pets_by_status,
    find_pets_by_status_result,
    update_pet,
)
from petstore_contract.scenarios import (
    SCENARIOS,
    Scenario,
    ScenarioContext,
    establish_baseline,
    run_scenario,
    scenarios_in,
)

__all__ = [
    "ApiMessage",
    "Category",
    "ConfigError",
    "ExpectationMismatch",
    "HarnessError",
    "OperationResult",
    "Pet",
    "PetStatus",
    "SCENARIOS",
    "Scenario",
    "ScenarioContext",
    "Settings",
    "Tag",
    "TransportFailure",
    "UnexpectedBody",
    "UnexpectedStatus",
    "create_pet",
    "create_pet_result",
    "delete_pet",
    "establish_baseline",
    "find_pet_by_id",
    "find_pets_by_status",
    "find_pets_by_status_result",
    "load_settings",
    "open_client",
    "run_scenario",
    "scenarios_in",
    "send",
    "update_pet",
]
