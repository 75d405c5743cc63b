import httpx
import pytest
import pytest_asyncio

from petstore_contract import Settings, establish_baseline, load_settings, open_client


def _probe_http(url: str, timeout: float = 10.0) -> str | None:
    """Return None when the service answers, else a reason to skip."""
    try:
        resp = httpx.get(
            f"{url}/pet/findByStatus", params={"status": "available"}, timeout=timeout
        )
    except httpx.TransportError as exc:
        return f"Pet-store at {url} unreachable: {exc}"
    if resp.status_code >= 500:
        return f"Pet-store at {url} unhealthy: HTTP {resp.status_code}"
    return None


@pytest.fixture(scope="session")
def petstore_settings() -> Settings:
    return load_settings()


@pytest.fixture(scope="session")
def petstore_url(petstore_settings: Settings) -> str:
    """Base URL of a reachable Pet-store; skips live tests otherwise.

    Point PETSTORE_BASE_URL at another deployment to run against it.
    """
    reason = _probe_http(petstore_settings.base_url)
    if reason:
        pytest.skip(reason)
    return petstore_settings.base_url


@pytest_asyncio.fixture
async def petstore_client(petstore_url: str, petstore_settings: Settings):
    async with open_client(petstore_settings) as client:
        yield client


@pytest_asyncio.fixture
async def baseline(petstore_client: httpx.AsyncClient):
    """Fresh "Fluffy" pet created before each live scenario; never deleted."""
    return await establish_baseline(petstore_client)
