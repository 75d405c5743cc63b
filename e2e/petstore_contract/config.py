"""Runtime settings for the contract harness.

Defaults point at the public Swagger Pet-store. Each field can be
overridden through an environment variable so the same suite can target a
staging copy of the service.
"""

import os

from pydantic import BaseModel, field_validator

from petstore_contract.errors import ConfigError

DEFAULT_BASE_URL = "https://petstore.swagger.io/v2"
DEFAULT_API_KEY = "special-key"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    api_key: str = DEFAULT_API_KEY
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value


def load_settings() -> Settings:
    """Build Settings from PETSTORE_* environment variables."""
    overrides: dict[str, str] = {}
    for field, env_name in (
        ("base_url", "PETSTORE_BASE_URL"),
        ("api_key", "PETSTORE_API_KEY"),
        ("timeout", "PETSTORE_TIMEOUT"),
    ):
        value = os.environ.get(env_name)
        if value:
            overrides[field] = value
    try:
        return Settings(**overrides)
    except ValueError as exc:
        raise ConfigError(f"Invalid harness configuration: {exc}") from exc
