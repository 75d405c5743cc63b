from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PetStatus(str, Enum):
    available = "available"
    pending = "pending"
    sold = "sold"


class Tag(BaseModel):
    id: int | None = None
    name: str | None = None


class Category(BaseModel):
    id: int | None = None
    name: str | None = None


class Pet(BaseModel):
    # The service echoes fields it does not know about, keep them.
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int | None = None
    name: str | None = None
    category: Category | None = None
    # Plain str: the service accepts statuses outside PetStatus.
    status: str | None = None
    photo_urls: list[str] = Field(default_factory=list, alias="photoUrls")
    tags: list[Tag] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ApiMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: int | None = None
    type: str | None = None
    message: str
