"""
models/common.py — Envelope, pagination and embedded-relation models.

The backend wraps every response as {statusCode, message, data}; paginated
collections put {items, total, page, limit, totalPages} in `data`. All DTOs
use camelCase on the wire and snake_case in Python.
"""

from __future__ import annotations

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from notary_shared.constants import SortOrder

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for every wire DTO."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def from_api(cls, data: dict[str, Any]):
        return cls.model_validate(data)

    def to_payload(self) -> dict[str, Any]:
        """JSON body for a write request: camelCase keys, unset fields dropped."""
        return self.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )


class Page(ApiModel, Generic[T]):
    items: list[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int | None = None

    @property
    def pages(self) -> int:
        if self.total_pages is not None:
            return self.total_pages
        return math.ceil(self.total / self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.pages


class UserRef(ApiModel):
    id: str
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None


class CategoryRef(ApiModel):
    id: str
    name: str
    slug: str | None = None


class ListQuery(ApiModel):
    """Shared list filters. Subclasses add resource-specific filters."""

    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1, le=100)
    search: str | None = None
    sort_by: str | None = None
    sort_order: SortOrder | None = None

    def to_params(self) -> dict[str, Any]:
        """Query-string params; booleans are sent as 'true'/'false'."""
        params = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {
            k: (str(v).lower() if isinstance(v, bool) else v)
            for k, v in params.items()
        }
