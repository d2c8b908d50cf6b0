"""
services/base.py — Base class for all backend resource services.

Each concrete service sets:
  name      — used for logging
  resource  — the REST path prefix, e.g. "/records"

and builds its operations from the shared helpers below, which parse the
unwrapped `data` into DTOs. Services never cache or reconcile locally; the
NotaryApiClient handles caching, retries and invalidation.
"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog

from notary_shared.models import ApiModel, ListQuery, Page
from notary_client.api_client import NotaryApiClient

log = structlog.get_logger(__name__)

M = TypeVar("M", bound=ApiModel)


class BaseService:
    """Thin typed wrapper over one REST resource."""

    # Override in subclass
    name: str = "unknown"
    resource: str = "/"

    def __init__(self, api: NotaryApiClient) -> None:
        self._api = api
        self._log = log.bind(service=self.name)

    # ------------------------------------------------------------------
    # Shared helpers available to all subclasses
    # ------------------------------------------------------------------

    def _path(self, *parts: str) -> str:
        return "/".join([self.resource, *parts])

    @staticmethod
    def _params(query: ListQuery | dict[str, Any] | None, **overrides: Any) -> dict[str, Any]:
        """Query-string params from a query model or dict; overrides win."""
        if query is None:
            params: dict[str, Any] = {}
        elif isinstance(query, ListQuery):
            params = query.to_params()
        else:
            params = {k: v for k, v in query.items() if v is not None}
        for key, value in overrides.items():
            if value is not None:
                params[key] = str(value).lower() if isinstance(value, bool) else value
        return params

    @staticmethod
    def _payload(body: ApiModel | dict[str, Any] | None) -> dict[str, Any] | None:
        if body is None:
            return None
        if isinstance(body, ApiModel):
            return body.to_payload()
        return body

    @staticmethod
    def _one(model: type[M], data: Any) -> M:
        return model.from_api(data)

    @staticmethod
    def _many(model: type[M], data: Any) -> list[M]:
        return [model.from_api(item) for item in (data or [])]

    @staticmethod
    def _page(model: type[M], data: Any) -> Page[M]:
        data = data or {}
        return Page[model].model_validate({  # type: ignore[valid-type]
            **data,
            "items": [model.from_api(item) for item in data.get("items", [])],
        })

    async def _list(self, model: type[M], path: str, params: dict[str, Any]) -> Page[M]:
        self._log.info("resource_list", path=path, params=params)
        return self._page(model, await self._api.get(path, params))
