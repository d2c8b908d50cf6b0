"""
services/catalog.py — Notary services offered by the office.
"""

from __future__ import annotations

from typing import Any

from notary_shared.models import NotaryService, Page, ServiceQuery
from notary_client.services.base import BaseService


class CatalogService(BaseService):
    name = "services"
    resource = "/services"

    async def list(self, query: ServiceQuery | dict[str, Any] | None = None) -> Page[NotaryService]:
        return await self._list(NotaryService, self.resource, self._params(query))

    async def active(self, query: ServiceQuery | dict[str, Any] | None = None) -> Page[NotaryService]:
        return await self._list(NotaryService, self.resource, self._params(query, status=True))

    async def get(self, service_id: str) -> NotaryService:
        return self._one(NotaryService, await self._api.get(self._path(service_id)))
