"""
services/fee_calculations.py — Backend fee calculations and the fee catalogue.

The backend computes and stores fee calculations against a document group
and fee type; this is separate from the client-side quote calculator in
notary_client.fees.

Endpoints:
  POST /fee-calculations                 GET /fee-calculations
  GET  /fee-calculations/my-calculations GET /fee-calculations/{id}
  GET  /document-groups                  GET /document-groups/{id}
  GET  /fee-types                        GET /fee-types/{id}
  GET  /fee-types/document-group/{documentGroupId}
"""

from __future__ import annotations

from typing import Any

from notary_shared.models import (
    DocumentGroup,
    FeeCalculation,
    FeeCalculationCreate,
    FeeCalculationQuery,
    FeeType,
    ListQuery,
    Page,
)
from notary_client.services.base import BaseService


class FeeCalculationService(BaseService):
    name = "fee_calculations"
    resource = "/fee-calculations"

    async def calculate(self, data: FeeCalculationCreate) -> FeeCalculation:
        result = self._one(FeeCalculation, await self._api.post(self.resource, self._payload(data)))
        self._log.info("fee_calculated", calculation_id=result.id, total_fee=result.total_fee)
        return result

    async def list(
        self, query: FeeCalculationQuery | dict[str, Any] | None = None
    ) -> Page[FeeCalculation]:
        return await self._list(FeeCalculation, self.resource, self._params(query))

    async def mine(
        self, query: FeeCalculationQuery | dict[str, Any] | None = None
    ) -> Page[FeeCalculation]:
        return await self._list(FeeCalculation, self._path("my-calculations"), self._params(query))

    async def get(self, calculation_id: str) -> FeeCalculation:
        return self._one(FeeCalculation, await self._api.get(self._path(calculation_id)))


class DocumentGroupService(BaseService):
    name = "document_groups"
    resource = "/document-groups"

    async def list(self, query: ListQuery | dict[str, Any] | None = None) -> Page[DocumentGroup]:
        return await self._list(DocumentGroup, self.resource, self._params(query))

    async def get(self, group_id: str) -> DocumentGroup:
        return self._one(DocumentGroup, await self._api.get(self._path(group_id)))


class FeeTypeService(BaseService):
    name = "fee_types"
    resource = "/fee-types"

    async def list(self, query: ListQuery | dict[str, Any] | None = None) -> Page[FeeType]:
        return await self._list(FeeType, self.resource, self._params(query))

    async def get(self, fee_type_id: str) -> FeeType:
        return self._one(FeeType, await self._api.get(self._path(fee_type_id)))

    async def for_document_group(self, document_group_id: str) -> list[FeeType]:
        return self._many(
            FeeType, await self._api.get(self._path("document-group", document_group_id))
        )
