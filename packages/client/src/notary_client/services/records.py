"""
services/records.py — Customer case records and the approve/reject review flow.

Endpoints:
  GET    /records                 (paginated; status/customerId/typeId filters)
  GET    /records/{id}
  POST   /records
  PUT    /records/{id}
  DELETE /records/{id}
  POST   /records/{id}/approve    {reviewNotes?}
  POST   /records/{id}/reject     {reviewNotes?}
"""

from __future__ import annotations

from typing import Any

from notary_shared.models import (
    Page,
    Record,
    RecordCreate,
    RecordQuery,
    RecordUpdate,
    ReviewRecord,
)
from notary_client.services.base import BaseService


class RecordService(BaseService):
    name = "records"
    resource = "/records"

    async def list(self, query: RecordQuery | dict[str, Any] | None = None) -> Page[Record]:
        return await self._list(Record, self.resource, self._params(query))

    async def get(self, record_id: str) -> Record:
        return self._one(Record, await self._api.get(self._path(record_id)))

    async def create(self, data: RecordCreate) -> Record:
        created = self._one(Record, await self._api.post(self.resource, self._payload(data)))
        self._log.info("record_created", record_id=created.id)
        return created

    async def update(self, record_id: str, data: RecordUpdate) -> Record:
        return self._one(Record, await self._api.put(self._path(record_id), self._payload(data)))

    async def delete(self, record_id: str) -> None:
        await self._api.delete(self._path(record_id))
        self._log.info("record_deleted", record_id=record_id)

    async def approve(self, record_id: str, review_notes: str | None = None) -> Record:
        body = ReviewRecord(review_notes=review_notes)
        record = self._one(
            Record, await self._api.post(self._path(record_id, "approve"), self._payload(body))
        )
        self._log.info("record_approved", record_id=record_id)
        return record

    async def reject(self, record_id: str, review_notes: str | None = None) -> Record:
        body = ReviewRecord(review_notes=review_notes)
        record = self._one(
            Record, await self._api.post(self._path(record_id, "reject"), self._payload(body))
        )
        self._log.info("record_rejected", record_id=record_id)
        return record
