"""
services/consultations.py — Consultation bookings.

Customers create, list and cancel their own bookings; staff list all
bookings, assign and approve, complete or delete them.

Endpoints:
  GET    /consultations                      GET /consultations/my-consultations
  GET    /consultations/{id}                 POST /consultations
  PUT    /consultations/{id}                 DELETE /consultations/{id}
  POST   /consultations/{id}/approve         {staffId?, notes?}
  POST   /consultations/{id}/complete
  POST   /consultations/{id}/cancel          {cancelReason}
"""

from __future__ import annotations

from typing import Any

from notary_shared.models import (
    ApproveConsultation,
    CancelConsultation,
    Consultation,
    ConsultationCreate,
    ConsultationQuery,
    ConsultationUpdate,
    Page,
)
from notary_client.services.base import BaseService


class ConsultationService(BaseService):
    name = "consultations"
    resource = "/consultations"

    async def list(
        self, query: ConsultationQuery | dict[str, Any] | None = None
    ) -> Page[Consultation]:
        return await self._list(Consultation, self.resource, self._params(query))

    async def mine(
        self, query: ConsultationQuery | dict[str, Any] | None = None
    ) -> Page[Consultation]:
        return await self._list(Consultation, self._path("my-consultations"), self._params(query))

    async def get(self, consultation_id: str) -> Consultation:
        return self._one(Consultation, await self._api.get(self._path(consultation_id)))

    async def create(self, data: ConsultationCreate) -> Consultation:
        created = self._one(Consultation, await self._api.post(self.resource, self._payload(data)))
        self._log.info("consultation_booked", consultation_id=created.id)
        return created

    async def update(self, consultation_id: str, data: ConsultationUpdate) -> Consultation:
        return self._one(
            Consultation, await self._api.put(self._path(consultation_id), self._payload(data))
        )

    async def delete(self, consultation_id: str) -> None:
        await self._api.delete(self._path(consultation_id))

    async def approve(
        self,
        consultation_id: str,
        staff_id: str | None = None,
        notes: str | None = None,
    ) -> Consultation:
        body = ApproveConsultation(staff_id=staff_id, notes=notes)
        return self._one(
            Consultation,
            await self._api.post(self._path(consultation_id, "approve"), self._payload(body)),
        )

    async def complete(self, consultation_id: str) -> Consultation:
        return self._one(
            Consultation, await self._api.post(self._path(consultation_id, "complete"))
        )

    async def cancel(self, consultation_id: str, reason: str) -> Consultation:
        body = CancelConsultation(cancel_reason=reason)
        self._log.info("consultation_cancel", consultation_id=consultation_id)
        return self._one(
            Consultation,
            await self._api.post(self._path(consultation_id, "cancel"), self._payload(body)),
        )
