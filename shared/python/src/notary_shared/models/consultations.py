"""
models/consultations.py — Consultation bookings and the portal booking form.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import EmailStr, Field, field_validator

from notary_shared.constants import ConsultationStatus
from notary_shared.models.common import ApiModel, CategoryRef, ListQuery, UserRef
from notary_shared.time_utils import now_local


class Consultation(ApiModel):
    id: str
    customer_id: str | None = None
    customer: UserRef | None = None
    staff_id: str | None = None
    staff: UserRef | None = None
    service_id: str | None = None
    service: CategoryRef | None = None
    requested_datetime: datetime
    content: str
    status: ConsultationStatus = "PENDING"
    cancel_reason: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ConsultationCreate(ApiModel):
    requested_datetime: datetime
    content: str = Field(min_length=1)
    service_id: str | None = None


class ConsultationUpdate(ApiModel):
    service_id: str | None = None
    staff_id: str | None = None
    requested_datetime: datetime | None = None
    content: str | None = None
    notes: str | None = None


class ApproveConsultation(ApiModel):
    staff_id: str | None = None
    notes: str | None = None


class CancelConsultation(ApiModel):
    cancel_reason: str = Field(min_length=1)


class ConsultationQuery(ListQuery):
    customer_id: str | None = None
    staff_id: str | None = None
    service_id: str | None = None
    status: ConsultationStatus | None = None
    from_date: date | None = None
    to_date: date | None = None


class BookingForm(ApiModel):
    """The four-step booking form of the public portal."""

    full_name: str = Field(min_length=2, max_length=100)
    email: EmailStr = Field(max_length=255)
    phone: str = Field(pattern=r"^(0|\+84)[0-9]{9,10}$")
    consultation_type: str = Field(min_length=1)
    legal_area: str = Field(min_length=1)
    preferred_date: date
    preferred_time: str = Field(pattern=r"^([0-1][0-9]|2[0-3]):[0-5][0-9]$")
    meeting_type: str = Field(min_length=1)
    description: str = Field(min_length=20, max_length=1000)
    documents: list[str] = Field(default_factory=list)

    @field_validator("full_name", "phone", "description", mode="before")
    @classmethod
    def _strip(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("preferred_date")
    @classmethod
    def _not_in_past(cls, v: date) -> date:
        if v < now_local().date():
            raise ValueError("Ngày đã chọn phải từ hôm nay trở đi")
        return v
