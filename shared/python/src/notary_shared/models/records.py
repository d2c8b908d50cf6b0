"""
models/records.py — Customer case records and their review workflow.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from notary_shared.constants import RecordStatus
from notary_shared.models.common import ApiModel, CategoryRef, ListQuery, UserRef


class Record(ApiModel):
    id: str
    customer_id: str | None = None
    customer: UserRef | None = None
    type_id: str | None = None
    type: CategoryRef | None = None
    title: str
    description: str | None = None
    attachments: list[str] | None = None
    status: RecordStatus = "PENDING"
    review_notes: str | None = None
    reviewer_id: str | None = None
    reviewer: UserRef | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RecordCreate(ApiModel):
    type_id: str
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    attachments: list[str] | None = None


class RecordUpdate(ApiModel):
    type_id: str | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    attachments: list[str] | None = None
    status: RecordStatus | None = None
    review_notes: str | None = None


class ReviewRecord(ApiModel):
    review_notes: str | None = None


class RecordQuery(ListQuery):
    customer_id: str | None = None
    type_id: str | None = None
    status: RecordStatus | None = None
