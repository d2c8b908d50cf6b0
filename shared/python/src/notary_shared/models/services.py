"""
models/services.py — Notary services offered by the office (public catalogue).
"""

from __future__ import annotations

from datetime import datetime

from notary_shared.models.common import ApiModel, ListQuery


class NotaryService(ApiModel):
    id: str
    name: str
    slug: str | None = None
    description: str | None = None
    price: float | None = None
    status: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ServiceQuery(ListQuery):
    status: bool | None = None
