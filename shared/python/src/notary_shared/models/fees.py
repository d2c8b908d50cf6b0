"""
models/fees.py — Fee quote inputs/results and the backend fee-calculation records.

FeeQuoteRequest / FeeQuote describe the client-side notary fee calculator.
FeeCalculation, DocumentGroup and FeeType mirror the backend's persisted
calculation history and fee catalogue.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from notary_shared.constants import NotaryLocation
from notary_shared.models.common import ApiModel, CategoryRef, ListQuery, UserRef


class FeeQuoteRequest(ApiModel):
    contract_type: str
    area: float | None = None
    notary_location: NotaryLocation = "office"
    destination: str | None = None
    evaluated_at: datetime | None = None


class FeeQuote(ApiModel):
    contract_type: str
    area: float
    base_fee: int
    travel_fee: int
    overtime_fee: int
    total_fee: int
    distance_km: float = 0
    outside_working_hours: bool = False


class TieredFee(ApiModel):
    tier: int
    from_: float = Field(alias="from")
    to: float | None = None
    rate: float
    amount: float
    description: str = ""


class AdditionalFee(ApiModel):
    name: str
    amount: float
    quantity: int | None = None
    total: float | None = None
    description: str = ""


class CalculationDetail(ApiModel):
    base_fee: float | None = None
    percentage_fee: float | None = None
    tiered_fees: list[TieredFee] | None = None
    additional_fees: list[AdditionalFee] | None = None
    subtotal: float = 0
    total_fee: float = 0


class FeeCalculation(ApiModel):
    id: str
    user_id: str | None = None
    user: UserRef | None = None
    document_group_id: str
    document_group: CategoryRef | None = None
    fee_type_id: str
    fee_type: CategoryRef | None = None
    input_data: dict[str, Any] = Field(default_factory=dict)
    calculation_result: CalculationDetail | None = None
    total_fee: float = 0
    created_at: datetime | None = None


class FeeCalculationCreate(ApiModel):
    document_group_id: str
    fee_type_id: str
    input_data: dict[str, Any] = Field(default_factory=dict)


class FeeCalculationQuery(ListQuery):
    user_id: str | None = None
    document_group_id: str | None = None
    fee_type_id: str | None = None


class DocumentGroup(ApiModel):
    id: str
    name: str
    slug: str | None = None
    description: str | None = None
    form_fields: Any = None
    status: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FeeType(ApiModel):
    id: str
    document_group_id: str | None = None
    name: str
    calculation_method: str | None = None
    formula: Any = None
    base_fee: float | None = None
    percentage: float | None = None
    min_fee: float | None = None
    max_fee: float | None = None
    status: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
