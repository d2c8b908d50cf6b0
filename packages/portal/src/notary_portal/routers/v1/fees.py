"""Fee calculator endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from notary_shared.constants import (
    CONTRACT_TYPES,
    DESTINATION_DISTANCES_KM,
    DESTINATIONS,
    DISTRICTS,
    OFFICE_ADDRESS,
)
from notary_shared.models import FeeQuoteRequest
from notary_client.fees import format_vnd, quote_breakdown, quote_request
from notary_portal.responses import success

router = APIRouter(prefix="/fees", tags=["fees"])


@router.get("/contract-types")
async def list_contract_types():
    """Contract types the calculator prices."""
    data = [{"value": k, "label": v} for k, v in CONTRACT_TYPES.items()]
    return success(data)


@router.get("/destinations")
async def list_destinations():
    """Off-site destinations with their distance from the office and districts."""
    data = [
        {
            "value": key,
            "label": label,
            "distanceKm": DESTINATION_DISTANCES_KM[key],
            "districts": [{"value": k, "label": v} for k, v in DISTRICTS.get(key, {}).items()],
        }
        for key, label in DESTINATIONS.items()
    ]
    return success({"officeAddress": OFFICE_ADDRESS, "destinations": data})


@router.post("/quote")
async def create_quote(body: FeeQuoteRequest):
    result = quote_request(body)
    if result is None:
        raise HTTPException(status_code=422, detail="Vui lòng nhập diện tích hợp lệ (lớn hơn 0)")

    data = result.model_dump(mode="json", by_alias=True)
    data["formattedTotal"] = format_vnd(result.total_fee)
    data["breakdown"] = [
        {"label": label, "value": value}
        for label, value in quote_breakdown(result, body.destination)
    ]
    return success(data, "Tính phí thành công")
