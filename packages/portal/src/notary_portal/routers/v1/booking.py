"""Booking form endpoints: available slots and a preview of the consultation request."""

from __future__ import annotations

from fastapi import APIRouter

from notary_shared.constants import CONSULTATION_TYPES, LEGAL_AREAS, MEETING_TYPES
from notary_shared.models import BookingForm
from notary_client.booking import booking_slots, format_for_display, transform_consultation_data
from notary_portal.responses import success

router = APIRouter(prefix="/booking", tags=["booking"])


@router.get("/slots")
async def list_slots():
    """Next bookable weekdays, fixed time slots and the form's choice lists."""
    data = booking_slots()
    data["consultationTypes"] = [{"value": k, "label": v} for k, v in CONSULTATION_TYPES.items()]
    data["legalAreas"] = [{"value": k, "label": v} for k, v in LEGAL_AREAS.items()]
    data["meetingTypes"] = [{"value": k, "label": v} for k, v in MEETING_TYPES.items()]
    return success(data)


@router.post("/preview")
async def preview(form: BookingForm):
    """Validate the form and show the consultation request it would create."""
    request = transform_consultation_data(form)
    return success({
        "request": request.to_payload(),
        "display": format_for_display(form),
    })
