"""
fees/forms.py — The portal's fee form: which field holds the area, and when
the form is complete enough to quote.

Form values arrive as strings keyed by the form's camelCase field names
(`area`, `landArea`, `houseFloorArea`, `customAddress`, ...). For off-site
notarization `customAddress` carries the destination province key.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from notary_shared.models import FeeQuote
from notary_client.fees.calculator import quote

_APARTMENT_FIELDS = ("houseType", "area")
_LAND_FIELDS = ("landDistrict", "landArea")
_HOUSE_LAND_FIELDS = ("houseDistrict", "houseLandArea", "houseFloorArea")

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "apartment-sale": _APARTMENT_FIELDS,
    "apartment-gift": _APARTMENT_FIELDS,
    "apartment-contribution": _APARTMENT_FIELDS,
    "land-transfer": _LAND_FIELDS,
    "inheritance-division": _LAND_FIELDS,
    "house-land-sale": _HOUSE_LAND_FIELDS,
    "contract-amendment": (),
}


def _to_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    return parsed if parsed == parsed else None


def resolve_area(contract_type: str, form: Mapping[str, Any]) -> float | None:
    """The area the fee is computed on, or None when the field is blank or invalid."""
    if contract_type in ("apartment-sale", "apartment-gift", "apartment-contribution"):
        return _to_float(form.get("area"))
    if contract_type in ("land-transfer", "inheritance-division"):
        return _to_float(form.get("landArea"))
    if contract_type == "house-land-sale":
        # a zero floor area counts as missing
        return _to_float(form.get("houseFloorArea")) or _to_float(form.get("houseLandArea"))
    return None


def is_form_complete(contract_type: str, form: Mapping[str, Any]) -> bool:
    required = ("notaryLocation", *REQUIRED_FIELDS.get(contract_type, ()))
    if not all(form.get(field) for field in required):
        return False
    if form.get("notaryLocation") == "outside":
        return bool(form.get("customAddress")) and bool(form.get("district"))
    return True


def quote_form(
    contract_type: str,
    form: Mapping[str, Any],
    at: datetime | None = None,
) -> FeeQuote | None:
    """Quote straight from form values; None until a location and a valid area exist."""
    location = form.get("notaryLocation")
    if not location:
        return None
    return quote(
        contract_type,
        resolve_area(contract_type, form),
        notary_location=location,
        destination=form.get("customAddress") or None,
        at=at,
    )
