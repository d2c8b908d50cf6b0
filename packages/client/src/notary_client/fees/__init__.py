"""
notary_client.fees — Client-side notary fee calculator.
"""

from notary_client.fees.calculator import (
    base_fee,
    bracket_fee,
    overtime_fee,
    overtime_surcharge,
    quote,
    quote_request,
    travel_fee,
    travel_fee_for_distance,
)
from notary_client.fees.distance import distance_km
from notary_client.fees.formatting import format_vnd, quote_breakdown
from notary_client.fees.forms import is_form_complete, quote_form, resolve_area

__all__ = [
    "base_fee",
    "bracket_fee",
    "travel_fee",
    "travel_fee_for_distance",
    "overtime_fee",
    "overtime_surcharge",
    "quote",
    "quote_request",
    "distance_km",
    "format_vnd",
    "quote_breakdown",
    "resolve_area",
    "is_form_complete",
    "quote_form",
]
