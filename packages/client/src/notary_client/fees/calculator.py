"""
fees/calculator.py — Notary fee quote: base fee + travel fee + overtime surcharge.

Base fee
  apartment-sale, apartment-gift   tiered by area (≤50 / ≤100 / ≤150 / above)
  land-transfer                    tiered by area (≤100 / ≤500 / ≤1000 / above)
  house-land-sale, contract-amendment, apartment-contribution,
  inheritance-division             flat
  anything else                    DEFAULT_BASE_FEE

Travel fee
  0 on-site, or off-site with no destination; otherwise tiered by the
  destination's distance from the office.

Overtime
  OVERTIME_SURCHARGE when the evaluation instant is outside business hours
  in office-local time.

All functions are pure apart from the evaluation instant, which defaults to
now and can be passed in.

Usage:
    from notary_client.fees.calculator import quote

    q = quote("land-transfer", 600, notary_location="outside",
              destination="hanoi", at=datetime(2026, 10, 17, 14, 0))
    q.total_fee   # 900_000
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime

from notary_shared.constants import (
    APARTMENT_FEE_BRACKETS,
    DEFAULT_BASE_FEE,
    FLAT_BASE_FEES,
    LAND_FEE_BRACKETS,
    OVERTIME_SURCHARGE,
    TRAVEL_FEE_BRACKETS,
    NotaryLocation,
)
from notary_shared.models import FeeQuote, FeeQuoteRequest
from notary_shared.time_utils import is_outside_working_hours
from notary_client.fees.distance import distance_km
from notary_client.utils.logging import get_logger

log = get_logger(__name__, component="fees")

# Area sentinel for contract types whose fee does not depend on area
AREA_NOT_APPLICABLE = 1.0

_APARTMENT_TYPES = frozenset({"apartment-sale", "apartment-gift"})
_LAND_TYPES = frozenset({"land-transfer"})


def bracket_fee(value: float, brackets: Sequence[tuple[float | None, int]]) -> int:
    """First bracket whose inclusive upper bound covers `value`; None is unbounded."""
    for upper, fee in brackets:
        if upper is None or value <= upper:
            return fee
    raise ValueError("bracket table has no unbounded final entry")


def base_fee(contract_type: str, area: float) -> int:
    if contract_type in _APARTMENT_TYPES:
        return bracket_fee(area, APARTMENT_FEE_BRACKETS)
    if contract_type in _LAND_TYPES:
        return bracket_fee(area, LAND_FEE_BRACKETS)
    return FLAT_BASE_FEES.get(contract_type, DEFAULT_BASE_FEE)


def travel_fee_for_distance(km: float) -> int:
    return bracket_fee(km, TRAVEL_FEE_BRACKETS)


def travel_fee(notary_location: NotaryLocation, destination: str | None) -> tuple[int, float]:
    """(fee, distance_km). Zero on-site or when no destination was given."""
    if notary_location != "outside" or not destination:
        return 0, 0.0
    km = distance_km(destination)
    return travel_fee_for_distance(km), km


def overtime_surcharge(at: datetime | None = None) -> tuple[int, bool]:
    """(fee, outside_working_hours) for the evaluation instant."""
    outside = is_outside_working_hours(at)
    return (OVERTIME_SURCHARGE if outside else 0), outside


def overtime_fee(at: datetime | None = None) -> int:
    return overtime_surcharge(at)[0]


def quote(
    contract_type: str,
    area: float | None,
    *,
    notary_location: NotaryLocation = "office",
    destination: str | None = None,
    at: datetime | None = None,
) -> FeeQuote | None:
    """
    Price one notarization.

    Args:
        contract_type:   Key from CONTRACT_TYPES (unknown keys get the default fee).
        area:            Area in m². Ignored for contract-amendment.
        notary_location: "office" (on-site) or "outside" (off-site).
        destination:     Destination province key, used off-site only.
        at:              Evaluation instant. Defaults to now.

    Returns:
        The FeeQuote, or None when the area is missing or not positive.
    """
    if contract_type == "contract-amendment":
        area = AREA_NOT_APPLICABLE
    if area is None or math.isnan(area) or area <= 0:
        log.debug("fee_quote_skipped", contract_type=contract_type, area=area)
        return None

    base = base_fee(contract_type, area)
    travel, km = travel_fee(notary_location, destination)
    overtime, outside = overtime_surcharge(at)

    result = FeeQuote(
        contract_type=contract_type,
        area=area,
        base_fee=base,
        travel_fee=travel,
        overtime_fee=overtime,
        total_fee=base + travel + overtime,
        distance_km=km,
        outside_working_hours=outside,
    )
    log.debug("fee_quote", contract_type=contract_type, area=area, total_fee=result.total_fee)
    return result


def quote_request(request: FeeQuoteRequest) -> FeeQuote | None:
    return quote(
        request.contract_type,
        request.area,
        notary_location=request.notary_location,
        destination=request.destination,
        at=request.evaluated_at,
    )
