"""
fees/formatting.py — vi-VN money formatting and the quote breakdown text.
"""

from __future__ import annotations

from notary_shared.constants import CONTRACT_TYPES, DESTINATIONS
from notary_shared.models import FeeQuote


def format_vnd(amount: float | int | None, suffix: str = "VNĐ") -> str:
    """1200000 → '1.200.000 VNĐ' (dot thousands separator, no decimals)."""
    value = int(round(amount or 0))
    grouped = f"{abs(value):,}".replace(",", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}{grouped} {suffix}".rstrip()


def quote_breakdown(q: FeeQuote, destination: str | None = None) -> list[tuple[str, str]]:
    """(label, amount) rows in display order; travel and overtime only when charged."""
    rows = [
        ("Loại hợp đồng", CONTRACT_TYPES.get(q.contract_type, q.contract_type)),
        ("Phí công chứng cơ bản", format_vnd(q.base_fee)),
    ]
    if q.travel_fee or q.distance_km:
        place = DESTINATIONS.get(destination or "", destination or "")
        label = f"Phí di chuyển (~{q.distance_km:g}km{', ' + place if place else ''})"
        rows.append((label, format_vnd(q.travel_fee)))
    if q.outside_working_hours:
        rows.append(("Phụ phí ngoài giờ", format_vnd(q.overtime_fee)))
    rows.append(("Tổng chi phí", format_vnd(q.total_fee)))
    return rows
