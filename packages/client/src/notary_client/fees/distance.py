"""
fees/distance.py — Distance from the office to a destination province.

A static table stands in for a maps lookup; unknown keys fall back to the
"other province" distance.
"""

from __future__ import annotations

from notary_shared.constants import DEFAULT_DISTANCE_KM, DESTINATION_DISTANCES_KM


def distance_km(destination: str | None) -> float:
    if not destination:
        return DEFAULT_DISTANCE_KM
    return DESTINATION_DISTANCES_KM.get(destination.strip().lower(), DEFAULT_DISTANCE_KM)
