"""
tests/test_fees/test_calculator.py — Tests for the notary fee calculator.

Calendar used throughout (office-local):
  2026-10-17 Saturday, 2026-10-18 Sunday, 2026-10-19 Monday, 2026-10-20 Tuesday.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from notary_shared.models import FeeQuoteRequest
from notary_client.fees.calculator import (
    AREA_NOT_APPLICABLE,
    base_fee,
    bracket_fee,
    overtime_fee,
    overtime_surcharge,
    quote,
    quote_request,
    travel_fee,
    travel_fee_for_distance,
)
from notary_client.fees import calculator as calculator_module
from notary_client.fees.distance import distance_km

TUESDAY_2PM = datetime(2026, 10, 20, 14, 0)
SATURDAY_2PM = datetime(2026, 10, 17, 14, 0)


# ---------------------------------------------------------------------------
# Base fee
# ---------------------------------------------------------------------------

class TestBaseFee:
    @pytest.mark.parametrize(
        "area,expected",
        [
            (0.5, 150_000),
            (50, 150_000),
            (50.01, 200_000),
            (100, 200_000),
            (150, 250_000),
            (150.5, 300_000),
            (10_000, 300_000),
        ],
    )
    def test_apartment_brackets(self, area: float, expected: int):
        assert base_fee("apartment-sale", area) == expected
        assert base_fee("apartment-gift", area) == expected

    @pytest.mark.parametrize(
        "area,expected",
        [
            (1, 200_000),
            (100, 200_000),
            (101, 300_000),
            (500, 300_000),
            (600, 400_000),
            (1000, 400_000),
            (1000.1, 500_000),
        ],
    )
    def test_land_brackets(self, area: float, expected: int):
        assert base_fee("land-transfer", area) == expected

    @pytest.mark.parametrize(
        "contract_type,expected",
        [
            ("house-land-sale", 400_000),
            ("contract-amendment", 150_000),
            ("apartment-contribution", 200_000),
            ("inheritance-division", 300_000),
        ],
    )
    def test_flat_fees_ignore_area(self, contract_type: str, expected: int):
        assert base_fee(contract_type, 10) == expected
        assert base_fee(contract_type, 5000) == expected

    def test_unknown_type_gets_default(self):
        assert base_fee("power-of-attorney", 80) == 200_000

    def test_bracket_table_without_open_end_raises(self):
        with pytest.raises(ValueError):
            bracket_fee(200, ((100, 1),))


# ---------------------------------------------------------------------------
# Travel fee
# ---------------------------------------------------------------------------

class TestTravelFee:
    @pytest.mark.parametrize(
        "km,expected",
        [
            (0, 0),
            (5, 0),
            (6, 150_000),
            (10, 150_000),
            (15, 300_000),
            (20, 300_000),
            (50, 500_000),
            (100, 800_000),
            (101, 1_200_000),
            (1800, 1_200_000),
        ],
    )
    def test_distance_brackets(self, km: float, expected: int):
        assert travel_fee_for_distance(km) == expected

    def test_on_site_is_free(self):
        assert travel_fee("office", "haiphong") == (0, 0.0)

    def test_off_site_without_destination_is_free(self):
        assert travel_fee("outside", None) == (0, 0.0)
        assert travel_fee("outside", "") == (0, 0.0)

    def test_off_site_hanoi(self):
        assert travel_fee("outside", "hanoi") == (300_000, 15)

    def test_off_site_haiphong(self):
        assert travel_fee("outside", "haiphong") == (1_200_000, 120)

    def test_unknown_destination_uses_default_distance(self):
        assert distance_km("atlantis") == 500
        assert travel_fee("outside", "atlantis") == (1_200_000, 500)

    def test_destination_key_is_normalized(self):
        assert distance_km("  HaNoi ") == 15


# ---------------------------------------------------------------------------
# Overtime
# ---------------------------------------------------------------------------

class TestOvertimeFee:
    @pytest.mark.parametrize("hour", [0, 9, 14, 23])
    def test_sunday_always_surcharged(self, hour: int):
        assert overtime_fee(datetime(2026, 10, 18, hour, 0)) == 200_000

    def test_monday_morning_inside_hours(self):
        assert overtime_fee(datetime(2026, 10, 19, 10, 0)) == 0

    @pytest.mark.parametrize(
        "hour,minute,expected",
        [
            (7, 59, 200_000),
            (8, 0, 0),
            (17, 29, 0),
            (17, 30, 200_000),
        ],
    )
    def test_weekday_boundaries(self, hour: int, minute: int, expected: int):
        assert overtime_fee(datetime(2026, 10, 19, hour, minute)) == expected

    @pytest.mark.parametrize(
        "hour,minute,expected",
        [
            (8, 0, 0),
            (11, 59, 0),
            (12, 0, 200_000),
        ],
    )
    def test_saturday_half_day(self, hour: int, minute: int, expected: int):
        assert overtime_fee(datetime(2026, 10, 17, hour, minute)) == expected

    def test_aware_datetime_is_converted_to_office_time(self):
        # 01:00 UTC is 08:00 in Hanoi
        assert overtime_fee(datetime(2026, 10, 19, 1, 0, tzinfo=timezone.utc)) == 0
        assert overtime_fee(datetime(2026, 10, 19, 0, 59, tzinfo=timezone.utc)) == 200_000

    @pytest.mark.parametrize(
        "at,expected",
        [
            (datetime(2026, 10, 18, 9, 0), (200_000, True)),
            (datetime(2026, 10, 19, 10, 0), (0, False)),
            (datetime(2026, 10, 17, 12, 0), (200_000, True)),
        ],
    )
    def test_surcharge_returns_fee_and_flag(self, at: datetime, expected: tuple[int, bool]):
        assert overtime_surcharge(at) == expected
        q = quote("apartment-sale", 80, at=at)
        assert (q.overtime_fee, q.outside_working_hours) == expected
        assert overtime_fee(at) == q.overtime_fee

    def test_quote_uses_the_same_working_hours_check(self, monkeypatch):
        monkeypatch.setattr(calculator_module, "is_outside_working_hours", lambda at: True)
        q = quote("apartment-sale", 80, at=datetime(2026, 10, 19, 10, 0))
        assert q.overtime_fee == 200_000
        assert q.outside_working_hours is True
        assert overtime_fee(datetime(2026, 10, 19, 10, 0)) == 200_000


# ---------------------------------------------------------------------------
# quote()
# ---------------------------------------------------------------------------

class TestQuote:
    def test_apartment_on_site_during_hours(self):
        q = quote("apartment-sale", 80, notary_location="office", at=TUESDAY_2PM)
        assert q is not None
        assert q.base_fee == 200_000
        assert q.travel_fee == 0
        assert q.overtime_fee == 0
        assert q.total_fee == 200_000
        assert q.outside_working_hours is False

    def test_land_off_site_on_saturday_afternoon(self):
        q = quote(
            "land-transfer",
            600,
            notary_location="outside",
            destination="hanoi",
            at=SATURDAY_2PM,
        )
        assert q is not None
        assert q.base_fee == 400_000
        assert q.travel_fee == 300_000
        assert q.distance_km == 15
        assert q.overtime_fee == 200_000
        assert q.total_fee == 900_000
        assert q.outside_working_hours is True

    def test_total_is_sum_of_components(self):
        q = quote("house-land-sale", 120, notary_location="outside",
                  destination="danang", at=datetime(2026, 10, 18, 9, 0))
        assert q is not None
        assert q.total_fee == q.base_fee + q.travel_fee + q.overtime_fee
        assert q.total_fee == 400_000 + 1_200_000 + 200_000

    @pytest.mark.parametrize("area", [None, 0, -5, float("nan")])
    def test_missing_or_invalid_area_gives_no_quote(self, area):
        assert quote("apartment-sale", area, at=TUESDAY_2PM) is None

    @pytest.mark.parametrize("area", [None, 0, -1])
    def test_contract_amendment_ignores_area(self, area):
        q = quote("contract-amendment", area, at=TUESDAY_2PM)
        assert q is not None
        assert q.area == AREA_NOT_APPLICABLE
        assert q.total_fee == 150_000

    def test_off_site_without_destination_has_no_travel(self):
        q = quote("apartment-gift", 40, notary_location="outside", at=TUESDAY_2PM)
        assert q is not None
        assert q.travel_fee == 0
        assert q.distance_km == 0

    def test_quote_request_model(self):
        request = FeeQuoteRequest.model_validate({
            "contractType": "land-transfer",
            "area": 600,
            "notaryLocation": "outside",
            "destination": "hanoi",
            "evaluatedAt": "2026-10-17T14:00:00+07:00",
        })
        q = quote_request(request)
        assert q is not None
        assert q.total_fee == 900_000

    def test_payload_is_camel_case(self):
        q = quote("apartment-sale", 80, at=TUESDAY_2PM)
        payload = q.model_dump(by_alias=True)
        assert payload["totalFee"] == 200_000
        assert "outsideWorkingHours" in payload
