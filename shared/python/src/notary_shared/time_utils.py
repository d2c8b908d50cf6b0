"""
time_utils.py — Office-local time, business hours and vi-VN date formatting.

All business-hour checks are evaluated in the office timezone
(settings.office_timezone, Asia/Ho_Chi_Minh by default). Naive datetimes are
taken to already be office-local; aware datetimes are converted first.

Usage:
    from notary_shared.time_utils import is_outside_working_hours, format_time_ago

    is_outside_working_hours(datetime(2026, 10, 18, 10, 0))   # Sunday → True
    format_time_ago("2026-10-19T08:00:00Z")                    # "2 giờ trước"
    available_booking_dates(date(2026, 10, 19))                # next 14 weekdays-only
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo

from dateutil import parser as date_parser
from dateutil import tz

from notary_shared.config import settings
from notary_shared.constants import BOOKING_WINDOW_DAYS, BUSINESS_HOURS

_WEEKDAYS_VI: dict[int, str] = {
    1: "Thứ Hai",
    2: "Thứ Ba",
    3: "Thứ Tư",
    4: "Thứ Năm",
    5: "Thứ Sáu",
    6: "Thứ Bảy",
    7: "Chủ Nhật",
}
_WEEKDAYS_VI_SHORT: dict[int, str] = {
    1: "T2", 2: "T3", 3: "T4", 4: "T5", 5: "T6", 6: "T7", 7: "CN",
}


def office_tz() -> tzinfo:
    """The office timezone. Raises ValueError for an unknown zone name."""
    zone = tz.gettz(settings.office_timezone)
    if zone is None:
        raise ValueError(f"unknown timezone: {settings.office_timezone}")
    return zone


def now_local() -> datetime:
    """Current wall-clock time in the office timezone (aware)."""
    return datetime.now(office_tz())


def to_office_time(at: datetime) -> datetime:
    if at.tzinfo is None:
        return at
    return at.astimezone(office_tz())


def decimal_hour(at: datetime) -> float:
    """09:30 → 9.5. Seconds are ignored."""
    return at.hour + at.minute / 60


def is_outside_working_hours(at: datetime | None = None) -> bool:
    """
    True when `at` falls outside posted business hours.

    Mon–Fri open 08:00–17:30, Saturday 08:00–12:00, Sunday closed.
    The opening minute is inside, the closing minute is outside.

    Args:
        at: Evaluation instant. Defaults to now in the office timezone.
    """
    local = to_office_time(at) if at is not None else now_local()
    hours = BUSINESS_HOURS.get(local.isoweekday())
    if hours is None:
        return True
    opens, closes = hours
    current = decimal_hour(local)
    return current < opens or current >= closes


def parse_api_datetime(raw: str | datetime | None) -> datetime | None:
    """Parse an ISO-8601 timestamp from the API. Returns None if unparseable."""
    if raw is None or isinstance(raw, datetime):
        return raw
    try:
        return date_parser.isoparse(raw.strip())
    except (ValueError, OverflowError):
        return None


def format_date_vi(value: date | datetime | str | None) -> str:
    """dd/mm/yyyy, or '-' for missing or invalid input."""
    if isinstance(value, str):
        value = parse_api_datetime(value)
    if value is None:
        return "-"
    if isinstance(value, datetime):
        value = to_office_time(value)
    return value.strftime("%d/%m/%Y")


def format_date_display(value: str) -> str:
    """'Thứ Hai, 20/10/2026'. Unparseable input is returned unchanged."""
    parsed = parse_api_datetime(value)
    if parsed is None:
        return value
    parsed = to_office_time(parsed)
    return f"{_WEEKDAYS_VI[parsed.isoweekday()]}, {parsed.strftime('%d/%m/%Y')}"


def format_time_ago(value: str | datetime, now: datetime | None = None) -> str:
    """
    Relative Vietnamese timestamp: 'Vừa xong', 'N phút trước', 'N giờ trước',
    'N ngày trước', then a plain date after a week.
    """
    parsed = parse_api_datetime(value)
    if parsed is None:
        return str(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=office_tz())
    current = now or now_local()
    if current.tzinfo is None:
        current = current.replace(tzinfo=office_tz())

    seconds = int((current - parsed).total_seconds())
    if seconds < 60:
        return "Vừa xong"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} phút trước"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} giờ trước"
    days = hours // 24
    if days < 7:
        return f"{days} ngày trước"
    return format_date_vi(parsed)


def available_booking_dates(
    today: date | None = None,
    days: int = BOOKING_WINDOW_DAYS,
) -> list[dict[str, str]]:
    """
    Bookable dates over the next `days` days, skipping Saturdays and Sundays.

    Returns:
        [{"date": "2026-10-20", "display": "T3, 20/10"}, ...]
    """
    start = today or now_local().date()
    result: list[dict[str, str]] = []
    for offset in range(1, days + 1):
        d = start + timedelta(days=offset)
        if d.isoweekday() >= 6:
            continue
        result.append({
            "date": d.isoformat(),
            "display": f"{_WEEKDAYS_VI_SHORT[d.isoweekday()]}, {d.strftime('%d/%m')}",
        })
    return result


def combine_date_time(date_str: str, time_str: str) -> datetime:
    """
    Combine 'YYYY-MM-DD' and 'HH:MM' into an office-local aware datetime.

    Raises:
        ValueError: if either part is malformed.
    """
    d = date.fromisoformat(date_str)
    t = time.fromisoformat(time_str)
    return datetime.combine(d, t, tzinfo=office_tz())


def is_datetime_in_future(
    date_str: str, time_str: str, now: datetime | None = None
) -> bool:
    try:
        target = combine_date_time(date_str, time_str)
    except ValueError:
        return False
    current = now or now_local()
    if current.tzinfo is None:
        current = current.replace(tzinfo=office_tz())
    return target > current
