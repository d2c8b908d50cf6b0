"""
booking.py — Turn the portal's booking form into a consultation request.

The backend only stores a requested datetime and a free-text content block,
so every form detail is folded into a Vietnamese summary:

    === THÔNG TIN KHÁCH HÀNG ===
    Họ tên: ...
    === CHI TIẾT TƯ VẤN ===
    ...
    === MÔ TẢ VẤN ĐỀ ===
    ...
    [=== TÀI LIỆU ĐÍNH KÈM === ...]
"""

from __future__ import annotations

from notary_shared.constants import CONSULTATION_TYPES, LEGAL_AREAS, MEETING_TYPES, TIME_SLOTS
from notary_shared.models import BookingForm, ConsultationCreate
from notary_shared.time_utils import (
    available_booking_dates,
    combine_date_time,
    is_datetime_in_future,
)

__all__ = [
    "available_booking_dates",
    "booking_slots",
    "format_for_display",
    "is_datetime_in_future",
    "transform_consultation_data",
]


def format_for_display(form: BookingForm) -> dict[str, str]:
    """Display names for the coded choices; unknown codes pass through."""
    return {
        "consultationType": CONSULTATION_TYPES.get(form.consultation_type, form.consultation_type),
        "legalArea": LEGAL_AREAS.get(form.legal_area, form.legal_area),
        "meetingType": MEETING_TYPES.get(form.meeting_type, form.meeting_type),
    }


def _content(form: BookingForm) -> str:
    names = format_for_display(form)
    date_str = form.preferred_date.isoformat()
    lines = [
        "=== THÔNG TIN KHÁCH HÀNG ===",
        f"Họ tên: {form.full_name}",
        f"Email: {form.email}",
        f"Số điện thoại: {form.phone}",
        "",
        "=== CHI TIẾT TƯ VẤN ===",
        f"Gói tư vấn: {names['consultationType']}",
        f"Lĩnh vực pháp lý: {names['legalArea']}",
        f"Hình thức tư vấn: {names['meetingType']}",
        f"Thời gian đề xuất: {date_str} lúc {form.preferred_time}",
        "",
        "=== MÔ TẢ VẤN ĐỀ ===",
        form.description,
    ]
    if form.documents:
        lines += [
            "",
            "=== TÀI LIỆU ĐÍNH KÈM ===",
            f"Số lượng tài liệu: {len(form.documents)} file",
            "Lưu ý: Tài liệu sẽ được gửi riêng qua email sau khi đặt lịch.",
        ]
    return "\n".join(lines).strip()


def transform_consultation_data(form: BookingForm) -> ConsultationCreate:
    """The date and time are read as office-local time."""
    requested = combine_date_time(form.preferred_date.isoformat(), form.preferred_time)
    return ConsultationCreate(requested_datetime=requested, content=_content(form))


def booking_slots() -> dict[str, list]:
    """Bookable dates and the fixed time slots, as shown on the booking form."""
    return {"dates": available_booking_dates(), "times": list(TIME_SLOTS)}
