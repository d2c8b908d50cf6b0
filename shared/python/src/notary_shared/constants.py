"""
constants.py — shared constants used across the client, CLI and portal.

Status literals, roles, contract types, destination tables, fee brackets and
the booking catalogues are defined here so every package sees the same values.
"""

from __future__ import annotations

from typing import Final, Literal

# ---------------------------------------------------------------------------
# Status and role literals (match the backend enums)
# ---------------------------------------------------------------------------
RecordStatus = Literal["PENDING", "APPROVED", "REJECTED"]
ListingStatus = Literal["PENDING", "APPROVED", "REJECTED"]
ArticleStatus = Literal["DRAFT", "PUBLISHED", "ARCHIVED", "HIDDEN"]
ArticleType = Literal["NEWS", "SHARE", "INTERNAL"]
ConsultationStatus = Literal["PENDING", "APPROVED", "COMPLETED", "CANCELLED"]
ChatSessionStatus = Literal["ACTIVE", "CLOSED", "ESCALATED"]
MessageSender = Literal["USER", "BOT", "AGENT"]
UserRole = Literal["ADMIN", "STAFF", "CUSTOMER"]
SortOrder = Literal["ASC", "DESC"]
NotaryLocation = Literal["office", "outside"]
PermissionAction = Literal["create", "read", "update", "delete"]

# module -> allowed actions, per role. ADMIN is allowed everything.
PERMISSION_MATRIX: Final[dict[str, dict[str, tuple[str, ...]]]] = {
    "STAFF": {
        "users": ("read",),
        "employees": (),
        "services": ("create", "read", "update", "delete"),
        "documentGroups": ("create", "read", "update", "delete"),
        "feeTypes": ("create", "read", "update", "delete"),
        "feeCalculations": ("create", "read"),
        "records": ("read", "update"),
        "articles": ("create", "read"),
        "categories": ("create", "read", "update", "delete"),
        "listings": ("read", "update"),
        "consultations": ("read", "update", "delete"),
        "campaigns": ("read",),
        "files": ("create", "read", "delete"),
    },
    "CUSTOMER": {
        "services": ("read",),
        "feeTypes": ("read",),
        "feeCalculations": ("create", "read"),
        "records": ("create", "read", "update"),
        "articles": ("read",),
        "categories": ("read",),
        "listings": ("create", "read", "update", "delete"),
        "consultations": ("create", "read", "delete"),
        "files": ("create", "read", "delete"),
    },
}

# ---------------------------------------------------------------------------
# Fee calculator
# ---------------------------------------------------------------------------
OFFICE_ADDRESS: Final[str] = "622 Đ. Kim Giang, Thanh Quang, Thanh Trì, Hà Nội"

CONTRACT_TYPES: Final[dict[str, str]] = {
    "apartment-sale": "Hợp đồng mua bán căn hộ Chung Cư",
    "land-transfer": "Hợp đồng chuyển nhượng QSD Đất",
    "apartment-gift": "Hợp đồng tặng cho căn hộ Chung Cư",
    "house-land-sale": "Hợp đồng mua bán Nhà và chuyển nhượng QSD Đất",
    "contract-amendment": "Hợp đồng sửa đổi, bổ sung có thay đổi giá trị tài sản",
    "apartment-contribution": "Hợp đồng góp vốn bằng căn hộ Chung Cư",
    "inheritance-division": "Văn bản chia di sản thừa kế là Nhà - Đất",
}

# (upper bound m² inclusive, fee VND); the last entry has no bound
APARTMENT_FEE_BRACKETS: Final[tuple[tuple[float | None, int], ...]] = (
    (50, 150_000),
    (100, 200_000),
    (150, 250_000),
    (None, 300_000),
)
LAND_FEE_BRACKETS: Final[tuple[tuple[float | None, int], ...]] = (
    (100, 200_000),
    (500, 300_000),
    (1000, 400_000),
    (None, 500_000),
)
FLAT_BASE_FEES: Final[dict[str, int]] = {
    "house-land-sale": 400_000,
    "contract-amendment": 150_000,
    "apartment-contribution": 200_000,
    "inheritance-division": 300_000,
}
DEFAULT_BASE_FEE: Final[int] = 200_000

# (upper bound km inclusive, fee VND)
TRAVEL_FEE_BRACKETS: Final[tuple[tuple[float | None, int], ...]] = (
    (5, 0),
    (10, 150_000),
    (20, 300_000),
    (50, 500_000),
    (100, 800_000),
    (None, 1_200_000),
)

OVERTIME_SURCHARGE: Final[int] = 200_000

# Business hours as (open, close) in decimal hours, keyed by ISO weekday.
# Sunday (7) is absent: closed all day.
BUSINESS_HOURS: Final[dict[int, tuple[float, float]]] = {
    1: (8.0, 17.5),
    2: (8.0, 17.5),
    3: (8.0, 17.5),
    4: (8.0, 17.5),
    5: (8.0, 17.5),
    6: (8.0, 12.0),
}

DESTINATIONS: Final[dict[str, str]] = {
    "hanoi": "Hà Nội",
    "hcm": "TP. Hồ Chí Minh",
    "danang": "Đà Nẵng",
    "haiphong": "Hải Phòng",
    "cantho": "Cần Thơ",
    "other": "Tỉnh/Thành phố khác",
}

# Straight-line distance from the office, km
DESTINATION_DISTANCES_KM: Final[dict[str, float]] = {
    "hanoi": 15,
    "hcm": 1700,
    "danang": 800,
    "haiphong": 120,
    "cantho": 1800,
    "other": 500,
}
DEFAULT_DISTANCE_KM: Final[float] = 500

DISTRICTS: Final[dict[str, dict[str, str]]] = {
    "hanoi": {
        "ba-dinh": "Ba Đình",
        "hoan-kiem": "Hoàn Kiếm",
        "hai-ba-trung": "Hai Bà Trưng",
        "dong-da": "Đống Đa",
        "tay-ho": "Tây Hồ",
        "cau-giay": "Cầu Giấy",
        "thanh-xuan": "Thanh Xuân",
        "hoang-mai": "Hoàng Mai",
        "long-bien": "Long Biên",
        "nam-tu-liem": "Nam Từ Liêm",
        "bac-tu-liem": "Bắc Từ Liêm",
        "ha-dong": "Hà Đông",
        "thanh-tri": "Thanh Trì",
    },
    "hcm": {
        "quan-1": "Quận 1",
        "quan-3": "Quận 3",
        "quan-7": "Quận 7",
        "quan-10": "Quận 10",
        "binh-thanh": "Bình Thạnh",
        "go-vap": "Gò Vấp",
        "phu-nhuan": "Phú Nhuận",
        "tan-binh": "Tân Bình",
        "thu-duc": "Thủ Đức",
    },
    "danang": {
        "hai-chau": "Hải Châu",
        "cam-le": "Cẩm Lệ",
        "thanh-khe": "Thanh Khê",
        "lien-chieu": "Liên Chiểu",
        "ngu-hanh-son": "Ngũ Hành Sơn",
        "son-tra": "Sơn Trà",
        "hoa-vang": "Hòa Vang",
    },
    "haiphong": {
        "hong-bang": "Hồng Bàng",
        "ngo-quyen": "Ngô Quyền",
        "le-chan": "Lê Chân",
        "hai-an": "Hải An",
        "kien-an": "Kiến An",
        "do-son": "Đồ Sơn",
    },
    "cantho": {
        "ninh-kieu": "Ninh Kiều",
        "binh-thuy": "Bình Thủy",
        "cai-rang": "Cái Răng",
        "o-mon": "Ô Môn",
        "thot-not": "Thốt Nốt",
    },
    "other": {
        "center": "Trung tâm thành phố",
        "suburb": "Ngoại thành",
        "rural": "Vùng nông thôn",
    },
}

# ---------------------------------------------------------------------------
# Booking
# ---------------------------------------------------------------------------
CONSULTATION_TYPES: Final[dict[str, str]] = {
    "free-consultation": "Tư vấn miễn phí",
    "standard-consultation": "Tư vấn chuẩn",
    "premium-consultation": "Tư vấn chuyên sâu",
    "legal-review": "Xem xét tài liệu pháp lý",
}

LEGAL_AREAS: Final[dict[str, str]] = {
    "corporate": "Luật Doanh nghiệp",
    "family": "Luật Gia đình",
    "real-estate": "Bất động sản",
    "criminal": "Luật Hình sự",
    "labor": "Luật Lao động",
    "immigration": "Xuất nhập cảnh",
    "intellectual": "Sở hữu trí tuệ",
    "other": "Khác",
}

MEETING_TYPES: Final[dict[str, str]] = {
    "office": "Tại văn phòng",
    "video": "Video call",
    "phone": "Điện thoại",
}

TIME_SLOTS: Final[tuple[str, ...]] = (
    "09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
    "14:00", "14:30", "15:00", "15:30", "16:00", "16:30", "17:00",
)

BOOKING_WINDOW_DAYS: Final[int] = 14

# ---------------------------------------------------------------------------
# Upload rules: purpose -> (allowed content types or None for any, max bytes)
# ---------------------------------------------------------------------------
PDF_AND_WORD: Final[frozenset[str]] = frozenset({
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
})

UPLOAD_RULES: Final[dict[str, tuple[frozenset[str] | None, int | None]]] = {
    "records": (None, None),
    "listings": (frozenset({"image/jpeg", "image/png", "image/webp"}), None),
    "applications": (PDF_AND_WORD, 5 * 1024 * 1024),
    "consultations": (PDF_AND_WORD | {"image/jpeg", "image/png"}, 10 * 1024 * 1024),
}

GENERIC_ERROR_MESSAGE: Final[str] = "Đã có lỗi xảy ra, vui lòng thử lại"
