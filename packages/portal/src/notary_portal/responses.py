"""Standardized {statusCode, message, data} response envelopes."""

from __future__ import annotations

from typing import Any

from notary_shared.constants import GENERIC_ERROR_MESSAGE


def success(data: Any, message: str = "Thành công", status_code: int = 200) -> dict[str, Any]:
    return {"statusCode": status_code, "message": message, "data": data}


def error_response(
    status_code: int,
    message: str = GENERIC_ERROR_MESSAGE,
    data: Any = None,
) -> dict[str, Any]:
    return {"statusCode": status_code, "message": message, "data": data}
