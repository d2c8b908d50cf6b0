"""
tests/test_errors.py — Tests for client exceptions and user-facing messages.
"""

from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError

from notary_shared.models import LoginRequest
from notary_client.errors import (
    NotaryApiError,
    SessionExpiredError,
    UploadRejectedError,
    is_retryable_read_error,
    user_message,
)

GENERIC = "Đã có lỗi xảy ra, vui lòng thử lại"


class TestFromResponse:
    def test_reads_envelope_message_and_data(self):
        response = httpx.Response(
            409, json={"statusCode": 409, "message": "Slug đã tồn tại", "data": {"field": "slug"}}
        )
        exc = NotaryApiError.from_response(response)
        assert exc.status_code == 409
        assert exc.message == "Slug đã tồn tại"
        assert exc.payload == {"field": "slug"}
        assert str(exc) == "Slug đã tồn tại"

    def test_empty_message_falls_back(self):
        exc = NotaryApiError.from_response(httpx.Response(500, json={"statusCode": 500, "message": ""}))
        assert exc.message == GENERIC

    def test_non_json_body(self):
        exc = NotaryApiError.from_response(httpx.Response(503, text="<html>down</html>"))
        assert exc.message == GENERIC
        assert exc.payload is None


class TestSessionExpired:
    def test_is_a_401_api_error(self):
        exc = SessionExpiredError()
        assert isinstance(exc, NotaryApiError)
        assert exc.status_code == 401
        assert "đăng nhập lại" in exc.message


class TestRetryable:
    @pytest.mark.parametrize(
        "exc,expected",
        [
            (httpx.ConnectError("refused"), True),
            (httpx.ReadTimeout("slow"), True),
            (NotaryApiError(500), True),
            (NotaryApiError(503), True),
            (NotaryApiError(404), False),
            (SessionExpiredError(), False),
            (ValueError("x"), False),
        ],
    )
    def test_classification(self, exc: BaseException, expected: bool):
        assert is_retryable_read_error(exc) is expected


class TestUserMessage:
    def test_api_error(self):
        assert user_message(NotaryApiError(400, "Thiếu tiêu đề")) == "Thiếu tiêu đề"

    def test_upload_rejected(self):
        exc = UploadRejectedError("a.exe", "Định dạng file a.exe không được hỗ trợ")
        assert user_message(exc) == "Định dạng file a.exe không được hỗ trợ"

    def test_validation_error_uses_first_message(self):
        with pytest.raises(ValidationError) as exc_info:
            LoginRequest(email="khach@example.com", password="short")
        assert "8" in user_message(exc_info.value)

    def test_anything_else_is_generic(self):
        assert user_message(RuntimeError("secret stack detail")) == GENERIC
