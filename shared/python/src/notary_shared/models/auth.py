"""
models/auth.py — Login/registration payloads and the authenticated session.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from dateutil.relativedelta import relativedelta
from pydantic import EmailStr, Field, field_validator, model_validator

from notary_shared.constants import UserRole
from notary_shared.models.common import ApiModel
from notary_shared.time_utils import now_local

_VN_MOBILE = re.compile(r"^(0|\+84)(3[2-9]|5[2689]|7[06-9]|8[1-9]|9[0-9])[0-9]{7}$")


class AuthUser(ApiModel):
    id: str
    email: str | None = None
    full_name: str | None = None
    role: UserRole = "CUSTOMER"
    phone: str | None = None
    date_of_birth: str | None = None


class AuthSession(ApiModel):
    access_token: str
    refresh_token: str
    user: AuthUser | None = None


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=8)

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v


class RegisterRequest(ApiModel):
    full_name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8)
    confirm_password: str = Field(min_length=1, exclude=True)
    phone: str
    date_of_birth: date | None = None

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("full_name")
    @classmethod
    def _two_words(cls, v: str) -> str:
        v = v.strip()
        if len(v.split()) < 2:
            raise ValueError("Vui lòng nhập họ và tên đầy đủ")
        return v

    @field_validator("password")
    @classmethod
    def _strong_password(cls, v: str) -> str:
        if not re.search(r"[A-Z]", v):
            raise ValueError("Mật khẩu phải có ít nhất 1 chữ cái viết hoa")
        if not re.search(r"[a-z]", v):
            raise ValueError("Mật khẩu phải có ít nhất 1 chữ cái viết thường")
        if not re.search(r"[0-9]", v):
            raise ValueError("Mật khẩu phải có ít nhất 1 chữ số")
        return v

    @field_validator("phone")
    @classmethod
    def _vn_mobile(cls, v: str) -> str:
        v = v.strip()
        if not _VN_MOBILE.match(v):
            raise ValueError("Số điện thoại không hợp lệ (VD: 0912345678 hoặc +84912345678)")
        return v

    @field_validator("date_of_birth")
    @classmethod
    def _adult(cls, v: date | None) -> date | None:
        if v is not None and v > now_local().date() - relativedelta(years=18):
            raise ValueError("Bạn phải đủ 18 tuổi")
        return v

    @model_validator(mode="after")
    def _passwords_match(self) -> "RegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("Mật khẩu xác nhận không khớp")
        return self


class ChangePasswordRequest(ApiModel):
    old_password: str = Field(min_length=1)
    new_password: str = Field(min_length=8)
