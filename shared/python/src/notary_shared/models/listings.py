"""
models/listings.py — Customer property listings, comments and likes.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from pydantic import AnyHttpUrl, Field, TypeAdapter, field_validator

from notary_shared.constants import ListingStatus
from notary_shared.models.common import ApiModel, CategoryRef, ListQuery, UserRef

_URL = TypeAdapter(AnyHttpUrl)


class Listing(ApiModel):
    id: str
    author_id: str | None = None
    author: UserRef | None = None
    title: str
    content: str = ""
    price: float | None = None
    category_id: str | None = None
    category: CategoryRef | None = None
    images: list[str] | None = None
    status: ListingStatus = "PENDING"
    is_hidden: bool = False
    like_count: int = 0
    comment_count: int = 0
    approver_id: str | None = None
    approver: UserRef | None = None
    approved_at: datetime | None = None
    review_notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ListingCreate(ApiModel):
    title: str = Field(min_length=5, max_length=255)
    content: str = Field(min_length=20, max_length=5000)
    price: float | None = Field(default=None, gt=0)
    category_id: str | None = None
    images: list[str] | None = None

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, v: Any) -> Any:
        # "1,500,000 VND" → 1500000.0; blank → None
        if isinstance(v, str):
            cleaned = re.sub(r"[^0-9.-]", "", v)
            if not cleaned:
                return None
            try:
                return float(cleaned)
            except ValueError:
                return None
        return v

    @field_validator("category_id", mode="before")
    @classmethod
    def _blank_category(cls, v: Any) -> Any:
        return None if v == "" else v

    @field_validator("images")
    @classmethod
    def _valid_urls(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        for url in v:
            _URL.validate_python(url)
        return v


class ListingUpdate(ListingCreate):
    title: str | None = Field(default=None, min_length=5, max_length=255)
    content: str | None = Field(default=None, min_length=20, max_length=5000)


class ReviewListing(ApiModel):
    review_notes: str | None = None


class ListingComment(ApiModel):
    id: str
    listing_id: str
    user_id: str | None = None
    user: UserRef | None = None
    comment_text: str
    created_at: datetime | None = None


class LikeState(ApiModel):
    liked: bool
    like_count: int | None = None


class ListingQuery(ListQuery):
    author_id: str | None = None
    category_id: str | None = None
    status: ListingStatus | None = None
    min_price: float | None = None
    max_price: float | None = None
    is_hidden: bool | None = None
