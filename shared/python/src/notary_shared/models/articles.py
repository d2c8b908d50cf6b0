"""
models/articles.py — News / share / internal articles.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, model_validator

from notary_shared.constants import ArticleStatus, ArticleType
from notary_shared.models.common import ApiModel, CategoryRef, ListQuery, UserRef


class Article(ApiModel):
    id: str
    title: str
    slug: str
    content: str = ""
    excerpt: str | None = None
    author_id: str | None = None
    author: UserRef | None = None
    category_id: str | None = None
    category: CategoryRef | None = None
    status: ArticleStatus = "DRAFT"
    type: ArticleType = "NEWS"
    is_crawled: bool = False
    source_url: str | None = None
    thumbnail: str | None = None
    approver_id: str | None = None
    approver: UserRef | None = None
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ArticleCreate(ApiModel):
    title: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    content: str
    category_id: str | None = None
    type: ArticleType | None = None
    is_crawled: bool | None = None
    source_url: str | None = None
    thumbnail: str | None = None

    @model_validator(mode="after")
    def _crawled_needs_source(self) -> "ArticleCreate":
        if self.is_crawled and not self.source_url:
            raise ValueError("sourceUrl is required for crawled articles")
        return self


class ArticleUpdate(ApiModel):
    title: str | None = None
    slug: str | None = None
    content: str | None = None
    category_id: str | None = None
    type: ArticleType | None = None
    status: ArticleStatus | None = None
    source_url: str | None = None
    thumbnail: str | None = None


class ArticleQuery(ListQuery):
    author_id: str | None = None
    category_id: str | None = None
    status: ArticleStatus | None = None
    type: ArticleType | None = None
    is_crawled: bool | None = None
