"""
services/articles.py — News and share articles.

Admin operations cover CRUD plus the publish / archive / toggle-hidden
transitions. The public_* helpers mirror the portal: they only ever ask for
PUBLISHED articles.

Endpoints:
  GET    /articles                 GET /articles/{id}     GET /articles/slug/{slug}
  POST   /articles                 PUT /articles/{id}     DELETE /articles/{id}
  POST   /articles/{id}/publish    /archive               /toggle-hidden
"""

from __future__ import annotations

from typing import Any

from notary_shared.models import Article, ArticleCreate, ArticleQuery, ArticleUpdate, Page
from notary_client.services.base import BaseService


class ArticleService(BaseService):
    name = "articles"
    resource = "/articles"

    # ------------------------------------------------------------------
    # Admin
    # ------------------------------------------------------------------

    async def list(self, query: ArticleQuery | dict[str, Any] | None = None) -> Page[Article]:
        return await self._list(Article, self.resource, self._params(query))

    async def get(self, article_id: str) -> Article:
        return self._one(Article, await self._api.get(self._path(article_id)))

    async def get_by_slug(self, slug: str) -> Article:
        return self._one(Article, await self._api.get(self._path("slug", slug)))

    async def create(self, data: ArticleCreate) -> Article:
        return self._one(Article, await self._api.post(self.resource, self._payload(data)))

    async def update(self, article_id: str, data: ArticleUpdate) -> Article:
        return self._one(Article, await self._api.put(self._path(article_id), self._payload(data)))

    async def delete(self, article_id: str) -> None:
        await self._api.delete(self._path(article_id))

    async def publish(self, article_id: str) -> Article:
        self._log.info("article_publish", article_id=article_id)
        return self._one(Article, await self._api.post(self._path(article_id, "publish")))

    async def archive(self, article_id: str) -> Article:
        self._log.info("article_archive", article_id=article_id)
        return self._one(Article, await self._api.post(self._path(article_id, "archive")))

    async def toggle_hidden(self, article_id: str) -> Article:
        return self._one(Article, await self._api.post(self._path(article_id, "toggle-hidden")))

    # ------------------------------------------------------------------
    # Public portal
    # ------------------------------------------------------------------

    async def public_list(self, query: ArticleQuery | dict[str, Any] | None = None) -> Page[Article]:
        """Published articles only, whatever status the query asks for."""
        return await self._list(Article, self.resource, self._params(query, status="PUBLISHED"))

    async def news(self, query: ArticleQuery | dict[str, Any] | None = None) -> Page[Article]:
        return await self.public_list(self._params(query, type="NEWS"))

    async def shares(self, query: ArticleQuery | dict[str, Any] | None = None) -> Page[Article]:
        return await self.public_list(self._params(query, type="SHARE"))

    async def latest(self, limit: int = 5) -> Page[Article]:
        return await self.public_list(
            {"limit": limit, "sortBy": "publishedAt", "sortOrder": "DESC"}
        )

    async def related(self, category_id: str, exclude_id: str, limit: int = 4) -> list[Article]:
        """Published articles of the same category, minus the one being read."""
        page = await self.public_list({
            "categoryId": category_id,
            # one extra so dropping `exclude_id` still leaves `limit`
            "limit": limit + 1,
            "sortBy": "publishedAt",
            "sortOrder": "DESC",
        })
        return [a for a in page.items if a.id != exclude_id][:limit]
