"""
services/listings.py — Customer property listings with comments and likes.

Endpoints:
  GET    /listings                    GET /listings/my-listings    GET /listings/{id}
  POST   /listings                    PUT /listings/{id}           DELETE /listings/{id}
  POST   /listings/{id}/approve       /reject                      /toggle-hidden
  GET    /listings/{id}/comments      POST /listings/{id}/comments
  DELETE /listings/comments/{commentId}
  POST   /listings/{id}/like          GET /listings/{id}/liked
"""

from __future__ import annotations

from typing import Any

from notary_shared.models import (
    LikeState,
    Listing,
    ListingComment,
    ListingCreate,
    ListingQuery,
    ListingUpdate,
    Page,
    ReviewListing,
)
from notary_client.services.base import BaseService


class ListingService(BaseService):
    name = "listings"
    resource = "/listings"

    async def list(self, query: ListingQuery | dict[str, Any] | None = None) -> Page[Listing]:
        return await self._list(Listing, self.resource, self._params(query))

    async def public_list(self, query: ListingQuery | dict[str, Any] | None = None) -> Page[Listing]:
        """Approved listings only; the portal never shows pending or rejected ones."""
        return await self._list(Listing, self.resource, self._params(query, status="APPROVED"))

    async def mine(self, query: ListingQuery | dict[str, Any] | None = None) -> Page[Listing]:
        return await self._list(Listing, self._path("my-listings"), self._params(query))

    async def get(self, listing_id: str) -> Listing:
        return self._one(Listing, await self._api.get(self._path(listing_id)))

    async def create(self, data: ListingCreate) -> Listing:
        return self._one(Listing, await self._api.post(self.resource, self._payload(data)))

    async def update(self, listing_id: str, data: ListingUpdate) -> Listing:
        return self._one(Listing, await self._api.put(self._path(listing_id), self._payload(data)))

    async def delete(self, listing_id: str) -> None:
        await self._api.delete(self._path(listing_id))

    async def approve(self, listing_id: str, review_notes: str | None = None) -> Listing:
        body = ReviewListing(review_notes=review_notes)
        return self._one(
            Listing, await self._api.post(self._path(listing_id, "approve"), self._payload(body))
        )

    async def reject(self, listing_id: str, review_notes: str | None = None) -> Listing:
        body = ReviewListing(review_notes=review_notes)
        return self._one(
            Listing, await self._api.post(self._path(listing_id, "reject"), self._payload(body))
        )

    async def toggle_hidden(self, listing_id: str) -> Listing:
        return self._one(Listing, await self._api.post(self._path(listing_id, "toggle-hidden")))

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    async def comments(self, listing_id: str) -> list[ListingComment]:
        return self._many(ListingComment, await self._api.get(self._path(listing_id, "comments")))

    async def add_comment(self, listing_id: str, comment_text: str) -> ListingComment:
        text = comment_text.strip()
        if not text:
            raise ValueError("Nội dung bình luận không được để trống")
        data = await self._api.post(self._path(listing_id, "comments"), {"commentText": text})
        return self._one(ListingComment, data)

    async def delete_comment(self, comment_id: str) -> None:
        await self._api.delete(self._path("comments", comment_id))

    # ------------------------------------------------------------------
    # Likes
    # ------------------------------------------------------------------

    async def toggle_like(self, listing_id: str) -> LikeState:
        return self._one(LikeState, await self._api.post(self._path(listing_id, "like")))

    async def has_liked(self, listing_id: str) -> bool:
        data = await self._api.get(self._path(listing_id, "liked"), cached=False)
        return bool((data or {}).get("liked"))
