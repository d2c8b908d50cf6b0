"""
tests/conftest.py — Shared pytest fixtures for the client test suite.

Provides:
  token_store      — TokenStore backed by a tmp file
  signed_in        — token_store holding a STAFF session
  api              — NotaryApiClient against http://api.test/api, zero retry delay
  sample_*         — camelCase payloads as the backend returns them
"""

from __future__ import annotations

from typing import Any

import pytest
import pytest_asyncio

from notary_client.api_client import NotaryApiClient
from notary_client.token_store import TokenStore
from notary_client.utils.cache import QueryCache


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def token_store(tmp_path) -> TokenStore:
    return TokenStore(tmp_path / "session.json")


@pytest.fixture
def signed_in(token_store: TokenStore) -> TokenStore:
    token_store.set_tokens(
        "access-1",
        "refresh-1",
        {"id": "u-1", "email": "staff@example.com", "fullName": "Nguyễn Văn A", "role": "STAFF"},
    )
    return token_store


@pytest_asyncio.fixture
async def api(token_store: TokenStore):
    client = NotaryApiClient(
        "http://api.test/api",
        token_store=token_store,
        cache=QueryCache(default_ttl=30.0),
        retry_attempts=3,
        retry_base_delay=0,
    )
    yield client
    await client.aclose()


# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_record() -> dict[str, Any]:
    return {
        "id": "rec-1",
        "customerId": "cus-1",
        "customer": {"id": "cus-1", "fullName": "Trần Thị B", "email": "b@example.com"},
        "typeId": "type-1",
        "type": {"id": "type-1", "name": "Hợp đồng mua bán", "slug": "hop-dong-mua-ban"},
        "title": "Công chứng hợp đồng mua bán căn hộ",
        "description": "Căn hộ 80m² tại Thanh Xuân",
        "attachments": ["https://storage.example.com/records/1-hd.pdf"],
        "status": "PENDING",
        "reviewNotes": None,
        "reviewerId": None,
        "reviewer": None,
        "createdAt": "2026-10-18T03:00:00.000Z",
        "updatedAt": "2026-10-18T03:00:00.000Z",
    }


@pytest.fixture
def sample_article() -> dict[str, Any]:
    return {
        "id": "art-1",
        "title": "Thủ tục công chứng hợp đồng",
        "slug": "thu-tuc-cong-chung",
        "content": "<p>Nội dung</p>",
        "status": "PUBLISHED",
        "type": "NEWS",
        "isCrawled": False,
        "category": {"id": "cat-1", "name": "Hợp đồng"},
        "publishedAt": "2026-10-17T02:00:00.000Z",
    }


@pytest.fixture
def sample_listing() -> dict[str, Any]:
    return {
        "id": "lst-1",
        "authorId": "cus-1",
        "title": "Bán căn hộ 2 phòng ngủ",
        "content": "Căn hộ chung cư tầng 12, sổ hồng chính chủ.",
        "price": 2500000000,
        "images": ["https://img.example.com/1.jpg"],
        "status": "APPROVED",
        "isHidden": False,
        "likeCount": 3,
        "commentCount": 1,
    }


@pytest.fixture
def sample_consultation() -> dict[str, Any]:
    return {
        "id": "con-1",
        "customerId": "cus-1",
        "requestedDatetime": "2026-10-21T02:00:00.000Z",
        "content": "=== THÔNG TIN KHÁCH HÀNG ===",
        "status": "PENDING",
    }
