"""
tests/test_services.py — Tests for the resource services.

Each test checks the path, query string and body a service sends and how it
parses the unwrapped `data`. All HTTP is mocked via respx.
"""

from __future__ import annotations

import json
import re

import httpx
import pytest
import respx

from notary_shared.models import (
    ConsultationCreate,
    FeeCalculationCreate,
    ListingCreate,
    RecordCreate,
    RecordQuery,
)
from notary_client.api_client import NotaryApiClient
from notary_client.services import (
    ArticleService,
    AuthService,
    CatalogService,
    ChatbotService,
    ConsultationService,
    DocumentGroupService,
    FeeCalculationService,
    FeeTypeService,
    ListingService,
    RecordService,
)

BASE_URL = "http://api.test/api"


def url(path: str) -> str:
    return re.escape(f"{BASE_URL}{path}") + r"(\?.*)?$"


def envelope(data) -> dict:
    return {"statusCode": 200, "message": "Thành công", "data": data}


def page_of(items: list, total: int | None = None, page: int = 1, limit: int = 10) -> dict:
    total = len(items) if total is None else total
    return envelope({"items": items, "total": total, "page": page, "limit": limit})


def sent_json(route: respx.Route):
    return json.loads(route.calls.last.request.content or b"null")


def sent_params(route: respx.Route) -> dict:
    return dict(route.calls.last.request.url.params)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class TestRecordService:
    @pytest.mark.asyncio
    async def test_list_parses_page(self, api: NotaryApiClient, sample_record: dict):
        with respx.mock() as router:
            route = router.get(url__regex=url("/records")).mock(
                return_value=httpx.Response(200, json=page_of([sample_record], total=25))
            )
            page = await RecordService(api).list(RecordQuery(status="PENDING", page=1, limit=10))

        assert sent_params(route) == {"status": "PENDING", "page": "1", "limit": "10"}
        assert page.total == 25
        assert page.pages == 3
        assert page.has_next is True
        record = page.items[0]
        assert record.id == "rec-1"
        assert record.customer.full_name == "Trần Thị B"
        assert record.status == "PENDING"

    @pytest.mark.asyncio
    async def test_list_accepts_plain_dict(self, api: NotaryApiClient):
        with respx.mock() as router:
            route = router.get(url__regex=url("/records")).mock(
                return_value=httpx.Response(200, json=page_of([]))
            )
            await RecordService(api).list({"customerId": "cus-1", "typeId": None})
        assert sent_params(route) == {"customerId": "cus-1"}

    @pytest.mark.asyncio
    async def test_create_sends_camel_case(self, api: NotaryApiClient, sample_record: dict):
        with respx.mock() as router:
            route = router.post(url__regex=url("/records")).mock(
                return_value=httpx.Response(201, json=envelope(sample_record))
            )
            record = await RecordService(api).create(
                RecordCreate(type_id="type-1", title="Công chứng hợp đồng")
            )
        assert sent_json(route) == {"typeId": "type-1", "title": "Công chứng hợp đồng"}
        assert record.id == "rec-1"

    @pytest.mark.asyncio
    async def test_approve_posts_review_notes(self, api: NotaryApiClient, sample_record: dict):
        approved = {**sample_record, "status": "APPROVED", "reviewNotes": "Đầy đủ hồ sơ"}
        with respx.mock() as router:
            route = router.post(url__regex=url("/records/rec-1/approve")).mock(
                return_value=httpx.Response(200, json=envelope(approved))
            )
            record = await RecordService(api).approve("rec-1", "Đầy đủ hồ sơ")
        assert sent_json(route) == {"reviewNotes": "Đầy đủ hồ sơ"}
        assert record.status == "APPROVED"

    @pytest.mark.asyncio
    async def test_reject_without_notes_sends_empty_body(self, api: NotaryApiClient, sample_record: dict):
        rejected = {**sample_record, "status": "REJECTED"}
        with respx.mock() as router:
            route = router.post(url__regex=url("/records/rec-1/reject")).mock(
                return_value=httpx.Response(200, json=envelope(rejected))
            )
            record = await RecordService(api).reject("rec-1")
        assert sent_json(route) == {}
        assert record.status == "REJECTED"


# ---------------------------------------------------------------------------
# Articles
# ---------------------------------------------------------------------------

class TestArticleService:
    @pytest.mark.asyncio
    async def test_public_list_forces_published(self, api: NotaryApiClient, sample_article: dict):
        with respx.mock() as router:
            route = router.get(url__regex=url("/articles")).mock(
                return_value=httpx.Response(200, json=page_of([sample_article]))
            )
            page = await ArticleService(api).public_list({"status": "DRAFT", "search": "hợp đồng"})
        params = sent_params(route)
        assert params["status"] == "PUBLISHED"
        assert params["search"] == "hợp đồng"
        assert page.items[0].slug == "thu-tuc-cong-chung"

    @pytest.mark.asyncio
    async def test_news_filters_type(self, api: NotaryApiClient):
        with respx.mock() as router:
            route = router.get(url__regex=url("/articles")).mock(
                return_value=httpx.Response(200, json=page_of([]))
            )
            await ArticleService(api).news()
        assert sent_params(route) == {"type": "NEWS", "status": "PUBLISHED"}

    @pytest.mark.asyncio
    async def test_latest_sorts_by_publish_date(self, api: NotaryApiClient):
        with respx.mock() as router:
            route = router.get(url__regex=url("/articles")).mock(
                return_value=httpx.Response(200, json=page_of([]))
            )
            await ArticleService(api).latest(3)
        assert sent_params(route) == {
            "limit": "3", "sortBy": "publishedAt", "sortOrder": "DESC", "status": "PUBLISHED",
        }

    @pytest.mark.asyncio
    async def test_related_excludes_current_article(self, api: NotaryApiClient, sample_article: dict):
        items = [{**sample_article, "id": f"art-{i}", "slug": f"a-{i}"} for i in range(1, 6)]
        with respx.mock() as router:
            route = router.get(url__regex=url("/articles")).mock(
                return_value=httpx.Response(200, json=page_of(items))
            )
            related = await ArticleService(api).related("cat-1", exclude_id="art-2", limit=4)
        assert sent_params(route)["limit"] == "5"
        assert sent_params(route)["categoryId"] == "cat-1"
        assert [a.id for a in related] == ["art-1", "art-3", "art-4", "art-5"]

    @pytest.mark.asyncio
    async def test_get_by_slug(self, api: NotaryApiClient, sample_article: dict):
        with respx.mock() as router:
            router.get(url__regex=url("/articles/slug/thu-tuc-cong-chung")).mock(
                return_value=httpx.Response(200, json=envelope(sample_article))
            )
            article = await ArticleService(api).get_by_slug("thu-tuc-cong-chung")
        assert article.category.name == "Hợp đồng"

    @pytest.mark.asyncio
    async def test_publish(self, api: NotaryApiClient, sample_article: dict):
        with respx.mock() as router:
            route = router.post(url__regex=url("/articles/art-1/publish")).mock(
                return_value=httpx.Response(200, json=envelope(sample_article))
            )
            article = await ArticleService(api).publish("art-1")
        assert route.called
        assert article.status == "PUBLISHED"


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------

class TestListingService:
    @pytest.mark.asyncio
    async def test_public_list_forces_approved(self, api: NotaryApiClient, sample_listing: dict):
        with respx.mock() as router:
            route = router.get(url__regex=url("/listings")).mock(
                return_value=httpx.Response(200, json=page_of([sample_listing]))
            )
            page = await ListingService(api).public_list({"minPrice": 1000})
        assert sent_params(route) == {"minPrice": "1000", "status": "APPROVED"}
        assert page.items[0].price == 2_500_000_000

    @pytest.mark.asyncio
    async def test_mine_uses_own_listings_path(self, api: NotaryApiClient):
        with respx.mock() as router:
            route = router.get(url__regex=url("/listings/my-listings")).mock(
                return_value=httpx.Response(200, json=page_of([]))
            )
            await ListingService(api).mine()
        assert route.called

    @pytest.mark.asyncio
    async def test_create_parses_price_string(self, api: NotaryApiClient, sample_listing: dict):
        with respx.mock() as router:
            route = router.post(url__regex=url("/listings")).mock(
                return_value=httpx.Response(201, json=envelope(sample_listing))
            )
            await ListingService(api).create(ListingCreate(
                title="Bán căn hộ 2 phòng ngủ",
                content="Căn hộ chung cư tầng 12, sổ hồng chính chủ.",
                price="2,500,000,000 VND",
                category_id="",
            ))
        body = sent_json(route)
        assert body["price"] == 2_500_000_000
        assert "categoryId" not in body

    @pytest.mark.asyncio
    async def test_add_comment_strips_text(self, api: NotaryApiClient):
        comment = {"id": "cmt-1", "listingId": "lst-1", "commentText": "Còn bán không?"}
        with respx.mock() as router:
            route = router.post(url__regex=url("/listings/lst-1/comments")).mock(
                return_value=httpx.Response(201, json=envelope(comment))
            )
            result = await ListingService(api).add_comment("lst-1", "  Còn bán không?  ")
        assert sent_json(route) == {"commentText": "Còn bán không?"}
        assert result.comment_text == "Còn bán không?"

    @pytest.mark.asyncio
    async def test_blank_comment_is_rejected_locally(self, api: NotaryApiClient):
        with respx.mock() as router:
            with pytest.raises(ValueError):
                await ListingService(api).add_comment("lst-1", "   ")
            assert len(router.calls) == 0

    @pytest.mark.asyncio
    async def test_delete_comment_path(self, api: NotaryApiClient):
        with respx.mock() as router:
            route = router.delete(url__regex=url("/listings/comments/cmt-1")).mock(
                return_value=httpx.Response(200, json=envelope(None))
            )
            await ListingService(api).delete_comment("cmt-1")
        assert route.called

    @pytest.mark.asyncio
    async def test_toggle_like_and_liked_state(self, api: NotaryApiClient):
        with respx.mock() as router:
            like = router.post(url__regex=url("/listings/lst-1/like")).mock(
                return_value=httpx.Response(200, json=envelope({"liked": True, "likeCount": 4}))
            )
            liked = router.get(url__regex=url("/listings/lst-1/liked")).mock(
                side_effect=[
                    httpx.Response(200, json=envelope({"liked": False})),
                    httpx.Response(200, json=envelope({"liked": True})),
                ]
            )
            service = ListingService(api)
            assert await service.has_liked("lst-1") is False
            state = await service.toggle_like("lst-1")
            assert await service.has_liked("lst-1") is True

        assert state.liked is True
        assert state.like_count == 4
        assert like.call_count == 1
        assert liked.call_count == 2


# ---------------------------------------------------------------------------
# Consultations
# ---------------------------------------------------------------------------

class TestConsultationService:
    @pytest.mark.asyncio
    async def test_mine_path(self, api: NotaryApiClient, sample_consultation: dict):
        with respx.mock() as router:
            route = router.get(url__regex=url("/consultations/my-consultations")).mock(
                return_value=httpx.Response(200, json=page_of([sample_consultation]))
            )
            page = await ConsultationService(api).mine()
        assert route.called
        assert page.items[0].status == "PENDING"

    @pytest.mark.asyncio
    async def test_create(self, api: NotaryApiClient, sample_consultation: dict):
        with respx.mock() as router:
            route = router.post(url__regex=url("/consultations")).mock(
                return_value=httpx.Response(201, json=envelope(sample_consultation))
            )
            created = await ConsultationService(api).create(ConsultationCreate.model_validate({
                "requestedDatetime": "2026-10-21T09:00:00+07:00",
                "content": "Tư vấn hợp đồng",
            }))
        body = sent_json(route)
        assert body["requestedDatetime"] == "2026-10-21T09:00:00+07:00"
        assert body["content"] == "Tư vấn hợp đồng"
        assert created.id == "con-1"

    @pytest.mark.asyncio
    async def test_approve_assigns_staff(self, api: NotaryApiClient, sample_consultation: dict):
        with respx.mock() as router:
            route = router.post(url__regex=url("/consultations/con-1/approve")).mock(
                return_value=httpx.Response(
                    200, json=envelope({**sample_consultation, "status": "APPROVED", "staffId": "st-1"})
                )
            )
            result = await ConsultationService(api).approve("con-1", staff_id="st-1")
        assert sent_json(route) == {"staffId": "st-1"}
        assert result.staff_id == "st-1"

    @pytest.mark.asyncio
    async def test_cancel_sends_reason(self, api: NotaryApiClient, sample_consultation: dict):
        with respx.mock() as router:
            route = router.post(url__regex=url("/consultations/con-1/cancel")).mock(
                return_value=httpx.Response(
                    200, json=envelope({**sample_consultation, "status": "CANCELLED"})
                )
            )
            result = await ConsultationService(api).cancel("con-1", "Bận việc đột xuất")
        assert sent_json(route) == {"cancelReason": "Bận việc đột xuất"}
        assert result.status == "CANCELLED"


# ---------------------------------------------------------------------------
# Fees, catalogue and chatbot
# ---------------------------------------------------------------------------

class TestFeeServices:
    @pytest.mark.asyncio
    async def test_calculate(self, api: NotaryApiClient):
        result = {
            "id": "calc-1",
            "documentGroupId": "dg-1",
            "feeTypeId": "ft-1",
            "inputData": {"value": 1_000_000_000},
            "calculationResult": {"subtotal": 1_000_000, "totalFee": 1_000_000},
            "totalFee": 1_000_000,
        }
        with respx.mock() as router:
            route = router.post(url__regex=url("/fee-calculations")).mock(
                return_value=httpx.Response(201, json=envelope(result))
            )
            calc = await FeeCalculationService(api).calculate(FeeCalculationCreate(
                document_group_id="dg-1", fee_type_id="ft-1", input_data={"value": 1_000_000_000}
            ))
        assert sent_json(route) == {
            "documentGroupId": "dg-1", "feeTypeId": "ft-1", "inputData": {"value": 1_000_000_000},
        }
        assert calc.total_fee == 1_000_000
        assert calc.calculation_result.total_fee == 1_000_000

    @pytest.mark.asyncio
    async def test_fee_types_for_document_group(self, api: NotaryApiClient):
        with respx.mock() as router:
            router.get(url__regex=url("/fee-types/document-group/dg-1")).mock(
                return_value=httpx.Response(200, json=envelope([
                    {"id": "ft-1", "name": "Theo giá trị", "documentGroupId": "dg-1"},
                    {"id": "ft-2", "name": "Cố định", "documentGroupId": "dg-1"},
                ]))
            )
            fee_types = await FeeTypeService(api).for_document_group("dg-1")
        assert [f.id for f in fee_types] == ["ft-1", "ft-2"]

    @pytest.mark.asyncio
    async def test_document_groups(self, api: NotaryApiClient):
        with respx.mock() as router:
            router.get(url__regex=url("/document-groups")).mock(
                return_value=httpx.Response(200, json=page_of([{"id": "dg-1", "name": "Hợp đồng"}]))
            )
            page = await DocumentGroupService(api).list()
        assert page.items[0].name == "Hợp đồng"

    @pytest.mark.asyncio
    async def test_catalog_active_sends_boolean_string(self, api: NotaryApiClient):
        with respx.mock() as router:
            route = router.get(url__regex=url("/services")).mock(
                return_value=httpx.Response(200, json=page_of([{"id": "s-1", "name": "Công chứng"}]))
            )
            page = await CatalogService(api).active()
        assert sent_params(route) == {"status": "true"}
        assert page.items[0].status is True


class TestChatbotService:
    @pytest.mark.asyncio
    async def test_send_omits_missing_session(self, api: NotaryApiClient):
        result = {
            "session": {"id": "ses-1", "status": "ACTIVE"},
            "userMessage": {"id": "m-1", "sender": "USER", "messageText": "Xin chào"},
            "botResponse": {"id": "m-2", "sender": "BOT", "messageText": "Chào bạn"},
        }
        with respx.mock() as router:
            route = router.post(url__regex=url("/chatbot/message")).mock(
                return_value=httpx.Response(200, json=envelope(result))
            )
            sent = await ChatbotService(api).send("Xin chào")
        assert sent_json(route) == {"messageText": "Xin chào"}
        assert sent.bot_response.message_text == "Chào bạn"
        assert sent.session.id == "ses-1"

    @pytest.mark.asyncio
    async def test_sessions_pagination(self, api: NotaryApiClient):
        with respx.mock() as router:
            route = router.get(url__regex=url("/chatbot/sessions")).mock(
                return_value=httpx.Response(200, json=page_of([], page=2, limit=20))
            )
            await ChatbotService(api).sessions(page=2, limit=20)
        assert sent_params(route) == {"page": "2", "limit": "20"}

    @pytest.mark.asyncio
    async def test_escalate(self, api: NotaryApiClient):
        with respx.mock() as router:
            route = router.post(url__regex=url("/chatbot/escalate/ses-1")).mock(
                return_value=httpx.Response(200, json=envelope({"id": "ses-1", "status": "ESCALATED"}))
            )
            session = await ChatbotService(api).escalate("ses-1")
        assert route.called
        assert session.status == "ESCALATED"


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

class TestAuthService:
    @pytest.mark.asyncio
    async def test_login_stores_session(self, api: NotaryApiClient):
        session = {
            "accessToken": "access-9",
            "refreshToken": "refresh-9",
            "user": {"id": "u-9", "email": "khach@example.com", "fullName": "Lê Văn C", "role": "CUSTOMER"},
        }
        api.cache.set("/records", ["stale"])
        with respx.mock() as router:
            route = router.post(url__regex=url("/auth/login")).mock(
                return_value=httpx.Response(200, json=envelope(session))
            )
            await AuthService(api).login("  Khach@Example.com ", "matkhau123")

        assert sent_json(route) == {"email": "khach@example.com", "password": "matkhau123"}
        assert api.tokens.access_token == "access-9"
        assert api.tokens.current_user().full_name == "Lê Văn C"
        assert len(api.cache) == 0

    @pytest.mark.asyncio
    async def test_logout_clears_session(self, api: NotaryApiClient, signed_in):
        auth = AuthService(api)
        assert auth.current_user() is not None
        auth.logout()
        assert auth.current_user() is None
        assert api.tokens.is_authenticated() is False
