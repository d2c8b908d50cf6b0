"""
notary_shared.models — Pydantic DTOs mirroring the backend REST API.

These models are used by:
- packages/client: parse responses and validate write payloads
- packages/portal: validate portal requests and serialize responses

All models provide:
  .from_api(data: dict) -> Model
  .to_payload() -> dict   (camelCase, unset fields dropped)
"""

from notary_shared.models.articles import Article, ArticleCreate, ArticleQuery, ArticleUpdate
from notary_shared.models.auth import (
    AuthSession,
    AuthUser,
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
)
from notary_shared.models.chat import ChatMessage, ChatSession, SendMessage, SendMessageResult
from notary_shared.models.common import ApiModel, CategoryRef, ListQuery, Page, UserRef
from notary_shared.models.consultations import (
    ApproveConsultation,
    BookingForm,
    CancelConsultation,
    Consultation,
    ConsultationCreate,
    ConsultationQuery,
    ConsultationUpdate,
)
from notary_shared.models.fees import (
    CalculationDetail,
    DocumentGroup,
    FeeCalculation,
    FeeCalculationCreate,
    FeeCalculationQuery,
    FeeQuote,
    FeeQuoteRequest,
    FeeType,
)
from notary_shared.models.listings import (
    LikeState,
    Listing,
    ListingComment,
    ListingCreate,
    ListingQuery,
    ListingUpdate,
    ReviewListing,
)
from notary_shared.models.records import Record, RecordCreate, RecordQuery, RecordUpdate, ReviewRecord
from notary_shared.models.services import NotaryService, ServiceQuery

__all__ = [
    "ApiModel",
    "Page",
    "UserRef",
    "CategoryRef",
    "ListQuery",
    "Record",
    "RecordCreate",
    "RecordUpdate",
    "RecordQuery",
    "ReviewRecord",
    "Article",
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleQuery",
    "Listing",
    "ListingCreate",
    "ListingUpdate",
    "ListingQuery",
    "ListingComment",
    "ReviewListing",
    "LikeState",
    "Consultation",
    "ConsultationCreate",
    "ConsultationUpdate",
    "ConsultationQuery",
    "ApproveConsultation",
    "CancelConsultation",
    "BookingForm",
    "FeeQuote",
    "FeeQuoteRequest",
    "FeeCalculation",
    "FeeCalculationCreate",
    "FeeCalculationQuery",
    "CalculationDetail",
    "DocumentGroup",
    "FeeType",
    "AuthUser",
    "AuthSession",
    "LoginRequest",
    "RegisterRequest",
    "ChangePasswordRequest",
    "ChatMessage",
    "ChatSession",
    "SendMessage",
    "SendMessageResult",
    "NotaryService",
    "ServiceQuery",
]
