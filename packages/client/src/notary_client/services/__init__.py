"""
notary_client.services — Typed wrappers over each backend REST resource.

Every service takes a shared NotaryApiClient:

    async with NotaryApiClient() as api:
        records = RecordService(api)
        page = await records.list({"status": "PENDING"})
"""

from notary_client.services.articles import ArticleService
from notary_client.services.auth import AuthService
from notary_client.services.base import BaseService
from notary_client.services.catalog import CatalogService
from notary_client.services.chatbot import ChatbotService
from notary_client.services.consultations import ConsultationService
from notary_client.services.fee_calculations import (
    DocumentGroupService,
    FeeCalculationService,
    FeeTypeService,
)
from notary_client.services.listings import ListingService
from notary_client.services.records import RecordService

__all__ = [
    "BaseService",
    "AuthService",
    "RecordService",
    "ArticleService",
    "ListingService",
    "ConsultationService",
    "FeeCalculationService",
    "DocumentGroupService",
    "FeeTypeService",
    "CatalogService",
    "ChatbotService",
]
