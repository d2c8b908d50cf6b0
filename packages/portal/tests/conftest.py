"""Shared test fixtures for notary-portal."""

from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from notary_shared.time_utils import now_local


@pytest.fixture()
def app():
    """Fresh portal app."""
    from notary_portal.app import create_app
    return create_app()


@pytest.fixture()
def client(app):
    """HTTP test client."""
    return TestClient(app)


@pytest.fixture()
def booking_form():
    return {
        "fullName": "Nguyễn Thị Lan",
        "email": "lan@example.com",
        "phone": "0912345678",
        "consultationType": "free-consultation",
        "legalArea": "real-estate",
        "preferredDate": (now_local().date() + timedelta(days=2)).isoformat(),
        "preferredTime": "10:00",
        "meetingType": "office",
        "description": "Tôi cần tư vấn thủ tục sang tên sổ đỏ cho con.",
    }
