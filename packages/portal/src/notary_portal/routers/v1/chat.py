"""Canned legal-assistant chat endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import Field, field_validator

from notary_shared.models import ApiModel
from notary_client.assistant import WELCOME_MESSAGE, reply_for
from notary_portal.responses import success

router = APIRouter(prefix="/chat", tags=["chat"])


class ChatRequest(ApiModel):
    message: str = Field(min_length=1, max_length=2000)

    @field_validator("message", mode="before")
    @classmethod
    def _strip(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


@router.get("/welcome")
async def welcome():
    return success({"reply": WELCOME_MESSAGE})


@router.post("/reply")
async def reply(body: ChatRequest):
    """Keyword-matched reply. The typing delay is left to the widget."""
    return success({"message": body.message, "reply": reply_for(body.message)})
