"""
models/chat.py — Chatbot sessions as stored by the backend.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from notary_shared.constants import ChatSessionStatus, MessageSender
from notary_shared.models.common import ApiModel, UserRef


class ChatMessage(ApiModel):
    id: str
    session_id: str | None = None
    sender: MessageSender
    message_text: str
    created_at: datetime | None = None


class ChatSession(ApiModel):
    id: str
    user_id: str | None = None
    user: UserRef | None = None
    status: ChatSessionStatus = "ACTIVE"
    escalated_at: datetime | None = None
    messages: list[ChatMessage] = Field(default_factory=list)
    started_at: datetime | None = None
    updated_at: datetime | None = None
    ended_at: datetime | None = None


class SendMessage(ApiModel):
    session_id: str | None = None
    message_text: str = Field(min_length=1)


class SendMessageResult(ApiModel):
    session: ChatSession
    user_message: ChatMessage
    bot_response: ChatMessage
