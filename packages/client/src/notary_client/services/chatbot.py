"""
services/chatbot.py — Backend chatbot sessions (staff inbox and escalation).

Endpoints:
  POST /chatbot/message               {sessionId?, messageText}
  POST /chatbot/escalate/{sessionId}
  GET  /chatbot/session/{id}
  GET  /chatbot/sessions              ?page&limit
  POST /chatbot/session/{id}/close
"""

from __future__ import annotations

from notary_shared.models import ChatSession, Page, SendMessage, SendMessageResult
from notary_client.services.base import BaseService


class ChatbotService(BaseService):
    name = "chatbot"
    resource = "/chatbot"

    async def send(self, message_text: str, session_id: str | None = None) -> SendMessageResult:
        body = SendMessage(session_id=session_id, message_text=message_text)
        return self._one(SendMessageResult, await self._api.post(self._path("message"), self._payload(body)))

    async def escalate(self, session_id: str) -> ChatSession:
        self._log.info("chat_escalated", session_id=session_id)
        return self._one(ChatSession, await self._api.post(self._path("escalate", session_id)))

    async def session(self, session_id: str) -> ChatSession:
        return self._one(ChatSession, await self._api.get(self._path("session", session_id)))

    async def sessions(self, page: int | None = None, limit: int | None = None) -> Page[ChatSession]:
        return await self._list(
            ChatSession, self._path("sessions"), self._params(None, page=page, limit=limit)
        )

    async def close(self, session_id: str) -> ChatSession:
        return self._one(ChatSession, await self._api.post(self._path("session", session_id, "close")))
