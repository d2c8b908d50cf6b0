"""
assistant.py — Canned legal-assistant chat for the portal's chat widget.

Replies are keyword-matched: the lower-cased message is checked against each
rule in order and the first rule with any keyword as a substring wins;
otherwise the fallback reply is used. A Conversation keeps the transcript and
delivers each reply after a simulated typing delay.

Usage:
    convo = Conversation()
    reply = await convo.send("How much does a contract review cost?")
    reply.content   # the contract rule matches before the price rule
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import uuid4

import structlog

from notary_shared.time_utils import now_local

log = structlog.get_logger(__name__)

WELCOME_MESSAGE = (
    "👋 Hello! I'm your AI legal assistant. I can help you with legal questions, "
    "document guidance, and connect you with attorneys. How can I assist you today?"
)
FALLBACK_REPLY = (
    "Thank you for your question! While I can provide general legal information, for "
    "specific legal advice, I'd recommend speaking with one of our qualified attorneys. "
    "Would you like me to help you schedule a consultation?"
)
APOLOGY_REPLY = "Xin lỗi, có lỗi xảy ra khi xử lý yêu cầu của bạn. Vui lòng thử lại sau."

# (keywords, reply); first match wins
RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("hello", "hi", "hey"),
        "Hello! I'm here to help you with legal questions. What would you like to know about?",
    ),
    (
        ("contract", "agreement"),
        "I can help you understand contracts! Are you looking to review, draft, or have "
        "questions about a specific type of contract? I can also connect you with a "
        "contract attorney.",
    ),
    (
        ("lawyer", "attorney"),
        "I'd be happy to help you connect with a qualified attorney! What type of legal "
        "matter do you need assistance with? We have specialists in family law, corporate "
        "law, real estate, and more.",
    ),
    (
        ("real estate", "property", "house"),
        "Real estate law can be complex! Are you buying, selling, or dealing with property "
        "disputes? I can provide general guidance and connect you with our real estate "
        "attorneys.",
    ),
    (
        ("family law", "divorce", "custody"),
        "Family law matters require careful attention. I can provide general information "
        "about divorce, custody, and family legal processes. Would you like me to connect "
        "you with a family law specialist?",
    ),
    (
        ("business", "corporate", "company"),
        "Business legal matters are important for your success! Are you starting a "
        "business, need contract help, or dealing with corporate compliance? I can guide "
        "you to the right resources.",
    ),
    (
        ("price", "cost", "fee"),
        "Legal fees vary depending on the type and complexity of your case. Many of our "
        "attorneys offer free consultations. Would you like me to schedule a consultation "
        "to discuss pricing?",
    ),
)

TYPING_DELAY_RANGE: tuple[float, float] = (1.0, 2.5)


def reply_for(message: str) -> str:
    text = message.lower()
    for keywords, reply in RULES:
        if any(keyword in text for keyword in keywords):
            return reply
    return FALLBACK_REPLY


def random_typing_delay() -> float:
    return random.uniform(*TYPING_DELAY_RANGE)


@dataclass
class Message:
    content: str
    sender: Literal["user", "ai"]
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=now_local)


class Conversation:
    """
    One chat transcript.

    Args:
        responder: Maps a user message to a reply. Defaults to reply_for.
        delay:     Returns the typing delay in seconds for each reply.
        sleep:     Awaitable sleep; tests pass a no-op.
    """

    def __init__(
        self,
        responder: Callable[[str], str] = reply_for,
        delay: Callable[[], float] = random_typing_delay,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._responder = responder
        self._delay = delay
        self._sleep = sleep
        self.messages: list[Message] = [Message(WELCOME_MESSAGE, "ai")]
        self.is_typing = False

    async def send(self, text: str) -> Message | None:
        """Append the user's message and, after the typing delay, the reply. Blank input is ignored."""
        content = text.strip()
        if not content:
            return None

        self.messages.append(Message(content, "user"))
        self.is_typing = True
        try:
            await self._sleep(self._delay())
            try:
                reply = self._responder(content)
            except Exception as exc:
                log.error("assistant_reply_failed", error=str(exc), exc_info=True)
                reply = APOLOGY_REPLY
        finally:
            self.is_typing = False

        message = Message(reply, "ai")
        self.messages.append(message)
        return message
