"""
tests/test_assistant.py — Tests for the keyword-matched legal assistant.
"""

from __future__ import annotations

import pytest

from notary_client.assistant import (
    APOLOGY_REPLY,
    FALLBACK_REPLY,
    RULES,
    TYPING_DELAY_RANGE,
    WELCOME_MESSAGE,
    Conversation,
    random_typing_delay,
    reply_for,
)


def rule_reply(keyword: str) -> str:
    return next(reply for keywords, reply in RULES if keyword in keywords)


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class TestReplyFor:
    @pytest.mark.parametrize(
        "message,keyword",
        [
            ("Hello there", "hello"),
            ("I need to draft an AGREEMENT", "agreement"),
            ("Can you find me an attorney?", "attorney"),
            ("Buying a property in Hanoi", "property"),
            ("Question about divorce", "divorce"),
            ("Registering a company", "company"),
            ("What does it cost?", "cost"),
        ],
    )
    def test_keyword_rules(self, message: str, keyword: str):
        assert reply_for(message) == rule_reply(keyword)

    def test_first_matching_rule_wins(self):
        assert reply_for("How much does a contract review cost?") == rule_reply("contract")

    def test_keywords_match_as_substrings(self):
        # "this" contains "hi"
        assert reply_for("Is this a contract?") == rule_reply("hi")

    def test_fallback(self):
        assert reply_for("Tôi muốn công chứng") == FALLBACK_REPLY


class TestTypingDelay:
    def test_within_range(self):
        low, high = TYPING_DELAY_RANGE
        for _ in range(20):
            assert low <= random_typing_delay() <= high


class TestConversation:
    def test_starts_with_welcome(self):
        convo = Conversation()
        assert len(convo.messages) == 1
        assert convo.messages[0].content == WELCOME_MESSAGE
        assert convo.messages[0].sender == "ai"
        assert convo.is_typing is False

    @pytest.mark.asyncio
    async def test_send_appends_user_and_reply(self):
        sleep = RecordingSleep()
        convo = Conversation(delay=lambda: 1.5, sleep=sleep)
        reply = await convo.send("  I need a lawyer  ")

        assert reply is not None
        assert reply.sender == "ai"
        assert reply.content == rule_reply("lawyer")
        assert [m.sender for m in convo.messages] == ["ai", "user", "ai"]
        assert convo.messages[1].content == "I need a lawyer"
        assert sleep.delays == [1.5]
        assert convo.is_typing is False

    @pytest.mark.asyncio
    async def test_blank_message_is_ignored(self):
        sleep = RecordingSleep()
        convo = Conversation(sleep=sleep)
        assert await convo.send("   ") is None
        assert len(convo.messages) == 1
        assert sleep.delays == []

    @pytest.mark.asyncio
    async def test_responder_failure_gives_apology(self):
        def broken(_: str) -> str:
            raise RuntimeError("model offline")

        convo = Conversation(responder=broken, delay=lambda: 0.0, sleep=RecordingSleep())
        reply = await convo.send("hello")
        assert reply.content == APOLOGY_REPLY
        assert convo.is_typing is False

    @pytest.mark.asyncio
    async def test_typing_flag_set_while_waiting(self):
        convo: Conversation
        seen: list[bool] = []

        async def sleep(_: float) -> None:
            seen.append(convo.is_typing)

        convo = Conversation(delay=lambda: 0.0, sleep=sleep)
        await convo.send("hi")
        assert seen == [True]

    @pytest.mark.asyncio
    async def test_message_ids_are_unique(self):
        convo = Conversation(delay=lambda: 0.0, sleep=RecordingSleep())
        await convo.send("hi")
        await convo.send("fee?")
        ids = [m.id for m in convo.messages]
        assert len(ids) == len(set(ids)) == 5
