"""AsyncMindMate / MindMate facades over a mocked transport."""

import gc

import httpx
import pytest

from mindmate import AsyncMindMate, MindMate, Settings
from mindmate.errors import SessionError
from mindmate.models.emotion import EmotionLabel
from mindmate.models.message import Sender

SETTINGS = Settings(endpoint="https://generation.test/chatbot/", reply_delay=0)


def ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"response": "Tell me more."})


def down(request: httpx.Request) -> httpx.Response:
    return httpx.Response(502, text="bad gateway")


class TestAsyncClient:
    @pytest.mark.asyncio
    async def test_chat_turn(self):
        async with AsyncMindMate(settings=SETTINGS, transport=httpx.MockTransport(ok)) as client:
            session = client.new_session()
            reply = await session.send("hello")
            assert reply.text == "Tell me more."
            assert len(session.messages) == 3
        assert client.closed

    @pytest.mark.asyncio
    async def test_fallback_turn(self):
        async with AsyncMindMate(settings=SETTINGS, transport=httpx.MockTransport(down)) as client:
            session = client.new_session()
            reply = await session.send("I feel nervous")
            assert session.current_emotion == EmotionLabel.ANXIOUS
            assert reply.sender == Sender.ASSISTANT
            assert reply.text.startswith("Anxiety can be challenging.")

    @pytest.mark.asyncio
    async def test_sessions_are_independent(self):
        async with AsyncMindMate(settings=SETTINGS, transport=httpx.MockTransport(ok)) as client:
            first = client.new_session()
            second = client.new_session()
            await first.send("I am happy")
            assert first.current_emotion == EmotionLabel.HAPPY
            assert second.current_emotion == EmotionLabel.NEUTRAL
            assert len(second.messages) == 1

    @pytest.mark.asyncio
    async def test_new_session_after_close(self):
        client = AsyncMindMate(settings=SETTINGS, transport=httpx.MockTransport(ok))
        await client.close()
        with pytest.raises(SessionError):
            client.new_session()


    @pytest.mark.asyncio
    async def test_released_sessions_are_dropped(self):
        async with AsyncMindMate(settings=SETTINGS, transport=httpx.MockTransport(ok)) as client:
            kept = client.new_session()
            dropped = client.new_session()
            await dropped.send("hello")
            assert len(client.sessions) == 2
            del dropped
            gc.collect()
            assert client.sessions == (kept,)


class TestSyncClient:
    def test_chat_sync(self):
        client = MindMate(settings=SETTINGS, transport=httpx.MockTransport(ok))
        try:
            reply = client.chat_sync("hi")
            assert reply.text == "Tell me more."
            assert client.chat_sync("   ") is None
            assert len(client.session.messages) == 3
        finally:
            client.close()
