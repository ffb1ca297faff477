"""
Session controller — drives one conversation.

Turn lifecycle:
- submit(text) appends the user message, updates the emotion when the
  classifier matches, and schedules the turn as an asyncio task
- the task awaits the gateway, waits out the presentation delay, then appends
  either the reply or the fallback for the current emotion
- while a turn is in flight further submits are ignored

Blank input is dropped without touching state.
"""

import asyncio
import logging
from typing import Optional, Protocol

from mindmate.config import DEFAULT_GREETING, DEFAULT_REPLY_DELAY_S
from mindmate.emotion import classify
from mindmate.errors import TransportError
from mindmate.fallback import fallback_reply
from mindmate.models.emotion import EmotionLabel
from mindmate.models.message import Message
from mindmate.models.session import SessionPhase, SessionState
from mindmate.store import MessageStore

logger = logging.getLogger(__name__)


class Gateway(Protocol):
    async def generate(self, user_text: str, emotion: EmotionLabel) -> str: ...


class SessionController:
    def __init__(
        self,
        gateway: Gateway,
        *,
        greeting: str = DEFAULT_GREETING,
        reply_delay: float = DEFAULT_REPLY_DELAY_S,
    ):
        self._gateway = gateway
        self._reply_delay = reply_delay
        self._store = MessageStore()
        self._store.append(Message.assistant(greeting))
        self._emotion = EmotionLabel.NEUTRAL
        self._awaiting_reply = False
        self._task: Optional[asyncio.Task[Message]] = None

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._store.snapshot()

    @property
    def current_emotion(self) -> EmotionLabel:
        return self._emotion

    @property
    def awaiting_reply(self) -> bool:
        return self._awaiting_reply

    @property
    def phase(self) -> SessionPhase:
        return SessionPhase.AWAITING_REPLY if self._awaiting_reply else SessionPhase.IDLE

    def snapshot(self) -> SessionState:
        return SessionState(
            messages=self._store.snapshot(),
            current_emotion=self._emotion,
            awaiting_reply=self._awaiting_reply,
        )

    def submit(self, text: str) -> Optional["asyncio.Task[Message]"]:
        """Start a turn. Returns the turn task, or None if the input was rejected.

        Must be called from within a running event loop.
        """
        if self._awaiting_reply:
            logger.debug("Ignoring submit while a reply is pending")
            return None
        if not text.strip():
            return None

        self._store.append(Message.user(text))
        detected = classify(text)
        if detected is not None:
            self._emotion = detected
        self._awaiting_reply = True
        logger.debug("Turn started (emotion=%s, messages=%d)", self._emotion, len(self._store))

        self._task = asyncio.get_running_loop().create_task(self._run_turn(text, self._emotion))
        return self._task

    async def send(self, text: str) -> Optional[Message]:
        """Submit and wait for the assistant message. None if the input was rejected."""
        task = self.submit(text)
        if task is None:
            return None
        return await task

    async def wait(self) -> Optional[Message]:
        """Wait for the in-flight turn, if any."""
        if self._task is None or self._task.done():
            return None
        return await asyncio.shield(self._task)

    async def close(self) -> None:
        """Cancel the in-flight turn, if any. The session is left idle."""
        task = self._task
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.debug("Turn cancelled")
        # A task cancelled before its first step never runs its own cleanup.
        self._awaiting_reply = False
        self._task = None

    async def _run_turn(self, text: str, emotion: EmotionLabel) -> Message:
        try:
            try:
                reply = await self._gateway.generate(text, emotion)
            except TransportError as e:
                logger.warning("Generation failed, using fallback for %s: %s", self._emotion, e)
                reply = fallback_reply(self._emotion)
            await asyncio.sleep(self._reply_delay)
            message = Message.assistant(reply)
            self._store.append(message)
            return message
        finally:
            self._awaiting_reply = False
            self._task = None

    def __repr__(self) -> str:
        return (
            f"SessionController(phase={self.phase.value!r}, emotion={self._emotion.value!r}, "
            f"messages={len(self._store)})"
        )
