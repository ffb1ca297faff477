"""
AsyncMindMate / MindMate — main clients.
"""

import asyncio
import weakref
from pathlib import Path
from typing import Any, Optional

import httpx

from mindmate.config import Settings, load_settings
from mindmate.errors import SessionError
from mindmate.gateway import ResponseGateway
from mindmate.models.message import Message
from mindmate.session import SessionController
from mindmate.transport.http import HttpClient


class AsyncMindMate:
    """Async MindMate client (primary)."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        config_path: Optional[Path] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ):
        self.settings = settings or load_settings(config_path, **overrides)
        self.http = HttpClient(self.settings.endpoint, timeout=self.settings.timeout, transport=transport)
        self.gateway = ResponseGateway(self.http, self.settings)
        self._sessions: "weakref.WeakSet[SessionController]" = weakref.WeakSet()

    @property
    def closed(self) -> bool:
        return self.http.closed

    @property
    def sessions(self) -> tuple[SessionController, ...]:
        """Sessions created by this client that are still referenced."""
        return tuple(self._sessions)

    def new_session(self) -> SessionController:
        """Start a conversation seeded with the greeting."""
        self._ensure_open()
        session = SessionController(
            self.gateway,
            greeting=self.settings.greeting,
            reply_delay=self.settings.reply_delay,
        )
        self._sessions.add(session)
        return session

    async def close(self) -> None:
        """Cancel any in-flight turns and release the HTTP client."""
        for session in list(self._sessions):
            await session.close()
        self._sessions.clear()
        await self.http.close()

    async def __aenter__(self) -> "AsyncMindMate":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    def _ensure_open(self) -> None:
        if self.closed:
            raise SessionError("Client is closed.", code="client_closed")


class MindMate:
    """Sync wrapper around AsyncMindMate. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._loop = asyncio.new_event_loop()
        self._async = AsyncMindMate(**kwargs)
        self._session: Optional[SessionController] = None

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def settings(self) -> Settings:
        return self._async.settings

    @property
    def session(self) -> SessionController:
        if self._session is None:
            self._session = self._async.new_session()
        return self._session

    def chat_sync(self, content: str) -> Optional[Message]:
        """Run one turn and return the assistant message (blocking). None if rejected."""
        return self._run(self.session.send(content))

    def close(self) -> None:
        try:
            self._run(self._async.close())
        finally:
            self._loop.close()
