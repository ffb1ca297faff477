"""
HTTP client for the generation endpoint.

Every transport-level problem is raised as TransportError: connection
failures, timeouts, non-success status codes and bodies that are not JSON.
"""

import logging
from typing import Any, Optional

import httpx

from mindmate.config import DEFAULT_TIMEOUT_S
from mindmate.errors import TransportError

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._endpoint = endpoint
        self._client = httpx.AsyncClient(
            headers={"User-Agent": "mindmate/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    async def post(self, body: dict[str, Any]) -> Any:
        try:
            resp = await self._client.post(
                self._endpoint, json=body, headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.warning("POST %s failed: %s", self._endpoint, e)
            raise TransportError(f"Request failed: {e}") from e
        if not resp.is_success:
            raise TransportError(f"HTTP {resp.status_code}: {resp.text[:200]}", status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(f"Malformed JSON body: {resp.text[:200]}", status_code=resp.status_code) from e

    async def close(self) -> None:
        await self._client.aclose()
