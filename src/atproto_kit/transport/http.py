"""
HTTP transport for XRPC calls.

The pipeline only needs ``send``; anything with a matching coroutine can
stand in (tests hand an ``httpx.MockTransport`` to ``HttpxTransport``).
"""

import logging
from typing import Optional, Protocol

import httpx

from atproto_kit.errors import TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "atproto-kit/0.1.0"

Response = tuple[int, dict[str, str], bytes]


class Transport(Protocol):
    async def send(
        self, method: str, url: str, headers: dict[str, str], body: Optional[bytes] = None,
    ) -> Response:
        ...


class HttpxTransport:
    def __init__(self, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
            transport=transport,
        )

    async def send(
        self, method: str, url: str, headers: dict[str, str], body: Optional[bytes] = None,
    ) -> Response:
        try:
            resp = await self._client.request(method, url, headers=headers, content=body)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}", details={"cause": type(e).__name__}) from e
        return resp.status_code, dict(resp.headers), resp.content

    async def close(self) -> None:
        await self._client.aclose()
