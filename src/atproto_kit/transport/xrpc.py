"""
XRPC request pipeline.

One generic call path for every endpoint: build ``{base}/xrpc/{nsid}`` with
an ordered query string, attach the bearer token when a session is given,
send through the transport and decode the body into the endpoint's output
record. Every outcome comes back as a ``Result``; nothing is retried.
"""

import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Generic, Optional, Sequence, TypeVar

import httpx

from atproto_kit.errors import (
    DecodeError,
    RequestCancelledError,
    SessionRequiredError,
    TransportError,
    URLConstructionError,
    XRPCResponseError,
)
from atproto_kit.models.base import decode
from atproto_kit.result import Result
from atproto_kit.session import Session
from atproto_kit.transport.http import Transport

logger = logging.getLogger(__name__)

DEFAULT_PDS_URL = "https://bsky.social"

T = TypeVar("T")

QueryItems = Sequence[tuple[str, Any]]

_NSID_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9-]*(\.[a-zA-Z0-9-]+)+\.[a-zA-Z][a-zA-Z0-9]*$")


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """An XRPC method: its NSID, HTTP verb, output record and auth need.

    ``output`` is ``None`` for procedures that return no body.
    """

    nsid: str
    output: Optional[type[T]]
    method: str = "GET"
    requires_auth: bool = False


def clamp(value: int, lower: int, upper: int) -> int:
    """Pull ``value`` into ``[lower, upper]`` instead of rejecting it."""
    return max(lower, min(value, upper))


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(base_url: str, nsid: str, params: QueryItems = ()) -> str:
    """Join host, NSID and query pairs; pairs whose value is ``None`` are dropped."""
    if not _NSID_RE.match(nsid):
        raise URLConstructionError(f"invalid NSID: {nsid!r}")
    try:
        url = httpx.URL(
            f"{base_url.rstrip('/')}/xrpc/{nsid}",
            params=[(name, _query_value(value)) for name, value in params if value is not None],
        )
    except (httpx.InvalidURL, TypeError) as e:
        raise URLConstructionError(f"invalid service URL {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise URLConstructionError(f"invalid service URL {base_url!r}")
    return str(url)


def _response_error(status: int, content: bytes) -> XRPCResponseError:
    try:
        payload = json.loads(content) if content else {}
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    error, message = payload.get("error"), payload.get("message")
    return XRPCResponseError(
        status,
        error if isinstance(error, str) else None,
        message if isinstance(message, str) else None,
    )


class XRPCPipeline:
    def __init__(self, transport: Transport, base_url: str = DEFAULT_PDS_URL, session: Optional[Session] = None):
        self._transport = transport
        self._base_url = base_url
        self.session = session

    def set_session(self, session: Optional[Session]) -> None:
        self.session = session

    async def call(
        self,
        endpoint: Endpoint[T],
        params: QueryItems = (),
        credential: Optional[Session] = None,
        body: Optional[dict[str, Any]] = None,
        base_url: Optional[str] = None,
    ) -> Result[T]:
        """Issue one XRPC request and decode the answer. Never raises ``ATProtoError``.

        Cancelling the awaiting task ends the call with a ``RequestCancelledError``
        result and clears the cancel request, so an enclosing ``asyncio.wait_for``
        or ``asyncio.timeout`` sees that result instead of raising ``TimeoutError``.
        """
        if endpoint.requires_auth and credential is None:
            return Result.failure(SessionRequiredError(endpoint.nsid))
        host = base_url or (credential.service_url if credential else self._base_url)
        try:
            url = build_url(host, endpoint.nsid, params)
        except URLConstructionError as e:
            logger.warning("%s: %s", endpoint.nsid, e)
            return Result.failure(e)

        headers = {"Accept": "application/json"}
        if credential is not None:
            headers["Authorization"] = f"Bearer {credential.access_token}"
        content = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            content = json.dumps(body).encode()

        logger.debug("%s %s", endpoint.method, url)
        try:
            status, _headers, raw = await self._transport.send(endpoint.method, url, headers, content)
        except TransportError as e:
            return Result.failure(e)
        except asyncio.CancelledError:
            logger.debug("%s cancelled", endpoint.nsid)
            task = asyncio.current_task()
            if task is not None and hasattr(task, "uncancel"):
                task.uncancel()
            return Result.failure(RequestCancelledError(f"{endpoint.nsid} cancelled"))

        if status >= 400:
            error = _response_error(status, raw)
            logger.warning("%s: %s", endpoint.nsid, error)
            return Result.failure(error)

        return self._decode(endpoint, raw)

    @staticmethod
    def _decode(endpoint: Endpoint[T], raw: bytes) -> Result[T]:
        if endpoint.output is None:
            return Result.success(None)  # type: ignore[arg-type]
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("%s: response body is not JSON: %s", endpoint.nsid, e)
            error = TransportError(f"{endpoint.nsid}: response body is not JSON: {e}", code="invalid_json")
            error.__cause__ = e
            return Result.failure(error)
        try:
            return Result.success(decode(endpoint.output, data))
        except DecodeError as e:
            logger.warning("%s: %s", endpoint.nsid, e)
            return Result.failure(e)
