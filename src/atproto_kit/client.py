"""
ATProtoKit / AsyncATProtoKit, the main client objects.
"""

import asyncio
from datetime import datetime
from typing import Any, Optional

from atproto_kit.graph import GraphAPI
from atproto_kit.models.graph import GetListBlocksOutput
from atproto_kit.models.notification import ListNotificationsOutput, UnreadCountOutput
from atproto_kit.models.repo import GetRecordOutput
from atproto_kit.notifications import NotificationsAPI
from atproto_kit.repo import RepoAPI
from atproto_kit.result import Result
from atproto_kit.session import Session
from atproto_kit.transport.http import HttpxTransport, Transport
from atproto_kit.transport.xrpc import DEFAULT_PDS_URL, XRPCPipeline


class AsyncATProtoKit:
    """Async AT Protocol client (primary)."""

    def __init__(
        self,
        session: Optional[Session] = None,
        base_url: str = DEFAULT_PDS_URL,
        transport: Optional[Transport] = None,
    ):
        self._owns_transport = transport is None
        self.transport = transport or HttpxTransport()
        self.xrpc = XRPCPipeline(self.transport, base_url=base_url, session=session)
        self.repo = RepoAPI(self.xrpc)
        self.graph = GraphAPI(self.xrpc)
        self.notifications = NotificationsAPI(self.xrpc)

    @property
    def session(self) -> Optional[Session]:
        return self.xrpc.session

    def set_session(self, session: Optional[Session]) -> None:
        self.xrpc.set_session(session)

    async def close(self) -> None:
        if self._owns_transport and isinstance(self.transport, HttpxTransport):
            await self.transport.close()

    async def __aenter__(self) -> "AsyncATProtoKit":
        return self

    async def __aexit__(self, *_exc: Any) -> None:
        await self.close()


class ATProtoKit:
    """Sync wrapper around AsyncATProtoKit. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncATProtoKit(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def session(self) -> Optional[Session]:
        return self._async.session

    def set_session(self, session: Optional[Session]) -> None:
        self._async.set_session(session)

    def get_record(
        self, repo: str, collection: str, record_key: str, cid: Optional[str] = None, **kwargs: Any,
    ) -> Result[GetRecordOutput]:
        return self._run(self._async.repo.get_record(repo, collection, record_key, cid, **kwargs))

    def get_list_blocks(self, limit: Optional[int] = 50, cursor: Optional[str] = None) -> Result[GetListBlocksOutput]:
        return self._run(self._async.graph.get_list_blocks(limit=limit, cursor=cursor))

    def list_notifications(self, **kwargs: Any) -> Result[ListNotificationsOutput]:
        return self._run(self._async.notifications.list_notifications(**kwargs))

    def get_unread_count(self, **kwargs: Any) -> Result[UnreadCountOutput]:
        return self._run(self._async.notifications.get_unread_count(**kwargs))

    def update_seen(self, seen_at: Optional[datetime] = None) -> Result[None]:
        return self._run(self._async.notifications.update_seen(seen_at))

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
