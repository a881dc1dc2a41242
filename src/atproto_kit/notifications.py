"""
app.bsky.notification endpoints.
"""

from datetime import datetime, timezone
from typing import Optional

from atproto_kit.models.dates import format_datetime
from atproto_kit.models.notification import ListNotificationsOutput, UnreadCountOutput
from atproto_kit.result import Result
from atproto_kit.transport.xrpc import Endpoint, XRPCPipeline, clamp

LIST_NOTIFICATIONS = Endpoint(
    "app.bsky.notification.listNotifications", ListNotificationsOutput, requires_auth=True,
)
GET_UNREAD_COUNT = Endpoint("app.bsky.notification.getUnreadCount", UnreadCountOutput, requires_auth=True)
UPDATE_SEEN = Endpoint("app.bsky.notification.updateSeen", None, method="POST", requires_auth=True)


def _timestamp(value: Optional[datetime]) -> Optional[str]:
    return format_datetime(value) if value is not None else None


class NotificationsAPI:
    def __init__(self, xrpc: XRPCPipeline):
        self._xrpc = xrpc

    async def list_notifications(
        self,
        limit: Optional[int] = 50,
        priority: Optional[bool] = None,
        cursor: Optional[str] = None,
        seen_at: Optional[datetime] = None,
    ) -> Result[ListNotificationsOutput]:
        """Enumerate notifications for the session's account. ``limit`` is clamped to 1..100."""
        return await self._xrpc.call(
            LIST_NOTIFICATIONS,
            [
                ("limit", clamp(limit, 1, 100) if limit is not None else None),
                ("priority", priority),
                ("cursor", cursor),
                ("seenAt", _timestamp(seen_at)),
            ],
            credential=self._xrpc.session,
        )

    async def get_unread_count(
        self, priority: Optional[bool] = None, seen_at: Optional[datetime] = None,
    ) -> Result[UnreadCountOutput]:
        return await self._xrpc.call(
            GET_UNREAD_COUNT,
            [("priority", priority), ("seenAt", _timestamp(seen_at))],
            credential=self._xrpc.session,
        )

    async def update_seen(self, seen_at: Optional[datetime] = None) -> Result[None]:
        """Mark notifications up to ``seen_at`` (default: now) as read."""
        return await self._xrpc.call(
            UPDATE_SEEN,
            body={"seenAt": format_datetime(seen_at or datetime.now(timezone.utc))},
            credential=self._xrpc.session,
        )
