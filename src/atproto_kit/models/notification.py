"""
Notifications: app.bsky.notification.{listNotifications,getUnreadCount}.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from atproto_kit.models.actor import ProfileView
from atproto_kit.models.base import Record
from atproto_kit.models.dates import DateTime, OptionalDateTime
from atproto_kit.models.label import Label
from atproto_kit.models.unknown import UnknownType


class NotificationReason(str, Enum):
    """Why a notification was sent. Any other value fails to decode."""

    LIKE = "like"
    REPOST = "repost"
    FOLLOW = "follow"
    MENTION = "mention"
    REPLY = "reply"
    QUOTE = "quote"
    STARTERPACK_JOINED = "starterpack-joined"


class Notification(Record):
    uri: StrictStr = Field(alias="uri")
    cid: StrictStr = Field(alias="cid")
    author: ProfileView = Field(alias="author")
    reason: NotificationReason = Field(alias="reason")
    reason_subject: Optional[StrictStr] = Field(None, alias="reasonSubject")
    # The like, repost, follow or post record that caused the notification.
    record: UnknownType = Field(alias="record")
    is_read: StrictBool = Field(alias="isRead")
    indexed_at: DateTime = Field(alias="indexedAt")
    labels: Optional[list[Label]] = Field(None, alias="labels")


class ListNotificationsOutput(Record):
    cursor: Optional[StrictStr] = Field(None, alias="cursor")
    notifications: list[Notification] = Field(alias="notifications")
    is_priority: Optional[StrictBool] = Field(None, alias="priority")
    seen_at: OptionalDateTime = Field(None, alias="seenAt")


class UnreadCountOutput(Record):
    count: StrictInt = Field(alias="count")
