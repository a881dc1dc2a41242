"""
Profile views: app.bsky.actor.defs.
"""

from typing import Optional

from pydantic import Field, StrictBool, StrictStr

from atproto_kit.models.base import Record
from atproto_kit.models.dates import OptionalDateTime
from atproto_kit.models.label import Label
from atproto_kit.models.unknown import UnknownType


class ViewerState(Record):
    """How the requesting account relates to a profile."""

    is_muted: Optional[StrictBool] = Field(None, alias="muted")
    is_blocked_by: Optional[StrictBool] = Field(None, alias="blockedBy")
    blocking_uri: Optional[StrictStr] = Field(None, alias="blocking")
    following_uri: Optional[StrictStr] = Field(None, alias="following")
    followed_by_uri: Optional[StrictStr] = Field(None, alias="followedBy")


class ProfileViewBasic(Record):
    did: StrictStr = Field(alias="did")
    handle: StrictStr = Field(alias="handle")
    display_name: Optional[StrictStr] = Field(None, alias="displayName")
    avatar_url: Optional[StrictStr] = Field(None, alias="avatar")
    associated: Optional[UnknownType] = Field(None, alias="associated")
    viewer: Optional[ViewerState] = Field(None, alias="viewer")
    labels: Optional[list[Label]] = Field(None, alias="labels")
    created_at: OptionalDateTime = Field(None, alias="createdAt")


class ProfileView(ProfileViewBasic):
    description: Optional[StrictStr] = Field(None, alias="description")
    indexed_at: OptionalDateTime = Field(None, alias="indexedAt")


class BlockedAuthor(Record):
    """The author of a record hidden by a block."""

    did: StrictStr = Field(alias="did")
    viewer: Optional[ViewerState] = Field(None, alias="viewer")
