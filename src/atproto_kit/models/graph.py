"""
Moderation and curation lists: app.bsky.graph.defs.
"""

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from atproto_kit.models.actor import ProfileView
from atproto_kit.models.base import Record
from atproto_kit.models.dates import DateTime
from atproto_kit.models.label import Label
from atproto_kit.models.unknown import UnknownType


class ListPurpose(str, Enum):
    MODERATION = "app.bsky.graph.defs#modlist"
    CURATION = "app.bsky.graph.defs#curatelist"
    REFERENCE = "app.bsky.graph.defs#referencelist"


class ListViewerState(Record):
    is_muted: Optional[StrictBool] = Field(None, alias="muted")
    blocked_uri: Optional[StrictStr] = Field(None, alias="blocked")


class ListView(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.graph.defs#listView"

    uri: StrictStr = Field(alias="uri")
    cid: StrictStr = Field(alias="cid")
    creator: ProfileView = Field(alias="creator")
    name: StrictStr = Field(alias="name")
    purpose: ListPurpose = Field(alias="purpose")
    description: Optional[StrictStr] = Field(None, alias="description")
    description_facets: Optional[list[UnknownType]] = Field(None, alias="descriptionFacets")
    avatar_url: Optional[StrictStr] = Field(None, alias="avatar")
    list_item_count: Optional[StrictInt] = Field(None, alias="listItemCount")
    labels: Optional[list[Label]] = Field(None, alias="labels")
    viewer: Optional[ListViewerState] = Field(None, alias="viewer")
    indexed_at: DateTime = Field(alias="indexedAt")


class GetListBlocksOutput(Record):
    """app.bsky.graph.getListBlocks output."""

    cursor: Optional[StrictStr] = Field(None, alias="cursor")
    lists: list[ListView] = Field(alias="lists")
