"""
Feed generator views: app.bsky.feed.defs#generatorView.
"""

from typing import ClassVar, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from atproto_kit.models.actor import ProfileView
from atproto_kit.models.base import Record
from atproto_kit.models.dates import DateTime
from atproto_kit.models.label import Label
from atproto_kit.models.unknown import UnknownType


class GeneratorViewerState(Record):
    like_uri: Optional[StrictStr] = Field(None, alias="like")


class GeneratorView(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.feed.defs#generatorView"

    uri: StrictStr = Field(alias="uri")
    cid: StrictStr = Field(alias="cid")
    did: StrictStr = Field(alias="did")
    creator: ProfileView = Field(alias="creator")
    display_name: StrictStr = Field(alias="displayName")
    description: Optional[StrictStr] = Field(None, alias="description")
    description_facets: Optional[list[UnknownType]] = Field(None, alias="descriptionFacets")
    avatar_url: Optional[StrictStr] = Field(None, alias="avatar")
    like_count: Optional[StrictInt] = Field(None, alias="likeCount")
    accepts_interactions: Optional[StrictBool] = Field(None, alias="acceptsInteractions")
    labels: Optional[list[Label]] = Field(None, alias="labels")
    viewer: Optional[GeneratorViewerState] = Field(None, alias="viewer")
    indexed_at: DateTime = Field(alias="indexedAt")
