"""
Post records: app.bsky.feed.post.
"""

from typing import ClassVar, Optional

from pydantic import Field, StrictStr

from atproto_kit.models.base import Record
from atproto_kit.models.dates import DateTime
from atproto_kit.models.embed import PostEmbedUnion
from atproto_kit.models.repo import StrongReference
from atproto_kit.models.unknown import UnknownType


class ReplyReference(Record):
    root: StrongReference = Field(alias="root")
    parent: StrongReference = Field(alias="parent")


class PostRecord(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.feed.post"

    text: StrictStr = Field(alias="text")
    created_at: DateTime = Field(alias="createdAt")
    facets: Optional[list[UnknownType]] = Field(None, alias="facets")
    reply: Optional[ReplyReference] = Field(None, alias="reply")
    embed: Optional[PostEmbedUnion] = Field(None, alias="embed")
    languages: Optional[list[StrictStr]] = Field(None, alias="langs")
    labels: Optional[UnknownType] = Field(None, alias="labels")
    tags: Optional[list[StrictStr]] = Field(None, alias="tags")
