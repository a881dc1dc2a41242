"""
Embeds: app.bsky.embed.{record,images,external,recordWithMedia}.

Two families live here: the embed objects a post record stores, and the
hydrated views the AppView returns for them. Views nest recursively: a
quoted record view carries its own embed views, which may quote again.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Optional, Union

from pydantic import Field, StrictBool, StrictInt, StrictStr

from atproto_kit.models.actor import BlockedAuthor, ProfileViewBasic
from atproto_kit.models.base import OneOf, Record
from atproto_kit.models.dates import DateTime
from atproto_kit.models.feed import GeneratorView
from atproto_kit.models.graph import ListView
from atproto_kit.models.label import Label
from atproto_kit.models.repo import StrongReference
from atproto_kit.models.unknown import UnknownType


class AspectRatio(Record):
    width: StrictInt = Field(alias="width")
    height: StrictInt = Field(alias="height")


# Stored embeds

class EmbedRecord(Record):
    """A quote of another record (a post, feed generator, list...)."""

    type_id: ClassVar[Optional[str]] = "app.bsky.embed.record"

    record: StrongReference = Field(alias="record")


class EmbedImage(Record):
    image: UnknownType = Field(alias="image")
    alt: StrictStr = Field(alias="alt")
    aspect_ratio: Optional[AspectRatio] = Field(None, alias="aspectRatio")


class EmbedImages(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.embed.images"

    images: list[EmbedImage] = Field(alias="images")


class ExternalLink(Record):
    uri: StrictStr = Field(alias="uri")
    title: StrictStr = Field(alias="title")
    description: StrictStr = Field(alias="description")
    thumb: Optional[UnknownType] = Field(None, alias="thumb")


class EmbedExternal(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.embed.external"

    external: ExternalLink = Field(alias="external")


class EmbedRecordWithMedia(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.embed.recordWithMedia"

    record: EmbedRecord = Field(alias="record")
    media: MediaUnion = Field(alias="media")


# Hydrated views

class ViewImage(Record):
    thumb_url: StrictStr = Field(alias="thumb")
    fullsize_url: StrictStr = Field(alias="fullsize")
    alt: StrictStr = Field(alias="alt")
    aspect_ratio: Optional[AspectRatio] = Field(None, alias="aspectRatio")


class EmbedImagesView(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.embed.images#view"

    images: list[ViewImage] = Field(alias="images")


class ViewExternal(Record):
    uri: StrictStr = Field(alias="uri")
    title: StrictStr = Field(alias="title")
    description: StrictStr = Field(alias="description")
    thumb_url: Optional[StrictStr] = Field(None, alias="thumb")


class EmbedExternalView(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.embed.external#view"

    external: ViewExternal = Field(alias="external")


class EmbedRecordView(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.embed.record#view"

    record: RecordViewUnion = Field(alias="record")


class EmbedRecordWithMediaView(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.embed.recordWithMedia#view"

    record: EmbedRecordView = Field(alias="record")
    media: MediaViewUnion = Field(alias="media")


class ViewRecord(Record):
    """A quoted record that resolved."""

    type_id: ClassVar[Optional[str]] = "app.bsky.embed.record#viewRecord"

    uri: StrictStr = Field(alias="uri")
    cid: StrictStr = Field(alias="cid")
    author: ProfileViewBasic = Field(alias="author")
    # The record data itself, in whatever lexicon it was written.
    value: UnknownType = Field(alias="value")
    labels: Optional[list[Label]] = Field(None, alias="labels")
    reply_count: Optional[StrictInt] = Field(None, alias="replyCount")
    repost_count: Optional[StrictInt] = Field(None, alias="repostCount")
    like_count: Optional[StrictInt] = Field(None, alias="likeCount")
    quote_count: Optional[StrictInt] = Field(None, alias="quoteCount")
    embeds: Optional[list[EmbedViewUnion]] = Field(None, alias="embeds")
    indexed_at: DateTime = Field(alias="indexedAt")


class ViewNotFound(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.embed.record#viewNotFound"

    uri: StrictStr = Field(alias="uri")
    not_found: StrictBool = Field(alias="notFound")


class ViewBlocked(Record):
    type_id: ClassVar[Optional[str]] = "app.bsky.embed.record#viewBlocked"

    uri: StrictStr = Field(alias="uri")
    blocked: StrictBool = Field(alias="blocked")
    author: BlockedAuthor = Field(alias="author")


# Unions. Candidates are tried left to right; keep the stricter shape first.

MediaUnion = Annotated[Union[EmbedImages, EmbedExternal], OneOf("media")]

PostEmbedUnion = Annotated[
    Union[EmbedImages, EmbedExternal, EmbedRecordWithMedia, EmbedRecord],
    OneOf("post embed"),
]

MediaViewUnion = Annotated[Union[EmbedImagesView, EmbedExternalView], OneOf("media view")]

# Both record views hold a ``record`` key; the with-media view goes first.
EmbedViewUnion = Annotated[
    Union[EmbedImagesView, EmbedExternalView, EmbedRecordWithMediaView, EmbedRecordView],
    OneOf("embed view"),
]

# ViewRecord needs cid, author, value and indexedAt, so a not-found or
# blocked marker never parses as one. ViewNotFound precedes ViewBlocked.
RecordViewUnion = Annotated[
    Union[ViewRecord, ViewNotFound, ViewBlocked, GeneratorView, ListView],
    OneOf("record view"),
]

EmbedRecordWithMedia.model_rebuild()
EmbedRecordView.model_rebuild()
EmbedRecordWithMediaView.model_rebuild()
ViewRecord.model_rebuild()
