"""Ordered trial decoding of union fields."""

from typing import Annotated, Union

import pytest
from pydantic import Field, StrictStr

from atproto_kit import OneOf, Record, UnrecognizedVariantError
from atproto_kit.models.embed import (
    EmbedExternalView,
    EmbedImagesView,
    EmbedRecordView,
    EmbedRecordWithMediaView,
    ViewBlocked,
    ViewNotFound,
    ViewRecord,
)
from atproto_kit.models.feed import GeneratorView
from atproto_kit.models.graph import ListView


class Loose(Record):
    uri: StrictStr = Field(alias="uri")


class Specific(Record):
    uri: StrictStr = Field(alias="uri")
    cid: StrictStr = Field(alias="cid")


class SpecificFirst(Record):
    held: Annotated[Union[Specific, Loose], OneOf("specific first")] = Field(alias="held")


class LooseFirst(Record):
    held: Annotated[Union[Loose, Specific], OneOf("loose first")] = Field(alias="held")


class TestOrderingLaw:
    def test_earlier_candidate_wins_when_both_accept(self):
        payload = {"held": {"uri": "at://x", "cid": "bafy"}}
        assert isinstance(SpecificFirst.decode(payload).held, Specific)
        assert isinstance(LooseFirst.decode(payload).held, Loose)

    def test_only_matching_candidate_is_selected_in_any_order(self):
        payload = {"held": {"uri": "at://x"}}
        assert isinstance(SpecificFirst.decode(payload).held, Loose)
        assert isinstance(LooseFirst.decode(payload).held, Loose)

    def test_not_found_before_blocked(self):
        payload = {"record": {"uri": "at://x", "notFound": True, "blocked": True, "author": {"did": "did:plc:x"}}}
        assert isinstance(EmbedRecordView.decode(payload).record, ViewNotFound)

    def test_held_instance_passes_through(self):
        held = Specific(uri="at://x", cid="bafy")
        assert LooseFirst(held=held).held is held


class TestRecordViewUnion:
    def test_not_found_marker(self):
        view = EmbedRecordView.decode({"record": {"uri": "at://x", "notFound": True}})
        assert isinstance(view.record, ViewNotFound)
        assert view.record.uri == "at://x"
        assert view.record.not_found is True

    def test_resolved_record(self, view_record):
        view = EmbedRecordView.decode({"record": view_record})
        assert isinstance(view.record, ViewRecord)
        assert view.record.author.handle == "alice.bsky.social"
        assert view.record.value.record_type == "app.bsky.feed.post"

    def test_blocked_marker(self):
        view = EmbedRecordView.decode(
            {"record": {"uri": "at://x", "blocked": True, "author": {"did": "did:plc:blocker"}}}
        )
        assert isinstance(view.record, ViewBlocked)
        assert view.record.author.did == "did:plc:blocker"

    def test_generator_view(self):
        generator = {
            "uri": "at://did:plc:feeds/app.bsky.feed.generator/cats",
            "cid": "bafygen",
            "did": "did:web:feeds.example.com",
            "creator": {"did": "did:plc:feeds", "handle": "feeds.example.com"},
            "displayName": "Cats",
            "likeCount": 4,
            "indexedAt": "2024-02-01T00:00:00.000Z",
        }
        assert isinstance(EmbedRecordView.decode({"record": generator}).record, GeneratorView)

    def test_list_view(self, list_view):
        assert isinstance(EmbedRecordView.decode({"record": list_view}).record, ListView)

    def test_mistyped_marker_is_not_coerced(self):
        with pytest.raises(UnrecognizedVariantError) as exc_info:
            EmbedRecordView.decode({"record": {"uri": "at://x", "notFound": "true"}})
        assert exc_info.value.path == "record"
        assert exc_info.value.details["label"] == "record view"

    def test_no_candidate_matches(self):
        with pytest.raises(UnrecognizedVariantError) as exc_info:
            EmbedRecordView.decode({"record": {"uri": "at://x"}})
        names = exc_info.value.details["names"]
        assert names == "ViewRecord, ViewNotFound, ViewBlocked, GeneratorView, ListView"


class TestDiscriminant:
    def test_matching_type_tag_is_accepted(self):
        view = EmbedRecordView.decode({
            "$type": "app.bsky.embed.record#view",
            "record": {"$type": "app.bsky.embed.record#viewNotFound", "uri": "at://x", "notFound": True},
        })
        assert isinstance(view.record, ViewNotFound)

    def test_conflicting_type_tag_rules_a_candidate_out(self):
        with pytest.raises(UnrecognizedVariantError):
            EmbedRecordView.decode({
                "record": {"$type": "app.bsky.embed.record#viewBlocked", "uri": "at://x", "notFound": True},
            })

    def test_encode_writes_type_tags(self):
        view = EmbedRecordView.decode({"record": {"uri": "at://x", "notFound": True}})
        assert view.encode() == {
            "$type": "app.bsky.embed.record#view",
            "record": {"$type": "app.bsky.embed.record#viewNotFound", "uri": "at://x", "notFound": True},
        }

    def test_type_tag_is_not_settable(self):
        view = ViewNotFound(uri="at://x", not_found=True)
        assert view.type_id == "app.bsky.embed.record#viewNotFound"
        assert "type_id" not in ViewNotFound.model_fields


class TestRecursiveEmbeds:
    def test_quoted_record_with_nested_embeds(self, view_record):
        view_record["embeds"] = [
            {"record": {"uri": "at://deeper", "notFound": True}},
            {"images": [{"thumb": "https://cdn/t.jpg", "fullsize": "https://cdn/f.jpg", "alt": ""}]},
        ]
        view = EmbedRecordView.decode({"record": view_record})
        inner = view.record.embeds
        assert isinstance(inner[0], EmbedRecordView)
        assert isinstance(inner[0].record, ViewNotFound)
        assert isinstance(inner[1], EmbedImagesView)
        assert inner[1].images[0].fullsize_url == "https://cdn/f.jpg"

    def test_record_with_media_view_is_tried_before_record_view(self, view_record):
        payload = {
            "record": {"record": view_record},
            "media": {"external": {"uri": "https://example.com", "title": "Example", "description": ""}},
        }
        view = EmbedRecordView.decode({"record": {**view_record, "embeds": [payload]}})
        inner = view.record.embeds[0]
        assert isinstance(inner, EmbedRecordWithMediaView)
        assert isinstance(inner.media, EmbedExternalView)
        assert isinstance(inner.record.record, ViewRecord)

    def test_bad_nested_embed_fails_the_whole_decode(self, view_record):
        view_record["embeds"] = [{"unknown": 1}]
        with pytest.raises(UnrecognizedVariantError) as exc_info:
            EmbedRecordView.decode({"record": view_record})
        assert exc_info.value.path == "record"

    def test_rejections_name_the_failing_field(self):
        with pytest.raises(UnrecognizedVariantError) as exc_info:
            EmbedRecordView.decode({"record": {"uri": "at://x"}})
        rejected = exc_info.value.details["rejected"]
        assert rejected[0].startswith("ViewRecord: cid: ")
        assert all(": " in entry for entry in rejected)
