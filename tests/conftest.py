"""Shared wire payloads."""

import copy

import pytest

PROFILE = {
    "did": "did:plc:alice",
    "handle": "alice.bsky.social",
    "displayName": "Alice",
}

POST_VALUE = {
    "$type": "app.bsky.feed.post",
    "text": "hello from the quoted post",
    "createdAt": "2024-05-19T10:00:00.000Z",
    "langs": ["en"],
}

VIEW_RECORD = {
    "uri": "at://did:plc:alice/app.bsky.feed.post/3kq",
    "cid": "bafyreiquoted",
    "author": PROFILE,
    "value": POST_VALUE,
    "indexedAt": "2024-05-19T10:00:01.000Z",
}

NOTIFICATION = {
    "uri": "at://did:plc:bob/app.bsky.feed.like/3kr",
    "cid": "bafyreilike",
    "author": {"did": "did:plc:bob", "handle": "bob.bsky.social"},
    "reason": "like",
    "reasonSubject": "at://did:plc:alice/app.bsky.feed.post/3kq",
    "record": {
        "$type": "app.bsky.feed.like",
        "subject": {"uri": "at://did:plc:alice/app.bsky.feed.post/3kq", "cid": "bafyreiquoted"},
        "createdAt": "2024-05-19T11:00:00.000Z",
    },
    "isRead": False,
    "indexedAt": "2024-05-19T11:00:00.500Z",
}

LIST_VIEW = {
    "uri": "at://did:plc:mod/app.bsky.graph.list/3ks",
    "cid": "bafyreilist",
    "creator": {"did": "did:plc:mod", "handle": "mod.bsky.social"},
    "name": "Spam accounts",
    "purpose": "app.bsky.graph.defs#modlist",
    "listItemCount": 12,
    "indexedAt": "2024-03-10T08:00:00.000Z",
}


@pytest.fixture
def notification():
    return copy.deepcopy(NOTIFICATION)


@pytest.fixture
def view_record():
    return copy.deepcopy(VIEW_RECORD)


@pytest.fixture
def list_view():
    return copy.deepcopy(LIST_VIEW)
