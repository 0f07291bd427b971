from __future__ import annotations

import pytest

from hn_tui.decoder import decode_story, decode_story_ids
from hn_tui.errors import DecodeError


def test_decode_full_story(story_payload):
    story = decode_story(story_payload(8863))
    assert story.id == 8863
    assert story.by == "pg"
    assert story.descendants == 15
    assert story.kids == (101, 102)
    assert story.score == 57
    assert story.time == 1160418111
    assert story.title == "Story 8863"
    assert story.url == "http://www.example.com/8863"
    assert story.domain == "example.com"


def test_optional_fields_default_when_missing(story_payload):
    payload = story_payload()
    for name in ("descendants", "kids", "url"):
        del payload[name]
    story = decode_story(payload)
    assert story.descendants == 0
    assert story.kids == ()
    assert story.url == ""
    assert story.link == story.discussion_url


@pytest.mark.parametrize(
    "name,value",
    [("descendants", None), ("descendants", "many"), ("kids", "101"), ("kids", [1, "x"]), ("url", 42)],
)
def test_optional_fields_default_when_malformed(story_payload, name, value):
    story = decode_story(story_payload(**{name: value}))
    assert getattr(story, name) in (0, (), "")


@pytest.mark.parametrize("name", ["by", "id", "score", "time", "title"])
def test_missing_required_field_fails(story_payload, name):
    payload = story_payload()
    del payload[name]
    with pytest.raises(DecodeError, match=name):
        decode_story(payload)


def test_wrong_type_for_required_field_fails(story_payload):
    with pytest.raises(DecodeError):
        decode_story(story_payload(score="57"))
    with pytest.raises(DecodeError):
        decode_story(story_payload(id=True))


def test_null_item_fails():
    # The API answers null for ids that do not exist.
    with pytest.raises(DecodeError):
        decode_story(None)


def test_decode_story_ids():
    assert decode_story_ids([3, 2, 1]) == [3, 2, 1]
    assert decode_story_ids([]) == []
    with pytest.raises(DecodeError):
        decode_story_ids({"ids": [1]})
    with pytest.raises(DecodeError):
        decode_story_ids([1, "2"])
