from __future__ import annotations

import pytest

from hn_tui.datamodels import Story


def _story_payload(story_id: int = 1, **overrides):
    payload = {
        "by": "pg",
        "descendants": 15,
        "id": story_id,
        "kids": [101, 102],
        "score": 57,
        "time": 1160418111,
        "title": f"Story {story_id}",
        "type": "story",
        "url": f"http://www.example.com/{story_id}",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def story_payload():
    return _story_payload


@pytest.fixture
def make_story():
    def _make(story_id: int = 1, **overrides) -> Story:
        fields = dict(by="pg", id=story_id, score=10, time=1160418111, title=f"Story {story_id}")
        fields.update(overrides)
        return Story(**fields)

    return _make
