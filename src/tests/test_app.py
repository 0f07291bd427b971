from __future__ import annotations

import asyncio
import os
from unittest.mock import MagicMock

from textual.widgets import ListView

from hn_tui.app import NewsApp
from hn_tui.config import DEFAULT_THEME, load_config
from hn_tui.errors import BadStatus
from hn_tui.update import StoryFailed, StoryLoaded
from hn_tui.widgets import AlertBanner, StoryItem


def test_failed_top_stories_show_dismissible_alert():
    client = MagicMock()
    client.fetch_top_story_ids.side_effect = BadStatus("https://hn.test/v0/topstories.json", 500)

    async def scenario():
        app = NewsApp(client=client)
        async with app.run_test() as pilot:
            await app.workers.wait_for_complete()
            await pilot.pause(0.1)
            assert "500" in app.model.alert
            assert app.query_one(AlertBanner).display
            client.fetch_story.assert_not_called()

            await pilot.press("x")
            await pilot.pause()
            assert app.model.alert is None
            assert not app.query_one(AlertBanner).display

    asyncio.run(scenario())


def test_stories_are_listed_as_they_arrive(make_story):
    client = MagicMock()
    client.fetch_top_story_ids.return_value = [1, 2, 3]
    client.fetch_story.side_effect = make_story

    async def scenario():
        app = NewsApp(client=client)
        async with app.run_test() as pilot:
            await app.workers.wait_for_complete()
            await pilot.pause(0.1)
            await app.workers.wait_for_complete()
            await pilot.pause(0.1)
            assert sorted(s.id for s in app.model.stories) == [1, 2, 3]
            assert app.model.alert is None
            assert len(app.query(StoryItem)) == 3
            assert app.sub_title == "3 stories"

    asyncio.run(scenario())


def _loaded_client(make_story, ids):
    client = MagicMock()
    client.fetch_top_story_ids.return_value = ids
    client.fetch_story.side_effect = make_story
    return client


def test_highlighted_story_survives_updates(make_story, tmp_path):
    client = _loaded_client(make_story, [1, 2, 3])

    async def scenario():
        app = NewsApp(client=client, config_path=str(tmp_path / "config.json"))
        async with app.run_test() as pilot:
            await app.workers.wait_for_complete()
            await pilot.pause(0.1)
            await app.workers.wait_for_complete()
            await pilot.pause(0.1)

            app.query_one("#stories-list", ListView).index = 1
            await pilot.pause()
            highlighted = app._highlighted_story()
            assert highlighted is not None

            app.dispatch(StoryFailed(BadStatus("https://hn.test/v0/item/4.json", 500)))
            await pilot.pause()
            assert app._highlighted_story() == highlighted

            app.dispatch(StoryLoaded(make_story(9)))
            await pilot.pause()
            assert app.model.stories[0].id == 9
            assert len(app.query(StoryItem)) == 4
            assert app._highlighted_story() == highlighted

            await pilot.press("x")
            await pilot.pause()
            assert app._highlighted_story() == highlighted

    asyncio.run(scenario())


def test_unknown_theme_falls_back_to_default(make_story, tmp_path):
    config_path = str(tmp_path / "config.json")
    client = _loaded_client(make_story, [])

    async def scenario():
        app = NewsApp(client=client, theme="no-such-theme", config_path=config_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.theme == DEFAULT_THEME

    asyncio.run(scenario())
    # Falling back is not a user choice, so nothing is saved.
    assert not os.path.exists(config_path)


def test_theme_change_is_saved(make_story, tmp_path):
    config_path = str(tmp_path / "config.json")
    client = _loaded_client(make_story, [])

    async def scenario():
        app = NewsApp(client=client, config={"timeout": 5}, config_path=config_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.theme = "nord"
            await pilot.pause()

    asyncio.run(scenario())
    assert load_config(config_path) == {"timeout": 5, "theme": "nord"}
