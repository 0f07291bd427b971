from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

from .datamodels import Model
from .update import FetchStory, FetchTopStoryIds, init, outcome_event, perform, update
from .view import alert_text, stories_table

logger = logging.getLogger("hn")


def run_once(client, console: Optional[Console] = None) -> Model:
    """Fetch the current top stories once and print them.

    Runs the same init/update cycle as the TUI, with the story batch fetched
    through ``client.fetch_top_stories``.
    """
    console = console or Console()
    model, effects = init()

    while effects:
        story_ids = [e.story_id for e in effects if isinstance(e, FetchStory)]
        pending = []
        for effect in effects:
            if isinstance(effect, FetchTopStoryIds):
                model, more = update(perform(client, effect), model)
                pending.extend(more)
        if story_ids:
            logger.debug("Fetching %d stories", len(story_ids))
            for _, outcome in client.fetch_top_stories(story_ids):
                model, more = update(outcome_event(outcome), model)
                pending.extend(more)
        effects = pending

    console.print(stories_table(model))
    alert = alert_text(model)
    if alert is not None:
        console.print(alert)
    return model
