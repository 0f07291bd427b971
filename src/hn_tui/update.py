from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import List, Tuple, Union

from .config import MAX_STORIES
from .datamodels import Model, Story
from .errors import FetchError, describe_error


# --- Effects ---
@dataclass(frozen=True)
class FetchTopStoryIds:
    pass


@dataclass(frozen=True)
class FetchStory:
    story_id: int


Effect = Union[FetchTopStoryIds, FetchStory]


# --- Events ---
@dataclass(frozen=True)
class TopStoryIdsLoaded:
    ids: Tuple[int, ...]


@dataclass(frozen=True)
class TopStoryIdsFailed:
    error: FetchError


@dataclass(frozen=True)
class StoryLoaded:
    story: Story


@dataclass(frozen=True)
class StoryFailed:
    error: FetchError


@dataclass(frozen=True)
class AlertDismissed:
    pass


Event = Union[TopStoryIdsLoaded, TopStoryIdsFailed, StoryLoaded, StoryFailed, AlertDismissed]


def init() -> Tuple[Model, List[Effect]]:
    return Model(), [FetchTopStoryIds()]


def update(event: Event, model: Model) -> Tuple[Model, List[Effect]]:
    """Fold one event into the model.

    Returns the new model and the effects the runtime should start. The
    incoming model is never modified.
    """
    if isinstance(event, TopStoryIdsLoaded):
        return model, [FetchStory(i) for i in event.ids[:MAX_STORIES]]
    if isinstance(event, (TopStoryIdsFailed, StoryFailed)):
        return dataclasses.replace(model, alert=describe_error(event.error)), []
    if isinstance(event, StoryLoaded):
        return dataclasses.replace(model, stories=(event.story,) + model.stories), []
    if isinstance(event, AlertDismissed):
        return dataclasses.replace(model, alert=None), []
    raise TypeError(f"Unknown event: {event!r}")


def perform(client, effect: Effect) -> Event:
    """Run one effect against the API client and report the outcome as an event."""
    if isinstance(effect, FetchTopStoryIds):
        try:
            return TopStoryIdsLoaded(tuple(client.fetch_top_story_ids()))
        except FetchError as e:
            return TopStoryIdsFailed(e)
    if isinstance(effect, FetchStory):
        try:
            return StoryLoaded(client.fetch_story(effect.story_id))
        except FetchError as e:
            return StoryFailed(e)
    raise TypeError(f"Unknown effect: {effect!r}")


def outcome_event(outcome: Union[Story, FetchError]) -> Event:
    """Event for one result yielded by ``HackerNewsClient.fetch_top_stories``."""
    if isinstance(outcome, Story):
        return StoryLoaded(outcome)
    return StoryFailed(outcome)
