from __future__ import annotations

import logging
import webbrowser
from functools import partial
from typing import Any, List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, ListView
from textual.worker import Worker, WorkerState

from .config import BASE_URL, CONFIG_PATH, DEFAULT_THEME, save_config
from .datamodels import Model, Story
from .fetcher import HackerNewsClient
from .messages import AlertDismissRequested
from .update import (
    AlertDismissed,
    Effect,
    Event,
    FetchStory,
    FetchTopStoryIds,
    init,
    perform,
    update,
)
from .view import alert_text, header_text
from .widgets import AlertBanner, StoryItem

logger = logging.getLogger("hn")

FETCH_GROUP = "fetch"


def _worker_name(effect: Effect) -> str:
    if isinstance(effect, FetchStory):
        return f"story:{effect.story_id}"
    return "top_story_ids"


class NewsApp(App):
    TITLE = "Hacker News"
    SUB_TITLE = "Top stories"

    CSS_PATH = "app.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("x,escape", "dismiss_alert", "Dismiss"),
        Binding("o", "open_story", "Open"),
        Binding("c", "open_comments", "Comments"),
    ]

    def __init__(
        self,
        client: Optional[HackerNewsClient] = None,
        theme: Optional[str] = None,
        config: Optional[dict[str, Any]] = None,
        config_path: str = CONFIG_PATH,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.config = config or {}
        self.config_path = config_path
        self.client = client or HackerNewsClient(
            base_url=self.config.get("base_url", BASE_URL),
            timeout=self.config.get("timeout"),
        )
        self._theme_name = theme or DEFAULT_THEME
        self.model = Model()
        self._shown = 0
        self._persist_theme = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield AlertBanner(id="alert")
        yield ListView(id="stories-list")
        yield Footer()

    def on_mount(self) -> None:
        if self._theme_name in self.available_themes:
            self.theme = self._theme_name
        else:
            logger.warning("Unknown theme %s, falling back to %s", self._theme_name, DEFAULT_THEME)
            self.theme = DEFAULT_THEME
        self._persist_theme = True

        self.query_one("#stories-list", ListView).focus()

        self.model, effects = init()
        self.render_model()
        self.run_effects(effects)

    # --- Runtime ---
    def dispatch(self, event: Event) -> None:
        """Run one event through the reducer and act on the result."""
        logger.debug("Dispatching %s", type(event).__name__)
        self.model, effects = update(event, self.model)
        self.render_model()
        self.run_effects(effects)

    def run_effects(self, effects: List[Effect]) -> None:
        for effect in effects:
            self.run_worker(
                partial(perform, self.client, effect),
                name=_worker_name(effect),
                group=FETCH_GROUP,
                thread=True,
                exit_on_error=False,
            )
        if any(isinstance(e, FetchTopStoryIds) for e in effects):
            self.sub_title = "Loading top stories..."

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.worker.group != FETCH_GROUP:
            return
        if event.state is WorkerState.SUCCESS:
            self.dispatch(event.worker.result)
        elif event.state is WorkerState.ERROR:
            logger.error("Worker %s failed: %s", event.worker.name, event.worker.error)

    # --- Rendering ---
    def render_model(self) -> None:
        self.sub_title = header_text(self.model)
        self.query_one(AlertBanner).show(alert_text(self.model))

        # Stories are only ever prepended, so mount the new ones above the rest.
        new_count = len(self.model.stories) - self._shown
        if new_count <= 0:
            return
        stories_list = self.query_one("#stories-list", ListView)
        items = [StoryItem(s) for s in self.model.stories[:new_count]]
        index = stories_list.index
        if self._shown:
            stories_list.mount(*items, before=0)
        else:
            stories_list.extend(items)
        self._shown = len(self.model.stories)
        if index is not None:
            stories_list.index = index + new_count

    def watch_theme(self, old_theme: str, new_theme: str) -> None:
        """Remember a theme picked from the command palette."""
        if not getattr(self, "_persist_theme", False) or old_theme == new_theme:
            return
        if new_theme == self.config.get("theme"):
            return
        self.config["theme"] = new_theme
        save_config(self.config, self.config_path)

    # --- Actions ---
    def _highlighted_story(self) -> Optional[Story]:
        item = self.query_one("#stories-list", ListView).highlighted_child
        if isinstance(item, StoryItem):
            return item.story
        return None

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, StoryItem):
            webbrowser.open(event.item.story.link)

    def on_alert_dismiss_requested(self, message: AlertDismissRequested) -> None:
        self.dispatch(AlertDismissed())

    def action_dismiss_alert(self) -> None:
        self.dispatch(AlertDismissed())

    def action_open_story(self) -> None:
        story = self._highlighted_story()
        if story:
            webbrowser.open(story.link)

    def action_open_comments(self) -> None:
        story = self._highlighted_story()
        if story:
            webbrowser.open(story.discussion_url)
