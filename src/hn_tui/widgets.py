from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, ListItem, Static

from .datamodels import Story
from .messages import AlertDismissRequested
from .view import story_meta, story_title


# --- UI Widgets ---
class StoryItem(ListItem):
    def __init__(self, story: Story):
        super().__init__()
        self.story = story

    def compose(self) -> ComposeResult:
        with Vertical(classes="story-container"):
            yield Static(story_title(self.story), classes="story-title")
            yield Static(story_meta(self.story), classes="story-meta")


class AlertBanner(Horizontal):
    """Single-slot error banner, hidden while there is nothing to show."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.message = Static("", id="alert-message")

    def compose(self) -> ComposeResult:
        yield self.message
        yield Button("Dismiss", id="dismiss-alert", variant="error")

    def show(self, message: Optional[Text]) -> None:
        if message is None:
            self.display = False
            return
        self.message.update(message)
        self.display = True

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "dismiss-alert":
            event.stop()
            self.post_message(AlertDismissRequested())

