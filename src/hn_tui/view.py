from __future__ import annotations

import time
from typing import Optional

from rich.table import Table
from rich.text import Text

from .datamodels import Model, Story


def format_age(timestamp: int, now: Optional[float] = None) -> str:
    """Render a unix timestamp the way the HN front page does ("3 hours ago")."""
    now = time.time() if now is None else now
    seconds = max(0, int(now - timestamp))
    for unit, size in (("day", 86400), ("hour", 3600), ("minute", 60)):
        if seconds >= size:
            count = seconds // size
            return f"{count} {unit}{'s' if count != 1 else ''} ago"
    return "just now"


def story_title(story: Story) -> Text:
    title = Text(story.title, style=f"bold link {story.discussion_url}")
    if story.domain:
        title.append(f" ({story.domain})", style="dim")
    return title


def story_meta(story: Story, now: Optional[float] = None) -> Text:
    comments = "comment" if story.descendants == 1 else "comments"
    return Text.assemble(
        f"{story.score} points by ",
        (story.by, f"link {story.author_url}"),
        f" {format_age(story.time, now)} | ",
        (f"{story.descendants} {comments}", f"link {story.discussion_url}"),
        style="dim",
    )


def alert_text(model: Model) -> Optional[Text]:
    if model.alert is None:
        return None
    return Text(model.alert, style="bold red")


def header_text(model: Model) -> str:
    count = len(model.stories)
    return f"{count} {'story' if count == 1 else 'stories'}"


def stories_table(model: Model, now: Optional[float] = None) -> Table:
    """The story list as a table, newest arrival first."""
    table = Table(title="Hacker News: top stories", show_lines=False, expand=True)
    table.add_column("Title", ratio=3)
    table.add_column("Score", justify="right")
    table.add_column("Author")
    table.add_column("Comments", justify="right")
    table.add_column("Age")
    for story in model.stories:
        table.add_row(
            story_title(story),
            str(story.score),
            Text(story.by, style=f"link {story.author_url}"),
            str(story.descendants),
            format_age(story.time, now),
        )
    return table
