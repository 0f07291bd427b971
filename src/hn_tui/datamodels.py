from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
from urllib.parse import urlparse

from .config import HN_WEB_URL


# --- Data models ---
@dataclass(frozen=True)
class Story:
    by: str
    id: int
    score: int
    time: int
    title: str
    descendants: int = 0
    kids: Tuple[int, ...] = ()
    url: str = ""

    @property
    def discussion_url(self) -> str:
        return f"{HN_WEB_URL}/item?id={self.id}"

    @property
    def author_url(self) -> str:
        return f"{HN_WEB_URL}/user?id={self.by}"

    @property
    def link(self) -> str:
        """External URL, or the discussion thread for text posts."""
        return self.url or self.discussion_url

    @property
    def domain(self) -> str:
        if not self.url:
            return ""
        host = urlparse(self.url).netloc
        return host[4:] if host.startswith("www.") else host


class AppState(Enum):
    # Only VIEWING_ALL is ever entered.
    VIEWING_ALL = "viewing_all"
    READING = "reading"
    LOADING = "loading"


@dataclass(frozen=True)
class Model:
    stories: Tuple[Story, ...] = ()
    state: AppState = AppState.VIEWING_ALL
    story_ids: Tuple[int, ...] = ()
    alert: Optional[str] = None
