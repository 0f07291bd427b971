from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

import requests
from requests.adapters import HTTPAdapter

from .config import BASE_URL, MAX_STORIES, REQUEST_HEADERS
from .datamodels import Story
from .decoder import decode_story, decode_story_ids
from .errors import BadPayload, BadStatus, DecodeError, FetchError, NetworkError

logger = logging.getLogger("hn")


class HackerNewsClient:
    def __init__(self, base_url: str = BASE_URL, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update(REQUEST_HEADERS)
        # One pooled connection per story in a batch; no retries.
        adapter = HTTPAdapter(pool_connections=1, pool_maxsize=MAX_STORIES, max_retries=0)
        s.mount("https://", adapter)
        s.mount("http://", adapter)
        return s

    def top_stories_url(self) -> str:
        return f"{self.base_url}/v0/topstories.json"

    def item_url(self, story_id: int) -> str:
        return f"{self.base_url}/v0/item/{story_id}.json"

    def _get_json(self, url: str) -> Any:
        logger.debug("Fetching %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            raise NetworkError(url, str(e)) from e
        if not 200 <= resp.status_code < 300:
            logger.warning("Fetch of %s returned HTTP %d", url, resp.status_code)
            raise BadStatus(url, resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            logger.warning("Invalid JSON from %s: %s", url, e)
            raise BadPayload(url, "response is not valid JSON") from e

    def fetch_top_story_ids(self) -> List[int]:
        url = self.top_stories_url()
        payload = self._get_json(url)
        try:
            ids = decode_story_ids(payload)
        except DecodeError as e:
            raise BadPayload(url, str(e)) from e
        logger.debug("Got %d top story ids", len(ids))
        return ids

    def fetch_story(self, story_id: int) -> Story:
        url = self.item_url(story_id)
        payload = self._get_json(url)
        try:
            return decode_story(payload)
        except DecodeError as e:
            logger.warning("Could not decode item %s: %s", story_id, e)
            raise BadPayload(url, str(e)) from e

    def fetch_top_stories(
        self, ids: Iterable[int]
    ) -> Iterator[Tuple[int, Union[Story, FetchError]]]:
        """Fetch the first MAX_STORIES ids concurrently.

        Yields ``(id, story_or_error)`` in completion order, not in id order.
        """
        batch = list(ids)[:MAX_STORIES]
        if not batch:
            return

        with ThreadPoolExecutor(max_workers=len(batch)) as executor:
            future_to_id = {executor.submit(self.fetch_story, i): i for i in batch}
            for future in as_completed(future_to_id):
                story_id = future_to_id[future]
                outcome: Union[Story, FetchError]
                try:
                    outcome = future.result()
                except FetchError as e:
                    logger.error("Failed to fetch story %s: %s", story_id, e)
                    outcome = e
                yield story_id, outcome
