"""Hacker News HTTP client with optional caching."""

import json
from pathlib import Path
from typing import Any

import requests
from loguru import logger

from hn_companion.config import (
    API_CACHE_PREFIX,
    HN_ITEM_PAGE_URL,
    HN_ITEMS_API_URL,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from hn_companion.errors import PostNotFoundError


class HackerNewsApi:
    """Fetch the comment tree and the discussion page of a post."""

    def __init__(
        self,
        *,
        from_cache: bool = False,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.from_cache = from_cache
        self.timeout = timeout
        self.sess = session or requests.Session()
        self.sess.headers["User-Agent"] = USER_AGENT

        self.api_cache_prefix: str | None = API_CACHE_PREFIX if from_cache else None
        if self.api_cache_prefix:
            Path(self.api_cache_prefix).parent.mkdir(parents=True, exist_ok=True)

        logger.debug(
            "API ready: from_cache {!r}, api_cache_prefix {!r}",
            self.from_cache,
            self.api_cache_prefix,
        )

    def _get(self, url: str, cache_name: str) -> str:
        """GET a url, returning the body text. Served from cache when enabled."""
        cache_file: Path | None = None
        if self.api_cache_prefix:
            cache_file = Path(self.api_cache_prefix + cache_name)
            if cache_file.exists():
                logger.debug("Filled from cache: {!r}", str(cache_file))
                return cache_file.read_text(encoding="utf-8")

        logger.debug("Making request: {!r}", url)
        r = self.sess.get(url, timeout=self.timeout)
        r.raise_for_status()

        if cache_file is not None:
            cache_file.write_text(r.text, encoding="utf-8")
        return r.text

    def fetch_item(self, post_id: str) -> dict[str, Any]:
        """Return the items API JSON for a post, including its comment tree."""
        body = self._get(HN_ITEMS_API_URL.format(post_id=post_id), f"item-{post_id}.json")
        rv: dict[str, Any] = json.loads(body)
        return rv

    def fetch_page(self, post_id: str) -> str:
        """Return the rendered discussion page HTML."""
        body = self._get(HN_ITEM_PAGE_URL.format(post_id=post_id), f"page-{post_id}.html")
        if body.strip() == "No such item.":
            msg = f"Post ID {post_id} not found on HN."
            raise PostNotFoundError(msg)
        return body
