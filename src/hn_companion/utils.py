"""Helpers for turning user input into Hacker News post ids."""

import re
from urllib.parse import parse_qs, urlparse

_HN_HOSTS = frozenset({"news.ycombinator.com", "hn.algolia.com"})
_POST_ID = re.compile(r"\d+")


def extract_post_id_from_url(url: str) -> str | None:
    """Return the ``id`` query parameter of a Hacker News URL, or None."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return None
    if parsed.hostname not in _HN_HOSTS:
        return None
    ids = parse_qs(parsed.query).get("id")
    if not ids or not _POST_ID.fullmatch(ids[0]):
        return None
    return ids[0]


def get_post_id(value: str) -> str | None:
    """Accept a post id or a Hacker News URL, return the post id or None."""
    value = value.strip()
    if value.startswith("http"):
        return extract_post_id_from_url(value)
    if _POST_ID.fullmatch(value):
        return value
    return None
