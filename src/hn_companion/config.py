"""Configuration constants for hn-companion."""

import os
from pathlib import Path

# Hierarchical comment tree, one request per post.
HN_ITEMS_API_URL: str = "https://hn.algolia.com/api/v1/items/{post_id}"

# Rendered discussion page; gives display order, text and downvote colours.
HN_ITEM_PAGE_URL: str = "https://news.ycombinator.com/item?id={post_id}"

USER_AGENT: str = "hn-companion/0.1"

# Seconds. Overridable with HN_COMPANION_TIMEOUT.
REQUEST_TIMEOUT: float = float(os.environ.get("HN_COMPANION_TIMEOUT", "30"))

# Cache prefix, used only when --cache is passed.
API_CACHE_PREFIX: str = "/tmp/hn-companion-cache/cache-"

# Output directories. The env var wins, then the first existing candidate.
OUTPUT_DIR_ENV: str = "HN_COMPANION_OUTPUT_DIR"
OUTPUT_DIRECTORIES: list[Path] = [
    Path("~/.local/share/hn-companion").expanduser(),
    Path("~/.hn-companion").expanduser(),
]


def resolve_output_directory() -> Path:
    """Return the directory prompts and path maps are written to.

    Falls back to the first candidate when none exists yet; callers create it.
    """
    env_dir = os.environ.get(OUTPUT_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    for candidate in OUTPUT_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return OUTPUT_DIRECTORIES[0]
