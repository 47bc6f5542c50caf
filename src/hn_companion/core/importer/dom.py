"""Extract visible comments from a rendered Hacker News discussion page."""

import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag
from loguru import logger

from hn_companion.models.comment import DomRecord

# Downvoted comments are rendered in progressively lighter text colours.
DOWNVOTE_LEVELS: dict[str, int] = {
    "c00": 0,
    "c5a": 1,
    "c73": 2,
    "c82": 3,
    "c88": 4,
    "c9c": 5,
    "cae": 6,
    "cbe": 7,
    "cce": 8,
    "cdd": 9,
}

_COLOR_CLASS = re.compile(r"c[0-9a-f]{2}")
_WHITESPACE = re.compile(r"\s+")

# Rows hidden by the page: collapsed comments and descendants of collapsed ones.
_HIDDEN_ROW_CLASSES = frozenset({"coll", "noshow"})


def downvote_level(classes: Iterable[str]) -> int:
    """Map the first colour class of a comment to its downvote level (0-9)."""
    for class_name in classes:
        lowered = class_name.lower()
        if _COLOR_CLASS.fullmatch(lowered):
            return DOWNVOTE_LEVELS.get(lowered, 0)
    return 0


def _clean_text(comment_div: Tag) -> str:
    """Strip links, code and markup, keeping the readable comment text."""
    for element in comment_div.find_all(["a", "code", "pre"]):
        element.extract()
    for paragraph in comment_div.find_all("p"):
        paragraph.insert_before(" ")
        paragraph.unwrap()
    return _WHITESPACE.sub(" ", comment_div.get_text()).strip()


def extract_dom_records(html: str) -> dict[int, DomRecord]:
    """Collect the visible comments of a discussion page.

    Every ``.comtr`` row counts towards the display position, including rows
    that are skipped because they are collapsed, hidden or have no text.

    Args:
        html: Page HTML from ``news.ycombinator.com/item?id=...``.

    Returns:
        Records keyed by the numeric comment id, in document order.
    """
    soup = BeautifulSoup(html, "html.parser")
    rows = soup.select(".comtr")

    records: dict[int, DomRecord] = {}
    skipped = 0
    for position, row in enumerate(rows):
        row_classes = set(row.get("class") or [])
        comment_div = row.select_one(".commtext")
        if row_classes & _HIDDEN_ROW_CLASSES or comment_div is None:
            skipped += 1
            continue

        row_id = str(row.get("id") or "")
        if not row_id.isdigit():
            logger.debug("Skipping comment row without numeric id: {!r}", row_id)
            skipped += 1
            continue

        downvotes = downvote_level(comment_div.get("class") or [])
        records[int(row_id)] = DomRecord(
            position=position,
            text=_clean_text(comment_div),
            downvotes=downvotes,
        )

    logger.debug(
        "Comments from DOM: total {}, skipped {}, remaining {}", len(rows), skipped, len(records)
    )
    return records
