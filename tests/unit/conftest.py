"""Shared test fixtures."""

from typing import Any

import pytest

from tests.unit.fakes import FakeHackerNewsApi, FakeWriter
from tests.unit.html_pages import comment_row, render_page

POST_ID = "1000"

# API order: alice, bob, dave. The page ranks bob above alice, and dave is collapsed.
STORY_ITEM: dict[str, Any] = {
    "id": 1000,
    "type": "story",
    "author": "poster",
    "title": "Show HN: A tiny outliner",
    "url": "https://example.com/outliner",
    "points": 128,
    "children": [
        {
            "id": 101,
            "type": "comment",
            "author": "alice",
            "children": [
                {
                    "id": 103,
                    "type": "comment",
                    "author": "carol",
                    "children": [
                        {"id": 105, "type": "comment", "author": "erin", "children": []},
                    ],
                },
            ],
        },
        {"id": 102, "type": "comment", "author": "bob", "children": []},
        {
            "id": 104,
            "type": "comment",
            "author": "dave",
            "children": [
                {"id": 106, "type": "comment", "author": "frank", "children": []},
            ],
        },
    ],
}


STORY_PAGE = render_page(
    comment_row(102, "Bob was here first"),
    comment_row(
        101,
        'First <a href="https://example.com">https://example.com</a> comment'
        "<p>Second para &amp; more",
    ),
    comment_row(103, "A mild reply", color="c5a", indent=1),
    comment_row(105, "Deep <i>reply</i> with <code>code()</code>", indent=2),
    comment_row(104, "Collapsed comment", row_class="coll"),
    comment_row(106, "Hidden under collapsed", row_class="noshow", indent=1),
)


@pytest.fixture
def story_item() -> dict[str, Any]:
    return STORY_ITEM


@pytest.fixture
def story_page() -> str:
    return STORY_PAGE


@pytest.fixture
def fake_api() -> FakeHackerNewsApi:
    """A fake client serving the sample story."""
    api = FakeHackerNewsApi()
    api.add_post(POST_ID, item=STORY_ITEM, page=STORY_PAGE)
    return api


@pytest.fixture
def fake_writer() -> FakeWriter:
    return FakeWriter()
