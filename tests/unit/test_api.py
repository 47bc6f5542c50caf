"""Tests for HackerNewsApi — HTTP client with caching."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from hn_companion.api import HackerNewsApi
from hn_companion.errors import PostNotFoundError


def _make_response(text: str) -> MagicMock:
    """Create a mock HTTP response with the given body."""
    response = MagicMock()
    response.text = text
    return response


@pytest.fixture
def mock_session() -> MagicMock:
    session = MagicMock()
    session.headers = {}
    return session


def test_init_sets_user_agent(mock_session: MagicMock) -> None:
    HackerNewsApi(session=mock_session)

    assert mock_session.headers["User-Agent"].startswith("hn-companion")


def test_fetch_item_requests_algolia_and_parses_json(mock_session: MagicMock) -> None:
    mock_session.get.return_value = _make_response(json.dumps({"id": 1, "type": "story"}))
    api = HackerNewsApi(session=mock_session, timeout=5)

    result = api.fetch_item("1")

    assert result == {"id": 1, "type": "story"}
    mock_session.get.assert_called_once_with("https://hn.algolia.com/api/v1/items/1", timeout=5)


def test_fetch_page_returns_html(mock_session: MagicMock) -> None:
    mock_session.get.return_value = _make_response("<html></html>")
    api = HackerNewsApi(session=mock_session)

    assert api.fetch_page("42") == "<html></html>"
    url = mock_session.get.call_args[0][0]
    assert url == "https://news.ycombinator.com/item?id=42"


def test_fetch_page_raises_for_unknown_post(mock_session: MagicMock) -> None:
    mock_session.get.return_value = _make_response("No such item.")
    api = HackerNewsApi(session=mock_session)

    with pytest.raises(PostNotFoundError, match="not found"):
        api.fetch_page("42")


def test_fetch_raises_on_http_error(mock_session: MagicMock) -> None:
    mock_session.get.return_value.raise_for_status.side_effect = requests.HTTPError("503")
    api = HackerNewsApi(session=mock_session)

    with pytest.raises(requests.HTTPError, match="503"):
        api.fetch_item("1")


def test_cache_serves_second_request_from_disk(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mock_session: MagicMock
) -> None:
    monkeypatch.setattr("hn_companion.api.API_CACHE_PREFIX", str(tmp_path / "cache-"))
    mock_session.get.return_value = _make_response('{"id": 9}')
    api = HackerNewsApi(from_cache=True, session=mock_session)

    first = api.fetch_item("9")
    second = api.fetch_item("9")

    assert first == second == {"id": 9}
    assert mock_session.get.call_count == 1
    assert (tmp_path / "cache-item-9.json").read_text() == '{"id": 9}'


def test_no_cache_by_default(mock_session: MagicMock) -> None:
    mock_session.get.return_value = _make_response('{"id": 9}')
    api = HackerNewsApi(session=mock_session)

    api.fetch_item("9")
    api.fetch_item("9")

    assert api.api_cache_prefix is None
    assert mock_session.get.call_count == 2
