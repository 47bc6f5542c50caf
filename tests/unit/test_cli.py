"""Tests for the hn-companion CLI."""

import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from hn_companion.cli import app
from tests.unit.fakes import FakeHackerNewsApi

runner = CliRunner()


@pytest.fixture(autouse=True)
def _fake_client(fake_api: FakeHackerNewsApi) -> Iterator[None]:
    """Route CLI downloads to the in-memory fake and keep log output off stdout."""
    with (
        patch("hn_companion.cli.HackerNewsApi", return_value=fake_api),
        patch("hn_companion.cli.configure_logging"),
    ):
        yield


def test_fetch_writes_output_files(tmp_path: Path) -> None:
    result = runner.invoke(app, ["fetch", "1000", "--output-dir", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "4 comments" in result.output
    assert (tmp_path / "1000-system-prompt.txt").exists()
    assert (tmp_path / "1000-user-prompt.txt").exists()
    path_map = json.loads((tmp_path / "1000-comment-path-id-map.json").read_text())
    assert path_map[0] == ["1", 102]


def test_fetch_accepts_url(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["fetch", "https://news.ycombinator.com/item?id=1000", "-o", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "1000-user-prompt.txt").exists()


def test_fetch_dry_run_writes_nothing(tmp_path: Path) -> None:
    outdir = tmp_path / "out"

    result = runner.invoke(app, ["fetch", "1000", "-o", str(outdir), "--dry-run"])

    assert result.exit_code == 0, result.output
    assert not outdir.exists()


def test_fetch_rejects_invalid_input(tmp_path: Path) -> None:
    result = runner.invoke(app, ["fetch", "not-a-post", "-o", str(tmp_path)])

    assert result.exit_code == 1


def test_fetch_exits_when_post_missing(tmp_path: Path) -> None:
    result = runner.invoke(app, ["fetch", "999", "-o", str(tmp_path)])

    assert result.exit_code == 1


def test_comments_prints_formatted_lines() -> None:
    result = runner.invoke(app, ["comments", "1000"])

    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.startswith("[")]
    assert lines[0] == "[1] (score: 1000) <replies: 0> {downvotes: 0} bob: Bob was here first"
    assert lines[3].startswith("[2.1.1]")


def test_comments_json_output() -> None:
    result = runner.invoke(app, ["comments", "1000", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["post"]["id"] == "1000"
    assert [c["path"] for c in data["comments"]] == ["1", "2", "2.1", "2.1.1"]
    assert data["comments"][0]["parent_id"] is None


def test_serve_passes_verbose_flag_to_server() -> None:
    with patch("hn_companion.mcp.server.run_mcp_server") as run:
        result = runner.invoke(app, ["-v", "serve"])

    assert result.exit_code == 0, result.output
    run.assert_called_once_with(verbose=True)
