"""CLI for hn-companion (fetch prompts, print comments, MCP server)."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import requests
import typer
from loguru import logger

from hn_companion.api import HackerNewsApi
from hn_companion.config import resolve_output_directory
from hn_companion.core.format.prompt import format_comments
from hn_companion.errors import CommentMergeError, PostNotFoundError
from hn_companion.fetcher import download_post_comments, save_outputs
from hn_companion.logging_config import configure_logging
from hn_companion.models.comment import DiscussionResult
from hn_companion.utils import get_post_id
from hn_companion.writer import OutputWriter

app = typer.Typer(help="Turn Hacker News discussions into scored, path-addressed prompts.")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    ctx.obj = {"verbose": verbose}
    configure_logging(verbose=verbose)


def _download(value: str, *, cache: bool) -> DiscussionResult:
    """Resolve the post id and download it, exiting with 1 on expected failures."""
    post_id = get_post_id(value)
    if not post_id:
        logger.error("Invalid input {!r}: expected a Hacker News post ID or URL", value)
        raise typer.Exit(1)

    try:
        return download_post_comments(HackerNewsApi(from_cache=cache), post_id)
    except (CommentMergeError, PostNotFoundError, requests.RequestException) as e:
        logger.error("Failed to process post {}: {}", post_id, e)
        raise typer.Exit(1) from e


@app.command()
def fetch(
    value: str = typer.Argument(..., metavar="INPUT", help="Post ID or Hacker News URL"),
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for prompts and path map"),
    ] = None,
    cache: bool = typer.Option(
        False, "--cache", "-C", help="Cache requests and use cache while developing"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
) -> None:
    """Download a post and save its prompts and comment path map."""
    result = _download(value, cache=cache)

    writer = OutputWriter(output_dir or resolve_output_directory(), dry_run=dry_run)
    for name in save_outputs(writer, result):
        logger.info("Saved {}", writer.path_for(name))

    typer.echo(
        f"Processed \"{result.post.title}\" ({len(result.comments)} comments): {writer.summary()}"
    )


@app.command()
def comments(
    value: str = typer.Argument(..., metavar="INPUT", help="Post ID or Hacker News URL"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    cache: bool = typer.Option(
        False, "--cache", "-C", help="Cache requests and use cache while developing"
    ),
) -> None:
    """Print the merged comments of a post."""
    result = _download(value, cache=cache)

    if output_json:
        data = {
            "post": asdict(result.post),
            "comments": [asdict(c) for c in result.comments],
        }
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(format_comments(result.comments))


@app.command()
def serve(ctx: typer.Context) -> None:
    """Start the MCP server (stdio transport)."""
    from hn_companion.mcp.server import run_mcp_server

    run_mcp_server(verbose=bool(ctx.obj and ctx.obj.get("verbose")))
