"""MCP server exposing Hacker News discussion summarization tools."""

import asyncio
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

import requests
from loguru import logger
from mcp.server.fastmcp import Context, FastMCP

from hn_companion.api import HackerNewsApi
from hn_companion.core.format.prompt import build_path_id_map, format_for_summary
from hn_companion.errors import CommentMergeError, PostNotFoundError
from hn_companion.fetcher import download_post_comments
from hn_companion.protocols import HackerNewsProtocol
from hn_companion.utils import get_post_id

# --- Core functions (testable without MCP context) ---


def hn_summarize(api: HackerNewsProtocol, *, value: str) -> dict[str, Any]:
    """Build summarization prompts for a Hacker News post.

    Args:
        api: Client used to fetch the comment tree and the page.
        value: Post ID or Hacker News URL.
    """
    if not value.strip():
        return {"error": "Missing input. Provide a Hacker News post ID or URL."}

    post_id = get_post_id(value)
    if not post_id:
        return {"error": "Invalid input. Provide a valid Hacker News post ID or URL."}

    try:
        result = download_post_comments(api, post_id)
    except (CommentMergeError, PostNotFoundError, requests.RequestException) as e:
        logger.warning("Failed to process post {}: {}", post_id, e)
        return {"error": f"Failed to process post {post_id}: {e}"}

    output = format_for_summary(result.post, result.comments)
    output["path_id_map"] = [list(pair) for pair in build_path_id_map(result.comments)]
    return output


# --- MCP Server Setup ---


@dataclass
class ServerContext:
    """Shared resources for the MCP server lifetime."""

    api: HackerNewsProtocol


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[ServerContext]:
    """Create the HTTP client on startup."""
    from_cache = os.environ.get("HN_COMPANION_CACHE", "") == "1"
    yield ServerContext(api=HackerNewsApi(from_cache=from_cache))


mcp_server = FastMCP(
    "hn-companion",
    instructions="""\
Summarize Hacker News discussions.

Call hn_summarize_tool with a post ID or URL. It returns a system prompt and a
user prompt. Each comment in the user prompt is one line:

    [path] (score: N) <replies: N> {downvotes: N} author: text

Paths like [1.2] address comments in the thread; path_id_map maps them to
comment ids, so https://news.ycombinator.com/item?id=<id> links to a comment.
""",
    lifespan=server_lifespan,
)


def _ctx(mcp_ctx: Context) -> ServerContext:
    return mcp_ctx.request_context.lifespan_context  # type: ignore[return-value]


# --- MCP Tool Wrappers ---


@mcp_server.tool()
async def hn_summarize_tool(ctx: Context, input: str) -> dict[str, Any]:
    """Fetch a Hacker News post and build prompts to summarize its discussion.

    Args:
        input: Post ID (e.g. 43448075) or URL
            (e.g. https://news.ycombinator.com/item?id=43448075).
    """
    return await asyncio.to_thread(hn_summarize, _ctx(ctx).api, value=input)


def run_mcp_server(*, verbose: bool = False) -> None:
    """Run the MCP server with stdio transport."""
    from hn_companion.logging_config import configure_logging

    configure_logging(verbose=verbose, server=True)
    mcp_server.run(transport="stdio")
