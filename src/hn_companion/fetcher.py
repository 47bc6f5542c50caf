"""Download a post and merge its API comment tree with the rendered page."""

from loguru import logger

from hn_companion.core.format.prompt import (
    build_path_id_map,
    generate_system_prompt,
    generate_user_prompt,
)
from hn_companion.core.importer.api_tree import parse_api_tree, parse_post
from hn_companion.core.importer.dom import extract_dom_records
from hn_companion.core.tree.flatten import flatten_discussion
from hn_companion.models.comment import DiscussionResult
from hn_companion.protocols import HackerNewsProtocol, WriterProtocol


def download_post_comments(api: HackerNewsProtocol, post_id: str) -> DiscussionResult:
    """Fetch both comment sources for a post and reconcile them.

    Args:
        api: Client for the items API and the discussion page.
        post_id: Numeric Hacker News post id.

    Returns:
        The post with its visible comments, ordered as on the page.
    """
    logger.info("Downloading comments for post {}", post_id)
    item = api.fetch_item(post_id)
    html = api.fetch_page(post_id)

    post = parse_post(item)
    comments = flatten_discussion(parse_api_tree(item), extract_dom_records(html))
    logger.info("Post {!r}: {} visible comments", post.title, len(comments))
    return DiscussionResult(post=post, comments=tuple(comments))


def save_outputs(writer: WriterProtocol, result: DiscussionResult) -> list[str]:
    """Write the path map and both prompts for a downloaded post.

    Returns:
        Relative names of the files written.
    """
    post_id = result.post.id
    names = [
        f"{post_id}-comment-path-id-map.json",
        f"{post_id}-system-prompt.txt",
        f"{post_id}-user-prompt.txt",
    ]
    writer.make_data_file(
        names[0], data=[list(pair) for pair in build_path_id_map(result.comments)]
    )
    writer.make_data_file(names[1], contents=generate_system_prompt())
    writer.make_data_file(names[2], contents=generate_user_prompt(result.post, result.comments))
    return names
