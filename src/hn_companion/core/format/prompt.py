"""Render merged comments as summarization prompts."""

from collections.abc import Sequence
from typing import Any

from hn_companion.models.comment import CommentId, FlatComment, Post

SYSTEM_PROMPT = """\
You are an assistant that summarizes Hacker News discussions.

The user message contains the post title followed by its comments, one per line,
in the order they are shown on the page. Each line has this format:

    [path] (score: N) <replies: N> {downvotes: N} author: text

- path: hierarchical address of the comment. "1" and "2" are top-level
  comments, "1.2" is the second reply to comment "1", "1.2.1" replies to "1.2".
- score: relevance from 0 to 1000, based on how prominently the comment is
  shown. Higher means the community ranked it higher.
- replies: number of direct replies the comment received.
- downvotes: 0 to 9, how strongly the comment was downvoted.

Write the summary in markdown with these sections:

# Overview
Two or three sentences on what the discussion is about.

# Main themes and key insights
The main themes, each with the strongest supporting comments. Weigh comments
by score and replies; treat heavily downvoted comments with caution.

# Significant viewpoints
Notable agreements, disagreements and alternative perspectives.

# Notable side discussions
Interesting tangents worth a look.

Quote comments sparingly and always cite them by path, e.g. [1.2], so the
reader can find them in the thread.
"""


def format_comment(comment: FlatComment) -> str:
    """Render a comment as a single prompt line."""
    return (
        f"[{comment.path}] (score: {comment.score}) <replies: {comment.replies}> "
        f"{{downvotes: {comment.downvotes}}} {comment.author}: {comment.text}"
    )


def format_comments(comments: Sequence[FlatComment]) -> str:
    """Render all comments, one line each, in their given order."""
    return "\n".join(format_comment(c) for c in comments)


def build_path_id_map(comments: Sequence[FlatComment]) -> list[tuple[str, CommentId]]:
    """Pairs of (path, comment id), used later to resolve path references to links."""
    return [(c.path, c.id) for c in comments]


def generate_system_prompt() -> str:
    return SYSTEM_PROMPT


def generate_user_prompt(post: Post, comments: Sequence[FlatComment]) -> str:
    """Embed the post title and the formatted comments into the user message."""
    return (
        f"Provide a concise and insightful summary of the following Hacker News discussion.\n\n"
        f"Title: {post.title}\n\n"
        f"Comments:\n{format_comments(comments)}\n"
    )


def format_for_summary(post: Post, comments: Sequence[FlatComment]) -> dict[str, Any]:
    """Bundle the prompts and post metadata for an LLM client."""
    return {
        "post_id": post.id,
        "post_title": post.title,
        "comment_count": len(comments),
        "system_prompt": generate_system_prompt(),
        "user_prompt": generate_user_prompt(post, comments),
    }
