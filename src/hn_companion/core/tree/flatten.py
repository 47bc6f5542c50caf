"""Run the merge, path and score passes over one discussion."""

from collections.abc import Mapping

from hn_companion.core.tree.merge import merge
from hn_companion.core.tree.paths import assign_paths
from hn_companion.core.tree.scoring import score_comments
from hn_companion.models.comment import CommentId, DomRecord, FlatComment, RawApiNode


def flatten_discussion(
    api_tree: RawApiNode, dom_records: Mapping[CommentId, DomRecord]
) -> list[FlatComment]:
    """Merge both sources into a position-ordered, path-addressed, scored list.

    Top-level comments come back with ``parent_id=None``.
    """
    comments = merge(api_tree, dom_records)
    if not comments:
        return comments

    assign_paths(comments, api_tree.id)
    score_comments(comments)

    for comment in comments:
        if comment.parent_id == api_tree.id:
            comment.parent_id = None
    return comments
