"""Merge the API comment tree with the comments visible on the page."""

from collections.abc import Mapping

from loguru import logger

from hn_companion.core.tree.scoring import MAX_DOWNVOTES
from hn_companion.errors import PreconditionError
from hn_companion.models.comment import CommentId, DomRecord, FlatComment, NodeKind, RawApiNode


def merge(api_tree: RawApiNode, dom_records: Mapping[CommentId, DomRecord]) -> list[FlatComment]:
    """Flatten the API tree into the comments that are visible on the page.

    The tree is walked depth-first in its native child order. A comment missing
    from ``dom_records`` (flagged, collapsed or deleted) is dropped together with
    its whole subtree. Top-level comments get the story id as ``parent_id``.

    Args:
        api_tree: Story node at the root of the discussion.
        dom_records: Visible comments keyed by comment id.

    Returns:
        Surviving comments, stable-sorted by display position.
    """
    if api_tree.kind is not NodeKind.STORY:
        msg = f"Comment tree must be rooted at a story, got {api_tree.kind.value!r}"
        raise PreconditionError(msg)

    flat: list[FlatComment] = []
    api_count = 0
    skipped = 0

    # Explicit stack keeps pre-order without recursion limits on deep threads.
    todo: list[tuple[RawApiNode, CommentId]] = [
        (child, api_tree.id) for child in reversed(api_tree.children)
    ]
    while todo:
        node, parent_id = todo.pop()
        api_count += 1

        if node.kind is NodeKind.STORY:
            msg = f"Story node {node.id!r} found below the root under {parent_id!r}"
            raise PreconditionError(msg)
        if node.id is None or node.id == "":
            msg = f"Comment without id under parent {parent_id!r}"
            raise PreconditionError(msg)

        record = dom_records.get(node.id)
        if record is None:
            skipped += 1
            continue
        if record.position < 0:
            msg = f"Comment {node.id!r} has negative display position {record.position}"
            raise PreconditionError(msg)
        if not 0 <= record.downvotes < MAX_DOWNVOTES:
            msg = (
                f"Comment {node.id!r} has downvote level {record.downvotes}, "
                f"expected 0..{MAX_DOWNVOTES - 1}"
            )
            raise PreconditionError(msg)

        flat.append(
            FlatComment(
                id=node.id,
                author=node.author,
                parent_id=parent_id,
                position=record.position,
                text=record.text,
                downvotes=record.downvotes,
                replies=len(node.children),
            )
        )
        todo.extend((child, node.id) for child in reversed(node.children))

    logger.debug(
        "Comments from API: total {}, skipped {}, remaining {}", api_count, skipped, len(flat)
    )

    # list.sort is stable, so equal positions keep traversal order.
    flat.sort(key=lambda c: c.position)
    return flat
