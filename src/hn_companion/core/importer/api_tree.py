"""Parse Algolia items API responses into domain models."""

from typing import Any

from hn_companion.errors import PreconditionError
from hn_companion.models.comment import CommentId, NodeKind, Post, RawApiNode


def _normalize_id(raw_id: Any) -> CommentId:
    """Item ids are integers on HN; accept digit strings too."""
    if isinstance(raw_id, bool):
        msg = f"Invalid item id: {raw_id!r}"
        raise PreconditionError(msg)
    if isinstance(raw_id, int):
        return raw_id
    if isinstance(raw_id, str) and raw_id.strip():
        value = raw_id.strip()
        return int(value) if value.isdigit() else value
    msg = f"Invalid item id: {raw_id!r}"
    raise PreconditionError(msg)


def _item_id(data: Any, *, parent: CommentId | None) -> CommentId:
    if not isinstance(data, dict):
        msg = f"Expected an item object under {parent!r}, got {type(data).__name__}"
        raise PreconditionError(msg)
    if data.get("id") is None:
        msg = f"Item without id under parent {parent!r}"
        raise PreconditionError(msg)
    return _normalize_id(data["id"])


def parse_api_tree(data: dict[str, Any]) -> RawApiNode:
    """Build the comment tree from an items API response.

    Args:
        data: Decoded JSON of ``/api/v1/items/{id}``.

    Returns:
        The root node, with ``kind`` STORY when the item is a story.
    """
    # Pre-order pass validates items; nodes are then built bottom-up from the
    # reversed order, so deep threads never touch the recursion limit.
    visited: list[tuple[dict[str, Any], CommentId, int]] = []
    todo: list[tuple[Any, CommentId | None]] = [(data, None)]
    while todo:
        item, parent = todo.pop()
        node_id = _item_id(item, parent=parent)
        children = list(item.get("children") or [])
        visited.append((item, node_id, len(children)))
        todo.extend((child, node_id) for child in reversed(children))

    built: list[RawApiNode] = []
    for item, node_id, child_count in reversed(visited):
        # The first child sits on top of the stack.
        child_nodes = tuple(built.pop() for _ in range(child_count))
        kind = NodeKind.STORY if item.get("type") == NodeKind.STORY.value else NodeKind.COMMENT
        built.append(
            RawApiNode(
                id=node_id,
                kind=kind,
                # Deleted comments come back with a null author.
                author=item.get("author") or "",
                children=child_nodes,
            )
        )
    return built[0]


def parse_post(data: dict[str, Any]) -> Post:
    """Extract the story metadata from an items API response."""
    if data.get("id") is None:
        msg = "Post data has no id"
        raise PreconditionError(msg)
    return Post(
        id=str(data["id"]),
        title=data.get("title") or "",
        author=data.get("author") or "",
        url=data.get("url"),
        points=data.get("points"),
    )
