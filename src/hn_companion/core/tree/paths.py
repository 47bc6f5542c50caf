"""Assign dotted hierarchical paths (1, 1.1, 2.3.1, ...) to merged comments."""

from collections import defaultdict
from collections.abc import Sequence

from hn_companion.errors import MissingParentError, PreconditionError
from hn_companion.models.comment import CommentId, FlatComment


def _sibling_ranks(comments: Sequence[FlatComment]) -> dict[CommentId, int]:
    """Map each comment id to its 1-based rank among comments sharing its parent."""
    groups: defaultdict[CommentId | None, list[FlatComment]] = defaultdict(list)
    for comment in comments:
        groups[comment.parent_id].append(comment)

    ranks: dict[CommentId, int] = {}
    for siblings in groups.values():
        for rank, sibling in enumerate(siblings, start=1):
            ranks[sibling.id] = rank
    return ranks


def assign_paths(comments: Sequence[FlatComment], root_id: CommentId) -> None:
    """Set ``path`` on every comment, in place.

    Top-level comments (``parent_id == root_id``) are numbered 1, 2, 3 in
    sequence order. A reply gets its parent's path plus its 1-based rank among
    its siblings, ranked by display position.

    Args:
        comments: Merged comments, sorted by display position.
        root_id: Id of the story the comments belong to.

    Raises:
        PreconditionError: Input is unsorted, has duplicate ids, or lists a
            child before its parent.
        MissingParentError: A parent id matches neither the root nor a comment.
    """
    ids: set[CommentId] = set()
    previous_position: int | None = None
    for comment in comments:
        if comment.id in ids:
            msg = f"Duplicate comment id {comment.id!r}"
            raise PreconditionError(msg)
        ids.add(comment.id)
        if previous_position is not None and comment.position < previous_position:
            msg = f"Comments are not sorted by position at comment {comment.id!r}"
            raise PreconditionError(msg)
        previous_position = comment.position

    for comment in comments:
        if comment.parent_id != root_id and comment.parent_id not in ids:
            raise MissingParentError(comment.id, comment.parent_id)

    ranks = _sibling_ranks(comments)
    paths: dict[CommentId, str] = {}
    top_level_counter = 0

    for comment in comments:
        parent_id = comment.parent_id
        if parent_id == root_id:
            top_level_counter += 1
            path = str(top_level_counter)
        else:
            if parent_id is None:
                raise MissingParentError(comment.id, parent_id)
            parent_path = paths.get(parent_id)
            if parent_path is None:
                msg = f"Comment {comment.id!r} appears before its parent {comment.parent_id!r}"
                raise PreconditionError(msg)
            path = f"{parent_path}.{ranks[comment.id]}"

        comment.path = path
        paths[comment.id] = path
