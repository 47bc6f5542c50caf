"""Position and downvote based relevance score."""

import math
from collections.abc import Sequence

from hn_companion.errors import PreconditionError
from hn_companion.models.comment import FlatComment

MAX_SCORE = 1000
MAX_DOWNVOTES = 10


def score(comment: FlatComment, total_count: int) -> int:
    """Score a comment from its display position and downvote level.

    The score falls linearly from 1000 at position 0, and each downvote level
    removes a tenth of that position score. Never negative.
    """
    if total_count <= 0:
        msg = f"Cannot score comment {comment.id!r} against total_count={total_count}"
        raise PreconditionError(msg)

    default_score = math.floor(MAX_SCORE - comment.position * MAX_SCORE / total_count)
    penalty_per_downvote = default_score / MAX_DOWNVOTES
    penalty = penalty_per_downvote * comment.downvotes
    return math.floor(max(default_score - penalty, 0))


def score_comments(comments: Sequence[FlatComment]) -> None:
    """Set ``score`` on every comment, in place. No-op for an empty list."""
    total = len(comments)
    for comment in comments:
        comment.score = score(comment, total)
