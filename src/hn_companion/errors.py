"""Exceptions raised while reconciling comment sources."""


class CommentMergeError(ValueError):
    """Base class for errors raised by the comment merge pipeline."""


class PreconditionError(CommentMergeError):
    """Input is malformed or a function was called outside its contract."""


class MissingParentError(CommentMergeError):
    """A surviving comment points at a parent that did not survive the merge."""

    def __init__(self, comment_id: object, parent_id: object) -> None:
        self.comment_id = comment_id
        self.parent_id = parent_id
        super().__init__(f"Parent comment {parent_id!r} not found for comment {comment_id!r}")


class PostNotFoundError(RuntimeError):
    """Hacker News reports that the requested item does not exist."""
