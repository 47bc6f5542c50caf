"""Domain models for Hacker News discussions."""

from dataclasses import dataclass
from enum import Enum


class NodeKind(str, Enum):
    """Kind of an item in the API comment tree."""

    STORY = "story"
    COMMENT = "comment"


CommentId = int | str


@dataclass(frozen=True)
class RawApiNode:
    """A node of the comment tree as returned by the items API."""

    id: CommentId
    kind: NodeKind
    author: str
    children: tuple["RawApiNode", ...] = ()


@dataclass(frozen=True)
class DomRecord:
    """A visible comment as rendered on the discussion page."""

    position: int
    text: str
    downvotes: int = 0


@dataclass
class FlatComment:
    """A surviving comment, annotated in place with its path and score."""

    id: CommentId
    author: str
    parent_id: CommentId | None
    position: int
    text: str
    downvotes: int
    replies: int
    path: str = ""
    score: int = 0


@dataclass(frozen=True)
class Post:
    """The story a discussion belongs to."""

    id: str
    title: str
    author: str = ""
    url: str | None = None
    points: int | None = None


@dataclass(frozen=True)
class DiscussionResult:
    """A post with its merged, path-addressed comments."""

    post: Post
    comments: tuple[FlatComment, ...]
