"""Merge Hacker News comment trees with the rendered page for summarization."""

from hn_companion.api import HackerNewsApi
from hn_companion.core.tree.flatten import flatten_discussion
from hn_companion.fetcher import download_post_comments, save_outputs
from hn_companion.protocols import HackerNewsProtocol, WriterProtocol
from hn_companion.writer import OutputWriter

__all__ = [
    "HackerNewsApi",
    "HackerNewsProtocol",
    "OutputWriter",
    "WriterProtocol",
    "download_post_comments",
    "flatten_discussion",
    "save_outputs",
]
