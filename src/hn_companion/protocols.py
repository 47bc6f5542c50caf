"""Protocols for dependency injection in the fetch pipeline."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HackerNewsProtocol(Protocol):
    """Protocol for Hacker News clients."""

    def fetch_item(self, post_id: str) -> dict[str, Any]:
        """Return the items API JSON for a post, with its comment tree."""
        ...

    def fetch_page(self, post_id: str) -> str:
        """Return the HTML of the post's discussion page."""
        ...


@runtime_checkable
class WriterProtocol(Protocol):
    """Protocol for writers used to save prompts and path maps."""

    def make_data_file(
        self,
        fname_rel: str,
        *,
        contents: str | None = None,
        data: Any = None,
    ) -> None:
        """Write a file to the output directory."""
        ...
