"""
SourceHandler Protocol — Base interface for hosting-platform handlers.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from citation_harvester.models.source import FetchResult


@runtime_checkable
class SourceHandler(Protocol):
    """
    Protocol that all platform handlers must implement.

    Handlers recognise the URLs of one hosting platform and turn them into
    normalized SourceData.
    """

    platform_name: str

    def can_handle(self, url: str) -> bool:
        """Return True if this handler recognises the URL."""
        ...

    async def fetch(self, url: str) -> FetchResult:
        """Fetch metadata for the URL. Failures are reported in the result."""
        ...
