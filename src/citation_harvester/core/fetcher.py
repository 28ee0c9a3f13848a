"""
Source Fetcher — Entry point that routes URLs to platform handlers.
"""

import logging

from citation_harvester.core.config import HarvesterConfig
from citation_harvester.core.errors import UnsupportedUrlError
from citation_harvester.handlers.base import SourceHandler
from citation_harvester.handlers.github import GitHubHandler
from citation_harvester.models.source import FetchResult

logger = logging.getLogger(__name__)


class SourceFetcher:
    """
    Fetches normalized metadata for any supported source URL.

    Handlers are tried in registration order; the first one whose
    can_handle() accepts the URL performs the fetch.
    """

    def __init__(
        self,
        handlers: list[SourceHandler] | None = None,
        config: HarvesterConfig | None = None,
    ):
        self.config = config or HarvesterConfig()
        self.handlers = handlers if handlers is not None else [GitHubHandler(self.config)]

    def find_handler(self, url: str) -> SourceHandler | None:
        """Return the first handler that accepts the URL, if any."""
        return next((h for h in self.handlers if h.can_handle(url)), None)

    def can_handle(self, url: str) -> bool:
        return self.find_handler(url) is not None

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch metadata for a source URL.

        Args:
            url: Project URL, e.g. 'github.com/octocat/Hello-World'.

        Returns:
            FetchResult holding either the SourceData or the errors.
        """
        handler = self.find_handler(url)
        if handler is None:
            logger.info(f"No handler for {url!r}")
            return FetchResult(None, [UnsupportedUrlError(url)])

        logger.debug(f"Fetching {url} with {handler.platform_name} handler")
        return await handler.fetch(url)
