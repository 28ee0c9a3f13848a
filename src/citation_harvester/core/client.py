"""
GitHub REST API client.

A thin wrapper that sends one GET per call, decodes the JSON body and turns
transport failures and non-200 statuses into FetchError subclasses.
"""

import logging
from typing import Any

import httpx

from citation_harvester.core.config import HarvesterConfig
from citation_harvester.core.errors import HttpStatusError, ParseError, TransportError

logger = logging.getLogger(__name__)


class GitHubApiClient:
    """
    Sends requests to the GitHub API over a caller-owned httpx client.

    Usage:
        config = HarvesterConfig()
        async with config.http_client() as http:
            api = GitHubApiClient(http, config)
            repo = await api.send_request("repos/octocat/Hello-World")
    """

    def __init__(self, http: httpx.AsyncClient, config: HarvesterConfig | None = None):
        self.http = http
        self.config = config or HarvesterConfig()

    async def send_request(self, path: str) -> Any:
        """
        Fetch and decode one API resource.

        Args:
            path: Path relative to the configured base URL,
                e.g. 'repos/apple/swift'.

        Returns:
            The decoded JSON body (object or array depending on endpoint).

        Raises:
            TransportError: The request could not complete.
            HttpStatusError: The response status was not 200.
            ParseError: A 200 response carried malformed JSON.
        """
        url = self.config.base_url + path
        logger.debug(f"GET {url}")

        try:
            resp = await self.http.get(url, headers={"User-Agent": self.config.user_agent})
        except httpx.TransportError as e:
            logger.debug(f"Request failed ({type(e).__name__}): {url}")
            raise TransportError(url, e) from e

        # Body is decoded before the status check so error responses keep it.
        try:
            body = resp.json() if resp.content else None
        except ValueError as e:
            if resp.status_code == 200:
                raise ParseError(url, e) from e
            body = None

        if resp.status_code != 200:
            raise HttpStatusError(resp.status_code, str(resp.url), body)

        return body
