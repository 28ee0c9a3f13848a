"""
Runtime configuration for the GitHub API client.
"""

from dataclasses import dataclass
from enum import Enum

import httpx


DEFAULT_BASE_URL = "https://api.github.com/"
DEFAULT_USER_AGENT = "SoftwareCitationCore"
DEFAULT_TIMEOUT = 30.0


class VersionFallback(Enum):
    """Where the version comes from when the newest release has no name."""

    NEXT_RELEASE_TAG = "next-release-tag"  # tag of the second release
    OWN_TAG = "own-tag"  # tag of the newest release itself


@dataclass
class HarvesterConfig:
    """
    Settings shared by every request of a fetch.

    base_url must end with a slash: request paths are appended verbatim.
    A timeout of None waits on a request indefinitely.
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = DEFAULT_TIMEOUT
    version_fallback: VersionFallback = VersionFallback.NEXT_RELEASE_TAG

    def http_client(self) -> httpx.AsyncClient:
        """Create the HTTP client used for the duration of one fetch."""
        return httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
        )
