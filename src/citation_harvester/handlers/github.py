"""
GitHub Handler — Fan-out/fan-in metadata fetch for GitHub repositories.

For one repository URL the handler runs three branches concurrently:
- repository info (repos/<owner>/<repo>)
- contributors, then the top contributors' user profiles
- releases
and merges them into a single SourceData once every branch has finished.
"""

import asyncio
import logging

from citation_harvester.core.client import GitHubApiClient
from citation_harvester.core.config import HarvesterConfig
from citation_harvester.core.errors import FetchError, UnsupportedUrlError
from citation_harvester.models.source import Author, FetchResult, RepoIdentifier, SourceData
from citation_harvester.parsers import github as parsers

logger = logging.getLogger(__name__)


def _raise_first_failure(results: list) -> list:
    """
    Re-raise a failure collected by gather(return_exceptions=True).

    Anything that is not a FetchError (ParseError, programming errors) is
    raised ahead of FetchErrors so it cannot be reported as ordinary data.
    """
    failures = [r for r in results if isinstance(r, BaseException)]
    for failure in failures:
        if not isinstance(failure, FetchError):
            raise failure
    if failures:
        raise failures[0]
    return results


class GitHubHandler:
    """Fetches and normalizes project metadata from the GitHub REST API."""

    platform_name = "github"

    def __init__(self, config: HarvesterConfig | None = None):
        self.config = config or HarvesterConfig()

    def can_handle(self, url: str) -> bool:
        return parsers.can_handle(url)

    # ──────────────────────────────────────────────
    # Authors
    # ──────────────────────────────────────────────

    async def resolve_authors(self, api: GitHubApiClient, logins: list[str]) -> list[Author]:
        """
        Look up each login's profile concurrently and map it to an Author.

        All lookups run to completion. If any failed the whole resolution
        fails; which error is raised when several fail is unspecified.
        """
        if not logins:
            return []

        results = await asyncio.gather(
            *(api.send_request(f"users/{login}") for login in logins),
            return_exceptions=True,
        )
        users = _raise_first_failure(results)
        return [parsers.parse_author(user) for user in users]

    async def _fetch_authors(self, api: GitHubApiClient, repo_id: RepoIdentifier) -> list[Author]:
        """Fetch the contributor ranking, then resolve the top entries."""
        contributors = await api.send_request(f"repos/{repo_id.path}/contributors")
        logins = parsers.contributor_logins(contributors)
        logger.debug(f"[GitHub] {repo_id.path}: resolving authors {logins}")
        return await self.resolve_authors(api, logins)

    # ──────────────────────────────────────────────
    # Orchestration
    # ──────────────────────────────────────────────

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch normalized metadata for a GitHub repository URL.

        Returns:
            FetchResult with the SourceData on success, or None and a
            single-element error list if the URL is unsupported or any
            request failed.

        Raises:
            ParseError: A successful response carried malformed JSON.
        """
        repo_id = parsers.parse_repo_identifier(url)
        if repo_id is None:
            return FetchResult(None, [UnsupportedUrlError(url)])

        async with self.config.http_client() as http:
            api = GitHubApiClient(http, self.config)
            results = await asyncio.gather(
                api.send_request(f"repos/{repo_id.path}"),
                self._fetch_authors(api, repo_id),
                api.send_request(f"repos/{repo_id.path}/releases"),
                return_exceptions=True,
            )

        try:
            info, authors, releases = _raise_first_failure(results)
        except FetchError as e:
            logger.debug(f"[GitHub] {repo_id.path}: {e}")
            return FetchResult(None, [e])

        logger.debug(f"[GitHub] Fetched {repo_id.path}")
        return FetchResult(self._merge(info, authors, releases), [])

    def _merge(self, info: dict, authors: list[Author], releases: list[dict]) -> SourceData:
        """Combine the three branch results into one record."""
        return SourceData(
            name=info.get("name"),
            url=info.get("homepage") or info.get("html_url"),
            release_date=parsers.parse_timestamp(info.get("updated_at")),
            description=info.get("description"),
            authors=authors,
            version=parsers.select_version(releases, self.config.version_fallback),
        )
