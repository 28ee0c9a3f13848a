"""
GitHub Response Parsers.

Pure helpers that recognise GitHub repository URLs and normalize raw API
payloads (users, releases, timestamps) into citation-harvester values.
"""

import logging
import re
from datetime import datetime

from citation_harvester.core.config import VersionFallback
from citation_harvester.models.source import Author, RepoIdentifier

logger = logging.getLogger(__name__)

# Owners may contain hyphens, repository names hyphens and dots
URL_PATTERN = re.compile(r"^github\.com/([\w-]+)/([\w.-]+?)(?:\.git)?(?:[/?#]|$)")

# Contributors beyond this rank are not resolved into authors
MAX_AUTHORS = 3


def parse_repo_identifier(url: str) -> RepoIdentifier | None:
    """
    Extract the owner/repo pair from a GitHub URL.

    'github.com/apple/swift/tree/main' -> RepoIdentifier('apple', 'swift')

    Args:
        url: Repository URL without scheme.

    Returns:
        The identifier, or None if the URL is not a GitHub repository URL.
    """
    if not isinstance(url, str):
        return None
    match = URL_PATTERN.match(url)
    if match is None:
        return None
    return RepoIdentifier(match.group(1), match.group(2))


def can_handle(url: str) -> bool:
    """Check whether the URL points at a GitHub repository."""
    return parse_repo_identifier(url) is not None


def contributor_logins(contributors: list[dict], limit: int = MAX_AUTHORS) -> list[str]:
    """Return the logins of the top-ranked contributors."""
    logins = [c["login"] for c in contributors if c.get("login")]
    return logins[:limit]


def parse_author(user: dict) -> Author:
    """
    Map a GitHub user object to an Author.

    The display name is split on whitespace: one token is a first name, two
    are first and last, three or more are first, middle and last with any
    remaining tokens dropped.
    """
    name = user.get("name")
    pieces = name.split() if isinstance(name, str) else []

    return Author(
        first_name=pieces[0] if len(pieces) > 0 else None,
        middle_name=pieces[1] if len(pieces) > 2 else None,
        last_name=pieces[2] if len(pieces) > 2 else (pieces[1] if len(pieces) == 2 else None),
        email=user.get("email"),
    )


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a GitHub ISO-8601 timestamp such as '2011-01-26T19:14:43Z'."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        logger.warning(f"Unparseable timestamp from GitHub: {value!r}")
        return None


def select_version(
    releases: list[dict], fallback: VersionFallback = VersionFallback.NEXT_RELEASE_TAG
) -> str | None:
    """
    Pick the project version from a release list (newest first).

    The newest release's name wins. When it has none, NEXT_RELEASE_TAG takes
    the tag of the *second* release (None if there is no second release) and
    OWN_TAG takes the newest release's own tag.
    """
    if not releases:
        return None

    newest = releases[0]
    if newest.get("name"):
        return newest["name"]

    if fallback is VersionFallback.OWN_TAG:
        return newest.get("tag_name")

    if len(releases) < 2:
        return None
    return releases[1].get("tag_name")
