"""
Source Model — Platform-independent software metadata.

Defines the records produced when a hosting platform's project data is
normalized: the project itself (SourceData) and the people behind it (Author).
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime


@dataclass
class Author:
    """A person credited on a project, with a heuristically split name."""

    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    email: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SourceData:
    """
    Normalized metadata for one software project.

    Built fresh for every fetch and owned by the caller once returned.
    """

    name: str | None = None
    url: str | None = None
    release_date: datetime | None = None
    description: str | None = None
    authors: list[Author] = field(default_factory=list)
    version: str | None = None

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        data = asdict(self)
        data["release_date"] = self.release_date.isoformat() if self.release_date else None
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SourceData":
        """Deserialize from dictionary."""
        release_date = data.get("release_date")
        return cls(
            name=data.get("name"),
            url=data.get("url"),
            release_date=datetime.fromisoformat(release_date) if release_date else None,
            description=data.get("description"),
            authors=[Author(**a) for a in data.get("authors", [])],
            version=data.get("version"),
        )


@dataclass(frozen=True)
class RepoIdentifier:
    """Owner/name pair parsed from a repository URL."""

    owner: str
    repo: str

    @property
    def path(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class FetchResult:
    """Outcome of one fetch: a populated record, or None plus the errors."""

    data: SourceData | None
    errors: list[Exception] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.data is not None and not self.errors
