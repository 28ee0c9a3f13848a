"""Hosting-platform handlers."""

from citation_harvester.handlers.base import SourceHandler
from citation_harvester.handlers.github import GitHubHandler

__all__ = ["SourceHandler", "GitHubHandler"]
