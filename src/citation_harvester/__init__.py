"""
Citation Harvester - Software project metadata collector.

Fetches metadata about open-source projects from their hosting platform
(currently GitHub) and normalizes it into platform-independent records
suitable for software citation.
"""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy import for heavy dependencies."""
    if name == "SourceFetcher":
        from citation_harvester.core.fetcher import SourceFetcher

        return SourceFetcher
    if name == "SourceData":
        from citation_harvester.models.source import SourceData

        return SourceData
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["SourceFetcher", "SourceData", "__version__"]
