"""
Exporter Protocol — Base interface for all export backends.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from citation_harvester.models.source import SourceData


@runtime_checkable
class Exporter(Protocol):
    """
    Protocol that all exporters must implement.

    Exporters receive normalized SourceData records and persist them in
    their respective format (JSON files, SQLite, etc.).
    """

    async def export(self, data: SourceData) -> None:
        """Export a single record to the target format."""
        ...

    async def finalize(self) -> None:
        """Called after all records have been exported. Use for cleanup."""
        ...
