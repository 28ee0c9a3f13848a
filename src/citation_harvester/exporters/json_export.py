"""
JSON Exporter — Exports each record as a standalone JSON file.
"""

import json
import logging
import re
from pathlib import Path

import aiofiles

from citation_harvester.models.source import SourceData

logger = logging.getLogger(__name__)


def _safe_filename(name: str | None) -> str:
    """Reduce a project name to a filesystem-safe stem."""
    stem = re.sub(r"[^\w.-]+", "_", name or "").strip("._")
    return stem or "unnamed"


class JSONExporter:
    """
    Exports SourceData records as individual JSON files.

    Output structure:
        output_dir/
        ├── Hello-World.json
        ├── click.json
        └── click-2.json      (second record named "click")
    """

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.count = 0
        self._written: set[str] = set()

    def _filename_for(self, data: SourceData) -> str:
        """Pick a filename, numbering repeats of the same stem within one export."""
        stem = _safe_filename(data.name)
        filename, n = f"{stem}.json", 1
        while filename in self._written:
            n += 1
            filename = f"{stem}-{n}.json"
        self._written.add(filename)
        return filename

    async def export(self, data: SourceData) -> None:
        """Export a single record as a JSON file."""
        filepath = self.output_dir / self._filename_for(data)

        async with aiofiles.open(filepath, "w") as f:
            await f.write(json.dumps(data.to_dict(), indent=2))

        self.count += 1
        logger.debug(f"[JSON] Exported {data.name} to {filepath}")

    async def finalize(self) -> None:
        """Log export summary."""
        logger.info(f"[JSON] Export complete: {self.count} sources exported to {self.output_dir}")
