"""
SQLite Exporter — Exports records to a SQLite database.
"""

import json
import logging
import sqlite3
from pathlib import Path

from citation_harvester.models.source import SourceData

logger = logging.getLogger(__name__)


CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS sources (
    url TEXT PRIMARY KEY,
    name TEXT,
    version TEXT,
    release_date TEXT,
    description TEXT,
    authors TEXT
)
"""

INSERT_SQL = """
INSERT OR REPLACE INTO sources
(url, name, version, release_date, description, authors)
VALUES (?, ?, ?, ?, ?, ?)
"""


class SQLiteExporter:
    """
    Exports SourceData records to a SQLite database.

    Creates a 'sources' table keyed by project URL. Authors are stored as
    a JSON string.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(db_path))
        self.conn.execute(CREATE_TABLE_SQL)
        self.conn.commit()
        self.count = 0

    async def export(self, data: SourceData) -> None:
        """Export a single record to the SQLite database."""
        row = data.to_dict()
        self.conn.execute(
            INSERT_SQL,
            (
                row["url"],
                row["name"],
                row["version"],
                row["release_date"],
                row["description"],
                json.dumps(row["authors"]),
            ),
        )
        self.count += 1

    async def finalize(self) -> None:
        """Commit changes and close the connection."""
        self.conn.commit()
        self.conn.close()
        logger.info(f"[SQLite] Export complete: {self.count} sources exported to {self.db_path}")
