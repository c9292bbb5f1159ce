"""
Homebase — SQLite Document Database.

Stores JSON documents addressed by slash-separated paths in a single table,
so the same collection/document layout used by hosted document stores
(``families/{familyId}/members/{memberId}``) survives restarts locally.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import uuid
from contextlib import closing
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def new_document_id() -> str:
    """Generate a 20-character document id for auto-keyed collections."""
    return uuid.uuid4().hex[:20]


class DocumentDB:
    """SQLite-backed storage for path-addressed JSON documents."""

    def __init__(self, db_path: str | None = None) -> None:
        if db_path is None:
            from homebase.config import settings
            db_path = settings.DATABASE_PATH

        self._db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self) -> None:
        """Create the documents table if it doesn't exist."""
        with closing(self._connect()) as conn, conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    path        TEXT PRIMARY KEY,
                    collection  TEXT NOT NULL,
                    doc_id      TEXT NOT NULL,
                    payload     TEXT NOT NULL,
                    updated_at  TEXT NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_documents_collection "
                "ON documents (collection)"
            )
        logger.debug("Documents table initialized at %s", self._db_path)

    @staticmethod
    def _split(path: str) -> tuple[str, str]:
        collection, _, doc_id = path.strip("/").rpartition("/")
        return collection, doc_id

    def get(self, path: str) -> dict[str, Any] | None:
        """Fetch a single document by path."""
        with closing(self._connect()) as conn, conn:
            row = conn.execute(
                "SELECT payload FROM documents WHERE path = ?", (path,)
            ).fetchone()
        if row is None:
            return None
        return json.loads(row["payload"])

    def set(self, path: str, payload: dict[str, Any]) -> None:
        """Upsert a document, replacing any previous payload entirely."""
        collection, doc_id = self._split(path)
        with closing(self._connect()) as conn, conn:
            conn.execute(
                """
                INSERT INTO documents (path, collection, doc_id, payload, updated_at)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(path) DO UPDATE SET
                    payload = excluded.payload,
                    updated_at = excluded.updated_at
                """,
                (path, collection, doc_id, json.dumps(payload),
                 datetime.now().isoformat()),
            )
        logger.debug("Document set: %s", path)

    def create(self, path: str, payload: dict[str, Any]) -> bool:
        """Insert a document only if the path is free. Returns False if taken."""
        collection, doc_id = self._split(path)
        with closing(self._connect()) as conn, conn:
            cursor = conn.execute(
                """
                INSERT OR IGNORE INTO documents
                    (path, collection, doc_id, payload, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (path, collection, doc_id, json.dumps(payload),
                 datetime.now().isoformat()),
            )
        created = cursor.rowcount > 0
        if created:
            logger.debug("Document created: %s", path)
        return created

    def add(self, collection: str, payload: dict[str, Any]) -> str:
        """Insert a document under a generated id. Returns the id."""
        doc_id = new_document_id()
        path = f"{collection.strip('/')}/{doc_id}"
        with closing(self._connect()) as conn, conn:
            conn.execute(
                """
                INSERT INTO documents (path, collection, doc_id, payload, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (path, collection.strip("/"), doc_id, json.dumps(payload),
                 datetime.now().isoformat()),
            )
        logger.debug("Document added: %s", path)
        return doc_id

    def list_collection(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        """Return (doc_id, payload) pairs of one collection, in insertion order."""
        with closing(self._connect()) as conn, conn:
            rows = conn.execute(
                "SELECT doc_id, payload FROM documents WHERE collection = ? "
                "ORDER BY rowid",
                (collection.strip("/"),),
            ).fetchall()
        return [(r["doc_id"], json.loads(r["payload"])) for r in rows]
