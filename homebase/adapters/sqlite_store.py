"""SQLite document store adapter — implements DocumentStore.

Uses the sync DocumentDB wrapped with asyncio.to_thread for async
compatibility, and translates sqlite3 errors into port errors.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from typing import Any

from homebase.data.db import DocumentDB
from homebase.ports.store_port import (
    DocumentExistsError,
    StoreError,
    WriteError,
    split_path,
)

logger = logging.getLogger(__name__)


class SQLiteDocumentStore:
    """SQLite implementation of DocumentStore."""

    def __init__(self, db_path: str | None = None) -> None:
        self._db = DocumentDB(db_path=db_path)

    async def get_document(self, path: str) -> dict[str, Any] | None:
        split_path(path)
        try:
            return await asyncio.to_thread(self._db.get, path)
        except sqlite3.Error as exc:
            raise StoreError(f"Failed to read {path}: {exc}") from exc

    async def set_document(self, path: str, payload: dict[str, Any]) -> None:
        split_path(path)
        try:
            await asyncio.to_thread(self._db.set, path, payload)
        except (sqlite3.Error, TypeError, ValueError) as exc:
            raise WriteError(f"Failed to write {path}: {exc}") from exc

    async def create_document(self, path: str, payload: dict[str, Any]) -> None:
        split_path(path)
        try:
            created = await asyncio.to_thread(self._db.create, path, payload)
        except (sqlite3.Error, TypeError, ValueError) as exc:
            raise WriteError(f"Failed to create {path}: {exc}") from exc
        if not created:
            raise DocumentExistsError(path)

    async def add_document(self, collection: str, payload: dict[str, Any]) -> str:
        try:
            return await asyncio.to_thread(self._db.add, collection, payload)
        except (sqlite3.Error, TypeError, ValueError) as exc:
            raise WriteError(f"Failed to add to {collection}: {exc}") from exc

    async def list_documents(
        self, collection: str
    ) -> list[tuple[str, dict[str, Any]]]:
        try:
            return await asyncio.to_thread(self._db.list_collection, collection)
        except sqlite3.Error as exc:
            raise StoreError(f"Failed to list {collection}: {exc}") from exc
