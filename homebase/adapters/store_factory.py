"""Document store factory — creates the right adapter based on config."""

from __future__ import annotations

from homebase.config import settings
from homebase.ports.store_port import DocumentStore


def create_document_store(db_path: str | None = None) -> DocumentStore:
    """Return the store adapter matching the STORE_BACKEND setting.

    Args:
        db_path: Overrides DATABASE_PATH for the sqlite backend.
    """
    backend = settings.STORE_BACKEND.lower()

    if backend == "memory":
        from homebase.adapters.memory_store import InMemoryDocumentStore

        return InMemoryDocumentStore()

    if backend == "sqlite":
        from homebase.adapters.sqlite_store import SQLiteDocumentStore

        return SQLiteDocumentStore(db_path=db_path)

    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")
