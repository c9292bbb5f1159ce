"""Shared test fixtures and configuration.

Sets fake environment variables before any homebase imports and provides
common fixtures like temp-file and in-memory document stores.
"""

import os

# Patch env vars BEFORE any homebase imports
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("FAMILY_ID", "defaultFamily123")
os.environ.setdefault("FAMILY_NAME", "Sample Family")
os.environ.setdefault("CONNECTIVITY_PROBE_URL", "https://probe.invalid/favicon.ico")

from datetime import datetime

import pytest


@pytest.fixture
def tmp_db_path(tmp_path):
    """Return a temporary SQLite DB path."""
    return str(tmp_path / "test_homebase.db")


@pytest.fixture
def document_db(tmp_db_path):
    """Return a DocumentDB instance backed by a temp file."""
    from homebase.data.db import DocumentDB
    return DocumentDB(db_path=tmp_db_path)


@pytest.fixture
def sqlite_store(tmp_db_path):
    """Return a SQLiteDocumentStore backed by a temp file."""
    from homebase.adapters.sqlite_store import SQLiteDocumentStore
    return SQLiteDocumentStore(db_path=tmp_db_path)


@pytest.fixture
def memory_store():
    """Return an empty InMemoryDocumentStore."""
    from homebase.adapters.memory_store import InMemoryDocumentStore
    return InMemoryDocumentStore()


@pytest.fixture
def seed_time():
    """A fixed seeding moment: Friday 2024-03-01, 09:00."""
    return datetime(2024, 3, 1, 9, 0)
