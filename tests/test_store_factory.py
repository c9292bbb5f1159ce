"""Tests for the document store factory."""

import pytest
from unittest.mock import patch

from homebase.adapters.store_factory import create_document_store


class TestCreateDocumentStore:
    @patch("homebase.adapters.store_factory.settings")
    def test_returns_memory_store(self, mock_settings):
        mock_settings.STORE_BACKEND = "memory"
        store = create_document_store()
        from homebase.adapters.memory_store import InMemoryDocumentStore
        assert isinstance(store, InMemoryDocumentStore)

    @patch("homebase.adapters.store_factory.settings")
    def test_returns_sqlite_store(self, mock_settings, tmp_db_path):
        mock_settings.STORE_BACKEND = "sqlite"
        store = create_document_store(db_path=tmp_db_path)
        from homebase.adapters.sqlite_store import SQLiteDocumentStore
        assert isinstance(store, SQLiteDocumentStore)

    @patch("homebase.adapters.store_factory.settings")
    def test_case_insensitive(self, mock_settings):
        mock_settings.STORE_BACKEND = "Memory"
        store = create_document_store()
        from homebase.adapters.memory_store import InMemoryDocumentStore
        assert isinstance(store, InMemoryDocumentStore)

    @patch("homebase.adapters.store_factory.settings")
    def test_unknown_backend_raises(self, mock_settings):
        mock_settings.STORE_BACKEND = "firestore"
        with pytest.raises(ValueError, match="Unknown STORE_BACKEND"):
            create_document_store()


class TestSettingsValidation:
    def test_backend_normalized(self):
        from homebase.config import Settings
        assert Settings(STORE_BACKEND=" SQLite ").STORE_BACKEND == "sqlite"

    def test_unknown_backend_rejected(self):
        from pydantic import ValidationError
        from homebase.config import Settings
        with pytest.raises(ValidationError):
            Settings(STORE_BACKEND="mongo")

    def test_timeout_parsed_from_string(self):
        from homebase.config import Settings
        assert Settings(CONNECTIVITY_TIMEOUT_SECONDS="2.5").CONNECTIVITY_TIMEOUT_SECONDS == 2.5
