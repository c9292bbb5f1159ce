"""Document store port — abstract interface for persistence operations.

Core modules depend on this protocol, never on a specific backend.
Paths are slash-separated, alternating collection and document id:
``families/defaultFamily123/members/child1``.
"""

from __future__ import annotations

from typing import Any, Protocol


class StoreError(Exception):
    """Raised when any document store operation fails."""


class WriteError(StoreError):
    """Raised when a write (set, add, create) is rejected or fails."""


class DocumentExistsError(WriteError):
    """Raised by an exclusive create when the document is already present."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Document already exists: {path}")
        self.path = path


class DocumentStore(Protocol):
    """Abstract document store used by core modules."""

    async def get_document(self, path: str) -> dict[str, Any] | None: ...

    async def set_document(self, path: str, payload: dict[str, Any]) -> None: ...

    async def add_document(
        self, collection: str, payload: dict[str, Any]
    ) -> str: ...

    async def create_document(
        self, path: str, payload: dict[str, Any]
    ) -> None: ...

    async def list_documents(
        self, collection: str
    ) -> list[tuple[str, dict[str, Any]]]: ...


def split_path(path: str) -> tuple[str, str]:
    """Split a document path into (collection path, document id).

    Raises ValueError if the path does not point at a document.
    """
    parts = [p for p in path.strip("/").split("/") if p]
    if len(parts) < 2 or len(parts) % 2:
        raise ValueError(f"Not a document path: {path!r}")
    return "/".join(parts[:-1]), parts[-1]


def doc_path(*segments: str) -> str:
    """Join path segments into a document or collection path."""
    return "/".join(s.strip("/") for s in segments)
