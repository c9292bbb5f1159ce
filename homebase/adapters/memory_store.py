"""In-memory document store adapter — implements DocumentStore.

Keeps documents in a dict keyed by path. Used for the `memory` backend and
in tests, where `fail_on` lets a test reject selected writes.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable

from homebase.data.db import new_document_id
from homebase.ports.store_port import DocumentExistsError, WriteError, split_path

logger = logging.getLogger(__name__)

# (operation, path, payload) -> True to reject the write
FailurePredicate = Callable[[str, str, dict[str, Any]], bool]


class InMemoryDocumentStore:
    """Dict-backed implementation of DocumentStore."""

    def __init__(self, fail_on: FailurePredicate | None = None) -> None:
        self._docs: dict[str, dict[str, Any]] = {}
        self.fail_on = fail_on
        self.writes: list[tuple[str, str]] = []  # (operation, path) of accepted writes

    def _check(self, op: str, path: str, payload: dict[str, Any]) -> None:
        if self.fail_on is not None and self.fail_on(op, path, payload):
            logger.debug("Injected %s failure at %s", op, path)
            raise WriteError(f"Write rejected: {op} {path}")

    async def get_document(self, path: str) -> dict[str, Any] | None:
        split_path(path)
        doc = self._docs.get(path)
        return copy.deepcopy(doc) if doc is not None else None

    async def set_document(self, path: str, payload: dict[str, Any]) -> None:
        split_path(path)
        self._check("set", path, payload)
        self._docs[path] = copy.deepcopy(payload)
        self.writes.append(("set", path))

    async def create_document(self, path: str, payload: dict[str, Any]) -> None:
        split_path(path)
        if path in self._docs:
            raise DocumentExistsError(path)
        self._check("create", path, payload)
        self._docs[path] = copy.deepcopy(payload)
        self.writes.append(("create", path))

    async def add_document(self, collection: str, payload: dict[str, Any]) -> str:
        doc_id = new_document_id()
        path = f"{collection.strip('/')}/{doc_id}"
        self._check("add", path, payload)
        self._docs[path] = copy.deepcopy(payload)
        self.writes.append(("add", path))
        return doc_id

    async def list_documents(
        self, collection: str
    ) -> list[tuple[str, dict[str, Any]]]:
        prefix = collection.strip("/") + "/"
        return [
            (path[len(prefix):], copy.deepcopy(doc))
            for path, doc in self._docs.items()
            if path.startswith(prefix) and "/" not in path[len(prefix):]
        ]
