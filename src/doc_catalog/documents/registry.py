from __future__ import annotations

import logging
import threading
from typing import Iterator, NamedTuple, Optional

from ..exceptions import OutOfRangeError
from .models import Document

logger = logging.getLogger(__name__)


class CatalogEntry(NamedTuple):
    label: int  # 1-based position
    description: str


def render_entry(entry: CatalogEntry, header: str = "Document") -> str:
    return f"{header} #{entry.label}\n{entry.description}"


class DocumentRegistry:
    """Ordered, append-only collection of documents.

    - Insertion order is the only ordering; duplicates are allowed.
    - Lookups take a 0-based index and report 1-based labels.
    - Not safe for concurrent mutation; share one instance per thread of control.
    """

    def __init__(self) -> None:
        self._documents: list[Document] = []

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._documents))

    def add(self, document: Document) -> None:
        self._documents.append(document)
        logger.debug(
            "Added %s document %r",
            document.type_tag,
            document.name,
            extra={"doc_kind": document.kind, "doc_index": len(self._documents) - 1},
        )

    def list_all(self) -> list[CatalogEntry]:
        return [
            CatalogEntry(label=i + 1, description=doc.describe())
            for i, doc in enumerate(self._documents)
        ]

    def get_entry(self, index: int) -> CatalogEntry:
        if not 0 <= index < len(self._documents):
            raise OutOfRangeError(index, len(self._documents))
        return CatalogEntry(label=index + 1, description=self._documents[index].describe())

    def get_info(self, index: int) -> str:
        return self.get_entry(index).description


_registry: Optional[DocumentRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> DocumentRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = DocumentRegistry()
                logger.debug("Created process document registry")
    return _registry


def reset_registry() -> None:
    """Forget the process-wide registry (tests only)."""
    global _registry
    with _registry_lock:
        _registry = None


__all__ = [
    "CatalogEntry",
    "DocumentRegistry",
    "render_entry",
    "get_registry",
    "reset_registry",
]
