"""In-memory persistence adapters."""

from docstore.infrastructure.persistence.memory.document_repository import (
    InMemoryDocumentRepository,
)

__all__ = ["InMemoryDocumentRepository"]
