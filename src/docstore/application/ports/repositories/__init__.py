"""Repository ports."""

from docstore.application.ports.repositories.document_repository import (
    DocumentRepository,
)

__all__ = [
    "DocumentRepository",
]
