"""Domain entities."""

from docstore.domain.entities.document import Document

__all__ = [
    "Document",
]
