"""Get document use case."""

from docstore.application.ports.repositories import DocumentRepository
from docstore.domain.entities import Document


class GetDocumentUseCase:
    """Get document by id."""

    def __init__(self, repository: DocumentRepository) -> None:
        self._repository = repository

    def execute(self, document_id: str) -> Document | None:
        """Return the latest saved version, or None when the id is unknown."""
        return self._repository.get_by_id(document_id)
