"""Search documents use case."""

import logging

from docstore.application.dto.search_dto import SearchRequest
from docstore.application.ports.repositories import DocumentRepository
from docstore.domain.entities import Document

logger = logging.getLogger(__name__)


class SearchDocumentsUseCase:
    """Filtered search over all stored documents."""

    def __init__(self, repository: DocumentRepository) -> None:
        self._repository = repository

    def execute(self, request: SearchRequest | None = None) -> list[Document]:
        """Return documents matching every active filter of the request."""
        results = self._repository.search(request or SearchRequest())
        logger.debug("Search matched %d document(s)", len(results))
        return results
