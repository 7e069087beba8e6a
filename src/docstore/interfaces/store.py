"""In-process document store API."""

from docstore.application.dto.search_dto import SearchRequest
from docstore.application.use_cases.document.get_document import GetDocumentUseCase
from docstore.application.use_cases.document.save_document import SaveDocumentUseCase
from docstore.application.use_cases.search.search_documents import (
    SearchDocumentsUseCase,
)
from docstore.domain.entities import Document


class DocumentStore:
    """Upsert, lookup by id and filtered search over one owned collection.

    Build through docstore.main.create_document_store. Not thread-safe.
    """

    def __init__(
        self,
        save_document: SaveDocumentUseCase,
        get_document: GetDocumentUseCase,
        search_documents: SearchDocumentsUseCase,
    ) -> None:
        self._save_document = save_document
        self._get_document = get_document
        self._search_documents = search_documents

    def save(self, document: Document) -> Document:
        """Upsert document; generates id and created for new documents."""
        return self._save_document.execute(document)

    def find_by_id(self, document_id: str) -> Document | None:
        """Return the document with this id, or None."""
        return self._get_document.execute(document_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return all documents matching request. Order is unspecified."""
        return self._search_documents.execute(request)
