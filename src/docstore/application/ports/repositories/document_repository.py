"""Document repository port."""

from typing import Protocol

from docstore.application.dto.search_dto import SearchRequest
from docstore.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document storage."""

    def get_by_id(self, document_id: str) -> Document | None: ...

    def put(self, document: Document) -> Document: ...

    def search(self, request: SearchRequest) -> list[Document]: ...
