"""In-memory document repository implementation."""

from collections.abc import Callable

from docstore.application.dto.search_dto import SearchRequest
from docstore.domain.entities import Document

DocumentFilter = Callable[[Document], bool]


def _build_document_filters(request: SearchRequest) -> list[DocumentFilter]:
    """Build AND-combined predicates for the populated fields of request."""
    filters: list[DocumentFilter] = []

    prefixes = tuple(request.title_prefixes or ())
    if prefixes:
        filters.append(lambda d: d.title.startswith(prefixes))

    contents = tuple(request.contains_contents or ())
    if contents:
        filters.append(lambda d: any(c in d.content for c in contents))

    author_ids = frozenset(request.author_ids or ())
    if author_ids:
        filters.append(lambda d: d.author.id in author_ids)

    created_from = request.created_from
    if created_from is not None:
        filters.append(lambda d: d.created >= created_from)

    created_to = request.created_to
    if created_to is not None:
        filters.append(lambda d: d.created <= created_to)

    return filters


class InMemoryDocumentRepository:
    """Document repository backed by a dict keyed by document id."""

    def __init__(self) -> None:
        self._by_id: dict[str, Document] = {}

    def get_by_id(self, document_id: str) -> Document | None:
        """Get document by id."""
        return self._by_id.get(document_id)

    def put(self, document: Document) -> Document:
        """Replace any document with the same id."""
        self._by_id.pop(document.id, None)
        self._by_id[document.id] = document
        return document

    def search(self, request: SearchRequest) -> list[Document]:
        """Return documents satisfying every filter built from request."""
        filters = _build_document_filters(request)
        return [d for d in self._by_id.values() if all(f(d) for f in filters)]
