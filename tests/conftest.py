"""Pytest fixtures for docstore tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from docstore.application.use_cases.document.get_document import GetDocumentUseCase
from docstore.application.use_cases.document.save_document import SaveDocumentUseCase
from docstore.application.use_cases.search.search_documents import (
    SearchDocumentsUseCase,
)
from docstore.domain.entities import Document
from docstore.domain.value_objects import Author
from docstore.infrastructure.persistence.memory import InMemoryDocumentRepository
from docstore.interfaces.store import DocumentStore

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


# --- Fakes ---


class FakeClock:
    """Clock returning a fixed time that tests advance explicitly."""

    def __init__(self, start: datetime = T0) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


class SequentialIdGenerator:
    """Deterministic ids: doc-1, doc-2, ..."""

    def __init__(self, prefix: str = "doc") -> None:
        self._prefix = prefix
        self._n = 0

    def new_id(self) -> str:
        self._n += 1
        return f"{self._prefix}-{self._n}"


# --- Builders ---


def make_document(
    title: str = "Test Title",
    content: str = "Some content",
    author: Author | None = None,
    id: str | None = None,
    created: datetime | None = None,
) -> Document:
    """Build a Document with sensible defaults."""
    return Document(
        title=title,
        content=content,
        author=author or Author(id="1", name="Author Name"),
        id=id,
        created=created,
    )


# --- Fixtures ---


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def repository() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def store(
    repository: InMemoryDocumentRepository,
    id_generator: SequentialIdGenerator,
    clock: FakeClock,
) -> DocumentStore:
    """DocumentStore wired with deterministic id generator and clock."""
    return DocumentStore(
        SaveDocumentUseCase(repository, id_generator, clock),
        GetDocumentUseCase(repository),
        SearchDocumentsUseCase(repository),
    )
