"""Application entry point and composition root."""

import logging

from docstore import __version__
from docstore.application.use_cases.document.get_document import GetDocumentUseCase
from docstore.application.use_cases.document.save_document import SaveDocumentUseCase
from docstore.application.use_cases.search.search_documents import (
    SearchDocumentsUseCase,
)
from docstore.config import Settings, get_settings
from docstore.infrastructure.clock import SystemClock
from docstore.infrastructure.id_generator import UUIDGenerator
from docstore.infrastructure.persistence.memory import InMemoryDocumentRepository
from docstore.interfaces.store import DocumentStore
from docstore.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    setup_logging("DEBUG" if settings.debug else settings.log_level)
    print(f"docstore v{__version__}")


def create_document_store(settings: Settings | None = None) -> DocumentStore:
    """Composition root - build a DocumentStore with its own empty repository."""
    settings = settings or get_settings()
    repository = InMemoryDocumentRepository()

    save_document = SaveDocumentUseCase(
        repository=repository,
        id_generator=UUIDGenerator(settings.id_scheme),
        clock=SystemClock(),
    )
    get_document = GetDocumentUseCase(repository=repository)
    search_documents = SearchDocumentsUseCase(repository=repository)

    logger.info("Document store created (id_scheme=%s)", settings.id_scheme)
    return DocumentStore(save_document, get_document, search_documents)
