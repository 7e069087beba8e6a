"""Save (upsert) document use case."""

import logging
from dataclasses import replace

from docstore.application.ports import Clock, IdGenerator
from docstore.application.ports.repositories import DocumentRepository
from docstore.domain.entities import Document
from docstore.domain.value_objects import as_utc

logger = logging.getLogger(__name__)


class SaveDocumentUseCase:
    """Insert a new document or replace an existing one by id.

    New documents (no id, or an empty id) get a generated id and a created
    timestamp. Updates keep the created timestamp of the stored record unless
    the caller supplies one. Stored timestamps are aware UTC; naive input is
    taken to be UTC.
    """

    def __init__(
        self,
        repository: DocumentRepository,
        id_generator: IdGenerator,
        clock: Clock,
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator
        self._clock = clock

    def execute(self, document: Document) -> Document:
        """Save document and return the stored version."""
        if not document.id:
            saved = replace(
                document,
                id=self._id_generator.new_id(),
                created=as_utc(self._clock.now()),
            )
            logger.debug("Created document id=%s", saved.id)
            return self._repository.put(saved)

        created = document.created
        if created is None:
            existing = self._repository.get_by_id(document.id)
            created = existing.created if existing else None
        if created is None:
            created = self._clock.now()

        saved = replace(document, created=as_utc(created))
        logger.debug("Saved document id=%s", saved.id)
        return self._repository.put(saved)
