"""Document entity."""

from dataclasses import dataclass
from datetime import datetime

from docstore.domain.value_objects import Author


@dataclass(frozen=True)
class Document:
    """Stored document. Updates are new instances built with dataclasses.replace."""

    title: str
    content: str
    author: Author
    id: str | None = None
    created: datetime | None = None
