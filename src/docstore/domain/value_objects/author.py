"""Document author."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """Author reference carried by a document. Not tracked by the store."""

    id: str
    name: str
