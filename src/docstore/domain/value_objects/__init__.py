"""Domain value objects."""

from docstore.domain.value_objects.author import Author
from docstore.domain.value_objects.timestamp import as_utc

__all__ = [
    "Author",
    "as_utc",
]
