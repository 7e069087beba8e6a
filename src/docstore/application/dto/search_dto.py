"""Search DTOs."""

from collections.abc import Collection
from dataclasses import dataclass
from datetime import datetime

from docstore.domain.exceptions import ValidationError
from docstore.domain.value_objects import as_utc

_TERM_FIELDS = ("title_prefixes", "contains_contents", "author_ids")
_BOUND_FIELDS = ("created_from", "created_to")


def _terms(name: str, values: Collection[str] | None) -> tuple[str, ...] | None:
    """Materialize a collection-valued filter field once, so the request can be reused."""
    if values is None:
        return None
    if isinstance(values, (str, bytes)):
        raise ValidationError(f"{name} must be a collection of strings, not a single string")
    try:
        return tuple(values)
    except TypeError as e:
        raise ValidationError(f"{name} must be a collection of strings") from e


@dataclass(frozen=True)
class SearchRequest:
    """Filter for document search. Unset or empty fields impose no constraint.

    Active fields are combined with AND; values inside one collection with OR.
    Collections are stored as tuples and bounds as aware UTC datetimes.
    """

    title_prefixes: Collection[str] | None = None
    contains_contents: Collection[str] | None = None
    author_ids: Collection[str] | None = None
    created_from: datetime | None = None  # inclusive
    created_to: datetime | None = None  # inclusive

    def __post_init__(self) -> None:
        for name in _TERM_FIELDS:
            object.__setattr__(self, name, _terms(name, getattr(self, name)))
        for name in _BOUND_FIELDS:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, as_utc(value))
