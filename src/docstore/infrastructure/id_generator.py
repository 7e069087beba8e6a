"""UUID-based identifier generator."""

from typing import Literal
from uuid import uuid4

IdScheme = Literal["uuid4", "hex"]


class UUIDGenerator:
    """Random UUID4 identifiers, hyphenated ("uuid4") or as 32 hex chars ("hex")."""

    def __init__(self, scheme: IdScheme = "uuid4") -> None:
        if scheme not in ("uuid4", "hex"):
            raise ValueError(f"Unknown id scheme: {scheme}")
        self._scheme = scheme

    def new_id(self) -> str:
        value = uuid4()
        return value.hex if self._scheme == "hex" else str(value)
