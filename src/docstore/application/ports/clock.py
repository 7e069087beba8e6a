"""Clock port."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current time for created timestamps."""

    def now(self) -> datetime: ...
