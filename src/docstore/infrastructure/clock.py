"""System clock implementation."""

from datetime import UTC, datetime


class SystemClock:
    """Clock returning timezone-aware UTC time."""

    def now(self) -> datetime:
        return datetime.now(UTC)
