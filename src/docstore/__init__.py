"""In-memory document store."""

__version__ = "0.1.0"
