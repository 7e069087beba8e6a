"""Domain exceptions."""


class DocStoreError(Exception):
    """Base exception for docstore."""

    pass


class ValidationError(DocStoreError):
    """Validation failed for input data."""

    pass
