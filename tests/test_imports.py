"""Every docstore module imports cleanly."""

import importlib

import pytest

MODULES = [
    "docstore",
    "docstore.config",
    "docstore.logging_config",
    "docstore.main",
    "docstore.domain.entities",
    "docstore.domain.exceptions",
    "docstore.domain.value_objects",
    "docstore.application.dto.search_dto",
    "docstore.application.ports",
    "docstore.application.ports.repositories",
    "docstore.application.use_cases.document.get_document",
    "docstore.application.use_cases.document.save_document",
    "docstore.application.use_cases.search.search_documents",
    "docstore.infrastructure.clock",
    "docstore.infrastructure.id_generator",
    "docstore.infrastructure.persistence.memory",
    "docstore.interfaces.store",
]


@pytest.mark.parametrize("name", MODULES)
def test_module_imports(name: str) -> None:
    """Module imports without errors at class-definition time."""
    assert importlib.import_module(name) is not None
