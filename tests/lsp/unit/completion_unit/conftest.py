import pytest

from ghostty_lsp.lsp.features.completion import CompletionGenerator, CompletionService
from ghostty_lsp.lsp.utils.document_store import DocumentStore


@pytest.fixture
def generator(minimal_schema):
    return CompletionGenerator(minimal_schema)


@pytest.fixture
def document_store():
    return DocumentStore()


@pytest.fixture
def completion_service(document_store, generator):
    return CompletionService(document_store, generator)
