import pytest

from hapsite.context import DocumentDescriptor, MissingDocumentError, load_documents
from hapsite.storage import MemoryDocumentStore

DESCRIPTORS = [
    DocumentDescriptor(name="protocol", path="protocol.md"),
    DocumentDescriptor(name="integration", path="integration.md", required=False),
    DocumentDescriptor(name="service", path="service.md"),
]


def test_loads_documents_in_descriptor_order():
    store = MemoryDocumentStore({"service.md": "S", "integration.md": "I", "protocol.md": "P"})

    documents = load_documents(store, DESCRIPTORS)

    assert list(documents) == ["protocol", "integration", "service"]
    assert documents["integration"] == "I"


def test_missing_optional_document_is_omitted():
    store = MemoryDocumentStore({"protocol.md": "P", "service.md": "S"})

    assert load_documents(store, DESCRIPTORS) == {"protocol": "P", "service": "S"}


def test_missing_required_document_raises():
    store = MemoryDocumentStore({"protocol.md": "P"})

    with pytest.raises(MissingDocumentError) as excinfo:
        load_documents(store, DESCRIPTORS)

    assert excinfo.value.name == "service"
    assert excinfo.value.path == "service.md"


def test_empty_document_is_still_present():
    store = MemoryDocumentStore({"protocol.md": "", "service.md": "S"})

    assert load_documents(store, DESCRIPTORS)["protocol"] == ""
