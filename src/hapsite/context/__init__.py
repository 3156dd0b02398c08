"""Request-time context aggregation."""

from hapsite.context.assembler import SEPARATOR, ContextAssembler, render_context
from hapsite.context.catalog import (
    ContextCatalog,
    ContextDefinition,
    DocumentDescriptor,
    Edition,
    load_context_catalog,
    parse_context_catalog,
)
from hapsite.context.exceptions import (
    ContextError,
    EditionTableError,
    MissingDocumentError,
    UnknownContextError,
    UnknownEditionError,
)
from hapsite.context.loader import load_documents
from hapsite.context.sources import document_store, resolve_version, resolve_versions, source_root

__all__ = [
    "SEPARATOR",
    "ContextAssembler",
    "ContextCatalog",
    "ContextDefinition",
    "ContextError",
    "DocumentDescriptor",
    "Edition",
    "EditionTableError",
    "MissingDocumentError",
    "UnknownContextError",
    "UnknownEditionError",
    "document_store",
    "load_context_catalog",
    "load_documents",
    "parse_context_catalog",
    "render_context",
    "resolve_version",
    "resolve_versions",
    "source_root",
]
