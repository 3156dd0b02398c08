"""Document storage abstractions."""

from hapsite.storage.documents import DocumentStore, FilesystemDocumentStore, MemoryDocumentStore

__all__ = ["DocumentStore", "FilesystemDocumentStore", "MemoryDocumentStore"]
