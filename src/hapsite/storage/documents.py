"""Document store protocol and implementations.

The templating and transform code never touches the filesystem directly; it
reads and writes named documents through a :class:`DocumentStore`. Names are
POSIX-style paths relative to the store root (e.g. ``"protocol.md"`` or
``"docs/API.md"``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path, PurePosixPath
from typing import Protocol, runtime_checkable

from hapsite.exceptions import PathTraversalError

logger = logging.getLogger(__name__)

__all__ = ["DocumentStore", "FilesystemDocumentStore", "MemoryDocumentStore"]


@runtime_checkable
class DocumentStore(Protocol):
    """Read/write access to named text documents.

    Contract:
        - read() returns None when the document does not exist
        - write() is idempotent (same name overwrites)
    """

    def read(self, name: str) -> str | None:
        """Return the document text, or None if it does not exist."""
        ...

    def write(self, name: str, text: str) -> None:
        """Store ``text`` under ``name``, replacing any previous content."""
        ...

    def exists(self, name: str) -> bool:
        """Check if a document exists."""
        ...


class FilesystemDocumentStore:
    """Documents stored as UTF-8 files below a root directory.

    Structure:
        root/{name}

    ``write`` creates missing parent directories.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def __repr__(self) -> str:
        return f"FilesystemDocumentStore(root={self.root!r})"

    def path_for(self, name: str) -> Path:
        """Join ``name`` onto the root, refusing absolute names and ``..`` parts.

        Symlinks below the root are not resolved, so a document may link to a
        shared file elsewhere on disk.
        """
        relative = PurePosixPath(name)
        if relative.is_absolute() or ".." in relative.parts:
            raise PathTraversalError(name, str(self.root))
        return self.root.joinpath(*relative.parts)

    def read(self, name: str) -> str | None:
        path = self.path_for(name)
        if not path.is_file():
            logger.debug("Document %s not found at %s", name, path)
            return None
        return path.read_text(encoding="utf-8")

    def write(self, name: str, text: str) -> None:
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()


class MemoryDocumentStore:
    """Dict-backed store, used for in-memory rendering and tests."""

    def __init__(self, documents: Mapping[str, str] | None = None) -> None:
        self.documents: dict[str, str] = dict(documents or {})

    def read(self, name: str) -> str | None:
        return self.documents.get(name)

    def write(self, name: str, text: str) -> None:
        self.documents[name] = text

    def exists(self, name: str) -> bool:
        return name in self.documents
