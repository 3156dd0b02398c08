"""Centralized exceptions for hapsite."""


class HapSiteError(Exception):
    """Base exception for all hapsite errors."""


class PathTraversalError(HapSiteError):
    """Raised when a document name would escape its store root."""

    def __init__(self, name: str, root: str) -> None:
        self.name = name
        self.root = root
        super().__init__(f"Document name '{name}' resolves outside of {root}")
