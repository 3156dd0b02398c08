"""Exceptions raised while assembling contexts."""

from __future__ import annotations

from hapsite.exceptions import HapSiteError


class ContextError(HapSiteError):
    """Base exception for context assembly errors."""


class MissingDocumentError(ContextError):
    """Raised when a required document is absent at request time."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Required document '{name}' is missing: {path}")


class UnknownContextError(ContextError):
    """Raised when a context name is not in the edition table."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Context '{name}' not found. Available contexts: {', '.join(available)}")


class UnknownEditionError(ContextError):
    """Raised when a context has no edition for the requested version."""

    def __init__(self, context: str, version: str, available: list[str]) -> None:
        self.context = context
        self.version = version
        self.available = available
        super().__init__(
            f"Context '{context}' has no edition for version '{version}'. "
            f"Available versions: {', '.join(available)}"
        )


class EditionTableError(ContextError):
    """Raised when the edition table cannot be parsed or validated."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid edition table: {reason}")
