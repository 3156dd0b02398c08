"""Exceptions raised by the content synchronizer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hapsite.exceptions import HapSiteError

if TYPE_CHECKING:
    from pathlib import Path


class SyncError(HapSiteError):
    """Base exception for content synchronization errors."""


class SyncCopyError(SyncError):
    """Raised when copying or writing a synced file fails.

    Missing sources are not errors; they are logged and skipped.
    """

    def __init__(self, rule_name: str, dest: Path, original_exception: Exception) -> None:
        self.rule_name = rule_name
        self.dest = dest
        self.original_exception = original_exception
        super().__init__(f"Failed to sync '{rule_name}' to {dest}. Original error: {original_exception}")
