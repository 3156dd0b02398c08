"""Copy versioned and auxiliary documents into the site's build input.

Policy: a missing source is logged as a warning and skipped, for the primary
content directory as well as for auxiliary files, so the build keeps going with
whatever content is available. Failures while copying or writing are raised.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hapsite.sync.exceptions import SyncCopyError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["ContentSynchronizer", "CopyRule", "SyncResult"]


@dataclass(frozen=True, slots=True)
class CopyRule:
    """One source to copy into the site.

    Attributes:
        name: Logical name used in logs and results (e.g. ``"docs"``, ``"api"``).
        source: Resolved source file or directory.
        dest: Target file, or target directory when ``source`` is a directory.
        transform: Optional text transform; only applied to file sources.
        primary: Marks the versioned content directory.

    """

    name: str
    source: Path
    dest: Path
    transform: Callable[[str], str] | None = None
    primary: bool = False


@dataclass(slots=True)
class SyncResult:
    """Names of the rules that were applied or skipped during a run."""

    copied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.skipped


class ContentSynchronizer:
    """Apply copy rules in order."""

    def __init__(self, rules: Sequence[CopyRule]) -> None:
        self.rules = list(rules)

    def run(self) -> SyncResult:
        result = SyncResult()
        for rule in self.rules:
            if self.apply(rule):
                result.copied.append(rule.name)
            else:
                result.skipped.append(rule.name)
        return result

    def apply(self, rule: CopyRule) -> bool:
        """Apply a single rule. Returns False when the source is missing."""
        source = rule.source
        if not source.exists():
            if rule.primary:
                logger.warning("Content directory not found: %s", source)
            else:
                logger.warning("Skipping %s, source not found: %s", rule.name, source)
            return False

        try:
            if source.is_dir():
                rule.dest.mkdir(parents=True, exist_ok=True)
                shutil.copytree(source, rule.dest, dirs_exist_ok=True)
            elif rule.transform is not None:
                text = source.read_text(encoding="utf-8")
                rule.dest.parent.mkdir(parents=True, exist_ok=True)
                rule.dest.write_text(rule.transform(text), encoding="utf-8")
            else:
                rule.dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(source, rule.dest)
        except OSError as e:
            raise SyncCopyError(rule.name, rule.dest, e) from e

        logger.info("Copied %s -> %s", source, rule.dest)
        return True
