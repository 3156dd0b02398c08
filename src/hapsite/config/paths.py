"""Resolve the site layout from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hapsite.config.settings import PathsSettings

__all__ = ["SitePaths"]


@dataclass(frozen=True, slots=True)
class SitePaths:
    """Absolute paths for one site root."""

    site_root: Path
    manifest: Path
    content_root: Path
    sdk_root: Path
    demo_root: Path
    docs_target: Path
    sdk_target: Path
    templates_dir: Path

    @classmethod
    def from_settings(cls, site_root: Path, settings: PathsSettings | None = None) -> SitePaths:
        """Resolve every configured path against ``site_root``."""
        settings = settings or PathsSettings()
        root = site_root.expanduser().resolve()

        def resolve(path_str: str) -> Path:
            return (root / path_str).resolve()

        return cls(
            site_root=root,
            manifest=resolve(settings.manifest),
            content_root=resolve(settings.content_root),
            sdk_root=resolve(settings.sdk_root),
            demo_root=resolve(settings.demo_root),
            docs_target=resolve(settings.docs_target),
            sdk_target=resolve(settings.sdk_target),
            templates_dir=resolve(settings.templates_dir),
        )

    def content_dir(self, version: str) -> Path:
        """Return the versioned content directory (it may not exist)."""
        return self.content_root / version
