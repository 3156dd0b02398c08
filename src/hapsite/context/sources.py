"""Map context definitions onto the site's filesystem layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hapsite.storage.documents import FilesystemDocumentStore

if TYPE_CHECKING:
    from pathlib import Path

    from hapsite.config.paths import SitePaths
    from hapsite.context.catalog import ContextCatalog, ContextDefinition


def source_root(definition: ContextDefinition, paths: SitePaths, version: str) -> Path:
    """Directory the definition's documents are read from."""
    if definition.source == "content":
        return paths.content_dir(version)
    return paths.sdk_target


def document_store(definition: ContextDefinition, paths: SitePaths, version: str) -> FilesystemDocumentStore:
    return FilesystemDocumentStore(source_root(definition, paths, version))


def resolve_version(definition: ContextDefinition, site_version: str) -> str:
    """Pick the version a context is rendered at.

    Versioned content follows the site version; the SDK docs follow the
    newest SDK edition.
    """
    if definition.source == "content":
        return site_version
    return definition.latest()


def resolve_versions(catalog: ContextCatalog, site_version: str) -> dict[str, str]:
    return {definition.name: resolve_version(definition, site_version) for definition in catalog.definitions()}
