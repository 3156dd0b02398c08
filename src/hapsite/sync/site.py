"""The website's copy rules and the sync entry point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hapsite.config.paths import SitePaths
from hapsite.sync.synchronizer import ContentSynchronizer, CopyRule, SyncResult
from hapsite.sync.transforms import FrontmatterTransform

if TYPE_CHECKING:
    from pathlib import Path

    from hapsite.config.settings import HapSiteConfig, SyncSettings

logger = logging.getLogger(__name__)

# (logical name, path under the SDK checkout, filename under sdk_target)
SDK_DOCUMENTS: tuple[tuple[str, str, str], ...] = (
    ("readme", "README.md", "README.md"),
    ("api", "docs/API.md", "API.md"),
    ("local-dev", "docs/LOCAL_DEVELOPMENT.md", "LOCAL_DEVELOPMENT.md"),
    ("roadmap", "docs/ROADMAP.md", "ROADMAP.md"),
)


def build_site_rules(paths: SitePaths, version: str, sync: SyncSettings) -> list[CopyRule]:
    """Return the copy rules for ``version``, in the order they are applied."""
    rules = [
        CopyRule(
            name="docs",
            source=paths.content_dir(version),
            dest=paths.docs_target,
            primary=True,
        )
    ]
    rules.extend(
        CopyRule(name=name, source=paths.sdk_root / source, dest=paths.sdk_target / dest)
        for name, source, dest in SDK_DOCUMENTS
    )
    rules.append(
        CopyRule(
            name="demo",
            source=paths.demo_root / "README.md",
            dest=paths.docs_target / sync.demo_target,
            transform=FrontmatterTransform(title=sync.demo_title, version=version, date=sync.demo_date),
        )
    )
    return rules


def sync_site(site_root: Path, config: HapSiteConfig, version: str) -> SyncResult:
    """Sync all content for ``version`` into the site at ``site_root``."""
    paths = SitePaths.from_settings(site_root, config.paths)
    logger.info("Syncing content for HAP v%s...", version)

    result = ContentSynchronizer(build_site_rules(paths, version, config.sync)).run()

    logger.info("Done. Copied %d, skipped %d.", len(result.copied), len(result.skipped))
    return result
