"""Build-time content synchronization."""

from hapsite.sync.exceptions import SyncCopyError, SyncError
from hapsite.sync.site import SDK_DOCUMENTS, build_site_rules, sync_site
from hapsite.sync.synchronizer import ContentSynchronizer, CopyRule, SyncResult
from hapsite.sync.transforms import FrontmatterTransform, render_frontmatter, strip_heading

__all__ = [
    "SDK_DOCUMENTS",
    "ContentSynchronizer",
    "CopyRule",
    "FrontmatterTransform",
    "SyncCopyError",
    "SyncError",
    "SyncResult",
    "build_site_rules",
    "render_frontmatter",
    "strip_heading",
    "sync_site",
]
