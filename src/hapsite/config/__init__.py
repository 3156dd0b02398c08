"""Configuration for hapsite.

Single entry point for configuration-related imports.
"""

from hapsite.config.exceptions import (
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    ManifestNotFoundError,
    ManifestVersionError,
)
from hapsite.config.manifest import read_manifest_version
from hapsite.config.paths import SitePaths
from hapsite.config.settings import (
    CONFIG_FILENAME,
    HapSiteConfig,
    PathsSettings,
    ServerSettings,
    SiteSettings,
    SyncSettings,
    load_config,
    save_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "HapSiteConfig",
    "ManifestNotFoundError",
    "ManifestVersionError",
    "PathsSettings",
    "ServerSettings",
    "SitePaths",
    "SiteSettings",
    "SyncSettings",
    "load_config",
    "read_manifest_version",
    "save_config",
]
