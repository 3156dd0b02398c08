"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from hapsite.exceptions import HapSiteError


class ConfigError(HapSiteError):
    """Base exception for all configuration-related errors."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration file fails validation."""

    def __init__(self, config_path: Path, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.config_path = config_path
        self.errors = list(errors or [])
        super().__init__(
            f"Configuration in {config_path} failed validation with {len(self.errors)} error(s)."
        )


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""

    def __init__(self, config_path: Path, original_exception: Exception) -> None:
        self.config_path = config_path
        self.original_exception = original_exception
        super().__init__(f"Could not parse {config_path}: {original_exception}")


class ManifestNotFoundError(ConfigError):
    """Raised when the package manifest holding the site version is missing."""

    def __init__(self, manifest_path: Path) -> None:
        self.manifest_path = manifest_path
        super().__init__(f"Package manifest not found: {manifest_path}")


class ManifestVersionError(ConfigError):
    """Raised when the manifest cannot be parsed or carries no usable version."""

    def __init__(self, manifest_path: Path, reason: str) -> None:
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"Cannot read version from {manifest_path}: {reason}")
