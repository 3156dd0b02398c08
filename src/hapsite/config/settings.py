"""Configuration for hapsite.

Settings come from three layers, highest priority first:

1. Environment variables (``HAPSITE_SECTION__KEY``)
2. ``hapsite.toml`` in the site root
3. Defaults declared on the models below

CLI flags are applied on top by the individual commands.
"""

from __future__ import annotations

import logging
import os
import tomllib
from copy import deepcopy
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hapsite.config.exceptions import ConfigParseError, ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "hapsite.toml"
ENV_PREFIX = "HAPSITE_"


class SiteSettings(BaseModel):
    """Site identity used in generated headers."""

    title: str = Field(
        default="Human Agency Protocol",
        description="Site title",
    )
    description: str = Field(
        default="A global protocol for strengthening human agency in AI-native systems, "
        "without sharing content.",
        description="One-line site description",
    )


class PathsSettings(BaseModel):
    """Filesystem layout, relative to the site root (the website directory)."""

    manifest: str = Field(
        default="package.json",
        description="JSON package manifest carrying the site version",
    )
    content_root: str = Field(
        default="../content",
        description="Directory holding one subdirectory of documents per version",
    )
    sdk_root: str = Field(
        default="../sdk",
        description="SDK checkout (README.md plus docs/)",
    )
    demo_root: str = Field(
        default="../demo",
        description="Demo checkout (README.md)",
    )
    docs_target: str = Field(
        default="src/content/docs",
        description="Site build input directory for the versioned documents",
    )
    sdk_target: str = Field(
        default="src/sdk-docs",
        description="Site build input directory for the SDK documents",
    )
    templates_dir: str = Field(
        default=".hapsite/templates",
        description="Optional template overrides, searched before the packaged templates",
    )

    @field_validator(
        "manifest",
        "content_root",
        "sdk_root",
        "demo_root",
        "docs_target",
        "sdk_target",
        "templates_dir",
        mode="after",
    )
    @classmethod
    def validate_relative_path(cls, v: str) -> str:
        """Paths must be non-empty and relative to the site root."""
        if not v.strip():
            msg = "Path must not be empty"
            raise ValueError(msg)
        if Path(v).is_absolute():
            msg = f"Path must be relative, not absolute: {v}"
            raise ValueError(msg)
        return v


class SyncSettings(BaseModel):
    """Content synchronizer settings."""

    demo_title: str = Field(
        default="HAP Demo",
        description="Heading text stripped from the top of the demo readme",
    )
    demo_date: str = Field(
        default="January 2026",
        description="Fixed date written into the demo page frontmatter",
    )
    demo_target: str = Field(
        default="demo.md",
        description="Filename of the generated demo page inside docs_target",
    )


class ServerSettings(BaseModel):
    """HTTP server settings for the context endpoints."""

    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=4321, ge=1, le=65535, description="Port to bind")


class HapSiteConfig(BaseSettings):
    """Root configuration for hapsite.

    Supports environment variable overrides with the pattern
    ``HAPSITE_SECTION__KEY`` (e.g. ``HAPSITE_SERVER__PORT``).
    """

    site: SiteSettings = Field(default_factory=SiteSettings, description="Site identity")
    paths: PathsSettings = Field(default_factory=PathsSettings, description="Filesystem layout")
    sync: SyncSettings = Field(default_factory=SyncSettings, description="Content synchronizer")
    server: ServerSettings = Field(default_factory=ServerSettings, description="HTTP server")

    model_config = SettingsConfigDict(
        extra="forbid",
        validate_assignment=True,
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
    )


def _collect_env_override_paths() -> set[tuple[str, ...]]:
    """Return the set of config paths defined via environment variables."""
    env_paths: set[tuple[str, ...]] = set()
    for key in os.environ:
        if not key.startswith(ENV_PREFIX):
            continue
        parts = [part.lower() for part in key[len(ENV_PREFIX) :].split("__") if part]
        if parts:
            env_paths.add(tuple(parts))
    return env_paths


def _merge_config(
    base: dict[str, Any],
    override: dict[str, Any],
    env_override_paths: set[tuple[str, ...]],
    current_path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Merge override into base, skipping keys provided via env vars."""
    merged = deepcopy(base)

    for key, value in override.items():
        path = (*current_path, str(key).lower())
        if path in env_override_paths:
            continue

        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_config(merged[key], value, env_override_paths, path)
        else:
            merged[key] = value

    return merged


def load_config(site_root: Path | None = None) -> HapSiteConfig:
    """Load configuration for the site at ``site_root``.

    A missing ``hapsite.toml`` is not an error; defaults (plus environment
    overrides) are returned. A file that fails to parse or validate raises.

    Raises:
        ConfigParseError: If the file is not valid TOML.
        ConfigValidationError: If the merged configuration is invalid.

    """
    if site_root is None:
        site_root = Path.cwd()

    config_path = site_root / CONFIG_FILENAME
    if not config_path.exists():
        logger.debug("No %s in %s, using defaults", CONFIG_FILENAME, site_root)
        return HapSiteConfig()

    logger.debug("Loading config from %s", config_path)
    try:
        file_data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, e) from e

    try:
        base_dict = HapSiteConfig().model_dump(mode="json")
        merged = _merge_config(base_dict, file_data, _collect_env_override_paths())
        return HapSiteConfig.model_validate(merged)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            logger.error("  %s: %s", loc, error["msg"])
        raise ConfigValidationError(config_path, e.errors()) from e


def save_config(config: HapSiteConfig, site_root: Path) -> Path:
    """Write ``config`` to ``<site_root>/hapsite.toml`` and return the path."""
    site_root.mkdir(parents=True, exist_ok=True)
    config_path = site_root / CONFIG_FILENAME

    data = config.model_dump(exclude_defaults=False, mode="json")
    config_path.write_text(tomli_w.dumps(data), encoding="utf-8")
    logger.debug("Saved config to %s", config_path)
    return config_path
