"""Read the site version from the JSON package manifest."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from hapsite.config.exceptions import ManifestNotFoundError, ManifestVersionError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def read_manifest_version(manifest_path: Path) -> str:
    """Return the ``"version"`` field of a ``package.json``-style manifest.

    The value is treated as an opaque string; it is never parsed as semver.

    Raises:
        ManifestNotFoundError: If the manifest does not exist.
        ManifestVersionError: If the manifest is not JSON or has no string version.

    """
    if not manifest_path.is_file():
        raise ManifestNotFoundError(manifest_path)

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestVersionError(manifest_path, f"invalid JSON ({e.msg})") from e

    if not isinstance(data, dict):
        raise ManifestVersionError(manifest_path, "top-level value is not an object")

    version = data.get("version")
    if not isinstance(version, str) or not version.strip():
        raise ManifestVersionError(manifest_path, "missing or empty 'version' field")

    logger.debug("Read version %s from %s", version, manifest_path)
    return version.strip()
