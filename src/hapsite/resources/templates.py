"""Jinja2 rendering for the prose blocks of assembled contexts.

Priority:
1. ``<site_root>/.hapsite/templates/`` (site overrides)
2. ``src/hapsite/templates/`` (package defaults)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

logger = logging.getLogger(__name__)

PACKAGE_TEMPLATES_DIR = Path(__file__).parents[1] / "templates"


def resolve_search_paths(override_dir: Path | None = None) -> list[Path]:
    """Get the ordered list of directories to search for templates."""
    search_paths: list[Path] = []

    if override_dir is not None and override_dir.is_dir():
        search_paths.append(override_dir)
        logger.debug("Using template overrides from: %s", override_dir)

    if PACKAGE_TEMPLATES_DIR.is_dir():
        search_paths.append(PACKAGE_TEMPLATES_DIR)
    else:
        logger.warning("Package templates directory not found at %s", PACKAGE_TEMPLATES_DIR)

    return search_paths


class TemplateRenderer:
    """Manages the Jinja2 environment for context prose."""

    def __init__(self, search_paths: Sequence[Path] | None = None) -> None:
        self.search_paths = list(search_paths) if search_paths is not None else resolve_search_paths()
        self.env = Environment(
            loader=FileSystemLoader(self.search_paths),
            autoescape=select_autoescape(enabled_extensions=()),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    @classmethod
    def for_site(cls, override_dir: Path | None) -> TemplateRenderer:
        return cls(resolve_search_paths(override_dir))

    def render(self, template_name: str, **context: Any) -> str:
        """Render a template by name (e.g. ``"context/header.md.jinja"``)."""
        template = self.env.get_template(template_name)
        return template.render(**context)

    def read_data(self, name: str) -> str:
        """Return the raw text of a non-template data file from the search paths."""
        for search_path in self.search_paths:
            path = search_path / name
            if path.is_file():
                return path.read_text(encoding="utf-8")
        msg = f"'{name}' not found in template search paths: {self.search_paths}"
        raise FileNotFoundError(msg)
