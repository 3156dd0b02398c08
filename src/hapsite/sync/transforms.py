"""Text transforms applied to single files during content sync."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

__all__ = ["FrontmatterTransform", "render_frontmatter", "strip_heading"]

FRONTMATTER_MARKER = "---"


def strip_heading(text: str, title: str) -> str:
    """Remove a leading ``# <title>`` line and the blank lines right after it.

    Text that does not start with exactly that heading is returned unchanged.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != f"# {title}":
        return text

    index = 1
    while index < len(lines) and not lines[index].strip():
        index += 1
    return "".join(lines[index:])


def render_frontmatter(metadata: dict[str, Any]) -> str:
    """Render ``metadata`` as a YAML block between ``---`` marker lines.

    Keys keep their insertion order. The block ends with one blank line so the
    body can be appended directly.
    """
    yaml_front = yaml.dump(metadata, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"{FRONTMATTER_MARKER}\n{yaml_front}{FRONTMATTER_MARKER}\n\n"


@dataclass(frozen=True, slots=True)
class FrontmatterTransform:
    """Replace a known title heading with a ``title``/``version``/``date`` frontmatter block."""

    title: str
    version: str
    date: str
    heading: str | None = None

    def __call__(self, text: str) -> str:
        body = strip_heading(text, self.heading or self.title)
        front_matter = {"title": self.title, "version": self.version, "date": self.date}
        return render_frontmatter(front_matter) + body
