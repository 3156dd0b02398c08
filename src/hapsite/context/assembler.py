"""Assemble a plain-text context from prose templates and documents.

Output layout::

    header
    ---
    prose block (one section each)
    ---
    document (optionally preceded by its heading)
    ---
    footer

Sections are separated by a single ``---`` line surrounded by blank lines.
Empty sections are dropped, so an omitted document never leaves two
separators next to each other.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING

from hapsite.config.settings import SiteSettings
from hapsite.context.exceptions import MissingDocumentError
from hapsite.context.loader import load_documents

if TYPE_CHECKING:
    from hapsite.context.catalog import ContextDefinition
    from hapsite.resources.templates import TemplateRenderer
    from hapsite.storage.documents import DocumentStore

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n---\n\n"
_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*\r?\n)+")


def _trim(text: str) -> str:
    """Drop surrounding blank lines and trailing whitespace, keep first-line indentation."""
    return _LEADING_BLANK_LINES.sub("", text).rstrip()


class ContextAssembler:
    """Render one context definition into its plain-text form."""

    def __init__(
        self,
        definition: ContextDefinition,
        renderer: TemplateRenderer,
        site: SiteSettings | None = None,
    ) -> None:
        self.definition = definition
        self.renderer = renderer
        self.site = site or SiteSettings()

    def sections(self, documents: Mapping[str, str], version: str) -> list[str]:
        """Return the non-empty sections in output order."""
        edition = self.definition.edition(version)
        context = {"site": self.site, "version": version, "edition": edition}

        blocks = [self.renderer.render(edition.header, **context)]
        blocks.extend(self.renderer.render(name, **context) for name in edition.prose)

        for descriptor in edition.sections:
            text = documents.get(descriptor.name)
            if text is None:
                if descriptor.required:
                    raise MissingDocumentError(descriptor.name, descriptor.path)
                continue
            body = _trim(text)
            if not body:
                if descriptor.required:
                    logger.warning("Required document %s (%s) is blank", descriptor.name, descriptor.path)
                continue
            if descriptor.heading:
                body = f"{descriptor.heading}\n\n{body}"
            blocks.append(body)

        blocks.append(self.renderer.render(edition.footer, **context))
        return [block for block in map(_trim, blocks) if block]

    def assemble(self, documents: Mapping[str, str], version: str) -> str:
        """Join the sections with ``---`` separators."""
        return SEPARATOR.join(self.sections(documents, version)).strip()


def render_context(
    definition: ContextDefinition,
    version: str,
    store: DocumentStore,
    renderer: TemplateRenderer,
    site: SiteSettings | None = None,
) -> str:
    """Read the edition's documents from ``store`` and assemble them."""
    edition = definition.edition(version)
    documents = load_documents(store, edition.sections)
    logger.debug(
        "Assembling %s v%s from %d of %d documents",
        definition.name,
        version,
        len(documents),
        len(edition.sections),
    )
    return ContextAssembler(definition, renderer, site).assemble(documents, version)
