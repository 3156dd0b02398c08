"""The edition table: which prose and which documents make up each context.

Prose is data. Every version of every context is a record in ``editions.yml``
naming its header, prose and footer templates and its ordered document
sections, instead of a separate hand-written function per revision.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hapsite.context.exceptions import EditionTableError, UnknownContextError, UnknownEditionError

if TYPE_CHECKING:
    from hapsite.resources.templates import TemplateRenderer

logger = logging.getLogger(__name__)

EDITIONS_FILE = "editions.yml"

SourceKind = Literal["content", "sdk_docs"]


def version_sort_key(version: str) -> tuple[tuple[int, int | str], ...]:
    """Order ``"0.10"`` after ``"0.9"``; non-numeric parts sort after numeric ones."""
    return tuple((0, int(part)) if part.isdigit() else (1, part) for part in version.split("."))


class DocumentDescriptor(BaseModel):
    """One document slot in an assembled context."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Logical document name (e.g. 'protocol')")
    path: str = Field(description="Path relative to the context's source root")
    required: bool = Field(default=True, description="Fail the request when the file is missing")
    heading: str | None = Field(default=None, description="Literal heading emitted before the document")


class Edition(BaseModel):
    """The prose and document list for one version of one context."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    released: str = Field(description="Release label shown in the header (e.g. 'January 2026')")
    header: str = Field(description="Header template")
    prose: list[str] = Field(default_factory=list, description="Prose block templates, in order")
    sections: list[DocumentDescriptor] = Field(description="Document sections, in order")
    footer: str = Field(description="Footer template")

    @field_validator("sections")
    @classmethod
    def validate_unique_names(cls, v: list[DocumentDescriptor]) -> list[DocumentDescriptor]:
        names = [section.name for section in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            msg = f"Duplicate section names: {', '.join(duplicates)}"
            raise ValueError(msg)
        return v


class ContextDefinition(BaseModel):
    """A named context endpoint and its editions."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    route: str = Field(description="HTTP path the context is served at")
    source: SourceKind = Field(description="Where the documents are read from")
    editions: dict[str, Edition]

    @field_validator("route")
    @classmethod
    def validate_route(cls, v: str) -> str:
        if not v.startswith("/"):
            msg = f"Route must start with '/': {v}"
            raise ValueError(msg)
        return v

    @field_validator("editions")
    @classmethod
    def validate_editions(cls, v: dict[str, Edition]) -> dict[str, Edition]:
        if not v:
            msg = "At least one edition is required"
            raise ValueError(msg)
        return v

    def versions(self) -> list[str]:
        return sorted(self.editions, key=version_sort_key)

    def edition(self, version: str) -> Edition:
        try:
            return self.editions[version]
        except KeyError:
            raise UnknownEditionError(self.name, version, self.versions()) from None

    def latest(self) -> str:
        """Return the newest version that has an edition."""
        return self.versions()[-1]


class ContextCatalog(BaseModel):
    """All context definitions, keyed by name."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    contexts: dict[str, ContextDefinition]

    def get(self, name: str) -> ContextDefinition:
        try:
            return self.contexts[name]
        except KeyError:
            raise UnknownContextError(name, sorted(self.contexts)) from None

    def definitions(self) -> list[ContextDefinition]:
        return list(self.contexts.values())


def parse_context_catalog(raw: str) -> ContextCatalog:
    """Parse and validate edition table YAML.

    Raises:
        EditionTableError: If the YAML is malformed or fails validation.

    """
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as e:
        raise EditionTableError(str(e)) from e

    if not isinstance(data, dict):
        raise EditionTableError("top-level value is not a mapping")

    # Context names come from the mapping keys.
    contexts = data.get("contexts")
    if isinstance(contexts, dict):
        data["contexts"] = {
            name: {**body, "name": name} if isinstance(body, dict) else body for name, body in contexts.items()
        }

    try:
        return ContextCatalog.model_validate(data)
    except ValidationError as e:
        raise EditionTableError(str(e)) from e


def load_context_catalog(renderer: TemplateRenderer) -> ContextCatalog:
    """Load ``editions.yml`` from the renderer's search paths (site override first)."""
    catalog = parse_context_catalog(renderer.read_data(EDITIONS_FILE))
    logger.debug("Loaded %d context definitions", len(catalog.contexts))
    return catalog
