"""Tests for assembling plain-text contexts."""

import logging
from pathlib import Path

import pytest

from hapsite.config import SiteSettings
from hapsite.context import (
    SEPARATOR,
    ContextAssembler,
    MissingDocumentError,
    UnknownEditionError,
    load_context_catalog,
    parse_context_catalog,
    render_context,
)
from hapsite.resources import TemplateRenderer
from hapsite.storage import MemoryDocumentStore

TABLE = """
contexts:
  context:
    route: /context.txt
    source: content
    editions:
      "0.1":
        released: January 2026
        header: header.jinja
        prose: [intro.jinja]
        sections:
          - name: protocol
            path: protocol.md
          - name: integration
            path: integration.md
            required: false
          - name: service
            path: service.md
          - name: governance
            path: governance.md
        footer: footer.jinja
"""


@pytest.fixture
def renderer(tmp_path: Path) -> TemplateRenderer:
    (tmp_path / "header.jinja").write_text("# {{ site.title }}\n\nv{{ version }} {{ edition.released }}\n")
    (tmp_path / "intro.jinja").write_text("\n\nIntro prose.\n\n")
    (tmp_path / "footer.jinja").write_text("Footer\n")
    return TemplateRenderer([tmp_path])


@pytest.fixture
def definition():
    return parse_context_catalog(TABLE).get("context")


@pytest.fixture
def packaged():
    renderer = TemplateRenderer()
    return renderer, load_context_catalog(renderer)


def test_sections_are_joined_in_order_without_empty_slots(definition, renderer):
    store = MemoryDocumentStore({"protocol.md": "P", "service.md": "S", "governance.md": "G"})

    body = render_context(definition, "0.1", store, renderer, SiteSettings(title="HAP"))

    assert body == SEPARATOR.join(["# HAP\n\nv0.1 January 2026", "Intro prose.", "P", "S", "G", "Footer"])
    assert "---\n\n---" not in body


def test_optional_document_is_included_when_present(definition, renderer):
    store = MemoryDocumentStore(
        {"protocol.md": "P", "integration.md": "I", "service.md": "S", "governance.md": "G"}
    )

    sections = ContextAssembler(definition, renderer).sections(
        {"protocol": "P", "integration": "I", "service": "S", "governance": "G"}, "0.1"
    )

    assert sections[2:6] == ["P", "I", "S", "G"]
    assert render_context(definition, "0.1", store, renderer).count("\n---\n") == 6


def test_document_whitespace_is_trimmed(definition, renderer):
    documents = {"protocol": "\n\n# Protocol\n\nBody.\n\n\n", "service": "S\n", "governance": "G"}

    sections = ContextAssembler(definition, renderer).sections(documents, "0.1")

    assert "# Protocol\n\nBody." in sections


def test_blank_optional_document_is_dropped(definition, renderer):
    documents = {"protocol": "P", "integration": "  \n\n", "service": "S", "governance": "G"}

    body = ContextAssembler(definition, renderer).assemble(documents, "0.1")

    assert "---\n\n---" not in body
    assert body.count(SEPARATOR) == 5


def test_blank_required_document_is_dropped_with_warning(
    definition, renderer, caplog: pytest.LogCaptureFixture
):
    documents = {"protocol": "P", "service": "\n\n", "governance": "G"}

    with caplog.at_level(logging.WARNING, logger="hapsite.context"):
        sections = ContextAssembler(definition, renderer).sections(documents, "0.1")

    assert sections[2:4] == ["P", "G"]
    assert any("Required document service (service.md) is blank" in r.getMessage() for r in caplog.records)


def test_blank_optional_document_is_not_reported(
    definition, renderer, caplog: pytest.LogCaptureFixture
):
    documents = {"protocol": "P", "integration": "", "service": "S", "governance": "G"}

    with caplog.at_level(logging.WARNING, logger="hapsite.context"):
        ContextAssembler(definition, renderer).sections(documents, "0.1")

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_missing_required_document_raises(definition, renderer):
    store = MemoryDocumentStore({"protocol.md": "P", "governance.md": "G"})

    with pytest.raises(MissingDocumentError, match="service"):
        render_context(definition, "0.1", store, renderer)


def test_unknown_version_raises(definition, renderer):
    with pytest.raises(UnknownEditionError):
        ContextAssembler(definition, renderer).assemble({}, "0.3")


def test_packaged_protocol_context(packaged):
    renderer, catalog = packaged
    store = MemoryDocumentStore(
        {
            "protocol.md": "# Protocol\n\nProtocol body.",
            "service.md": "# Service\n\nService body.",
            "governance.md": "# Governance\n\nGovernance body.",
        }
    )

    body = render_context(catalog.get("context"), "0.1", store, renderer)

    assert body.startswith("# Human Agency Protocol - Complete Context\n\n**Version 0.1 — January 2026**")
    assert body.endswith("Website: https://humanagencyprotocol.org")
    assert "## Homepage" in body
    assert body.index("## Homepage") < body.index("# Protocol") < body.index("# Service")
    assert body.index("# Service") < body.index("# Governance")
    assert "# Integration" not in body
    assert body == body.strip()


def test_packaged_sdk_context_headings(packaged):
    renderer, catalog = packaged
    store = MemoryDocumentStore(
        {
            "README.md": "# HAP SDK\n\nInstall with npm.",
            "API.md": "## createClient()",
            "LOCAL_DEVELOPMENT.md": "## Setup",
        }
    )

    body = render_context(catalog.get("sdk-context"), "0.2.0", store, renderer)

    assert body.startswith("# HAP SDK (TypeScript) - Complete Documentation\n\n**Version 0.2.0 — November 2025**")
    assert "---\n\n# API Reference\n\n## createClient()\n\n---" in body
    assert "---\n\n# Local Development Guide\n\n## Setup\n\n---" in body
    assert "# Roadmap" not in body
    assert body.endswith("**Website**: https://humanagencyprotocol.org/integration/sdk")


def test_packaged_sdk_context_with_roadmap(packaged):
    renderer, catalog = packaged
    store = MemoryDocumentStore(
        {
            "README.md": "# HAP SDK",
            "API.md": "## createClient()",
            "LOCAL_DEVELOPMENT.md": "## Setup",
            "ROADMAP.md": "## Next\n\nPython SDK.",
        }
    )

    header, *_, roadmap, _footer = render_context(
        catalog.get("sdk-context"), "0.2.0", store, renderer
    ).split(SEPARATOR)

    assert "Local Development Guide, and the Roadmap" in header
    assert roadmap == "# Roadmap\n\n## Next\n\nPython SDK."
