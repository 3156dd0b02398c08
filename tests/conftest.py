from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

import pytest

from hapsite.config import HapSiteConfig, SitePaths


@dataclass(slots=True)
class SiteLayout:
    """A website directory with its sibling content, sdk and demo checkouts.

    Layout::

        repo/
        ├── website/package.json
        ├── content/<version>/*.md
        ├── sdk/README.md, sdk/docs/*.md
        └── demo/README.md
    """

    repo: Path
    site_root: Path
    version: str

    @property
    def paths(self) -> SitePaths:
        return SitePaths.from_settings(self.site_root, HapSiteConfig().paths)

    @property
    def content_dir(self) -> Path:
        return self.repo / "content" / self.version

    def write(self, relative: str, text: str) -> Path:
        path = self.repo / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path


@pytest.fixture
def empty_site(tmp_path: Path) -> SiteLayout:
    """A website directory with only a package.json (version 0.1)."""
    layout = SiteLayout(repo=tmp_path, site_root=tmp_path / "website", version="0.1")
    layout.write("website/package.json", json.dumps({"name": "hap-website", "version": "0.1"}))
    return layout


@pytest.fixture
def site(empty_site: SiteLayout) -> SiteLayout:
    """A complete site: versioned docs, SDK docs and the demo readme."""
    empty_site.write("content/0.1/protocol.md", "# Protocol\n\nProtocol body.\n")
    empty_site.write("content/0.1/integration.md", "# Integration\n\nIntegration body.\n")
    empty_site.write("content/0.1/service.md", "# Service\n\nService body.\n")
    empty_site.write("content/0.1/governance.md", "# Governance\n\nGovernance body.\n")
    empty_site.write("sdk/README.md", "# HAP SDK\n\nInstall with npm.\n")
    empty_site.write("sdk/docs/API.md", "## createClient()\n\nReturns a client.\n")
    empty_site.write("sdk/docs/LOCAL_DEVELOPMENT.md", "## Setup\n\nRun npm install.\n")
    empty_site.write("sdk/docs/ROADMAP.md", "## Next\n\nPython SDK.\n")
    empty_site.write("demo/README.md", "# HAP Demo\n\nTry the gates.\n")
    return empty_site


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep HAPSITE_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("HAPSITE_"):
            monkeypatch.delenv(key, raising=False)

