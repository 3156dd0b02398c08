import json
from pathlib import Path

import pytest

from hapsite.config import ManifestNotFoundError, ManifestVersionError, SitePaths, read_manifest_version


def _manifest(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "package.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_reads_version_as_opaque_string(tmp_path: Path):
    assert read_manifest_version(_manifest(tmp_path, {"version": "0.1"})) == "0.1"
    assert read_manifest_version(_manifest(tmp_path, {"version": "0.3.0-beta"})) == "0.3.0-beta"


def test_missing_manifest(tmp_path: Path):
    with pytest.raises(ManifestNotFoundError) as excinfo:
        read_manifest_version(tmp_path / "package.json")
    assert excinfo.value.manifest_path == tmp_path / "package.json"


def test_invalid_json(tmp_path: Path):
    path = tmp_path / "package.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ManifestVersionError, match="invalid JSON"):
        read_manifest_version(path)


@pytest.mark.parametrize("payload", [{}, {"version": ""}, {"version": 1}, ["0.1"]])
def test_unusable_version(tmp_path: Path, payload: object):
    with pytest.raises(ManifestVersionError):
        read_manifest_version(_manifest(tmp_path, payload))


def test_site_paths_resolve_against_site_root(tmp_path: Path):
    site_root = tmp_path / "website"
    paths = SitePaths.from_settings(site_root)

    assert paths.site_root == site_root.resolve()
    assert paths.manifest == site_root.resolve() / "package.json"
    assert paths.content_root == tmp_path.resolve() / "content"
    assert paths.content_dir("0.1") == tmp_path.resolve() / "content" / "0.1"
    assert paths.sdk_target == site_root.resolve() / "src" / "sdk-docs"
