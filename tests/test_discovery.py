"""Tests for root discovery and deduplication."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from crate_triage.discovery import discover, is_manifest, iter_manifest_files
from crate_triage.exceptions import DiscoveryError, ManifestError, SourceReadError


class TestIsManifest:
    @pytest.mark.parametrize("name", ["Cargo.toml", "cargo.toml"])
    def test_accepted(self, name):
        assert is_manifest(name)

    @pytest.mark.parametrize("name", ["CARGO.TOML", "Cargo.TOML", "cargo.toml.orig", "Cargo.lock"])
    def test_rejected(self, name):
        assert not is_manifest(name)


class TestDiscover:
    def test_single_crate(self, tmp_path: Path, make_crate):
        make_crate("pkgA", files={"src/main.rs": "fn main() {}"})
        index = discover(tmp_path)
        assert list(index) == ["pkgA"]
        root = next(iter(index["pkgA"]))
        assert root.directory == tmp_path / "pkgA"
        assert str(root.manifest.version) == "0.1.0"

    def test_lowercase_manifest(self, tmp_path: Path, make_crate):
        make_crate("low", manifest_name="cargo.toml")
        assert "low" in discover(tmp_path)

    def test_identical_manifests_collapse(self, tmp_path: Path, make_crate):
        make_crate("a/foo-0.1.0", name="foo")
        make_crate("b/foo-0.1.0", name="foo")
        index = discover(tmp_path)
        assert len(index["foo"]) == 1

    def test_versions_grouped_and_ordered(self, tmp_path: Path, make_crate):
        make_crate("foo-0.10.0", name="foo", version="0.10.0")
        make_crate("foo-0.2.0", name="foo", version="0.2.0")
        make_crate("bar-1.0.0", name="bar", version="1.0.0")
        index = discover(tmp_path)
        assert [str(r.manifest.version) for r in index["foo"]] == ["0.2.0", "0.10.0"]
        assert len(index["bar"]) == 1

    def test_nested_manifests_are_independent_roots(self, tmp_path: Path, make_crate):
        make_crate("outer")
        make_crate("outer/vendor/inner")
        index = discover(tmp_path)
        assert set(index) == {"outer", "inner"}

    def test_manifest_error_is_fatal(self, tmp_path: Path, make_crate):
        make_crate("good")
        bad = tmp_path / "bad"
        bad.mkdir()
        (bad / "Cargo.toml").write_text("[package]\nname = \"bad\"\n")
        with pytest.raises(ManifestError):
            discover(tmp_path)

    def test_non_manifest_files_ignored(self, tmp_path: Path):
        (tmp_path / "Cargo.lock").write_text("garbage")
        (tmp_path / "CARGO.TOML").write_text("garbage")
        assert len(discover(tmp_path)) == 0

    def test_missing_scan_path(self, tmp_path: Path):
        with pytest.raises(DiscoveryError, match="not found"):
            discover(tmp_path / "nope")

    def test_scan_path_is_manifest_file(self, tmp_path: Path, make_crate):
        root = make_crate("single")
        index = discover(root / "Cargo.toml")
        assert list(index) == ["single"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_manifest_skipped(self, tmp_path: Path, make_crate):
        real = make_crate("real")
        other = tmp_path / "other"
        other.mkdir()
        (other / "Cargo.toml").symlink_to(real / "Cargo.toml")
        found = list(iter_manifest_files(tmp_path))
        assert found == [real / "Cargo.toml"]

    def test_unreadable_directory_is_fatal(self, tmp_path: Path, make_crate, monkeypatch):
        make_crate("ok")
        make_crate("locked/inner")
        locked = str(tmp_path / "locked")
        real_scandir = os.scandir

        def scandir(path="."):
            if os.fspath(path) == locked:
                raise PermissionError(13, "Permission denied", locked)
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)
        with pytest.raises(SourceReadError) as exc:
            discover(tmp_path)
        assert exc.value.path == Path(locked)
        assert isinstance(exc.value.__cause__, PermissionError)
