"""Loader for Cargo.toml manifests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from semver import Version

from crate_triage.exceptions import ManifestError, SourceReadError
from crate_triage.models.manifest import BinDecl, LibDecl, PackageManifest


def _optional_path(table: dict[str, Any], where: str, path: Path | None) -> str | None:
    value = table.get("path")
    if value is None or isinstance(value, str):
        return value
    raise ManifestError(f"'{where}.path' must be a string, got {type(value).__name__}", path)


def _parse_version(raw: Any, path: Path | None) -> Version:
    if not isinstance(raw, str):
        raise ManifestError(
            f"'package.version' must be a string, got {type(raw).__name__}", path
        )
    try:
        return Version.parse(raw)
    except ValueError as e:
        raise ManifestError(f"invalid semantic version {raw!r}: {e}", path) from e


def _parse_lib(data: dict[str, Any], path: Path | None) -> LibDecl | None:
    lib = data.get("lib")
    if lib is None:
        return None
    if not isinstance(lib, dict):
        raise ManifestError("'lib' must be a table", path)
    return LibDecl(path=_optional_path(lib, "lib", path))


def _parse_bins(data: dict[str, Any], path: Path | None) -> tuple[BinDecl, ...] | None:
    bins = data.get("bin")
    if bins is None:
        return None
    if not isinstance(bins, list):
        raise ManifestError("'bin' must be an array of tables", path)
    decls: list[BinDecl] = []
    for i, entry in enumerate(bins):
        if not isinstance(entry, dict):
            raise ManifestError(f"'bin[{i}]' must be a table", path)
        decls.append(BinDecl(path=_optional_path(entry, f"bin[{i}]", path)))
    return tuple(decls)


def load_manifest(content: str, path: Path | None = None) -> PackageManifest:
    """Deserialize manifest text into a :class:`PackageManifest`.

    Args:
        content: Raw TOML text.
        path: Manifest location, only used in error messages.

    Raises:
        ManifestError: invalid TOML, missing ``package.name`` or
            ``package.version``, an invalid version, or mistyped fields.
    """
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"invalid TOML: {e}", path) from e

    package = data.get("package")
    if not isinstance(package, dict):
        raise ManifestError("missing [package] table", path)

    name = package.get("name")
    if name is None:
        raise ManifestError("missing 'package.name'", path)
    if not isinstance(name, str):
        raise ManifestError(f"'package.name' must be a string, got {type(name).__name__}", path)

    if "version" not in package:
        raise ManifestError("missing 'package.version'", path)
    version = _parse_version(package["version"], path)

    return PackageManifest(
        name=name,
        version=version,
        library=_parse_lib(data, path),
        binaries=_parse_bins(data, path),
    )


def read_manifest(path: Path) -> PackageManifest:
    """Read and load the manifest file at *path*."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ManifestError(f"not valid UTF-8: {e}", path) from e
    return load_manifest(content, path)
