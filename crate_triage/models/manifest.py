"""Package manifest record and its ordering."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any

from semver import Version


@dataclass(frozen=True)
class LibDecl:
    """The ``[lib]`` table; only the path override matters here."""

    path: str | None = None


@dataclass(frozen=True)
class BinDecl:
    """One ``[[bin]]`` entry."""

    path: str | None = None


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _tiebreak_key(manifest: PackageManifest) -> tuple:
    # Orders manifests that share (name, version precedence) but differ elsewhere.
    build = manifest.version.build
    lib = manifest.library
    bins = manifest.binaries
    return (
        (build is not None, build or ""),
        (lib is not None, lib is not None and lib.path is not None, (lib and lib.path) or ""),
        (
            bins is not None,
            tuple((b.path is not None, b.path or "") for b in bins or ()),
        ),
    )


def compare_manifests(a: PackageManifest, b: PackageManifest) -> int:
    """Three-way comparison of two manifests.

    Primary order is ``(name, version)`` with semantic-version precedence.
    Remaining fields only break ties, so the result is 0 exactly when the
    manifests are equal.
    """
    result = _cmp(a.name, b.name)
    if result:
        return result
    result = a.version.compare(b.version)
    if result:
        return result
    return _cmp(_tiebreak_key(a), _tiebreak_key(b))


manifest_sort_key = functools.cmp_to_key(compare_manifests)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class PackageManifest:
    """Parsed contents of a ``Cargo.toml`` relevant to triage.

    ``binaries`` is ``None`` when the manifest has no ``bin`` key, which is
    distinct from an empty list.
    """

    name: str
    version: Version
    library: LibDecl | None = None
    binaries: tuple[BinDecl, ...] | None = None

    def _identity(self) -> tuple:
        # str() keeps build metadata, which semver equality ignores.
        return (self.name, str(self.version), self.library, self.binaries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageManifest):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: PackageManifest) -> bool:
        if not isinstance(other, PackageManifest):
            return NotImplemented
        return compare_manifests(self, other) < 0
