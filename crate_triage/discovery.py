"""Find manifests under a scan path and group them by package name."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import structlog

from crate_triage.core.config import MANIFEST_FILENAMES
from crate_triage.exceptions import DiscoveryError, SourceReadError
from crate_triage.manifest import read_manifest
from crate_triage.models.root import PackageRoot, ScanIndex

log = structlog.get_logger(__name__)


def is_manifest(file_name: str) -> bool:
    return file_name in MANIFEST_FILENAMES


def _raise_walk_error(error: OSError) -> None:
    path = Path(error.filename) if error.filename else None
    raise SourceReadError(path, error.strerror or str(error)) from error


def iter_manifest_files(scan_path: Path) -> Iterator[Path]:
    """Yield manifest files under *scan_path* in a deterministic order.

    Symlinks are not followed and symlinked files are skipped. A directory
    that cannot be listed aborts the walk with SourceReadError.
    """
    if scan_path.is_file():
        if not scan_path.is_symlink() and is_manifest(scan_path.name):
            yield scan_path
        return

    for dirpath, dirnames, filenames in os.walk(scan_path, onerror=_raise_walk_error):
        dirnames.sort()
        for f in sorted(filenames):
            if not is_manifest(f):
                continue
            candidate = Path(dirpath) / f
            if candidate.is_symlink() or not candidate.is_file():
                continue
            yield candidate


def load_root(manifest_path: Path) -> PackageRoot:
    """Build a :class:`PackageRoot` from a manifest file."""
    directory = manifest_path.parent
    if directory == manifest_path or not directory.is_dir():
        raise DiscoveryError(f"unexpected lack of parent for {manifest_path}")
    return PackageRoot(directory=directory, manifest=read_manifest(manifest_path))


def discover(scan_path: Path) -> ScanIndex:
    """Walk *scan_path* and group every discovered root by package name.

    Any manifest that fails to load aborts the whole scan path.

    Nested manifests (e.g. vendored crates inside an unpacked crate) are
    discovered as independent roots.
    """
    if not scan_path.exists():
        raise DiscoveryError(f"scan path not found: {scan_path}")

    index = ScanIndex()
    for manifest_path in iter_manifest_files(scan_path):
        root = load_root(manifest_path)
        added = index.add(root)
        log.debug(
            "discovery.root_found",
            name=root.name,
            version=str(root.manifest.version),
            directory=str(root.directory),
            duplicate=not added,
        )

    log.info(
        "discovery.complete",
        scan_path=str(scan_path),
        packages=len(index),
        roots=index.root_count,
    )
    return index
