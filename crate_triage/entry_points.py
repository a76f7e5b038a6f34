"""Resolve which source files make up a root's binaries and library."""

from __future__ import annotations

from pathlib import Path

from crate_triage.models.root import PackageRoot

DEFAULT_BIN_PATH = Path("src") / "main.rs"
DEFAULT_LIB_PATH = Path("src") / "lib.rs"


def binaries(root: PackageRoot) -> list[Path]:
    """Binary entry points, in manifest order.

    Declared ``[[bin]]`` paths are taken as-is without checking they exist;
    entries without a path are skipped. Without declared binaries, falls
    back to ``src/main.rs`` if present.
    """
    declared = root.manifest.binaries
    if declared:
        return [root.directory / b.path for b in declared if b.path is not None]

    default = root.directory / DEFAULT_BIN_PATH
    if default.exists():
        return [default]
    return []


def library(root: PackageRoot) -> Path | None:
    """Library entry point: an existing ``lib.path`` override, else ``src/lib.rs`` if present."""
    lib = root.manifest.library
    if lib is not None and lib.path is not None:
        path = root.directory / lib.path
        if path.exists():
            return path

    default = root.directory / DEFAULT_LIB_PATH
    if default.exists():
        return default
    return None
