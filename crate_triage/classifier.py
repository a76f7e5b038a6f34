"""Triviality heuristics for binary and library entry points.

A binary is trivial when its only top-level function is a ``main`` that does
nothing but print, e.g. the ``cargo new`` template::

    fn main() {
        println!("Hello, world!");
    }

A library is trivial when none of its top-level items is declared plain
``pub``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from crate_triage.core.config import HeuristicSettings
from crate_triage.entry_points import binaries, library
from crate_triage.exceptions import SourceReadError
from crate_triage.models.root import PackageRoot
from crate_triage.syntax import (
    FUNCTION_ITEM,
    VISIBILITY_MODIFIER,
    ItemKind,
    find_child,
    node_text,
    parse_source,
    required_field,
    top_level_items,
)

log = structlog.get_logger(__name__)

_DEFAULT_SETTINGS = HeuristicSettings()

PUBLIC_VISIBILITY = "pub"


def _read_source(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e


def is_binary_trivial(path: Path, settings: HeuristicSettings | None = None) -> bool:
    """Classify a binary entry point.

    Non-trivial if any top-level function other than ``main`` exists, or a
    ``main`` body spans more than ``max_main_newlines`` newlines, or the body
    text lacks the print macro name. The macro check is a plain substring
    test, so a comment or string mentioning the macro also satisfies it.
    """
    settings = settings or _DEFAULT_SETTINGS
    content = _read_source(path)
    tree = parse_source(content, path)

    for item in top_level_items(tree):
        if item.type != FUNCTION_ITEM:
            continue

        name = node_text(required_field(item, "name", path), path)
        if name != "main":
            log.debug("classifier.binary_extra_function", path=str(path), function=name)
            return False

        body = node_text(required_field(item, "body", path), path)
        newlines = body.count("\n")
        if newlines > settings.max_main_newlines:
            log.debug("classifier.binary_long_main", path=str(path), newlines=newlines)
            return False

        if settings.print_macro not in body:
            log.debug("classifier.binary_main_without_print", path=str(path))
            return False

    return True


def is_library_trivial(path: Path) -> bool:
    """Classify a library entry point.

    Non-trivial as soon as one top-level item of a known :class:`ItemKind`
    carries exactly ``pub``; ``pub(crate)`` and friends do not count.
    """
    content = _read_source(path)
    tree = parse_source(content, path)

    for item in top_level_items(tree):
        kind = ItemKind.from_node(item)
        if kind is None:
            continue
        vis = find_child(item, VISIBILITY_MODIFIER)
        if vis is not None and node_text(vis, path) == PUBLIC_VISIBILITY:
            log.debug("classifier.library_public_item", path=str(path), kind=kind.name)
            return False

    return True


@dataclass
class RootVerdict:
    """Outcome for one package root."""

    root: PackageRoot
    non_trivial: bool
    evidence: Path | None = None  # entry point that proved non-triviality


def assess_root(root: PackageRoot, settings: HeuristicSettings | None = None) -> RootVerdict:
    """Check binaries in resolver order, then the library; stop at the first non-trivial one."""
    for bin_path in binaries(root):
        if not is_binary_trivial(bin_path, settings):
            return RootVerdict(root=root, non_trivial=True, evidence=bin_path)

    lib_path = library(root)
    if lib_path is not None and not is_library_trivial(lib_path):
        return RootVerdict(root=root, non_trivial=True, evidence=lib_path)

    return RootVerdict(root=root, non_trivial=False)


def root_is_non_trivial(root: PackageRoot, settings: HeuristicSettings | None = None) -> bool:
    return assess_root(root, settings).non_trivial
