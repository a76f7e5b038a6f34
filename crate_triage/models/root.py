"""Package roots and the per-name groups they are collected into."""

from __future__ import annotations

import bisect
import functools
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from crate_triage.models.manifest import PackageManifest


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class PackageRoot:
    """A directory holding one manifest.

    Identity is the manifest alone: the same manifest unpacked into two
    directories is one root.
    """

    directory: Path
    manifest: PackageManifest

    @property
    def name(self) -> str:
        return self.manifest.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageRoot):
            return NotImplemented
        return self.manifest == other.manifest

    def __hash__(self) -> int:
        return hash(self.manifest)

    def __lt__(self, other: PackageRoot) -> bool:
        if not isinstance(other, PackageRoot):
            return NotImplemented
        return self.manifest < other.manifest


class RootGroup:
    """Sorted, deduplicated roots sharing one package name."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._roots: list[PackageRoot] = []

    def add(self, root: PackageRoot) -> bool:
        """Insert *root* in order. Returns False if an equal root is already present."""
        if root.name != self.name:
            raise ValueError(f"root for {root.name!r} does not belong to group {self.name!r}")
        idx = bisect.bisect_left(self._roots, root)
        if idx < len(self._roots) and self._roots[idx] == root:
            return False
        self._roots.insert(idx, root)
        return True

    def __iter__(self) -> Iterator[PackageRoot]:
        return iter(self._roots)

    def __len__(self) -> int:
        return len(self._roots)

    def __contains__(self, root: object) -> bool:
        return root in self._roots

    def __repr__(self) -> str:
        versions = ", ".join(str(r.manifest.version) for r in self._roots)
        return f"RootGroup({self.name!r}, [{versions}])"


class ScanIndex:
    """Package name -> RootGroup for a single scan path.

    Names iterate in the order they were first seen.
    """

    def __init__(self) -> None:
        self._groups: dict[str, RootGroup] = {}

    def add(self, root: PackageRoot) -> bool:
        group = self._groups.get(root.name)
        if group is None:
            group = self._groups[root.name] = RootGroup(root.name)
        return group.add(root)

    def items(self) -> Iterator[tuple[str, RootGroup]]:
        return iter(self._groups.items())

    def __getitem__(self, name: str) -> RootGroup:
        return self._groups[name]

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    @property
    def root_count(self) -> int:
        return sum(len(g) for g in self._groups.values())
