"""Data models for manifests, package roots, and scan results."""

from crate_triage.models.manifest import BinDecl, LibDecl, PackageManifest, compare_manifests
from crate_triage.models.root import PackageRoot, RootGroup, ScanIndex

__all__ = [
    "BinDecl",
    "LibDecl",
    "PackageManifest",
    "PackageRoot",
    "RootGroup",
    "ScanIndex",
    "compare_manifests",
]
