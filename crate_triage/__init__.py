"""crate-triage: find placeholder crates among unpacked Rust packages."""

__version__ = "0.1.0"

from crate_triage.aggregator import PackageVerdict, classify, triage
from crate_triage.classifier import (
    RootVerdict,
    assess_root,
    is_binary_trivial,
    is_library_trivial,
    root_is_non_trivial,
)
from crate_triage.discovery import discover
from crate_triage.entry_points import binaries, library
from crate_triage.manifest import load_manifest, read_manifest
from crate_triage.models import (
    BinDecl,
    LibDecl,
    PackageManifest,
    PackageRoot,
    RootGroup,
    ScanIndex,
    compare_manifests,
)

__all__ = [
    "BinDecl",
    "LibDecl",
    "PackageManifest",
    "PackageRoot",
    "PackageVerdict",
    "RootGroup",
    "RootVerdict",
    "ScanIndex",
    "assess_root",
    "binaries",
    "classify",
    "compare_manifests",
    "discover",
    "is_binary_trivial",
    "is_library_trivial",
    "library",
    "load_manifest",
    "read_manifest",
    "root_is_non_trivial",
    "triage",
]
