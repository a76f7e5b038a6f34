"""One verdict per package name across all of its root versions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from crate_triage.classifier import assess_root
from crate_triage.core.config import HeuristicSettings
from crate_triage.discovery import discover
from crate_triage.models.root import PackageRoot, ScanIndex

log = structlog.get_logger(__name__)


@dataclass
class PackageVerdict:
    """Triage result for a single package name."""

    name: str
    trivial: bool
    versions: list[str] = field(default_factory=list)
    evidence: Path | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "trivial": self.trivial,
            "versions": self.versions,
            "evidence": str(self.evidence) if self.evidence is not None else None,
        }


def package_verdict(
    name: str,
    roots: Iterable[PackageRoot],
    settings: HeuristicSettings | None = None,
) -> PackageVerdict:
    """Non-trivial if any root is; roots after the first non-trivial one are not examined."""
    roots = list(roots)
    versions = [str(r.manifest.version) for r in roots]
    for root in roots:
        verdict = assess_root(root, settings)
        if verdict.non_trivial:
            log.debug(
                "aggregator.non_trivial",
                name=name,
                version=str(root.manifest.version),
                evidence=str(verdict.evidence),
            )
            return PackageVerdict(
                name=name, trivial=False, versions=versions, evidence=verdict.evidence
            )
    return PackageVerdict(name=name, trivial=True, versions=versions)


def classify(
    scan_index: ScanIndex,
    settings: HeuristicSettings | None = None,
) -> list[PackageVerdict]:
    """Classify every package in *scan_index*, in the index's iteration order."""
    return [package_verdict(name, group, settings) for name, group in scan_index.items()]


def triage(scan_path: Path, settings: HeuristicSettings | None = None) -> list[PackageVerdict]:
    """Discover and classify all packages under one scan path."""
    verdicts = classify(discover(scan_path), settings)
    log.info(
        "triage.complete",
        scan_path=str(scan_path),
        packages=len(verdicts),
        trivial=sum(1 for v in verdicts if v.trivial),
    )
    return verdicts
