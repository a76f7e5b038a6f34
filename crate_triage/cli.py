"""CLI entry point: crate-triage.

Usage:
    crate-triage /path/to/unpacked/crates            # print trivial packages
    crate-triage -v /path/a /path/b                  # also print non-trivial ones
    crate-triage --format json /path/to/crates       # one JSON document per scan path
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
import structlog

from crate_triage.aggregator import PackageVerdict, triage
from crate_triage.core.config import load_settings
from crate_triage.core.logging import setup_logging
from crate_triage.exceptions import TriageError

log = structlog.get_logger(__name__)

NON_TRIVIAL_PREFIX = "non trivial: "


def _format_text(verdicts: list[PackageVerdict], verbose: bool) -> list[str]:
    lines = []
    for v in verdicts:
        if v.trivial:
            lines.append(v.name)
        elif verbose:
            lines.append(f"{NON_TRIVIAL_PREFIX}{v.name}")
    return lines


def _format_json(scan_path: Path, verdicts: list[PackageVerdict], verbose: bool) -> str:
    packages = [v.to_dict() for v in verdicts if v.trivial or verbose]
    return json.dumps({"path": str(scan_path), "packages": packages}, indent=2)


@click.command()
@click.option("-v", "--verbose", is_flag=True, help="Also display non-trivial crates.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (default: $CRATE_TRIAGE_LOG_LEVEL or WARNING).",
)
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
def main(verbose: bool, fmt: str, log_level: str | None, paths: tuple[Path, ...]) -> None:
    """Scan paths containing extracted crates and report the ones without real code."""
    setup_logging(log_level)

    try:
        settings = load_settings()
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    for path in paths:
        try:
            verdicts = triage(path, settings)
        except (TriageError, OSError) as e:
            log.error("triage.failed", scan_path=str(path), error=str(e))
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        if fmt == "json":
            click.echo(_format_json(path, verdicts, verbose))
        else:
            for line in _format_text(verdicts, verbose):
                click.echo(line)


if __name__ == "__main__":
    main()
