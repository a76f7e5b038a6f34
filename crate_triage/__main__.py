"""Allow ``python -m crate_triage``."""

from crate_triage.cli import main

main()
