"""Settings for discovery and the triviality heuristics."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Accepted manifest spellings, matched case-sensitively against file names.
MANIFEST_FILENAMES: tuple[str, ...] = ("Cargo.toml", "cargo.toml")

# A trivial main body spans at most this many newlines: "{", one statement, "}".
DEFAULT_MAX_MAIN_NEWLINES = 2

# Matched as a plain substring of the main body, not as a macro invocation.
DEFAULT_PRINT_MACRO = "println!"

_ENV_MAX_MAIN_NEWLINES = "CRATE_TRIAGE_MAX_MAIN_NEWLINES"


@dataclass(frozen=True)
class HeuristicSettings:
    """Tunable thresholds for the binary heuristic."""

    max_main_newlines: int = DEFAULT_MAX_MAIN_NEWLINES
    print_macro: str = DEFAULT_PRINT_MACRO


def _env_int(key: str, default: int) -> int:
    return int(os.environ.get(key, default))


def load_settings() -> HeuristicSettings:
    """Build settings from the environment.

    Reads from environment variables:
        CRATE_TRIAGE_MAX_MAIN_NEWLINES: newline budget for a trivial main (default: 2)
    """
    max_newlines = _env_int(_ENV_MAX_MAIN_NEWLINES, DEFAULT_MAX_MAIN_NEWLINES)
    if max_newlines < 0:
        raise ValueError(f"{_ENV_MAX_MAIN_NEWLINES} must be >= 0, got {max_newlines}")
    return HeuristicSettings(max_main_newlines=max_newlines)
