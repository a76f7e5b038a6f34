"""Custom exceptions for crate-triage."""

from __future__ import annotations

from pathlib import Path


class TriageError(Exception):
    """Base exception for all triage errors."""


class SourceReadError(TriageError):
    """Raised when a manifest or source file cannot be opened or read."""

    def __init__(self, path: Path | None, reason: str):
        self.path = path
        super().__init__(f"Failed to read {path}: {reason}")


class ManifestError(TriageError):
    """Raised when a manifest is malformed, incomplete, or has an invalid version."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class ParseFailure(TriageError):
    """Raised when no syntax tree can be produced for a source file."""

    def __init__(self, path: Path | None, reason: str = "parsing failed"):
        self.path = path
        super().__init__(f"{path}: {reason}" if path is not None else reason)


class StructuralError(TriageError):
    """Raised when a syntax node lacks a field the grammar should provide.

    Usually means the grammar version does not match what the classifier
    expects, or the input has an unexpected shape.
    """

    def __init__(self, path: Path | None, node: str, missing: str):
        self.path = path
        self.node = node
        self.missing = missing
        super().__init__(f"{path}: {node} does not have a {missing}")


class DiscoveryError(TriageError):
    """Raised when a scan path or a discovered manifest cannot be resolved to a root."""
