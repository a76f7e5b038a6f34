"""Shared pytest fixtures for crate-triage tests."""

from __future__ import annotations

from pathlib import Path

import pytest

TRIVIAL_MAIN = 'fn main() {\n    println!("Hello, world!");\n}\n'


def manifest_text(
    name: str,
    version: str = "0.1.0",
    *,
    lib_path: str | None = None,
    bin_paths: list[str | None] | None = None,
) -> str:
    lines = ["[package]", f'name = "{name}"', f'version = "{version}"', ""]
    if lib_path is not None:
        lines += ["[lib]", f'path = "{lib_path}"', ""]
    for p in bin_paths or []:
        lines.append("[[bin]]")
        lines.append(f'name = "{name}-bin"')
        if p is not None:
            lines.append(f'path = "{p}"')
        lines.append("")
    return "\n".join(lines)


@pytest.fixture
def make_crate(tmp_path: Path):
    """Factory that lays out an unpacked crate under tmp_path."""

    def _make(
        dirname: str,
        name: str | None = None,
        version: str = "0.1.0",
        *,
        files: dict[str, str] | None = None,
        lib_path: str | None = None,
        bin_paths: list[str | None] | None = None,
        manifest_name: str = "Cargo.toml",
    ) -> Path:
        root = tmp_path / dirname
        root.mkdir(parents=True, exist_ok=True)
        (root / manifest_name).write_text(
            manifest_text(name or Path(dirname).name, version, lib_path=lib_path, bin_paths=bin_paths)
        )
        for rel, content in (files or {}).items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        return root

    return _make
