#!/usr/bin/env python3
"""Layer boundary checks for the audio_pack package."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src" / "audio_pack"

# The pipeline core and the application layer stay free of CLI and process code.
# Core modules also never reach up into the application layer.
CORE_MODULES = ["collect.py", "naming.py", "descriptors.py", "archive.py", "workspace.py"]
BOUNDARY_BANNED = ["import typer", "from typer", "import subprocess", "audio_pack.cli"]
CORE_BANNED = BOUNDARY_BANNED + ["audio_pack.application", "audio_pack.converters"]
APPLICATION_BANNED = BOUNDARY_BANNED + ["audio_pack.converters"]


def _violations(path: Path, banned: list[str]) -> list[str]:
    text = path.read_text(encoding="utf-8")
    return [f"{path.relative_to(ROOT)}: found '{token}'" for token in banned if token in text]


def find_violations(package: Path = PACKAGE) -> list[str]:
    """Return a message per banned import found in a restricted module."""
    found: list[str] = []
    for name in CORE_MODULES:
        found.extend(_violations(package / name, CORE_BANNED))
    for path in sorted((package / "application").glob("*.py")):
        found.extend(_violations(path, APPLICATION_BANNED))
    return found


def main() -> None:
    """Run repository architecture boundary checks."""
    found = find_violations()
    if found:
        raise SystemExit("Architecture violation in " + "\n".join(found))
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
