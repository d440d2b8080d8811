"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConvertedSound:
    """One source file that converted successfully."""

    original_name: str
    output_name: str
    event_name: str
    namespace: str

    @property
    def sound_path(self) -> str:
        """Namespaced sound reference, ``<namespace>:<event>``."""
        return f"{self.namespace}:{self.event_name}"

    @property
    def event_key(self) -> str:
        """Key used in ``sounds.json``, ``custom.<namespace>.<event>``."""
        return f"custom.{self.namespace}.{self.event_name}"


@dataclass(frozen=True)
class SkippedSource:
    """One source file that did not make it into the pack."""

    source_path: Path
    reason: str


@dataclass(frozen=True)
class PackResult:
    """Structured pack outcome.

    ``created`` is ``False`` when no source converted; nothing is written to
    ``output_path`` in that case.
    """

    created: bool
    output_path: Path
    sounds: tuple[ConvertedSound, ...] = ()
    skipped: tuple[SkippedSource, ...] = ()
