"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class AudioConverter(Protocol):
    """Convert one source audio file into the pack's target format."""

    def convert(self, source_path: Path, target_path: Path) -> bool:
        """Write ``target_path`` from ``source_path``.

        Returns ``False`` when the file was not converted; may also raise.
        """


@runtime_checkable
class NamedConverter(AudioConverter, Protocol):
    """Converter that can be registered and selected by name."""

    name: str
