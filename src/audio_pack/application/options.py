"""Typed request object passed through the pack use-case."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from audio_pack.application.ports import AudioConverter
from audio_pack.types import DEFAULT_SOURCE_EXTENSION, DEFAULT_TARGET_EXTENSION


@dataclass(frozen=True)
class PackRequest:
    """Validated, immutable description of one pack to build.

    Instances come from ``PackRequestBuilder.build()``; constructing one
    directly skips validation.
    """

    sources: tuple[Path, ...]
    output_path: Path
    namespace: str
    description: str
    pack_format: int
    converter: AudioConverter
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    target_extension: str = DEFAULT_TARGET_EXTENSION
