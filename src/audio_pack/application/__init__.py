"""Application-layer use-cases and request objects."""

from __future__ import annotations

from pathlib import Path

from audio_pack.application.builder import PackRequestBuilder
from audio_pack.application.options import PackRequest
from audio_pack.application.ports import AudioConverter, NamedConverter
from audio_pack.application.results import ConvertedSound, PackResult, SkippedSource


def create_resource_pack(
    request: PackRequest,
    *,
    workspace_dir: Path | None = None,
) -> PackResult:
    """Build the resource pack described by ``request`` via lazy use-case import."""
    from audio_pack.application.use_cases import create_resource_pack as _impl

    return _impl(request, workspace_dir=workspace_dir)


__all__ = [
    "AudioConverter",
    "NamedConverter",
    "PackRequest",
    "PackRequestBuilder",
    "ConvertedSound",
    "SkippedSource",
    "PackResult",
    "create_resource_pack",
]
