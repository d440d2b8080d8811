"""Public one-call pack API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from audio_pack.application.ports import AudioConverter
from audio_pack.application.results import PackResult
from audio_pack.application.use_cases import build_pack_request
from audio_pack.application.use_cases import create_resource_pack
from audio_pack.types import DEFAULT_SOURCE_EXTENSION
from audio_pack.types import DEFAULT_TARGET_EXTENSION
from audio_pack.types import PathRef


def build_resource_pack(
    *,
    output_path: PathRef,
    namespace: str,
    pack_format: int,
    converter: AudioConverter,
    files: Optional[Iterable[Optional[PathRef]]] = None,
    input_directory: Optional[PathRef] = None,
    description: Optional[str] = "",
    source_extension: str = DEFAULT_SOURCE_EXTENSION,
    target_extension: str = DEFAULT_TARGET_EXTENSION,
    workspace_dir: Optional[Path] = None,
) -> PackResult:
    """Validate inputs, convert sources, and write the resource pack zip."""
    request = build_pack_request(
        output_path=output_path,
        namespace=namespace,
        pack_format=pack_format,
        converter=converter,
        files=files,
        input_directory=input_directory,
        description=description,
        source_extension=source_extension,
        target_extension=target_extension,
    )
    return create_resource_pack(request, workspace_dir=workspace_dir)
