"""Top-level API for building audio resource packs."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from audio_pack.application import (
    AudioConverter,
    ConvertedSound,
    PackRequest,
    PackRequestBuilder,
    PackResult,
    SkippedSource,
)
from audio_pack.errors import (
    ArchiveError,
    ConfigurationError,
    ConverterError,
    DescriptorError,
    PackError,
    PackIOError,
    WorkspaceError,
)
from audio_pack.types import DEFAULT_SOURCE_EXTENSION, DEFAULT_TARGET_EXTENSION, PathRef

__version__ = "0.1.0"


def build_resource_pack(
    *,
    output_path: PathRef,
    namespace: str,
    pack_format: int,
    converter: AudioConverter,
    files: Iterable[PathRef | None] | None = None,
    input_directory: PathRef | None = None,
    description: str | None = "",
    source_extension: str = DEFAULT_SOURCE_EXTENSION,
    target_extension: str = DEFAULT_TARGET_EXTENSION,
    workspace_dir: Path | None = None,
) -> PackResult:
    """Convert audio files and bundle them into a resource pack zip.

    Parameters
    ----------
    output_path : str | PathLike
        Destination zip. An existing file is replaced.
    namespace : str
        Pack name; lowercased and reduced to ``[a-z0-9_.-]``.
    pack_format : int
        Positive ``pack_format`` written to ``pack.mcmeta``.
    converter : AudioConverter
        Object whose ``convert(source, target)`` returns ``True`` on success.
    files : Iterable[str | PathLike | None] | None, optional
        Explicit source files; non-matching entries are ignored.
    input_directory : str | PathLike | None, optional
        Directory scanned for additional source files.
    description : str | None, default=""
        Free-text pack description.
    source_extension : str, default=".mp3"
        Extension of accepted source files.
    target_extension : str, default=".ogg"
        Extension of converted files.
    workspace_dir : Path | None, optional
        Parent of the temporary workspace.

    Returns
    -------
    PackResult
        ``created`` is ``False`` when no file converted.

    Raises
    ------
    ConfigurationError
        If the request is invalid or no source file is found.
    PackIOError
        If the pack cannot be assembled or written.
    """
    from audio_pack.api import build_resource_pack as _impl

    return _impl(
        output_path=output_path,
        namespace=namespace,
        pack_format=pack_format,
        converter=converter,
        files=files,
        input_directory=input_directory,
        description=description,
        source_extension=source_extension,
        target_extension=target_extension,
        workspace_dir=workspace_dir,
    )


__all__ = [
    "AudioConverter",
    "ConvertedSound",
    "PackRequest",
    "PackRequestBuilder",
    "PackResult",
    "SkippedSource",
    "PackError",
    "ConfigurationError",
    "ConverterError",
    "PackIOError",
    "WorkspaceError",
    "DescriptorError",
    "ArchiveError",
    "build_resource_pack",
]
