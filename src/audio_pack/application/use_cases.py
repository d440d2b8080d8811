"""Application use-cases orchestrating resource pack assembly."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from audio_pack.application.builder import PackRequestBuilder
from audio_pack.application.options import PackRequest
from audio_pack.application.ports import AudioConverter
from audio_pack.application.results import ConvertedSound, PackResult, SkippedSource
from audio_pack.archive import zip_directory
from audio_pack.descriptors import write_pack_metadata, write_sounds_index
from audio_pack.naming import sanitize_event_name, unique_event_name
from audio_pack.types import DEFAULT_SOURCE_EXTENSION, DEFAULT_TARGET_EXTENSION, PathRef
from audio_pack.workspace import pack_workspace

logger = logging.getLogger(__name__)


def base_name(path: Path) -> str:
    """Return the file name of ``path`` without its final extension."""
    name = path.name
    dot = name.rfind(".")
    return name[:dot] if dot >= 0 else name


def _discard_output(target_path: Path) -> None:
    try:
        target_path.unlink(missing_ok=True)
    except OSError:
        logger.warning("Could not remove partial output %s", target_path, exc_info=True)


def convert_sources(
    sources: Sequence[Path],
    sounds_dir: Path,
    namespace: str,
    converter: AudioConverter,
    target_extension: str = DEFAULT_TARGET_EXTENSION,
) -> tuple[list[ConvertedSound], list[SkippedSource]]:
    """Convert each source into ``sounds_dir``, tolerating per-item failures.

    Parameters
    ----------
    sources : Sequence[Path]
        Source files in collection order. The order decides which of several
        colliding files keeps the bare event name.
    sounds_dir : Path
        Existing directory receiving converted files.
    namespace : str
        Sanitized pack namespace.
    converter : AudioConverter
        Converter invoked once per source.
    target_extension : str, default=".ogg"
        Extension of converted files.

    Returns
    -------
    tuple[list[ConvertedSound], list[SkippedSource]]
        Successful conversions and skipped sources, both in input order.
    """
    converted: list[ConvertedSound] = []
    skipped: list[SkippedSource] = []
    taken: set[str] = set()

    for ordinal, source in enumerate(sources):
        if not source.is_file():
            logger.warning("Source file does not exist or is not a file: %s", source.absolute())
            skipped.append(SkippedSource(source, "source file vanished before conversion"))
            continue

        event_name = unique_event_name(sanitize_event_name(base_name(source), ordinal), taken)
        output_name = f"{event_name}{target_extension}"
        target_path = sounds_dir / output_name
        logger.debug("Converting %s -> %s", source, target_path)

        try:
            ok = converter.convert(source, target_path)
        except Exception as exc:
            logger.warning("Conversion error for %s: %s", source.name, exc, exc_info=True)
            _discard_output(target_path)
            skipped.append(SkippedSource(source, f"converter raised {type(exc).__name__}: {exc}"))
            continue

        if not ok:
            logger.warning("Conversion failed or skipped by converter for: %s", source.name)
            _discard_output(target_path)
            skipped.append(SkippedSource(source, "converter reported failure"))
            continue

        taken.add(event_name)
        converted.append(
            ConvertedSound(
                original_name=source.name,
                output_name=output_name,
                event_name=event_name,
                namespace=namespace,
            )
        )

    return converted, skipped


def create_resource_pack(
    request: PackRequest,
    *,
    workspace_dir: Path | None = None,
) -> PackResult:
    """Use-case: convert sources, write descriptors, and zip the pack.

    Parameters
    ----------
    request : PackRequest
        Validated request from ``PackRequestBuilder.build()``.
    workspace_dir : Path | None, default=None
        Parent directory for the temporary workspace.

    Returns
    -------
    PackResult
        ``created`` is ``False`` when no source converted; the archive is not
        written in that case.

    Raises
    ------
    PackIOError
        If the workspace, a descriptor, or the archive cannot be written. The
        workspace is removed before the error propagates.
    """
    with pack_workspace(request.namespace, base_dir=workspace_dir) as workspace:
        sounds, skipped = convert_sources(
            request.sources,
            workspace.sounds_dir,
            request.namespace,
            request.converter,
            target_extension=request.target_extension,
        )
        if not sounds:
            logger.warning(
                "No sounds were successfully converted. Resource pack will not be created."
            )
            return PackResult(
                created=False,
                output_path=request.output_path,
                skipped=tuple(skipped),
            )

        write_pack_metadata(workspace.root, request.description, request.pack_format)
        write_sounds_index(workspace.namespace_dir, sounds)
        zip_directory(workspace.root, request.output_path)

    logger.info(
        "Resource pack '%s' written to %s (%d converted, %d skipped)",
        request.namespace,
        request.output_path,
        len(sounds),
        len(skipped),
    )
    return PackResult(
        created=True,
        output_path=request.output_path,
        sounds=tuple(sounds),
        skipped=tuple(skipped),
    )


def build_pack_request(
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
) -> PackRequest:
    """Build a validated request from flat command/API params."""
    return (
        PackRequestBuilder()
        .add_source_files(files)
        .input_directory(input_directory)
        .output_path(output_path)
        .namespace(namespace)
        .description(description)
        .pack_format(pack_format)
        .converter(converter)
        .source_extension(source_extension)
        .target_extension(target_extension)
        .build()
    )
