"""Collection and deduplication of source audio files."""

from __future__ import annotations

import logging
from pathlib import Path

from audio_pack.errors import ConfigurationError
from audio_pack.types import DEFAULT_SOURCE_EXTENSION, PathRef, SourceRefs

logger = logging.getLogger(__name__)


def has_extension(path: Path, extension: str) -> bool:
    """Check whether ``path`` ends with ``extension``, ignoring case."""
    return path.name.lower().endswith(extension.lower())


def is_candidate(path: Path, extension: str) -> bool:
    """Check whether ``path`` is an existing regular file with ``extension``."""
    return path.is_file() and has_extension(path, extension)


def collect_source_files(
    files: SourceRefs | None = None,
    input_directory: PathRef | None = None,
    extension: str = DEFAULT_SOURCE_EXTENSION,
) -> list[Path]:
    """Gather candidate source files in a stable, deduplicated order.

    Parameters
    ----------
    files : Iterable[str | PathLike | None] | None, default=None
        Explicit file references. Entries that are ``None``, missing, not
        regular files, or lacking ``extension`` are ignored.
    input_directory : str | PathLike | None, default=None
        Optional directory whose matching regular files are added after the
        explicit entries, in lexicographic name order.
    extension : str, default=".mp3"
        Case-insensitive file name suffix to accept.

    Returns
    -------
    list[Path]
        Candidates deduplicated by absolute path. May be empty; callers decide
        whether that is an error.

    Raises
    ------
    ConfigurationError
        If ``input_directory`` is given but is not a directory.
    """
    collected: list[Path] = []
    seen: set[str] = set()

    def _add(path: Path) -> None:
        key = str(path.absolute())
        if key in seen:
            logger.debug("Ignoring duplicate source %s", key)
            return
        seen.add(key)
        collected.append(path)

    for ref in files or ():
        if ref is None:
            continue
        path = Path(ref)
        if is_candidate(path, extension):
            _add(path)
        else:
            logger.debug("Ignoring non-candidate source %s", path)

    if input_directory is not None:
        directory = Path(input_directory)
        if not directory.is_dir():
            raise ConfigurationError(
                f"Specified input directory is not a directory: {directory.absolute()}"
            )
        for entry in sorted(directory.iterdir(), key=lambda item: item.name):
            if is_candidate(entry, extension):
                _add(entry)

    return collected
