"""Zip packaging of an assembled pack directory."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from audio_pack.errors import ArchiveError

logger = logging.getLogger(__name__)


def archive_entries(source_dir: Path) -> list[tuple[Path, str]]:
    """List regular files under ``source_dir`` with their archive names.

    Returns
    -------
    list[tuple[Path, str]]
        ``(file_path, entry_name)`` pairs sorted by entry name. Entry names are
        relative to ``source_dir`` and always use ``/`` separators.
    """
    entries = [
        (path, path.relative_to(source_dir).as_posix())
        for path in source_dir.rglob("*")
        if path.is_file()
    ]
    return sorted(entries, key=lambda item: item[1])


def remove_existing_archive(destination: Path) -> None:
    """Delete a previous archive at ``destination`` if there is one."""
    if not destination.exists() and not destination.is_symlink():
        return
    try:
        destination.unlink()
    except OSError as exc:
        raise ArchiveError(
            f"Could not delete existing zip file: {destination.absolute()}"
        ) from exc
    logger.debug("Removed existing archive %s", destination)


def _discard_partial(destination: Path) -> None:
    try:
        destination.unlink(missing_ok=True)
    except OSError:
        logger.warning("Could not delete partial archive %s", destination, exc_info=True)


def zip_directory(source_dir: Path, destination: Path) -> Path:
    """Package every regular file in ``source_dir`` into a deflated zip.

    Parameters
    ----------
    source_dir : Path
        Root of the tree to archive. Directories are not stored as entries.
    destination : Path
        Archive path. An existing file is replaced.

    Returns
    -------
    Path
        ``destination``.

    Raises
    ------
    ArchiveError
        If the previous archive cannot be removed or any entry cannot be
        written. A partially written archive is deleted before raising.
    """
    remove_existing_archive(destination)
    entries = archive_entries(source_dir)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as bundle:
            for path, entry_name in entries:
                bundle.write(path, arcname=entry_name)
    except OSError as exc:
        _discard_partial(destination)
        raise ArchiveError(f"Could not write zip file {destination}: {exc}") from exc
    logger.info("Archive created at %s (%d entries)", destination, len(entries))
    return destination
