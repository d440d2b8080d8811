"""Unit tests for zip packaging of the pack tree."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from audio_pack.archive import archive_entries, zip_directory
from audio_pack.errors import ArchiveError


def _tree(root: Path) -> Path:
    (root / "assets" / "ns" / "sounds").mkdir(parents=True)
    (root / "assets" / "empty").mkdir(parents=True)
    (root / "pack.mcmeta").write_text("{}\n", encoding="utf-8")
    (root / "assets" / "ns" / "sounds.json").write_text("{}\n", encoding="utf-8")
    (root / "assets" / "ns" / "sounds" / "b.ogg").write_bytes(b"b")
    (root / "assets" / "ns" / "sounds" / "a.ogg").write_bytes(b"a")
    return root


def test_archive_entries_are_sorted_posix_files_only(tmp_path: Path) -> None:
    """List files only, with forward-slash names relative to the root."""
    root = _tree(tmp_path / "tree")
    names = [name for _, name in archive_entries(root)]
    assert names == [
        "assets/ns/sounds.json",
        "assets/ns/sounds/a.ogg",
        "assets/ns/sounds/b.ogg",
        "pack.mcmeta",
    ]


def test_zip_directory_writes_deflated_entries(tmp_path: Path) -> None:
    """Store every file deflated and no directory entries."""
    root = _tree(tmp_path / "tree")
    destination = tmp_path / "out" / "pack.zip"

    assert zip_directory(root, destination) == destination

    with zipfile.ZipFile(destination) as bundle:
        infos = bundle.infolist()
        assert sorted(info.filename for info in infos) == [
            "assets/ns/sounds.json",
            "assets/ns/sounds/a.ogg",
            "assets/ns/sounds/b.ogg",
            "pack.mcmeta",
        ]
        assert all(not info.is_dir() for info in infos)
        assert all(info.compress_type == zipfile.ZIP_DEFLATED for info in infos)
        assert bundle.read("assets/ns/sounds/a.ogg") == b"a"


def test_existing_archive_is_replaced(tmp_path: Path) -> None:
    """Overwrite a previous file at the destination."""
    root = _tree(tmp_path / "tree")
    destination = tmp_path / "pack.zip"
    destination.write_bytes(b"old contents")

    zip_directory(root, destination)

    assert zipfile.is_zipfile(destination)


def test_unremovable_archive_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise ArchiveError and keep the old file when it cannot be deleted."""
    root = _tree(tmp_path / "tree")
    destination = tmp_path / "pack.zip"
    destination.write_bytes(b"locked")
    real_unlink = Path.unlink

    def locked_unlink(self: Path, missing_ok: bool = False) -> None:
        if self == destination:
            raise PermissionError("file is locked")
        real_unlink(self, missing_ok=missing_ok)

    monkeypatch.setattr(Path, "unlink", locked_unlink)

    with pytest.raises(ArchiveError, match="Could not delete existing zip file"):
        zip_directory(root, destination)
    assert destination.read_bytes() == b"locked"


def test_write_failure_removes_partial_archive(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Delete the partially written zip when an entry cannot be added."""
    root = _tree(tmp_path / "tree")
    destination = tmp_path / "pack.zip"
    real_write = zipfile.ZipFile.write

    def failing_write(self: zipfile.ZipFile, filename: object, arcname: str | None = None, **kwargs: object) -> None:
        if arcname == "pack.mcmeta":
            raise OSError("disk full")
        real_write(self, filename, arcname=arcname, **kwargs)

    monkeypatch.setattr(zipfile.ZipFile, "write", failing_write)

    with pytest.raises(ArchiveError, match="disk full"):
        zip_directory(root, destination)
    assert not destination.exists()
