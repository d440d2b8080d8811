"""Unit tests for the ffmpeg-backed converter."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

import audio_pack.converters.ffmpeg as ffmpeg_module
from audio_pack.application.ports import NamedConverter
from audio_pack.converters.ffmpeg import FfmpegConverter
from audio_pack.errors import ConverterError


class _Runner:
    """Record subprocess.run calls and return a canned process result."""

    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls: list[list[str]] = []
        self.kwargs: list[dict[str, object]] = []

    def __call__(self, cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        self.calls.append(cmd)
        self.kwargs.append(kwargs)
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ffmpeg_module.shutil, "which", lambda name: f"/usr/bin/{name}")


def test_satisfies_named_converter_protocol() -> None:
    assert isinstance(FfmpegConverter(), NamedConverter)
    assert FfmpegConverter.name == "ffmpeg"


def test_convert_builds_vorbis_command(
    monkeypatch: pytest.MonkeyPatch, on_path: None, tmp_path: Path
) -> None:
    """Run ffmpeg with the configured codec and quality."""
    runner = _Runner()
    monkeypatch.setattr(ffmpeg_module.subprocess, "run", runner)
    converter = FfmpegConverter(quality=3, timeout=12.5)

    ok = converter.convert(tmp_path / "in.mp3", tmp_path / "out.ogg")

    assert ok is True
    assert runner.calls == [
        [
            "/usr/bin/ffmpeg",
            "-y",
            "-loglevel",
            "error",
            "-i",
            str(tmp_path / "in.mp3"),
            "-vn",
            "-c:a",
            "libvorbis",
            "-q:a",
            "3",
            str(tmp_path / "out.ogg"),
        ]
    ]
    assert runner.kwargs[0]["timeout"] == 12.5
    assert runner.kwargs[0]["check"] is False


def test_non_zero_exit_reports_failure(
    monkeypatch: pytest.MonkeyPatch, on_path: None, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(ffmpeg_module.subprocess, "run", _Runner(returncode=1, stderr="Invalid data"))

    assert FfmpegConverter().convert(tmp_path / "in.mp3", tmp_path / "out.ogg") is False
    assert "Invalid data" in caplog.text


def test_timeout_reports_failure(monkeypatch: pytest.MonkeyPatch, on_path: None, tmp_path: Path) -> None:
    def hang(cmd: list[str], **kwargs: object) -> None:
        raise subprocess.TimeoutExpired(cmd, timeout=1)

    monkeypatch.setattr(ffmpeg_module.subprocess, "run", hang)

    assert FfmpegConverter(timeout=1).convert(tmp_path / "in.mp3", tmp_path / "out.ogg") is False


def test_missing_executable_raises(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(ffmpeg_module.shutil, "which", lambda _name: None)

    with pytest.raises(ConverterError, match="not found in PATH"):
        FfmpegConverter().convert(tmp_path / "in.mp3", tmp_path / "out.ogg")


def test_version_reads_first_line(monkeypatch: pytest.MonkeyPatch, on_path: None) -> None:
    monkeypatch.setattr(
        ffmpeg_module.subprocess,
        "run",
        _Runner(stdout="ffmpeg version 6.1\nbuilt with gcc\n"),
    )
    assert FfmpegConverter().version() == "ffmpeg version 6.1"


def test_version_without_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ffmpeg_module.shutil, "which", lambda _name: None)
    assert FfmpegConverter().version() is None
