"""ffmpeg-backed converter producing Ogg Vorbis files."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from audio_pack.errors import ConverterError

logger = logging.getLogger(__name__)

DEFAULT_CODEC = "libvorbis"
DEFAULT_QUALITY = 5


class FfmpegConverter:
    """Convert audio files by shelling out to ``ffmpeg``.

    Parameters
    ----------
    executable : str, default="ffmpeg"
        Command name or path of the ffmpeg binary.
    codec : str, default="libvorbis"
        Audio codec passed to ``-c:a``.
    quality : int, default=5
        Variable bitrate quality passed to ``-q:a``.
    timeout : float | None, default=None
        Seconds to wait for one conversion; a timeout counts as failure.
    """

    name = "ffmpeg"

    def __init__(
        self,
        executable: str = "ffmpeg",
        codec: str = DEFAULT_CODEC,
        quality: int = DEFAULT_QUALITY,
        timeout: float | None = None,
    ) -> None:
        self.executable = executable
        self.codec = codec
        self.quality = quality
        self.timeout = timeout

    def resolve_executable(self) -> str:
        """Return the absolute ffmpeg path or raise ``ConverterError``."""
        resolved = shutil.which(self.executable)
        if resolved is None:
            raise ConverterError(
                f"'{self.executable}' not found in PATH. Install ffmpeg first."
            )
        return resolved

    def command(self, executable: str, source_path: Path, target_path: Path) -> list[str]:
        return [
            executable,
            "-y",
            "-loglevel",
            "error",
            "-i",
            str(source_path),
            "-vn",
            "-c:a",
            self.codec,
            "-q:a",
            str(self.quality),
            str(target_path),
        ]

    def convert(self, source_path: Path, target_path: Path) -> bool:
        """Run ffmpeg for one file and report whether it succeeded."""
        cmd = self.command(self.resolve_executable(), source_path, target_path)
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("ffmpeg timed out after %ss for %s", self.timeout, source_path)
            return False

        if proc.returncode != 0:
            logger.warning(
                "ffmpeg exited with %d for %s: %s",
                proc.returncode,
                source_path,
                (proc.stderr or "").strip()[-2000:],
            )
            return False
        return True

    def version(self) -> str | None:
        """Return the first line of ``ffmpeg -version``, if available."""
        resolved = shutil.which(self.executable)
        if resolved is None:
            return None
        proc = subprocess.run(
            [resolved, "-version"],
            capture_output=True,
            text=True,
            check=False,
        )
        if proc.returncode != 0 or not proc.stdout:
            return None
        return proc.stdout.splitlines()[0]
