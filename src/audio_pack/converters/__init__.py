"""Built-in audio converters and the converter registry."""

from audio_pack.converters.ffmpeg import FfmpegConverter
from audio_pack.converters.registry import ConverterRegistry, create_default_registry

__all__ = ["FfmpegConverter", "ConverterRegistry", "create_default_registry"]
