"""Rendering of ``pack.mcmeta`` and ``sounds.json`` descriptors."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from audio_pack.errors import DescriptorError

PACK_METADATA_FILENAME = "pack.mcmeta"
SOUNDS_INDEX_FILENAME = "sounds.json"


class SoundEntry(Protocol):
    """One ``sounds.json`` entry: a mapping key and the sound it plays."""

    @property
    def event_key(self) -> str: ...

    @property
    def sound_path(self) -> str: ...


_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\b": "\\b",
        "\f": "\\f",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)


def escape_json_string(value: str | None) -> str:
    """Escape ``value`` for embedding inside a JSON string literal.

    Only backslash, double quote, and the ``\\b \\f \\n \\r \\t`` control
    characters are escaped; everything else, including non-ASCII text, is
    kept verbatim.
    """
    if value is None:
        return ""
    return value.translate(_ESCAPES)


def render_pack_metadata(description: str, pack_format: int) -> str:
    """Render the root-level metadata descriptor."""
    return (
        "{\n"
        '  "pack": {\n'
        f'    "pack_format": {pack_format},\n'
        f'    "description": "{escape_json_string(description)}"\n'
        "  }\n"
        "}\n"
    )


def render_sounds_index(sounds: Sequence[SoundEntry]) -> str:
    """Render the namespace-level sound event mapping.

    Entries keep the order of ``sounds``; the last one carries no comma.
    """
    lines = ["{\n"]
    last = len(sounds) - 1
    for index, sound in enumerate(sounds):
        lines.append(f'  "{escape_json_string(sound.event_key)}": {{\n')
        lines.append('    "sounds": [\n')
        lines.append(f'      "{escape_json_string(sound.sound_path)}"\n')
        lines.append("    ]\n")
        lines.append("  },\n" if index < last else "  }\n")
    lines.append("}\n")
    return "".join(lines)


def _write_text(path: Path, content: str) -> Path:
    try:
        path.write_text(content, encoding="utf-8", newline="\n")
    except OSError as exc:
        raise DescriptorError(f"Could not write descriptor {path}: {exc}") from exc
    return path


def write_pack_metadata(root_dir: Path, description: str, pack_format: int) -> Path:
    """Write ``pack.mcmeta`` into ``root_dir`` and return its path."""
    return _write_text(
        root_dir / PACK_METADATA_FILENAME,
        render_pack_metadata(description, pack_format),
    )


def write_sounds_index(namespace_dir: Path, sounds: Sequence[SoundEntry]) -> Path:
    """Write ``sounds.json`` into ``namespace_dir`` and return its path."""
    return _write_text(
        namespace_dir / SOUNDS_INDEX_FILENAME,
        render_sounds_index(sounds),
    )
