"""Shared type aliases for pack assembly modules."""

from __future__ import annotations

import os
from collections.abc import Iterable

type PathRef = str | os.PathLike[str]
type SourceRefs = Iterable[PathRef | None]

DEFAULT_SOURCE_EXTENSION = ".mp3"
DEFAULT_TARGET_EXTENSION = ".ogg"
