"""Identifier sanitization for pack namespaces and sound events."""

from __future__ import annotations

import re
import time
from collections.abc import Container

from audio_pack.errors import ConfigurationError

_NAMESPACE_DISALLOWED = re.compile(r"[^a-z0-9_.-]")
_EVENT_DISALLOWED = re.compile(r"[^a-z0-9_]")


def sanitize_namespace(raw: str) -> str:
    """Lowercase ``raw`` and strip characters outside ``[a-z0-9_.-]``.

    Parameters
    ----------
    raw : str
        Free-form pack name.

    Returns
    -------
    str
        Namespace usable as an asset path segment.

    Raises
    ------
    ConfigurationError
        If nothing is left after stripping, or only dots are left.
    """
    namespace = _NAMESPACE_DISALLOWED.sub("", raw.lower())
    if not namespace:
        raise ConfigurationError(
            f"Pack name {raw!r} became empty after sanitization. "
            "Please use valid characters (a-z, 0-9, _, ., -)."
        )
    if set(namespace) <= {"."}:
        raise ConfigurationError(
            f"Pack name {raw!r} sanitizes to {namespace!r}, which is not a usable directory name."
        )
    return namespace


def sanitize_event_name(base_name: str, ordinal: int) -> str:
    """Derive a sound event token from a file base name.

    Falls back to ``sound_<epoch-millis>_<ordinal>`` when the base name has no
    usable characters, so the result is never empty.
    """
    event = _EVENT_DISALLOWED.sub("", base_name.lower())
    if not event:
        event = f"sound_{time.time_ns() // 1_000_000}_{ordinal}"
    return event


def unique_event_name(candidate: str, taken: Container[str]) -> str:
    """Return ``candidate`` or the first free ``candidate_<n>`` (n >= 1)."""
    unique = candidate
    counter = 0
    while unique in taken:
        counter += 1
        unique = f"{candidate}_{counter}"
    return unique
