"""Exception hierarchy for resource pack assembly."""

from __future__ import annotations


class PackError(Exception):
    """Base error for the audio resource pack pipeline."""

    exit_code: int = 1


class ConfigurationError(PackError, ValueError):
    """Raised when a pack request is invalid before any work is attempted."""

    exit_code = 2


class ConverterError(PackError):
    """Raised when a converter cannot be resolved, loaded, or run at all."""

    exit_code = 3


class PackIOError(PackError, OSError):
    """Raised when the pipeline cannot read or write its files."""

    exit_code = 4


class WorkspaceError(PackIOError):
    """Raised when the temporary workspace cannot be prepared."""


class DescriptorError(PackIOError):
    """Raised when ``pack.mcmeta`` or ``sounds.json`` cannot be written."""


class ArchiveError(PackIOError):
    """Raised when the output archive cannot be replaced or written."""
