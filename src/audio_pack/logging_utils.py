"""Root logging configuration for command-line entry points."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_CONFIGURED = False


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once with a consistent, readable format.

    Parameters
    ----------
    level : str | None, default=None
        Log level name such as ``"INFO"`` or ``"DEBUG"``. Falls back to the
        ``LOG_LEVEL`` environment variable, then ``INFO``.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    _CONFIGURED = True
