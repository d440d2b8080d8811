"""Temporary workspace holding the pack tree while it is assembled."""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from audio_pack.descriptors import PACK_METADATA_FILENAME, SOUNDS_INDEX_FILENAME
from audio_pack.errors import WorkspaceError

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "audiopack-"


@dataclass(frozen=True)
class Workspace:
    """Fixed layout of an in-progress resource pack.

    Parameters
    ----------
    root : Path
        Temporary root directory; becomes the archive root.
    namespace : str
        Sanitized pack namespace.
    """

    root: Path
    namespace: str

    @property
    def namespace_dir(self) -> Path:
        return self.root / "assets" / self.namespace

    @property
    def sounds_dir(self) -> Path:
        return self.namespace_dir / "sounds"

    @property
    def pack_metadata_path(self) -> Path:
        return self.root / PACK_METADATA_FILENAME

    @property
    def sounds_index_path(self) -> Path:
        return self.namespace_dir / SOUNDS_INDEX_FILENAME


def _warn_on_failure(
    function: Callable[..., object], path: str, exc: BaseException
) -> None:
    del function
    logger.warning("Could not delete temporary directory/file %s: %s", path, exc)


def remove_tree(path: Path) -> None:
    """Recursively delete ``path``, logging failures instead of raising."""
    if not path.exists():
        return
    shutil.rmtree(path, onexc=_warn_on_failure)


@contextmanager
def pack_workspace(namespace: str, base_dir: Path | None = None) -> Iterator[Workspace]:
    """Allocate a workspace and always remove it on exit.

    Parameters
    ----------
    namespace : str
        Sanitized pack namespace used for the asset directory.
    base_dir : Path | None, default=None
        Parent for the temporary root; the system temp dir when omitted.

    Yields
    ------
    Workspace
        Workspace whose ``sounds_dir`` already exists.

    Raises
    ------
    WorkspaceError
        If the temporary root or its directory structure cannot be created.
    """
    try:
        root = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=base_dir))
    except OSError as exc:
        raise WorkspaceError(f"Could not allocate temporary workspace: {exc}") from exc

    logger.debug("Allocated workspace %s", root)
    try:
        workspace = Workspace(root=root, namespace=namespace)
        try:
            workspace.sounds_dir.mkdir(parents=True)
        except OSError as exc:
            raise WorkspaceError(
                f"Could not create directory structure: {workspace.sounds_dir}"
            ) from exc
        yield workspace
    finally:
        remove_tree(root)
        logger.debug("Removed workspace %s", root)
