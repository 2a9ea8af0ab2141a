"""Exclusively owned temporary directory for upload session artifacts."""

import shutil
import sys
import tempfile
import weakref
from pathlib import Path
from typing import Any

from tricore_flash.core.errors import WorkspaceUnavailableError
from tricore_flash.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

WORKSPACE_PREFIX = "tricore-flash-"


def _log_removal_failure(function: Any, path: str, error: Any) -> None:
    # onerror passes exc_info, onexc the exception itself
    if isinstance(error, tuple):
        error = error[1]
    if isinstance(error, FileNotFoundError):
        return
    logger.warning("workspace_release_failed", path=str(path), error=str(error))


def _remove_tree(path: Path) -> None:
    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=_log_removal_failure)
    else:
        shutil.rmtree(path, onerror=_log_removal_failure)


class Workspace:
    """A unique directory that is removed recursively when released.

    Release happens explicitly through :meth:`release` or the context
    manager protocol, and otherwise when the object is garbage collected or
    the interpreter exits.
    """

    def __init__(self, path: Path) -> None:
        self._path = path.resolve()
        self._finalizer = weakref.finalize(self, _remove_tree, self._path)

    @classmethod
    def allocate(cls, root: Path | None = None) -> "Workspace":
        """Create a new workspace under ``root`` (system temp dir if None).

        Raises:
            WorkspaceUnavailableError: If the directory cannot be created
        """
        try:
            path = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=root))
        except OSError as e:
            raise WorkspaceUnavailableError(
                f"Cannot create temporary directory for memtool input: {e}",
                {"root": str(root) if root else tempfile.gettempdir()},
            ) from e

        workspace = cls(path)
        logger.debug("workspace_allocated", path=str(workspace.path))
        return workspace

    @property
    def path(self) -> Path:
        """Absolute path of the workspace directory."""
        return self._path

    @property
    def released(self) -> bool:
        return not self._finalizer.alive

    def path_for(self, name: str) -> Path:
        """Compose the path of a file inside the workspace."""
        return self._path / name

    def write_text(self, name: str, content: str) -> Path:
        """Write a text artifact into the workspace and return its path.

        Line endings follow host conventions.
        """
        path = self.path_for(name)
        with path.open("w", encoding="utf-8") as f:
            f.write(content)
        logger.debug("workspace_artifact_written", path=str(path), size=len(content))
        return path

    def write_bytes(self, name: str, content: bytes) -> Path:
        """Write an artifact verbatim into the workspace and return its path."""
        path = self.path_for(name)
        with path.open("wb") as f:
            f.write(content)
        logger.debug("workspace_artifact_written", path=str(path), size=len(content))
        return path

    def release(self) -> None:
        """Remove the workspace directory. Safe to call more than once.

        Files that cannot be removed, e.g. because another process still
        holds them open, are logged as ``workspace_release_failed``.
        """
        if self._finalizer.alive:
            self._finalizer()
            logger.debug("workspace_released", path=str(self._path))

    def __enter__(self) -> "Workspace":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else "active"
        return f"<Workspace {self._path} ({state})>"
