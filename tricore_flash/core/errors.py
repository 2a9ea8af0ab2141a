"""Error hierarchy for tricore-flash."""

from pathlib import Path
from typing import Any


class TricoreFlashError(Exception):
    """Base class for all recoverable tricore-flash errors.

    Args:
        message: Human readable error message
        context: Optional structured context for logging
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConfigError(TricoreFlashError):
    """Raised when settings cannot be loaded or the flasher cannot be located."""


class TemplateError(TricoreFlashError):
    """A template could not be loaded or rendered."""


class FlashError(TricoreFlashError):
    """Base class for errors raised while starting or running an upload session."""


class WorkspaceUnavailableError(FlashError):
    """The temporary workspace directory could not be created."""


class ArtifactWriteError(FlashError):
    """One of the workspace artifacts could not be written."""

    def __init__(
        self, message: str, artifact: str, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, context)
        self.artifact = artifact


class FlasherNotStartableError(FlashError):
    """The flasher executable could not be spawned."""

    def __init__(
        self, message: str, flasher: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, context)
        self.flasher = flasher


class FlasherTimeoutError(FlashError):
    """The flasher did not terminate within the requested timeout."""


class SessionStateError(FlashError):
    """An operation was attempted on a session in the wrong state."""


class FlasherFailedError(SystemExit):
    """The flasher terminated with a non-success status.

    This is fatal: it derives from ``SystemExit`` so that it terminates the
    process with its message as diagnostic unless explicitly caught, and is
    not swallowed by ``except Exception`` handlers.
    """

    def __init__(self, returncode: int, flasher: Path | str) -> None:
        self.returncode = returncode
        self.flasher = flasher
        self.message = (
            f"Memtool did not exit with success (exit status {returncode}): {flasher}"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


__all__ = [
    "TricoreFlashError",
    "ConfigError",
    "TemplateError",
    "FlashError",
    "WorkspaceUnavailableError",
    "ArtifactWriteError",
    "FlasherNotStartableError",
    "FlasherTimeoutError",
    "SessionStateError",
    "FlasherFailedError",
]
