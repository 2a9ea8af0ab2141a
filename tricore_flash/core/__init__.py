from .errors import (
    ArtifactWriteError,
    ConfigError,
    FlashError,
    FlasherFailedError,
    FlasherNotStartableError,
    FlasherTimeoutError,
    SessionStateError,
    TemplateError,
    TricoreFlashError,
    WorkspaceUnavailableError,
)
from .logging import setup_logging


__all__ = [
    "setup_logging",
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
