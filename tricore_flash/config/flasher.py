"""Process-wide location of the Memtool executable.

Memtool is a vendor install whose location is stable on a machine. It is
resolved once, then frozen for the rest of the process.
"""

from pathlib import Path

from tricore_flash.core.errors import ConfigError
from tricore_flash.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

_flasher_path: Path | None = None


def configure_flasher_path(path: str | Path) -> Path:
    """Freeze the flasher location for this process.

    Raises:
        ConfigError: If a different location was already frozen
    """
    global _flasher_path
    resolved = Path(path).expanduser()
    if _flasher_path is not None and _flasher_path != resolved:
        raise ConfigError(
            f"Flasher location already configured as {_flasher_path}",
            {"requested": str(resolved)},
        )
    _flasher_path = resolved
    logger.debug("flasher_path_configured", path=str(resolved))
    return resolved


def get_flasher_path() -> Path:
    """Return the frozen flasher location, resolving it on first use.

    Raises:
        ConfigError: If no location is configured
    """
    if _flasher_path is not None:
        return _flasher_path

    from tricore_flash.config.user_config import create_user_config

    settings = create_user_config().settings
    if settings.memtool_path is None:
        raise ConfigError(
            "Memtool location is not configured. Set MEMTOOL_PATH or "
            "'memtool_path' in the config file."
        )
    return configure_flasher_path(settings.memtool_path)


def reset_flasher_path() -> None:
    """Forget the frozen location (used by tests)."""
    global _flasher_path
    _flasher_path = None
