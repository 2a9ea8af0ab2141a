"""XDG Base Directory specification helpers."""

import os
from pathlib import Path


APP_DIR_NAME = "tricore-flash"


def get_xdg_config_dir() -> Path:
    """Get XDG config directory for tricore-flash.

    Returns:
        Path to config directory: $XDG_CONFIG_HOME/tricore-flash or ~/.config/tricore-flash
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME
