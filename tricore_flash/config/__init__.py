"""
Configuration module for tricore-flash.

Settings come from YAML config files and environment variables; the Memtool
location is frozen once per process.
"""

from .flasher import configure_flasher_path, get_flasher_path, reset_flasher_path
from .models import FlashSettings
from .user_config import UserConfig, create_user_config


__all__ = [
    "FlashSettings",
    "UserConfig",
    "create_user_config",
    "configure_flasher_path",
    "get_flasher_path",
    "reset_flasher_path",
]
