"""
User configuration management for tricore-flash.

This module handles user-specific configuration settings with multiple sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tricore_flash.config.models import ENV_PREFIX, FlashSettings
from tricore_flash.core.errors import ConfigError
from tricore_flash.core.structlog_logger import get_struct_logger
from tricore_flash.utils.xdg import get_xdg_config_dir


logger = get_struct_logger(__name__)

# Environment variables read without the project prefix
UNPREFIXED_ENV_VARS = {"MEMTOOL_PATH": "memtool_path"}


class UserConfig:
    """Loads ``FlashSettings`` from YAML config files and the environment."""

    def __init__(self, cli_config_path: str | Path | None = None):
        """
        Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI
        """
        self._config_sources: dict[str, str] = {}
        self._config_path: Path | None = None
        self._cli_config_path = (
            Path(cli_config_path).expanduser().resolve() if cli_config_path else None
        )
        self._config_paths = self._generate_config_paths()
        self._load_config()

    def _generate_config_paths(self) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if self._cli_config_path:
            config_paths.append(self._cli_config_path)

        config_paths.extend(
            [Path.cwd() / "tricore-flash.yaml", Path.cwd() / ".tricore-flash.yml"]
        )

        xdg_dir = get_xdg_config_dir()
        config_paths.extend([xdg_dir / "config.yaml", xdg_dir / "config.yml"])

        return config_paths

    def _read_config_file(self, path: Path) -> dict[str, Any]:
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    def _load_config(self) -> None:
        """Load configuration from the first config file found and the environment."""
        if self._cli_config_path and not self._cli_config_path.exists():
            raise ConfigError(f"Config file not found: {self._cli_config_path}")

        config_data: dict[str, Any] = {}
        for path in self._config_paths:
            if path.is_file():
                config_data = self._read_config_file(path)
                self._config_path = path
                logger.debug("config_file_loaded", path=str(path))
                break
        else:
            logger.debug(
                "no_config_file_found",
                searched=[str(p) for p in self._config_paths],
            )

        try:
            self._config = FlashSettings(**config_data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        if self._config_path:
            for key in config_data:
                self._config_sources[key] = f"file:{self._config_path.name}"
        self._track_env_var_sources()

        if logging.getLogger(__name__).isEnabledFor(logging.DEBUG):
            for key in FlashSettings.model_fields:
                logger.debug(
                    "config_value",
                    key=key,
                    value=str(getattr(self._config, key)),
                    source=self.get_source(key),
                )

    def _track_env_var_sources(self) -> None:
        for env_name, key in UNPREFIXED_ENV_VARS.items():
            if os.environ.get(env_name):
                self._config_sources[key] = f"environment:{env_name}"

        for env_name, value in os.environ.items():
            if not env_name.upper().startswith(ENV_PREFIX) or not value:
                continue
            key = env_name[len(ENV_PREFIX) :].lower()
            if key in FlashSettings.model_fields:
                self._config_sources[key] = f"environment:{env_name}"

    @property
    def settings(self) -> FlashSettings:
        """The effective settings."""
        return self._config

    @property
    def config_path(self) -> Path | None:
        """Path of the config file that was loaded, if any."""
        return self._config_path

    def get_source(self, key: str) -> str:
        """Get the source of a configuration value."""
        return self._config_sources.get(key, "default")

    def get_log_level_int(self) -> int:
        """Get the configured log level as integer for the logging module."""
        return int(getattr(logging, self._config.log_level, logging.WARNING))


def create_user_config(cli_config_path: str | Path | None = None) -> UserConfig:
    """Create a UserConfig instance."""
    return UserConfig(cli_config_path=cli_config_path)
