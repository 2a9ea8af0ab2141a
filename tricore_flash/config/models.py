"""Settings model for tricore-flash."""

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PREFIX = "TRICORE_FLASH_"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FlashSettings(BaseSettings):
    """Flash settings with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables
    2. Constructor arguments (config file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        validate_assignment=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override config file values."""
        return (env_settings, init_settings)

    memtool_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "memtool_path", f"{ENV_PREFIX}MEMTOOL_PATH", "MEMTOOL_PATH"
        ),
        description="Path to the Infineon Memtool command line executable",
    )

    das_port: int = Field(
        default=0,
        ge=0,
        description="UDAS port selector of the target to flash",
    )

    halt: bool = Field(
        default=False,
        description="Stop after opening the firmware file and leave Memtool to the operator",
    )

    temp_root: Path | None = Field(
        default=None,
        description="Directory in which session workspaces are created (system temp dir if unset)",
    )

    wait_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for Memtool to terminate (unbounded if unset)",
    )

    log_level: str = Field(default="WARNING", description="Default log level")

    @field_validator("memtool_path", "temp_root", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        if isinstance(v, str | Path) and str(v).strip():
            return Path(str(v).strip()).expanduser()
        if isinstance(v, str):
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        upper_v = v.strip().upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return upper_v


__all__ = ["ENV_PREFIX", "FlashSettings"]
