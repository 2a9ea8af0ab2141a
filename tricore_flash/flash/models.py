"""Flash models and result types."""

from enum import Enum

from pydantic import Field

from tricore_flash.models.results import BaseResult


class FlashMode(str, Enum):
    """What Memtool is instructed to do with the opened firmware file."""

    FULL_PROGRAM = "full_program"
    HALT_AFTER_OPEN = "halt_after_open"

    @classmethod
    def from_halt(cls, halt: bool) -> "FlashMode":
        return cls.HALT_AFTER_OPEN if halt else cls.FULL_PROGRAM


class SessionState(str, Enum):
    """Lifecycle state of an upload session."""

    SPAWNED = "spawned"
    TERMINATED = "terminated"
    FAILED = "failed"


class FlashResult(BaseResult):
    """Result of a flash operation."""

    mode: FlashMode | None = None
    das_port: int | None = Field(default=None, ge=0)
    firmware_file: str | None = None
    returncode: int | None = None
    waited: bool = False


__all__ = ["FlashMode", "SessionState", "FlashResult"]
