"""Upload of a firmware image with Infineon Memtool.

A session writes the firmware, a Memtool target configuration and a batch
script into its own workspace, then starts Memtool on them. The workspace
lives as long as the session; releasing the session never terminates
Memtool, so that in halt mode the operator can keep working in it.

Typical use::

    with UploadSession.start(hex_text, FlashMode.FULL_PROGRAM, port=0) as session:
        session.wait()
"""

import subprocess
from pathlib import Path

from tricore_flash.config.flasher import get_flasher_path
from tricore_flash.core.errors import (
    ArtifactWriteError,
    FlasherFailedError,
    FlasherNotStartableError,
    FlasherTimeoutError,
    SessionStateError,
)
from tricore_flash.core.structlog_logger import get_struct_logger
from tricore_flash.flash.batch import render_batch
from tricore_flash.flash.memtool_config import render_config
from tricore_flash.flash.models import FlashMode, SessionState
from tricore_flash.flash.workspace import Workspace


logger = get_struct_logger(__name__)

INPUT_HEX_NAME = "input.hex"
CONFIG_NAME = "temp_config.cfg"
BATCH_NAME = "batch.mtb"


class UploadSession:
    """A running Memtool upload and the workspace feeding it."""

    def __init__(
        self,
        workspace: Workspace,
        process: subprocess.Popen[bytes],
        argv: list[str],
        mode: FlashMode,
        port: int,
    ) -> None:
        self._workspace = workspace
        self._process = process
        self._argv = argv
        self._mode = mode
        self._port = port
        self._state = SessionState.SPAWNED

    @classmethod
    def start(
        cls,
        firmware: str | bytes,
        mode: FlashMode = FlashMode.FULL_PROGRAM,
        port: int = 0,
        *,
        flasher: str | Path | None = None,
        temp_root: Path | None = None,
    ) -> "UploadSession":
        """Upload a HEX image to the target on the given UDAS port.

        A DAS instance must already be running. The image must not contain
        sections Memtool cannot flash.

        Args:
            firmware: Intel-HEX image, written verbatim
            mode: Program everything, or stop after opening the file
            port: UDAS port selector of the target
            flasher: Memtool executable (process-wide location if None)
            temp_root: Directory for the workspace (system temp dir if None)

        Raises:
            ConfigError: If no flasher is given and none is configured
            WorkspaceUnavailableError: If the workspace cannot be created
            ArtifactWriteError: If an input file cannot be written
            FlasherNotStartableError: If Memtool cannot be spawned
        """
        flasher_path = Path(flasher) if flasher is not None else get_flasher_path()
        firmware_bytes = firmware.encode("utf-8") if isinstance(firmware, str) else firmware

        workspace = Workspace.allocate(temp_root)
        try:
            firmware_path = cls._write_artifact(
                workspace, INPUT_HEX_NAME, firmware_bytes, "input hex file"
            )
            config_path = cls._write_artifact(
                workspace, CONFIG_NAME, render_config(port), "memtool configuration file"
            )
            batch_path = cls._write_artifact(
                workspace,
                BATCH_NAME,
                render_batch(mode, firmware_path),
                "memtool batch file",
            )

            argv = [str(flasher_path), "-c", str(config_path), str(batch_path)]
            process = cls._spawn(flasher_path, argv)
        except BaseException:
            workspace.release()
            raise

        logger.info(
            "memtool_spawned",
            pid=process.pid,
            mode=mode.value,
            das_port=port,
            workspace=str(workspace.path),
        )
        return cls(workspace, process, argv, mode, port)

    @staticmethod
    def _write_artifact(
        workspace: Workspace, name: str, content: str | bytes, description: str
    ) -> Path:
        try:
            if isinstance(content, bytes):
                return workspace.write_bytes(name, content)
            return workspace.write_text(name, content)
        except OSError as e:
            raise ArtifactWriteError(
                f"Cannot write temporary {description}: {e}",
                artifact=name,
                context={"workspace": str(workspace.path)},
            ) from e

    @staticmethod
    def _spawn(flasher_path: Path, argv: list[str]) -> subprocess.Popen[bytes]:
        logger.debug("memtool_spawning", argv=argv)
        try:
            # stdio is inherited from this process
            return subprocess.Popen(argv)
        except OSError as e:
            raise FlasherNotStartableError(
                f"Could not start memtool to flash device: {e}",
                flasher=flasher_path,
            ) from e

    def wait(self, timeout: float | None = None) -> int:
        """Wait for Memtool to finish.

        This normally takes seconds, but Memtool hangs when the flash layout
        is broken or another debugger is attached; without a timeout this
        call then blocks forever. Memtool's GUI or its logs are the only way
        to debug such a failure.

        Args:
            timeout: Seconds to wait, unbounded if None

        Returns:
            Memtool's exit status (always 0)

        Raises:
            FlasherFailedError: Memtool exited with a non-zero status. Fatal.
            FlasherTimeoutError: Memtool is still running after ``timeout``.
                It is not terminated and wait may be called again.
            SessionStateError: The session was already waited on.
        """
        if self._state != SessionState.SPAWNED:
            raise SessionStateError(
                f"Upload session already {self._state.value}, it cannot be waited on again"
            )

        try:
            returncode = self._process.wait(timeout=timeout)
        except subprocess.TimeoutExpired as e:
            logger.warning("memtool_wait_timeout", pid=self._process.pid, timeout=timeout)
            raise FlasherTimeoutError(
                f"Memtool did not terminate within {timeout} seconds",
                {"pid": self._process.pid},
            ) from e

        if returncode != 0:
            self._state = SessionState.FAILED
            logger.critical(
                "memtool_failed",
                returncode=returncode,
                das_port=self._port,
                flasher=self._argv[0],
            )
            raise FlasherFailedError(returncode, self._argv[0])

        self._state = SessionState.TERMINATED
        logger.info("memtool_terminated", das_port=self._port)
        return returncode

    def release(self) -> None:
        """Remove the workspace. Memtool is left running if it still is."""
        self._workspace.release()

    def __enter__(self) -> "UploadSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def released(self) -> bool:
        return self._workspace.released

    @property
    def mode(self) -> FlashMode:
        return self._mode

    @property
    def port(self) -> int:
        return self._port

    @property
    def argv(self) -> list[str]:
        """The argument vector Memtool was started with."""
        return list(self._argv)

    @property
    def process(self) -> subprocess.Popen[bytes]:
        return self._process

    @property
    def workspace_path(self) -> Path:
        return self._workspace.path

    @property
    def firmware_path(self) -> Path:
        return self._workspace.path_for(INPUT_HEX_NAME)

    @property
    def config_path(self) -> Path:
        return self._workspace.path_for(CONFIG_NAME)

    @property
    def batch_path(self) -> Path:
        return self._workspace.path_for(BATCH_NAME)

    def __repr__(self) -> str:
        return (
            f"<UploadSession pid={self._process.pid} mode={self._mode.value} "
            f"port={self._port} state={self._state.value}>"
        )
