"""Flash service for high-level flash operations."""

from pathlib import Path

from tricore_flash.config.models import FlashSettings
from tricore_flash.core.errors import FlashError
from tricore_flash.core.structlog_logger import StructlogMixin
from tricore_flash.flash.models import FlashMode, FlashResult
from tricore_flash.flash.session import UploadSession


class FlashService(StructlogMixin):
    """Reads a HEX file and flashes it through an upload session."""

    def __init__(self, settings: FlashSettings | None = None) -> None:
        super().__init__()
        self.settings = settings or FlashSettings()

    def flash(
        self,
        firmware_file: Path,
        *,
        mode: FlashMode | None = None,
        port: int | None = None,
        flasher: Path | None = None,
        wait: bool = True,
        timeout: float | None = None,
    ) -> FlashResult:
        """Flash ``firmware_file`` to the target on the given UDAS port.

        Unset arguments fall back to the service settings. In halt mode,
        waiting lasts until the operator closes Memtool; with ``wait=False``
        the workspace is removed right after Memtool was started. Only use
        that in halt mode: while programming, Memtool reads the configuration
        and batch files at arbitrary points.

        A non-zero Memtool exit raises ``FlasherFailedError`` and is never
        turned into a failed result.
        """
        mode = mode or FlashMode.from_halt(self.settings.halt)
        port = self.settings.das_port if port is None else port
        flasher = flasher or self.settings.memtool_path
        if timeout is None:
            timeout = self.settings.wait_timeout

        result = FlashResult(
            success=True, mode=mode, das_port=port, firmware_file=str(firmware_file)
        )
        self.logger.info(
            "flash_started",
            firmware_file=str(firmware_file),
            mode=mode.value,
            das_port=port,
        )

        try:
            firmware = firmware_file.read_bytes()
        except OSError as e:
            self.log_error_with_context("firmware_read_failed", e)
            result.add_error(f"Cannot read firmware file {firmware_file}: {e}")
            return result

        try:
            with UploadSession.start(
                firmware,
                mode,
                port,
                flasher=flasher,
                temp_root=self.settings.temp_root,
            ) as session:
                if wait:
                    result.returncode = session.wait(timeout=timeout)
                    result.waited = True
        except FlashError as e:
            self.log_error_with_context("flash_failed", e, das_port=port)
            result.add_error(str(e))
            return result

        if wait:
            result.add_message(f"Flashed {firmware_file.name} on UDAS port {port}")
        else:
            result.add_message(
                f"Memtool opened {firmware_file.name} on UDAS port {port}"
            )
        self.logger.info("flash_completed", das_port=port, waited=wait)
        return result


def create_flash_service(settings: FlashSettings | None = None) -> FlashService:
    """Create a FlashService instance."""
    return FlashService(settings=settings)
