"""Flash command implementation."""

from pathlib import Path
from typing import Annotated

import typer

from tricore_flash.cli.context import get_app_context
from tricore_flash.cli.decorators import handle_errors
from tricore_flash.cli.helpers import print_error_message, print_result
from tricore_flash.config.flasher import get_flasher_path
from tricore_flash.core.structlog_logger import get_struct_logger
from tricore_flash.flash import FlashMode, create_flash_service


logger = get_struct_logger(__name__)


@handle_errors
def flash(
    ctx: typer.Context,
    firmware_file: Annotated[
        Path,
        typer.Argument(
            help="Intel-HEX firmware image to flash",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    port: Annotated[
        int | None,
        typer.Option(
            "--port",
            "-p",
            min=0,
            help="UDAS port of the target (uses config default if not specified)",
        ),
    ] = None,
    halt: Annotated[
        bool | None,
        typer.Option(
            "--halt/--no-halt",
            help="Only connect and open the file, then leave Memtool to the operator",
        ),
    ] = None,
    memtool: Annotated[
        Path | None,
        typer.Option("--memtool", help="Path to the Memtool executable"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option(
            "--timeout",
            min=0.1,
            help="Seconds to wait for Memtool (waits forever if not specified)",
        ),
    ] = None,
    wait: Annotated[
        bool,
        typer.Option(
            "--wait/--no-wait",
            help=(
                "Wait for Memtool to terminate before removing its input files. "
                "--no-wait requires --halt: while programming, Memtool still "
                "reads the files that would be removed"
            ),
        ),
    ] = True,
) -> None:
    """Flash an Intel-HEX image to an AURIX TC39x target with Infineon Memtool.

    A DAS server must already be running with the target attached. The image
    must not contain sections Memtool cannot flash.

    Examples:
        # Program all sections of the target on UDAS port 0
        tricore-flash flash app.hex

        # Open the image in Memtool on port 2 and continue by hand
        tricore-flash flash app.hex --port 2 --halt
    """
    app_context = get_app_context(ctx)
    settings = app_context.user_config.settings

    if halt is None:
        halt = settings.halt
    if not wait and not halt:
        print_error_message(
            "--no-wait requires --halt: Memtool reads its configuration and "
            "batch files while programming"
        )
        raise typer.Exit(1)
    flasher = memtool or settings.memtool_path or get_flasher_path()

    logger.debug(
        "flash_command",
        firmware_file=str(firmware_file),
        port=port,
        halt=halt,
        flasher=str(flasher),
    )

    service = create_flash_service(settings)
    result = service.flash(
        firmware_file,
        mode=FlashMode.from_halt(halt),
        port=port,
        flasher=flasher,
        wait=wait,
        timeout=timeout,
    )

    print_result(result)
    if not result.success:
        raise typer.Exit(1)


def register_commands(app: typer.Typer) -> None:
    """Register the flash command with the main app."""
    app.command(name="flash")(flash)
