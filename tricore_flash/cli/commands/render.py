"""Commands printing the Memtool input files without running Memtool."""

from pathlib import Path
from typing import Annotated

import typer

from tricore_flash.cli.context import get_app_context
from tricore_flash.cli.decorators import handle_errors
from tricore_flash.flash import FlashMode, render_batch, render_config


render_app = typer.Typer(
    name="render",
    help="Print the Memtool configuration or batch script a flash would use.",
    no_args_is_help=True,
)


@render_app.command(name="config")
@handle_errors
def render_config_command(
    ctx: typer.Context,
    port: Annotated[
        int | None,
        typer.Option(
            "--port",
            "-p",
            min=0,
            help="UDAS port of the target (uses config default if not specified)",
        ),
    ] = None,
) -> None:
    """Print the Memtool target configuration for a UDAS port."""
    if port is None:
        port = get_app_context(ctx).user_config.settings.das_port
    typer.echo(render_config(port))


@render_app.command(name="batch")
@handle_errors
def render_batch_command(
    ctx: typer.Context,
    firmware_path: Annotated[
        Path, typer.Argument(help="Firmware path the script should open")
    ],
    halt: Annotated[
        bool | None,
        typer.Option("--halt/--no-halt", help="Render the halt-after-open script"),
    ] = None,
) -> None:
    """Print the Memtool batch script for a firmware path."""
    if halt is None:
        halt = get_app_context(ctx).user_config.settings.halt
    typer.echo(render_batch(FlashMode.from_halt(halt), firmware_path.absolute()), nl=False)


def register_commands(app: typer.Typer) -> None:
    """Register render commands with the main app."""
    app.add_typer(render_app, name="render")
