"""Configuration commands."""

import typer
from rich.console import Console
from rich.table import Table

from tricore_flash.cli.context import get_app_context
from tricore_flash.cli.decorators import handle_errors
from tricore_flash.config.models import FlashSettings


config_app = typer.Typer(
    name="config",
    help="Inspect tricore-flash configuration.",
    no_args_is_help=True,
)


@config_app.command(name="show")
@handle_errors
def show_config(ctx: typer.Context) -> None:
    """Show the effective settings and where each value comes from."""
    user_config = get_app_context(ctx).user_config
    settings = user_config.settings

    table = Table(
        title="tricore-flash configuration",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="bold")
    table.add_column("Source", style="dim")

    for key in FlashSettings.model_fields:
        value = getattr(settings, key)
        table.add_row(
            key, "-" if value is None else str(value), user_config.get_source(key)
        )

    console = Console(soft_wrap=True)
    console.print(table)
    if user_config.config_path:
        console.print(f"Config file: {user_config.config_path}")


def register_commands(app: typer.Typer) -> None:
    """Register config commands with the main app."""
    app.add_typer(config_app, name="config")
