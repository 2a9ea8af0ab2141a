"""CLI command modules."""

import typer

from tricore_flash.cli.commands.config import register_commands as register_config_commands
from tricore_flash.cli.commands.flash import register_commands as register_flash_commands
from tricore_flash.cli.commands.render import register_commands as register_render_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_flash_commands(app)
    register_render_commands(app)
    register_config_commands(app)
