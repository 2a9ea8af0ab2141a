"""Main CLI application for tricore-flash."""

import logging
from importlib.metadata import distribution
from typing import Annotated

import typer

from tricore_flash.cli.commands import register_all_commands
from tricore_flash.cli.context import AppContext
from tricore_flash.cli.decorators import handle_errors
from tricore_flash.core.logging import setup_logging


__all__ = ["app", "main", "__version__"]


__version__ = distribution("tricore-flash").version

logger = logging.getLogger(__name__)


app = typer.Typer(
    name="tricore-flash",
    help=f"""tricore-flash v{__version__}

Flash Intel-HEX images to Infineon AURIX TC39x targets by driving
Infineon Memtool in batch mode. A DAS server must be running with the
target attached.

Common workflows:
  • Flash a target:       tricore-flash flash app.hex --port 0
  • Open in Memtool only: tricore-flash flash app.hex --halt
  • Inspect inputs:       tricore-flash render config --port 0
  • Show settings:        tricore-flash config show""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """tricore-flash: Memtool batch flashing for AURIX TC39x."""
    if version:
        print(f"tricore-flash v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    # Logging goes to stderr before the config is loaded, stdout carries
    # rendered Memtool files
    if debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING
    setup_logging(level=log_level, log_file=log_file)

    app_context = handle_errors(AppContext)(
        verbose=verbose, log_file=log_file, config_file=config_file
    )
    ctx.obj = app_context

    # Without flags the configured level applies
    if not (debug or verbose):
        config_level = app_context.user_config.get_log_level_int()
        if config_level != log_level:
            log_level = config_level
            setup_logging(level=log_level, log_file=log_file)

    logger.debug("CLI started with log level %s", logging.getLevelName(log_level))


register_all_commands(app)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
