"""Application context shared between CLI commands."""

import typer

from tricore_flash.config.user_config import UserConfig, create_user_config


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.user_config: UserConfig = create_user_config(cli_config_path=config_file)


def get_app_context(ctx: typer.Context) -> AppContext:
    """Get the AppContext stored by the main callback."""
    app_context = ctx.find_object(AppContext)
    if app_context is None:
        app_context = AppContext()
        ctx.obj = app_context
    return app_context
