"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from tricore_flash.core.errors import ConfigError, FlashError, TricoreFlashError
from tricore_flash.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    Known errors are logged and reported before exiting with status 1.
    ``FlasherFailedError`` is a ``SystemExit`` and passes through untouched.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except ConfigError as e:
            logger.error("configuration_error", error=str(e), **e.context)
            _report(e)
            raise typer.Exit(1) from e
        except FlashError as e:
            logger.error("flash_error", error=str(e), **e.context)
            _report(e)
            raise typer.Exit(1) from e
        except TricoreFlashError as e:
            logger.error("tricore_flash_error", error=str(e), **e.context)
            _report(e)
            raise typer.Exit(1) from e
        except FileNotFoundError as e:
            logger.error("file_not_found", error=str(e))
            _report(e)
            raise typer.Exit(1) from e
        except Exception as e:
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            _report(e)
            raise typer.Exit(1) from e

    return wrapper


def _report(error: BaseException) -> None:
    from tricore_flash.cli.helpers.output import print_error_message

    print_error_message(str(error))
    print_stack_trace_if_verbose()


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
