"""Decorators for CLI commands."""

from tricore_flash.cli.decorators.error_handling import handle_errors


__all__ = ["handle_errors"]
