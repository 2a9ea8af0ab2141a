"""Command-line interface for tricore-flash."""

from tricore_flash.cli.app import app, main


__all__ = ["app", "main"]
