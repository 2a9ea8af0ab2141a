"""Helpers for CLI commands."""

from tricore_flash.cli.helpers.output import (
    print_error_message,
    print_list_item,
    print_result,
    print_success_message,
)


__all__ = [
    "print_success_message",
    "print_error_message",
    "print_list_item",
    "print_result",
]
