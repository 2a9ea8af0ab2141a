"""Helper functions for CLI output formatting with Rich integration."""

from rich.console import Console
from rich.markup import escape

from tricore_flash.models.results import BaseResult


def _console(stderr: bool = False) -> Console:
    return Console(stderr=stderr, highlight=False, soft_wrap=True)


def print_success_message(message: str) -> None:
    """Print a success message with a checkmark."""
    _console().print(f"[bold green]✓[/bold green] {escape(message)}")


def print_error_message(message: str) -> None:
    """Print an error message with an X symbol."""
    _console(stderr=True).print(f"[bold red]✗[/bold red] {escape(message)}")


def print_list_item(item: str, indent: int = 1) -> None:
    """Print a list item with bullet and indentation."""
    _console().print(f"{' ' * (indent * 2)}• {escape(item)}")


def print_result(result: BaseResult) -> None:
    """Print operation result with appropriate formatting."""
    if result.success:
        for message in result.messages or ["Operation completed successfully"]:
            print_success_message(message)
    else:
        print_error_message("Operation failed")
        for error in result.errors:
            print_list_item(error)
