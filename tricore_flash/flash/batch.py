"""Memtool batch script rendering."""

from pathlib import Path

from tricore_flash.flash.models import FlashMode


def batch_commands(mode: FlashMode, firmware_path: Path) -> list[str]:
    """Return the ordered Memtool batch commands for ``mode``.

    In halt mode Memtool is left connected with the file opened, for the
    operator to continue in the GUI.
    """
    commands = ["connect", f"open_file {firmware_path}"]
    if mode == FlashMode.FULL_PROGRAM:
        commands.extend(
            [
                "select_all_sections",
                "add_selected_sections",
                "program",
                "disconnect",
                "exit",
            ]
        )
    return commands


def render_batch(mode: FlashMode, firmware_path: Path) -> str:
    """Render the batch script, one command per line.

    The firmware path is substituted bare; Memtool does not accept quoting.
    """
    return "".join(f"{command}\n" for command in batch_commands(mode, firmware_path))
