"""Core test fixtures for the tricore-flash project."""

import json
import logging
import os
import sys
import textwrap
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from typer.testing import CliRunner

from tricore_flash.config.flasher import reset_flasher_path


SAMPLE_HEX = (
    ":020000040000FA\n"
    ":10000000214601360121470136007EFE09D2190140\n"
    ":00000001FF\n"
)


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_hex() -> str:
    """A small Intel-HEX image."""
    return SAMPLE_HEX


@pytest.fixture
def hex_file(tmp_path: Path, sample_hex: str) -> Path:
    """The sample image written to a file."""
    path = tmp_path / "firmware.hex"
    path.write_text(sample_hex)
    return path


# ---- Test Isolation Fixtures ----


@pytest.fixture(autouse=True)
def clean_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Isolate every test from user config files, environment and frozen state."""
    for key in list(os.environ):
        if key.startswith("TRICORE_FLASH_") or key == "MEMTOOL_PATH":
            monkeypatch.delenv(key)

    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))

    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    reset_flasher_path()
    yield
    reset_flasher_path()

    # CLI runs install handlers on streams that are closed afterwards
    logging.getLogger().handlers = []
    structlog.reset_defaults()


@pytest.fixture
def temp_root(tmp_path: Path) -> Path:
    """Directory in which session workspaces are created."""
    root = tmp_path / "workspaces"
    root.mkdir()
    return root


# ---- Fake Flasher ----


FAKE_FLASHER_SCRIPT = """
import json
import sys
import time
from pathlib import Path

GATE = {gate!r}
RECORD = {record!r}
EXIT_CODE = {exit_code!r}

if GATE is not None:
    deadline = time.monotonic() + 10
    while not Path(GATE).exists() and time.monotonic() < deadline:
        time.sleep(0.01)

files = {{}}
for arg in sys.argv[1:]:
    path = Path(arg)
    if path.is_file():
        files[arg] = path.read_text()

firmware = None
batch = files.get(sys.argv[-1], "")
for line in batch.splitlines():
    if line.startswith("open_file "):
        firmware_path = Path(line[len("open_file "):])
        if firmware_path.is_file():
            firmware = firmware_path.read_text()

Path(RECORD).write_text(
    json.dumps({{"argv": sys.argv[1:], "files": files, "firmware": firmware}})
)
sys.exit(EXIT_CODE)
"""


class FakeFlasher:
    """An executable standing in for Memtool that records how it was run."""

    def __init__(self, directory: Path, exit_code: int = 0, gated: bool = False):
        directory.mkdir(parents=True, exist_ok=True)
        self.record_path = directory / "record.json"
        self.gate_path = directory / "gate" if gated else None

        script = directory / "fake_memtool.py"
        script.write_text(
            textwrap.dedent(
                FAKE_FLASHER_SCRIPT.format(
                    gate=str(self.gate_path) if self.gate_path else None,
                    record=str(self.record_path),
                    exit_code=exit_code,
                )
            )
        )

        self.path = directory / "memtool"
        self.path.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n')
        self.path.chmod(0o755)

    def open_gate(self) -> None:
        assert self.gate_path is not None
        self.gate_path.touch()

    @property
    def record(self) -> dict[str, Any]:
        return json.loads(self.record_path.read_text())  # type: ignore[no-any-return]


@pytest.fixture
def fake_flasher_factory(tmp_path: Path) -> Callable[..., FakeFlasher]:
    """Create fake Memtool executables.

    Usage:
        def test_upload(fake_flasher_factory):
            flasher = fake_flasher_factory(exit_code=0)
            session = UploadSession.start(hex, flasher=flasher.path)
    """
    if sys.platform == "win32":
        pytest.skip("fake flasher is a POSIX shell script")

    counter = 0

    def _create(exit_code: int = 0, gated: bool = False) -> FakeFlasher:
        nonlocal counter
        counter += 1
        return FakeFlasher(tmp_path / f"flasher{counter}", exit_code, gated)

    return _create


@pytest.fixture
def fake_flasher(fake_flasher_factory: Callable[..., FakeFlasher]) -> FakeFlasher:
    """A fake Memtool that exits successfully."""
    return fake_flasher_factory()
