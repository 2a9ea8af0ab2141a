"""Tests for logging setup and structured logging helpers."""

import json
import logging

import pytest

from tricore_flash.core.logging import setup_logging
from tricore_flash.core.structlog_logger import (
    StructlogMixin,
    get_struct_logger,
)


class Worker(StructlogMixin):
    pass


@pytest.fixture(autouse=True)
def restore_root_level():
    level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(level)


def test_console_logs_go_to_stderr(capsys):
    setup_logging(level=logging.INFO)

    get_struct_logger("tricore_flash.test").info("memtool_spawned", das_port=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "memtool_spawned" in captured.err
    assert "das_port" in captured.err


def test_level_filters_console(capsys):
    setup_logging(level=logging.WARNING)

    get_struct_logger("tricore_flash.test").info("hidden_event")

    assert "hidden_event" not in capsys.readouterr().err


def test_json_log_file(tmp_path):
    log_file = tmp_path / "logs" / "flash.log"
    setup_logging(level=logging.DEBUG, log_file=log_file)

    get_struct_logger("tricore_flash.test").bind(das_port=5).info("memtool_terminated")
    for handler in logging.getLogger().handlers:
        handler.flush()

    entries = [json.loads(line) for line in log_file.read_text().splitlines()]
    entry = next(e for e in entries if e["event"] == "memtool_terminated")
    assert entry["das_port"] == 5
    assert entry["level"] == "info"
    assert entry["logger"] == "tricore_flash.test"


def test_mixin_binds_service_name(capsys):
    setup_logging(level=logging.INFO)

    worker = Worker()
    worker.log_error_with_context("upload_failed", OSError("disk full"), das_port=1)

    err = capsys.readouterr().err
    assert "upload_failed" in err
    assert "Worker" in err
    assert "disk full" in err
    assert worker.logger is worker.logger
