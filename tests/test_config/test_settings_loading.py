"""Tests for FlashSettings and the UserConfig loader."""

import logging
import os
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from tricore_flash.config import UserConfig, create_user_config
from tricore_flash.config.models import FlashSettings
from tricore_flash.core.errors import ConfigError


@pytest.fixture
def xdg_config_dir() -> Path:
    """The tricore-flash directory inside the isolated XDG config home."""
    path = Path(os.environ["XDG_CONFIG_HOME"]) / "tricore-flash"
    path.mkdir(parents=True)
    return path


def write_config(path: Path, data: dict) -> Path:
    path.write_text(yaml.safe_dump(data))
    return path


class TestFlashSettings:
    """Tests for the settings model."""

    def test_defaults(self):
        settings = FlashSettings()

        assert settings.memtool_path is None
        assert settings.das_port == 0
        assert settings.halt is False
        assert settings.temp_root is None
        assert settings.wait_timeout is None
        assert settings.log_level == "WARNING"

    def test_environment_overrides_init(self, monkeypatch):
        """Environment variables win over config file values."""
        monkeypatch.setenv("TRICORE_FLASH_DAS_PORT", "5")
        monkeypatch.setenv("TRICORE_FLASH_HALT", "true")

        settings = FlashSettings(das_port=1, halt=False)

        assert settings.das_port == 5
        assert settings.halt is True

    @pytest.mark.parametrize(
        "env_name", ["MEMTOOL_PATH", "TRICORE_FLASH_MEMTOOL_PATH"]
    )
    def test_memtool_path_from_environment(self, monkeypatch, env_name):
        monkeypatch.setenv(env_name, "/opt/infineon/memtool")

        assert FlashSettings().memtool_path == Path("/opt/infineon/memtool")

    def test_path_expansion(self):
        settings = FlashSettings(memtool_path="~/memtool", temp_root=" ")

        assert settings.memtool_path == Path("~/memtool").expanduser()
        assert settings.temp_root is None

    def test_log_level_normalized(self):
        assert FlashSettings(log_level=" debug ").log_level == "DEBUG"

    @pytest.mark.parametrize(
        "values",
        [{"das_port": -1}, {"wait_timeout": 0}, {"log_level": "LOUD"}],
    )
    def test_invalid_values(self, values):
        with pytest.raises(ValidationError):
            FlashSettings(**values)


class TestUserConfig:
    """Tests for config file discovery and source tracking."""

    def test_no_config_file(self):
        config = UserConfig()

        assert config.config_path is None
        assert config.settings == FlashSettings()
        assert config.get_source("das_port") == "default"

    def test_cwd_config_file(self):
        path = write_config(Path.cwd() / "tricore-flash.yaml", {"das_port": 3})

        config = create_user_config()

        assert config.config_path == path
        assert config.settings.das_port == 3
        assert config.get_source("das_port") == "file:tricore-flash.yaml"
        assert config.get_source("halt") == "default"

    def test_hidden_cwd_config_file(self):
        write_config(Path.cwd() / ".tricore-flash.yml", {"halt": True})

        assert UserConfig().settings.halt is True

    def test_xdg_config_file(self, xdg_config_dir):
        path = write_config(xdg_config_dir / "config.yaml", {"das_port": 8})

        config = UserConfig()

        assert config.config_path == path
        assert config.settings.das_port == 8

    def test_cwd_before_xdg(self, xdg_config_dir):
        write_config(xdg_config_dir / "config.yaml", {"das_port": 8})
        write_config(Path.cwd() / "tricore-flash.yaml", {"das_port": 2})

        assert UserConfig().settings.das_port == 2

    def test_cli_config_path_first(self, tmp_path):
        write_config(Path.cwd() / "tricore-flash.yaml", {"das_port": 2})
        cli_path = write_config(tmp_path / "bench.yaml", {"das_port": 11})

        config = UserConfig(cli_config_path=cli_path)

        assert config.config_path == cli_path.resolve()
        assert config.settings.das_port == 11

    def test_missing_cli_config_path(self, tmp_path):
        with pytest.raises(ConfigError, match="Config file not found"):
            UserConfig(cli_config_path=tmp_path / "missing.yaml")

    def test_environment_source(self, monkeypatch):
        write_config(Path.cwd() / "tricore-flash.yaml", {"das_port": 2})
        monkeypatch.setenv("TRICORE_FLASH_DAS_PORT", "9")
        monkeypatch.setenv("MEMTOOL_PATH", "/opt/memtool")

        config = UserConfig()

        assert config.settings.das_port == 9
        assert config.get_source("das_port") == "environment:TRICORE_FLASH_DAS_PORT"
        assert config.get_source("memtool_path") == "environment:MEMTOOL_PATH"

    def test_empty_config_file(self):
        (Path.cwd() / "tricore-flash.yaml").write_text("")

        assert UserConfig().settings == FlashSettings()

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("das_port: [1\n", "Invalid YAML"),
            ("- 1\n- 2\n", "must contain a mapping"),
            ("das_port: -3\n", "Invalid configuration"),
        ],
    )
    def test_invalid_config_file(self, content, message):
        (Path.cwd() / "tricore-flash.yaml").write_text(content)

        with pytest.raises(ConfigError, match=message):
            UserConfig()

    def test_unknown_keys_ignored(self):
        write_config(Path.cwd() / "tricore-flash.yaml", {"board": "triboard"})

        assert UserConfig().settings == FlashSettings()

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("ERROR", logging.ERROR)],
    )
    def test_log_level_int(self, level, expected):
        write_config(Path.cwd() / "tricore-flash.yaml", {"log_level": level})

        assert UserConfig().get_log_level_int() == expected
