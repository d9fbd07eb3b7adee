"""Tests for configuration loading and the config singleton."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from durafmt.core import config as config_module
from durafmt.core.config import (
    CONFIG_ENV_VAR,
    DurafmtConfig,
    _reset_config,
    get_config,
    load_config,
    set_config,
)
from durafmt.core.exceptions import ConfigError


class TestDurafmtConfigModel:
    """Tests for the Pydantic model."""

    def test_defaults(self) -> None:
        config = DurafmtConfig()
        assert config.language is None
        assert config.timezone is None

    def test_language_reduced_to_subtag(self) -> None:
        assert DurafmtConfig(language="de_DE.UTF-8").language == "de"
        assert DurafmtConfig(language="C").language is None

    def test_valid_timezone(self) -> None:
        assert DurafmtConfig(timezone="Europe/Berlin").timezone == "Europe/Berlin"

    def test_unknown_timezone_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DurafmtConfig(timezone="Mars/Olympus_Mons")
        assert "Unknown timezone" in str(exc_info.value)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DurafmtConfig(locale="de")

    def test_frozen(self) -> None:
        config = DurafmtConfig()
        with pytest.raises(ValidationError):
            config.language = "de"


class TestConfigSingleton:
    """Tests for get_config/set_config/_reset_config."""

    def test_get_config_defaults(self) -> None:
        assert get_config() == DurafmtConfig()

    def test_get_config_returns_same_instance(self) -> None:
        assert get_config() is get_config()

    def test_set_and_reset(self) -> None:
        custom = DurafmtConfig(language="de")
        set_config(custom)
        assert get_config() is custom
        _reset_config()
        assert get_config().language is None


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("language: de_DE\ntimezone: Europe/Berlin\n")
        config = load_config(config_file)
        assert config.language == "de"
        assert config.timezone == "Europe/Berlin"
        assert get_config() is config

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert load_config(config_file) == DurafmtConfig()

    def test_path_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "env.yaml"
        config_file.write_text("language: de\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert load_config().language == "de"

    def test_missing_default_file_uses_defaults(self) -> None:
        assert not config_module.DEFAULT_CONFIG_PATH.exists()
        assert load_config() == DurafmtConfig()

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_missing_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
        with pytest.raises(ConfigError, match="not found"):
            load_config()

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("language: [de\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_file)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- de\n- en\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config(config_file)

    def test_validation_failure(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("timezone: Nowhere/Special\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(config_file)

    def test_failed_load_keeps_previous_config(self, tmp_path: Path) -> None:
        previous = DurafmtConfig(language="de")
        set_config(previous)
        config_file = tmp_path / "config.yaml"
        config_file.write_text("unknown: 1\n")
        with pytest.raises(ConfigError):
            load_config(config_file)
        assert get_config() is previous
