"""Pytest configuration and fixtures for durafmt tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_config_singleton(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from user configuration.

    Clears the config singleton and points the config lookup at a file that
    does not exist, so the CLI and library run on defaults unless a test
    loads its own config.
    """
    from durafmt.core import config

    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", tmp_path / "no-such-config.yaml")
    config._reset_config()
    yield
    config._reset_config()


@pytest.fixture
def process_locale(monkeypatch: pytest.MonkeyPatch):
    """Set the process locale seen by durafmt.

    Usage:
        def test_something(process_locale):
            process_locale("de_DE")
    """

    def _set(name: str | None) -> None:
        monkeypatch.setattr(
            "durafmt.i18n.duration.locale.getlocale",
            lambda *args: (name, "UTF-8" if name else None),
        )

    return _set
