"""Pytest configuration and fixtures for configster tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings loader at an empty directory for every test."""
    settings_dir = tmp_path / "settings"
    settings_dir.mkdir()
    monkeypatch.setenv("CONFIGSTER_CONFIG", str(settings_dir))
    return settings_dir


@pytest.fixture
def sample_config_text():
    """The four-line example config."""
    return (
        "option = Blue , light , shiny\n"
        "max_users = 30\n"
        "DelayOff\n"
        "Option  /home/foo\n"
    )


@pytest.fixture
def sample_config_file(tmp_path, sample_config_text):
    """The four-line example config written to disk."""
    path = tmp_path / "sample.conf"
    path.write_text(sample_config_text, encoding="utf-8")
    return path


@pytest.fixture
def fixture_config_file():
    """Config with comments and blank lines; the invalid option is on line 8."""
    return FIXTURES_DIR / "config_test.conf"
