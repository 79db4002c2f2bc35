"""Shared fixtures: keep every test away from the real ~/.config/hsift."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    config_dir = tmp_path / "config"
    monkeypatch.setattr("hsift.config.CONFIG_PATH", config_dir / "config.json")
    monkeypatch.setattr("hsift.config._README_PATH", config_dir / "README.md")
    monkeypatch.setattr("hsift.config.THEME_CONFIG_PATH", config_dir / "theme.json")
    monkeypatch.delenv("HISTFILE", raising=False)
    return config_dir
