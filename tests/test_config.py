"""Unit tests for settings loading, validation, and persistence."""

import json
from pathlib import Path

import pytest

from hsift import config
from hsift.config import (
    ConfigError,
    Settings,
    load_settings,
    load_theme,
    save_settings,
    save_theme,
)


def _write(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


class TestSettings:
    def test_defaults(self):
        """
        Given no arguments
        When Settings is constructed
        Then history_file is unset and both display options are on
        """
        settings = Settings()
        assert settings.history_file is None
        assert settings.show_help is True
        assert settings.highlight_matches is True

    def test_unknown_field_raises(self):
        """
        Given a dict with a misspelt key
        When Settings.model_validate is called
        Then a ValidationError is raised
        """
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            Settings.model_validate({"show_hepl": False})


class TestLoadSettings:
    def test_returns_defaults_when_file_missing(self):
        """
        Given no config file exists
        When load_settings is called
        Then it returns defaults and creates the file and README
        """
        result = load_settings()

        assert result == Settings()
        assert config.CONFIG_PATH.exists()
        assert config._README_PATH.exists()

    def test_bootstrapped_file_is_valid_json(self):
        """
        Given no config file exists
        When load_settings creates the bootstrap file
        Then config.json is valid JSON containing an empty object
        """
        load_settings()

        assert json.loads(config.CONFIG_PATH.read_text()) == {}

    def test_existing_readme_is_not_overwritten(self):
        """
        Given a README the user has edited but no config.json
        When load_settings bootstraps
        Then the README is left alone
        """
        config._README_PATH.parent.mkdir(parents=True, exist_ok=True)
        config._README_PATH.write_text("mine")

        load_settings()

        assert config._README_PATH.read_text() == "mine"

    def test_valid_config_is_parsed(self, tmp_path: Path):
        """
        Given a config.json setting every field
        When load_settings is called
        Then the values are reflected in the result
        """
        _write(
            config.CONFIG_PATH,
            {
                "history_file": str(tmp_path / "zsh_history"),
                "show_help": False,
                "highlight_matches": False,
            },
        )

        result = load_settings()

        assert result.history_file == tmp_path / "zsh_history"
        assert result.show_help is False
        assert result.highlight_matches is False

    def test_history_file_is_expanded(self, tmp_path: Path, monkeypatch):
        """
        Given history_file written with a leading ~
        When load_settings is called
        Then the path is expanded against $HOME
        """
        monkeypatch.setenv("HOME", str(tmp_path))
        _write(config.CONFIG_PATH, {"history_file": "~/.zsh_history"})

        assert load_settings().history_file == tmp_path / ".zsh_history"

    def test_underscore_keys_are_stripped(self):
        """
        Given config.json contains a key starting with '_'
        When load_settings is called
        Then it is ignored rather than rejected
        """
        _write(config.CONFIG_PATH, {"_comment": "notes", "show_help": False})

        assert load_settings().show_help is False

    def test_invalid_json_raises_config_error(self):
        """
        Given config.json contains malformed JSON
        When load_settings is called
        Then a ConfigError is raised
        """
        config.CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        config.CONFIG_PATH.write_text("{not valid json}")

        with pytest.raises(ConfigError, match="not valid JSON"):
            load_settings()

    def test_non_object_root_raises_config_error(self):
        """
        Given config.json contains a JSON array at the root
        When load_settings is called
        Then a ConfigError is raised
        """
        _write(config.CONFIG_PATH, [])

        with pytest.raises(ConfigError, match="top level"):
            load_settings()

    def test_wrong_type_raises_config_error(self):
        """
        Given show_help is not a boolean
        When load_settings is called
        Then a ConfigError is raised
        """
        _write(config.CONFIG_PATH, {"show_help": "sometimes"})

        with pytest.raises(ConfigError, match="Invalid config.json"):
            load_settings()


class TestSaveSettings:
    def test_round_trip(self, tmp_path: Path):
        """
        Given a Settings object
        When save_settings then load_settings is called
        Then the loaded settings match the original
        """
        original = Settings(history_file=tmp_path / "h", show_help=False)

        save_settings(original)

        assert load_settings() == original

    def test_creates_parent_directory(self, tmp_path: Path, monkeypatch):
        """
        Given the config directory does not exist
        When save_settings is called
        Then the directory and file are created
        """
        cfg_path = tmp_path / "nested" / "dir" / "config.json"
        monkeypatch.setattr("hsift.config.CONFIG_PATH", cfg_path)

        save_settings(Settings())

        assert cfg_path.exists()


class TestTheme:
    def test_no_saved_theme(self):
        assert load_theme() is None

    def test_round_trip(self):
        """
        Given a theme name
        When save_theme then load_theme is called
        Then the same name comes back
        """
        save_theme("nord")

        assert load_theme() == "nord"

    def test_corrupt_theme_file_is_ignored(self):
        """
        Given theme.json is not valid JSON
        When load_theme is called
        Then it returns None instead of raising
        """
        config.THEME_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        config.THEME_CONFIG_PATH.write_text("nord")

        assert load_theme() is None
