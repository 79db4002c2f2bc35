"""Settings file loading, validation, and persistence.

Schema on disk (~/.config/hsift/config.json):

    {
        "history_file": "~/.zsh_history",
        "show_help": true,
        "highlight_matches": true
    }

Every key is optional.  Keys prefixed with "_" are reserved (e.g. "_comment")
and are stripped on load.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

CONFIG_PATH = Path("~/.config/hsift/config.json").expanduser()

_README_PATH = Path("~/.config/hsift/README.md").expanduser()

_README_CONTENT = """\
# hsift configuration

Edit `config.json` in this directory to change hsift's defaults.

## Schema

```json
{
    "history_file": "<path to history file>",
    "show_help": true,
    "highlight_matches": true
}
```

- `history_file`: history to search.  When unset hsift uses `$HISTFILE`,
  then `~/.bash_history`.  The `--history-file` option overrides it.
- `show_help`: show the key help line above the results.
- `highlight_matches`: render the matched part of each row in bold.

Keys prefixed with `_` (e.g. `_comment`) are ignored by hsift.
"""


class Settings(BaseModel):
    """User preferences read from config.json."""

    model_config = ConfigDict(extra="forbid")

    history_file: Path | None = None
    show_help: bool = True
    highlight_matches: bool = True


class ConfigError(Exception):
    """Raised when config.json exists but cannot be parsed or validated."""


def load_settings() -> Settings:
    """Load and validate the settings file.

    Creates the config directory, an empty config.json, and a README on first
    run, and returns the defaults.  Raises ConfigError if the file exists but
    is malformed.
    """
    if not CONFIG_PATH.exists():
        _bootstrap()
        return Settings()

    try:
        raw: object = json.loads(CONFIG_PATH.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config.json is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("config.json must be a JSON object at the top level")

    # Strip reserved/comment keys.
    data = {k: v for k, v in raw.items() if not k.startswith("_")}

    try:
        settings = Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config.json: {exc}") from exc

    if settings.history_file is not None:
        settings.history_file = settings.history_file.expanduser()
    return settings


def save_settings(settings: Settings) -> None:
    """Persist settings to disk, creating directories as needed."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(settings.model_dump(mode="json"), indent=2))


def _bootstrap() -> None:
    """Create the config directory, an empty config.json, and a README."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text("{}\n")
    if not _README_PATH.exists():
        _README_PATH.write_text(_README_CONTENT)


# Theme persistence
THEME_CONFIG_PATH = Path("~/.config/hsift/theme.json").expanduser()


def load_theme() -> str | None:
    """Load the saved theme preference.

    Returns the theme name if set, None otherwise.
    """
    if not THEME_CONFIG_PATH.exists():
        return None
    try:
        data = json.loads(THEME_CONFIG_PATH.read_text())
        return data.get("theme")
    except (json.JSONDecodeError, AttributeError):
        return None


def save_theme(theme: str) -> None:
    """Save the theme preference to disk."""
    THEME_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    THEME_CONFIG_PATH.write_text(json.dumps({"theme": theme}, indent=2))
