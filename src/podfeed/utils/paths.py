"""Platform-specific locations for podfeed files."""

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "podfeed"


def get_config_dir() -> Path:
    """Return the user config directory (XDG on Linux)."""
    return Path(user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Return the path of the global config file."""
    return get_config_dir() / "config.yaml"
