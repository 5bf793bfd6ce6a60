"""Configuration manager for loading and saving podfeed config."""

from pathlib import Path

import yaml

from podfeed.config.defaults import DEFAULT_CONFIG, get_default_config_content
from podfeed.config.schema import PodfeedConfig
from podfeed.utils.errors import ConfigNotFoundError, InvalidConfigError
from podfeed.utils.paths import get_config_dir, get_config_file


class ConfigManager:
    """Manages the podfeed configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        if config_dir is None:
            self.config_dir = get_config_dir()
            self.config_file = get_config_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"

    def load_config(self) -> PodfeedConfig:
        """Load and validate the global configuration.

        Returns:
            Validated PodfeedConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self.create_default_config()
            return DEFAULT_CONFIG.model_copy(deep=True)

        return self._read(self.config_file)

    def load_config_file(self, path: Path) -> PodfeedConfig:
        """Load an explicitly named configuration file.

        Args:
            path: YAML config file

        Returns:
            Validated PodfeedConfig instance

        Raises:
            ConfigNotFoundError: If the file doesn't exist
            InvalidConfigError: If config is invalid
        """
        if not path.exists():
            raise ConfigNotFoundError(f"Config file not found: {path}")
        return self._read(path)

    def save_config(self, config: PodfeedConfig) -> None:
        """Save configuration.

        Args:
            config: PodfeedConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def create_default_config(self, overwrite: bool = False) -> bool:
        """Write the default config.yaml file.

        Args:
            overwrite: Replace an existing file

        Returns:
            True if the file was written
        """
        if self.config_file.exists() and not overwrite:
            return False
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())
        return True

    def _read(self, path: Path) -> PodfeedConfig:
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            return PodfeedConfig(**data)
        except Exception as e:
            raise InvalidConfigError(f"Invalid configuration in {path}: {e}") from e
