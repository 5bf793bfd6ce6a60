"""Configuration loading for podfeed."""

from podfeed.config.manager import ConfigManager
from podfeed.config.schema import ChannelConfig, OutputConfig, PodfeedConfig, SourceConfig

__all__ = ["ConfigManager", "ChannelConfig", "OutputConfig", "PodfeedConfig", "SourceConfig"]
