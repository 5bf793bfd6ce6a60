"""Utility functions and helpers for podfeed."""

from podfeed.utils.errors import (
    ConfigError,
    ConfigNotFoundError,
    EmptyFeedError,
    FeedError,
    FetchError,
    InvalidConfigError,
    MalformedPageError,
    NetworkConnectionError,
    NetworkError,
    NetworkTimeoutError,
    OutputError,
    PodfeedError,
)
from podfeed.utils.paths import get_config_dir, get_config_file

__all__ = [
    # Errors
    "PodfeedError",
    "ConfigError",
    "InvalidConfigError",
    "ConfigNotFoundError",
    "FeedError",
    "MalformedPageError",
    "EmptyFeedError",
    "NetworkError",
    "FetchError",
    "NetworkConnectionError",
    "NetworkTimeoutError",
    "OutputError",
    # Paths
    "get_config_dir",
    "get_config_file",
]
