"""Custom exceptions for podfeed."""


class PodfeedError(Exception):
    """Base exception for all podfeed errors."""

    pass


class ConfigError(PodfeedError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    pass


class FeedError(PodfeedError):
    """Feed conversion errors."""

    pass


class MalformedPageError(FeedError):
    """Source page is missing its `data` list or is not JSON."""

    pass


class EmptyFeedError(FeedError):
    """No episodes to render."""

    pass


class NetworkError(PodfeedError):
    """Network-related errors."""

    pass


class FetchError(NetworkError):
    """Source API answered with a non-200 status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkConnectionError(NetworkError):
    """Connection failures."""

    pass


class NetworkTimeoutError(NetworkError):
    """Request timeout."""

    pass


class OutputError(PodfeedError):
    """Feed file could not be written."""

    pass
