"""Fetch -> extract -> render -> write pipeline."""

import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from podfeed.config.schema import ChannelConfig, PodfeedConfig
from podfeed.feeds.extractor import extract_episodes
from podfeed.feeds.fetcher import FeedFetcher
from podfeed.feeds.renderer import render_feed
from podfeed.output.writer import FeedWriter
from podfeed.utils.errors import ConfigError

logger = logging.getLogger(__name__)


def redact_url(url: str) -> str:
    """Drop the query string, which carries API credentials."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "...", ""))


def convert_page(page: Any, channel: ChannelConfig, escape_guid: bool = False) -> str:
    """Convert one decoded content API page into an RSS document.

    Args:
        page: Decoded JSON page
        channel: Channel metadata
        escape_guid: Escape guid values in the output

    Returns:
        XML document

    Raises:
        MalformedPageError: If the page has no ``data`` list
        EmptyFeedError: If no item yields an episode
    """
    logger.info("Parsing podcast JSON...")
    records = extract_episodes(page)

    logger.info("Generating RSS feed...")
    return render_feed(records, channel, escape_guid=escape_guid)


class PipelineOrchestrator:
    """Runs one conversion from the content API to a feed file."""

    def __init__(
        self,
        config: PodfeedConfig,
        fetcher: FeedFetcher | None = None,
        writer: FeedWriter | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            config: Complete run configuration
            fetcher: Transport (default: FeedFetcher with the configured timeout)
            writer: Sink (default: FeedWriter)
        """
        self.config = config
        self.fetcher = fetcher or FeedFetcher(timeout=config.source.timeout_seconds)
        self.writer = writer or FeedWriter()

    def run(self) -> Path:
        """Fetch, convert and write the feed.

        Returns:
            Path of the written feed file

        Raises:
            ConfigError: If no source URL is configured
            PodfeedError: On any fetch, conversion or write failure
        """
        url = self.config.source.url
        if not url:
            raise ConfigError("No source URL configured (set source.url or pass --url)")

        logger.info(f"Fetching JSON data from {redact_url(url)}...")
        page = self.fetcher.fetch(url)

        document = convert_page(
            page, self.config.channel, escape_guid=self.config.output.escape_guid
        )

        logger.info(f"Writing RSS feed to {self.config.output.path}...")
        written = self.writer.write(self.config.output.path, document)

        logger.info("RSS feed successfully written!")
        return written
