"""Episode extraction and RSS rendering for podfeed."""

from podfeed.feeds.extractor import extract_episode, extract_episodes
from podfeed.feeds.fetcher import FeedFetcher
from podfeed.feeds.models import EpisodeRecord
from podfeed.feeds.renderer import FeedRenderer, escape_xml, format_pub_date, render_feed

__all__ = [
    "EpisodeRecord",
    "FeedFetcher",
    "FeedRenderer",
    "escape_xml",
    "extract_episode",
    "extract_episodes",
    "format_pub_date",
    "render_feed",
]
