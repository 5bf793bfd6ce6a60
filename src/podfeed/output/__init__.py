"""Feed output for podfeed."""

from podfeed.output.writer import FeedWriter

__all__ = ["FeedWriter"]
