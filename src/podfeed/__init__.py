"""podfeed - turn a podcast content API page into an RSS feed."""

__version__ = "0.1.0"
