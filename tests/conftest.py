"""Shared fixtures for podfeed tests."""

from typing import Any

import pytest

from podfeed.config.schema import ChannelConfig


@pytest.fixture
def raw_item() -> dict[str, Any]:
    """A complete content API item."""
    return {
        "baseUrl": "https://a.com",
        "publicId": "g1",
        "l10n": [
            {
                "title": "Ep 1",
                "publishedAt": "2024-01-02T10:00:00Z",
                "metadata": {"url": "https://a.com/ep1"},
                "audios": [{"file": "ep1.mp3"}],
            }
        ],
    }


@pytest.fixture
def sample_page(raw_item: dict[str, Any]) -> dict[str, Any]:
    """A single-item content API page."""
    return {"data": [raw_item]}


@pytest.fixture
def channel_config() -> ChannelConfig:
    """Minimal channel metadata."""
    return ChannelConfig(
        title="T",
        description="D",
        link="https://x",
        copyright="C",
        managing_editor="",
        web_master="",
        category="Education",
        itunes_author="A",
        itunes_owner_name="A",
        itunes_owner_email="a@x.com",
        itunes_image="https://x/img.jpg",
    )


@pytest.fixture
def sample_config_dict() -> dict[str, Any]:
    """Config file contents as written by a user."""
    return {
        "version": "1",
        "log_level": "INFO",
        "source": {"url": "https://api.example.com/posts?apikey=k", "timeout_seconds": 10},
        "output": {"path": "feed.xml"},
        "channel": {
            "title": "A Playlist de...",
            "description": "Podcast não oficial",
            "language": "pt-pt",
            "category": "Education",
            "itunesAuthor": "andre",
        },
    }
