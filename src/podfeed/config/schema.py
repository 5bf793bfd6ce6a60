"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ChannelConfig(BaseModel):
    """Channel-level metadata written into the RSS document.

    Accepts both snake_case names and the camelCase option names used by
    existing feed configurations (``managingEditor``, ``itunesAuthor``...).
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    description: str = ""
    link: str = ""
    language: str = "en-us"
    copyright: str = ""
    managing_editor: str = Field(default="", alias="managingEditor")
    web_master: str = Field(default="", alias="webMaster")
    category: str = ""

    # iTunes podcast extension
    itunes_author: str = Field(default="", alias="itunesAuthor")
    itunes_owner_name: str = Field(default="", alias="itunesOwnerName")
    itunes_owner_email: str = Field(default="", alias="itunesOwnerEmail")
    itunes_image: str = Field(default="", alias="itunesImage")
    itunes_explicit: str = Field(default="no", alias="itunesExplicit")


class SourceConfig(BaseModel):
    """Content API endpoint to read episodes from."""

    url: str | None = None  # Includes API key/token query params
    timeout_seconds: float = Field(default=30.0, gt=0)


class OutputConfig(BaseModel):
    """Where and how the feed file is written."""

    path: Path = Field(default=Path("podcast-feed.xml"))
    escape_guid: bool = False  # False keeps output identical to older feeds


class PodfeedConfig(BaseModel):
    """Global podfeed configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"

    source: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    channel: ChannelConfig = Field(default_factory=ChannelConfig)
