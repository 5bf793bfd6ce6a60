"""Data models for normalized podcast episodes."""

from pydantic import BaseModel, ConfigDict, Field


class EpisodeRecord(BaseModel):
    """One episode extracted from a content API page.

    Values are carried verbatim from the source; `date` is parsed only when
    the feed is rendered.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1)
    title: str = ""
    date: str = ""
    guid: str = ""
    enclosure_url: str
