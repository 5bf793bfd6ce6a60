"""Extract normalized episodes from a content API page.

The page itself is validated strictly: a missing or non-list ``data`` field
aborts the conversion. Individual items are filtered leniently: an item
without a base URL, a localization or an audio file is dropped and the
remaining items are still extracted.
"""

import logging
from collections.abc import Mapping
from typing import Any

from podfeed.feeds.models import EpisodeRecord
from podfeed.utils.errors import MalformedPageError

logger = logging.getLogger(__name__)


def _first(value: Any) -> Any:
    """Return the first element of a list, or None."""
    if isinstance(value, list) and value:
        return value[0]
    return None


def _text(value: Any) -> str:
    """Coerce a scalar JSON value to text, mapping null to ''."""
    if value is None:
        return ""
    return str(value)


def extract_episode(item: Any) -> EpisodeRecord | None:
    """Build an EpisodeRecord from one raw item.

    Only the first localization and its first audio variant are consulted;
    the API lists the most relevant variant first.

    Args:
        item: One entry of the page's ``data`` list

    Returns:
        EpisodeRecord, or None if the item lacks a base URL, a
        localization or an audio variant
    """
    if not isinstance(item, Mapping):
        return None

    base_url = item.get("baseUrl")
    if not base_url:
        return None

    localized = _first(item.get("l10n"))
    if not isinstance(localized, Mapping):
        return None

    audio = _first(localized.get("audios"))
    if not isinstance(audio, Mapping):
        return None

    base_url = _text(base_url)
    metadata = localized.get("metadata")
    metadata_url = metadata.get("url") if isinstance(metadata, Mapping) else None

    return EpisodeRecord(
        url=_text(metadata_url) or base_url,
        title=_text(localized.get("title")),
        date=_text(localized.get("publishedAt")),
        guid=_text(item.get("publicId")),
        # Plain join, trailing slashes on baseUrl are kept as-is
        enclosure_url=f"{base_url}/{_text(audio.get('file'))}",
    )


def extract_episodes(page: Any) -> list[EpisodeRecord]:
    """Extract all usable episodes from a content API page.

    Args:
        page: Decoded JSON response body

    Returns:
        Episode records in source order (duplicates are not removed)

    Raises:
        MalformedPageError: If ``data`` is missing or not a list
    """
    data = page.get("data") if isinstance(page, Mapping) else None
    if not isinstance(data, list):
        raise MalformedPageError(
            "Invalid JSON format: 'data' field is missing or not an array."
        )

    records = []
    for index, item in enumerate(data):
        record = extract_episode(item)
        if record is None:
            logger.debug(f"Skipping item {index}: missing baseUrl, l10n or audio")
            continue
        records.append(record)

    logger.info(f"Extracted {len(records)} of {len(data)} episodes")
    return records
