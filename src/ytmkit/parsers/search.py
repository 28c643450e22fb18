"""Search result dispatch."""

import logging
from typing import Any

from ytmkit.models.entities import SearchResult
from ytmkit.models.enums import ContentType
from ytmkit.parsers import album, artist, playlist, song, video
from ytmkit.parsers.base import classify_item

logger = logging.getLogger(__name__)


def parse(item: Any) -> SearchResult | None:
    """Parse a ``musicResponsiveListItemRenderer`` of any content type.

    Returns:
        The Detailed record for the item's type, or None if the item could
        not be classified.
    """
    match classify_item(item):
        case ContentType.SONG:
            return song.parse_search_result(item)
        case ContentType.VIDEO:
            return video.parse_search_result(item)
        case ContentType.ARTIST:
            return artist.parse_search_result(item)
        case ContentType.ALBUM:
            return album.parse_search_result(item)
        case ContentType.PLAYLIST:
            return playlist.parse_search_result(item)
        case None:
            logger.debug("Skipping unclassifiable list item")
            return None
