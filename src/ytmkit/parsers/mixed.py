"""Mixed content parsers (home feed sections and their tiles)."""

import logging
from typing import Any

from ytmkit.models.entities import SearchResult
from ytmkit.models.enums import ContentType, RendererKind
from ytmkit.models.sections import CarouselSection, DescriptionSection, HomeSection
from ytmkit.parsers import album, artist, playlist, search, song, video
from ytmkit.parsers.base import build, classify_item, get_text, parse_each

logger = logging.getLogger(__name__)


def _parse_tile(tile: Any) -> SearchResult | None:
    match classify_item(tile):
        case ContentType.SONG:
            return song.parse_two_row(tile)
        case ContentType.VIDEO:
            return video.parse_two_row(tile)
        case ContentType.ARTIST:
            return artist.parse_two_row(tile)
        case ContentType.ALBUM:
            return album.parse_two_row(tile)
        case ContentType.PLAYLIST:
            return playlist.parse_two_row(tile)
        case None:
            logger.debug("Skipping unclassifiable tile")
            return None


def parse_item(content: Any) -> SearchResult | None:
    """Parse one entry of a shelf or carousel ``contents`` array.

    Entries wrap either a ``musicTwoRowItemRenderer`` (tile) or a
    ``musicResponsiveListItemRenderer`` (row).
    """
    if not isinstance(content, dict):
        return None
    if isinstance(tile := content.get("musicTwoRowItemRenderer"), dict):
        return _parse_tile(tile)
    if isinstance(row := content.get("musicResponsiveListItemRenderer"), dict):
        return search.parse(row)
    logger.debug("Skipping item renderer(s): %s", ", ".join(content))
    return None


def _section_title(body: dict[str, Any]) -> str:
    return get_text(body, "header", "title") or get_text(body, "title")


def parse_section(content: Any) -> HomeSection | None:
    """Parse one ``sectionListRenderer`` entry into a home section.

    Returns:
        The section, or None for renderers that carry no catalog content.
    """
    if not isinstance(content, dict) or not content:
        return None
    name, body = next(iter(content.items()))
    if not isinstance(body, dict):
        return None

    kind = RendererKind.of(name)
    match kind:
        case (
            RendererKind.CAROUSEL_SHELF
            | RendererKind.IMMERSIVE_CAROUSEL_SHELF
            | RendererKind.SHELF
        ):
            return build(
                CarouselSection,
                {
                    "title": _section_title(body),
                    "contents": parse_each(body.get("contents") or [], parse_item),
                },
            )
        case RendererKind.DESCRIPTION_SHELF:
            return build(
                DescriptionSection,
                {
                    "title": get_text(body, "header"),
                    "description": get_text(body, "description"),
                },
            )
        case RendererKind.UNRECOGNIZED:
            logger.debug("Skipping unrecognized section renderer %s", name)
            return None


def parse_sections(contents: Any) -> list[HomeSection]:
    """Parse a ``contents`` array of sections, dropping unusable ones."""
    if not isinstance(contents, list):
        return []
    return parse_each(contents, parse_section)
