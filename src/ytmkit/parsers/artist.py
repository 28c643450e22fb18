"""Artist parsers (artist pages, artist list items and carousel tiles)."""

import logging
from typing import Any

from ytmkit.models.entities import (
    AlbumDetailed,
    ArtistDetailed,
    ArtistFull,
    PlaylistDetailed,
    VideoDetailed,
)
from ytmkit.parsers import song
from ytmkit.parsers.base import (
    PAGE_HEADERS,
    browse_id,
    build,
    endpoint_of,
    find_header,
    flex_column_runs,
    get_text,
    get_thumbnails,
    parse_count,
    parse_each,
    require,
    run_text,
)
from ytmkit.utils.traverse import traverse, traverse_list, traverse_string

logger = logging.getLogger(__name__)

ARTIST_HEADERS = (
    "musicImmersiveHeaderRenderer",
    "musicVisualHeaderRenderer",
    *PAGE_HEADERS,
)


def artist_name(data: Any) -> str:
    """Name shown in the header of an artist page, or ``""``."""
    return traverse_string(find_header(data, ARTIST_HEADERS), "title", "runs", "text")


def parse(data: Any, artist_id: str) -> ArtistFull:
    """Parse an artist ``browse`` response.

    The first song shelf becomes ``top_songs``; carousel tiles are sorted
    into albums, videos, playlists the artist is featured on and similar
    artists by their content type.

    Args:
        data: Raw browse response.
        artist_id: Channel ID the page was requested with.

    Raises:
        ParseFailureError: If the page has no artist name.
    """
    # Tiles are dispatched by content type, which needs every entity parser
    from ytmkit.parsers.mixed import parse_item

    header = find_header(data, ARTIST_HEADERS)
    name = require(
        traverse_string(header, "title", "runs", "text"), "header.title.runs", "artist"
    )
    artist = {"artist_id": artist_id, "name": name}

    shelf = traverse(data, "musicShelfRenderer")
    top_songs = parse_each(
        traverse_list(shelf, "musicResponsiveListItemRenderer"),
        song.parse_artist_song,
        artist,
    )

    buckets: dict[type, list[Any]] = {
        AlbumDetailed: [],
        VideoDetailed: [],
        PlaylistDetailed: [],
        ArtistDetailed: [],
    }
    for carousel in traverse_list(data, "musicCarouselShelfRenderer"):
        contents = carousel.get("contents") if isinstance(carousel, dict) else None
        for tile in parse_each(contents or [], parse_item):
            if type(tile) in buckets:
                buckets[type(tile)].append(tile)
            else:
                logger.debug("Ignoring %s tile on artist page %s", tile.type, artist_id)

    return build(
        ArtistFull,
        {
            "artist_id": artist_id,
            "name": name,
            "thumbnails": get_thumbnails(header),
            "subscribers": parse_count(get_text(header, "subscriberCountText")),
            "description": traverse_string(header, "description", "runs", "text")
            or None,
            "top_songs": top_songs,
            "top_albums": buckets[AlbumDetailed],
            "top_videos": buckets[VideoDetailed],
            "featured_on": buckets[PlaylistDetailed],
            "similar_artists": buckets[ArtistDetailed],
        },
    )


def parse_search_result(item: Any) -> ArtistDetailed:
    """Parse an artist ``musicResponsiveListItemRenderer``."""
    columns = flex_column_runs(item)
    return build(
        ArtistDetailed,
        {
            "artist_id": require(
                browse_id(endpoint_of(item)), "navigationEndpoint.browseId", "artist"
            ),
            "name": require(
                run_text(columns[0]) if columns else "", "flexColumns.0.text", "artist"
            ),
            "thumbnails": get_thumbnails(item),
        },
    )


def parse_two_row(item: Any) -> ArtistDetailed:
    """Parse an artist ``musicTwoRowItemRenderer`` (carousel tile)."""
    return build(
        ArtistDetailed,
        {
            "artist_id": require(
                browse_id(endpoint_of(item)), "navigationEndpoint.browseId", "artist"
            ),
            "name": require(get_text(item, "title"), "title.runs", "artist"),
            "thumbnails": get_thumbnails(item),
        },
    )
