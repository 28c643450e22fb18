"""Album parsers (album pages, album list items and carousel tiles)."""

from typing import Any

from ytmkit.models.entities import AlbumDetailed, AlbumFull
from ytmkit.parsers import song
from ytmkit.parsers.base import (
    artist_refs,
    browse_id,
    build,
    endpoint_of,
    find_count,
    find_header,
    find_year,
    flex_column_runs,
    get_runs,
    get_text,
    get_thumbnails,
    parse_each,
    require,
    run_text,
)
from ytmkit.utils.traverse import traverse, traverse_list, traverse_string


def parse(data: Any, album_id: str) -> AlbumFull:
    """Parse an album ``browse`` response.

    Args:
        data: Raw browse response.
        album_id: Browse ID the page was requested with.
    """
    header = find_header(data)
    name = require(
        traverse_string(header, "title", "runs", "text"), "header.title.runs", "album"
    )
    subtitle = get_runs(header, "subtitle")
    credit_runs = get_runs(header, "straplineTextOne") + subtitle
    artists = artist_refs(credit_runs)
    artist = artists[0] if artists else None
    thumbnails = get_thumbnails(header)

    shelf = traverse(data, "musicShelfRenderer")
    songs = parse_each(
        traverse_list(shelf, "musicResponsiveListItemRenderer"),
        song.parse_album_song,
        artist,
        {"album_id": album_id, "name": name},
        thumbnails,
    )
    track_count = find_count(get_runs(header, "secondSubtitle"), "song", "songs")

    return build(
        AlbumFull,
        {
            "album_id": album_id,
            "name": name,
            "artist": artist,
            "year": find_year(subtitle),
            "thumbnails": thumbnails,
            "track_count": track_count if track_count is not None else len(songs),
            "description": traverse_string(header, "description", "runs", "text")
            or None,
            "songs": songs,
        },
    )


def parse_search_result(item: Any) -> AlbumDetailed:
    """Parse an album ``musicResponsiveListItemRenderer``."""
    columns = flex_column_runs(item)
    meta = [run for column in columns[1:] for run in column]
    artists = artist_refs(meta)
    return build(
        AlbumDetailed,
        {
            "album_id": require(
                browse_id(endpoint_of(item)), "navigationEndpoint.browseId", "album"
            ),
            "name": require(
                run_text(columns[0]) if columns else "", "flexColumns.0.text", "album"
            ),
            "artist": artists[0] if artists else None,
            "year": find_year(meta),
            "thumbnails": get_thumbnails(item),
        },
    )


def parse_two_row(item: Any, artist: dict[str, Any] | None = None) -> AlbumDetailed:
    """Parse an album ``musicTwoRowItemRenderer`` (carousel tile).

    Tiles on an artist page omit the artist, so ``artist`` fills it in.
    """
    subtitle = get_runs(item, "subtitle")
    artists = artist_refs(subtitle)
    return build(
        AlbumDetailed,
        {
            "album_id": require(
                browse_id(endpoint_of(item)), "navigationEndpoint.browseId", "album"
            ),
            "name": require(get_text(item, "title"), "title.runs", "album"),
            "artist": artists[0] if artists else artist,
            "year": find_year(subtitle),
            "thumbnails": get_thumbnails(item),
        },
    )


def parse_artist_album(item: Any, artist: dict[str, Any]) -> AlbumDetailed:
    """Parse an album tile from an artist's discography page."""
    return parse_two_row(item, artist)
