"""Playlist parsers (playlist pages, playlist list items and carousel tiles)."""

from typing import Any

from ytmkit.models.entities import PlaylistDetailed, PlaylistFull
from ytmkit.models.enums import PageType
from ytmkit.parsers.base import (
    artist_refs,
    browse_id,
    build,
    canonical_playlist_id,
    endpoint_of,
    find_count,
    find_header,
    find_year,
    flex_column_runs,
    get_runs,
    get_text,
    get_thumbnails,
    require,
    run_text,
)
from ytmkit.utils.traverse import traverse, traverse_string

# Owners are users or artists
_OWNER_PAGE_TYPES = (PageType.USER_CHANNEL, PageType.ARTIST)
_COUNT_WORDS = ("song", "songs", "track", "tracks", "video", "videos", "episodes")


def _owner(runs: list[dict[str, Any]]) -> dict[str, Any] | None:
    owners = artist_refs(runs, _OWNER_PAGE_TYPES)
    return owners[0] if owners else None


def _playlist_id_of(item: Any) -> str | None:
    endpoint = endpoint_of(item)
    playlist_id = browse_id(endpoint) or traverse(endpoint, "playlistId")
    if isinstance(playlist_id, str) and playlist_id:
        return canonical_playlist_id(playlist_id)
    return None


def parse(data: Any, playlist_id: str) -> PlaylistFull:
    """Parse a playlist ``browse`` response (header only, no tracks).

    Args:
        data: Raw browse response.
        playlist_id: Canonical browse ID the page was requested with.
    """
    header = find_header(data)
    subtitle = get_runs(header, "subtitle")
    counts = get_runs(header, "secondSubtitle") + subtitle

    return build(
        PlaylistFull,
        {
            "playlist_id": canonical_playlist_id(playlist_id),
            "name": require(
                traverse_string(header, "title", "runs", "text"),
                "header.title.runs",
                "playlist",
            ),
            "artist": _owner(get_runs(header, "straplineTextOne") + subtitle),
            "thumbnails": get_thumbnails(header),
            "video_count": find_count(counts, *_COUNT_WORDS),
            "description": traverse_string(header, "description", "runs", "text")
            or None,
            "year": find_year(subtitle),
        },
    )


def parse_search_result(item: Any) -> PlaylistDetailed:
    """Parse a playlist ``musicResponsiveListItemRenderer``."""
    columns = flex_column_runs(item)
    meta = [run for column in columns[1:] for run in column]
    return build(
        PlaylistDetailed,
        {
            "playlist_id": require(
                _playlist_id_of(item), "navigationEndpoint.browseId", "playlist"
            ),
            "name": require(
                run_text(columns[0]) if columns else "",
                "flexColumns.0.text",
                "playlist",
            ),
            "artist": _owner(meta),
            "video_count": find_count(meta, *_COUNT_WORDS),
            "thumbnails": get_thumbnails(item),
        },
    )


def parse_two_row(item: Any) -> PlaylistDetailed:
    """Parse a playlist ``musicTwoRowItemRenderer`` (carousel tile)."""
    subtitle = get_runs(item, "subtitle")
    return build(
        PlaylistDetailed,
        {
            "playlist_id": require(
                _playlist_id_of(item), "navigationEndpoint.browseId", "playlist"
            ),
            "name": require(get_text(item, "title"), "title.runs", "playlist"),
            "artist": _owner(subtitle),
            "video_count": find_count(subtitle, *_COUNT_WORDS),
            "thumbnails": get_thumbnails(item),
        },
    )
