"""Song parsers (player responses and song list items)."""

from typing import Any

from ytmkit.models.entities import SongDetailed, SongFull
from ytmkit.models.enums import VideoType
from ytmkit.parsers.base import (
    album_ref,
    artist_refs,
    build,
    find_duration,
    fixed_column_text,
    flex_column_runs,
    get_runs,
    get_text,
    get_thumbnails,
    is_explicit,
    parse_duration,
    require,
    run_text,
    video_id_of,
)
from ytmkit.utils.traverse import traverse, traverse_string


def _stream_format(raw: dict[str, Any]) -> dict[str, Any]:
    length = raw.get("contentLength")
    return {
        "itag": raw.get("itag"),
        "mime_type": raw.get("mimeType", ""),
        "bitrate": raw.get("bitrate"),
        "url": raw.get("url"),
        "audio_quality": raw.get("audioQuality"),
        "quality_label": raw.get("qualityLabel"),
        "content_length": int(length) if str(length).isdigit() else None,
    }


def _formats(data: Any, key: str) -> list[dict[str, Any]]:
    raw = traverse(data, "streamingData", key)
    if not isinstance(raw, list):
        return []
    return [_stream_format(f) for f in raw if isinstance(f, dict) and "itag" in f]


def player_duration(data: Any) -> int | None:
    """Duration of a player response: lengthSeconds, else the length text."""
    seconds = traverse_string(data, "videoDetails", "lengthSeconds")
    if seconds.isdigit():
        return int(seconds)
    return parse_duration(get_text(data, "lengthText"))


def player_details(data: Any) -> dict[str, Any]:
    """Fields shared by songs and videos, read from ``videoDetails``.

    Raises:
        ParseFailureError: If the response has no video ID.
    """
    details = traverse(data, "videoDetails")
    video_id = require(
        traverse_string(details, "videoId") if isinstance(details, dict) else None,
        "videoDetails.videoId",
        "player response",
    )
    author = traverse_string(details, "author")
    channel_id = traverse_string(details, "channelId")
    return {
        "video_id": video_id,
        "name": traverse_string(details, "title"),
        "artists": (
            [{"artist_id": channel_id or None, "name": author}] if author else []
        ),
        "duration": player_duration(data),
        "thumbnails": get_thumbnails(details),
    }


def parse(data: Any) -> SongFull:
    """Parse a ``player`` response into a SongFull."""
    song = player_details(data)
    video_type = traverse_string(data, "videoDetails", "musicVideoType")
    song.update(
        formats=_formats(data, "formats"),
        adaptive_formats=_formats(data, "adaptiveFormats"),
        # Only audio tracks carry a lyrics tab
        lyrics_eligible=video_type == VideoType.ATV,
    )
    return build(SongFull, song)


def _list_item(
    item: Any,
    *,
    artists: list[dict[str, Any]] | None = None,
    album: dict[str, Any] | None = None,
    thumbnails: list[dict[str, Any]] | None = None,
) -> SongDetailed:
    columns = flex_column_runs(item)
    meta = [run for column in columns[1:] for run in column]
    duration = find_duration(meta)
    if duration is None:
        duration = parse_duration(fixed_column_text(item))

    return build(
        SongDetailed,
        {
            "video_id": require(video_id_of(item), "playlistItemData.videoId", "song"),
            "name": require(
                run_text(columns[0]) if columns else "", "flexColumns.0.text", "song"
            ),
            "artists": artist_refs(meta) or artists or [],
            "album": album_ref(meta) or album,
            "duration": duration,
            "thumbnails": get_thumbnails(item) or thumbnails,
            "explicit": is_explicit(item),
        },
    )


def parse_search_result(item: Any) -> SongDetailed:
    """Parse a song ``musicResponsiveListItemRenderer``."""
    return _list_item(item)


def parse_artist_song(item: Any, artist: dict[str, Any]) -> SongDetailed:
    """Parse a song row of an artist page; the artist fills missing credits."""
    return _list_item(item, artists=[artist])


def parse_album_song(
    item: Any,
    artist: dict[str, Any] | None,
    album: dict[str, Any],
    thumbnails: list[dict[str, Any]] | None,
) -> SongDetailed:
    """Parse an album track row. Track rows carry no album link or artwork."""
    return _list_item(
        item,
        artists=[artist] if artist else None,
        album=album,
        thumbnails=thumbnails,
    )


def parse_two_row(item: Any) -> SongDetailed:
    """Parse a song ``musicTwoRowItemRenderer`` (carousel tile)."""
    subtitle = get_runs(item, "subtitle")
    return build(
        SongDetailed,
        {
            "video_id": require(video_id_of(item), "watchEndpoint.videoId", "song"),
            "name": require(get_text(item, "title"), "title.runs", "song"),
            "artists": artist_refs(subtitle),
            "album": album_ref(subtitle),
            "thumbnails": get_thumbnails(item),
            "explicit": is_explicit(item),
        },
    )
