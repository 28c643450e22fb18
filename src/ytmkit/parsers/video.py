"""Video parsers (player responses, video list items and playlist rows)."""

from typing import Any

from ytmkit.models.entities import VideoDetailed, VideoFull
from ytmkit.models.enums import PageType
from ytmkit.parsers.base import (
    artist_refs,
    build,
    find_count,
    find_duration,
    fixed_column_text,
    flex_column_runs,
    get_runs,
    get_text,
    get_thumbnails,
    parse_duration,
    require,
    run_text,
    video_id_of,
)
from ytmkit.parsers.song import player_details
from ytmkit.utils.traverse import traverse, traverse_string

# Videos are credited to artists or to plain uploader channels
_CREDIT_PAGE_TYPES = (PageType.ARTIST, PageType.USER_CHANNEL)


def parse(data: Any) -> VideoFull:
    """Parse a ``player`` response into a VideoFull."""
    video = player_details(data)
    views = traverse_string(data, "videoDetails", "viewCount")
    microformat = traverse(data, "microformatDataRenderer")
    if not isinstance(microformat, dict):
        microformat = {}
    tags = microformat.get("tags") or traverse(data, "videoDetails", "keywords")

    video.update(
        views=int(views) if views.isdigit() else None,
        description=traverse_string(data, "videoDetails", "shortDescription") or None,
        unlisted=bool(microformat.get("unlisted", False)),
        family_safe=bool(microformat.get("familySafe", True)),
        paid=bool(microformat.get("paid", False)),
        tags=[t for t in tags if isinstance(t, str)] if isinstance(tags, list) else [],
    )
    return build(VideoFull, video)


def _list_item(item: Any) -> VideoDetailed:
    columns = flex_column_runs(item)
    meta = [run for column in columns[1:] for run in column]
    duration = find_duration(meta)
    if duration is None:
        duration = parse_duration(fixed_column_text(item))

    return build(
        VideoDetailed,
        {
            "video_id": require(video_id_of(item), "playlistItemData.videoId", "video"),
            "name": require(
                run_text(columns[0]) if columns else "", "flexColumns.0.text", "video"
            ),
            "artists": artist_refs(meta, _CREDIT_PAGE_TYPES),
            "duration": duration,
            "views": find_count(meta, "view", "views"),
            "thumbnails": get_thumbnails(item),
        },
    )


def parse_search_result(item: Any) -> VideoDetailed:
    """Parse a video ``musicResponsiveListItemRenderer``."""
    return _list_item(item)


def parse_playlist_video(item: Any) -> VideoDetailed:
    """Parse a playlist row. The duration lives in the fixed column."""
    return _list_item(item)


def parse_two_row(item: Any) -> VideoDetailed:
    """Parse a video ``musicTwoRowItemRenderer`` (carousel tile)."""
    subtitle = get_runs(item, "subtitle")
    return build(
        VideoDetailed,
        {
            "video_id": require(video_id_of(item), "watchEndpoint.videoId", "video"),
            "name": require(get_text(item, "title"), "title.runs", "video"),
            "artists": artist_refs(subtitle, _CREDIT_PAGE_TYPES),
            "views": find_count(subtitle, "view", "views"),
            "thumbnails": get_thumbnails(item),
        },
    )
