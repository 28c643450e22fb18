"""Shared extraction rules for InnerTube renderers.

Entity parsers build plain dicts from these helpers and validate them with
``build()``, which turns pydantic validation errors into ParseFailureError.
"""

import logging
import re
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ytmkit.exceptions import ParseFailureError
from ytmkit.models.enums import ContentType, PageType, VideoType
from ytmkit.utils.traverse import is_missing, traverse, traverse_list

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
ItemT = TypeVar("ItemT")

Run = dict[str, Any]

DURATION_PATTERN = re.compile(r"^\d+(?::[0-5]\d){1,2}$")
YEAR_PATTERN = re.compile(r"^\d{4}$")
_COUNT_PATTERN = re.compile(r"(\d+(?:[.,]\d+)*)\s*([KMB])?\b", re.IGNORECASE)
_MULTIPLIERS = {"K": 1_000, "M": 1_000_000, "B": 1_000_000_000}

EXPLICIT_BADGE = "MUSIC_EXPLICIT_BADGE"


def parse_duration(text: str | None) -> int | None:
    """Parse 'm:ss' or 'h:mm:ss' into seconds. Returns None if malformed."""
    if not text or not DURATION_PATTERN.match(text.strip()):
        return None
    seconds = 0
    for part in text.strip().split(":"):
        seconds = seconds * 60 + int(part)
    return seconds


def parse_count(text: str | None) -> int | None:
    """Parse counts like '1.2M subscribers', '50 songs' or '1,234 views'."""
    if not text:
        return None
    match = _COUNT_PATTERN.search(text)
    if not match:
        return None
    number, suffix = match.groups()
    if suffix:
        value = float(number.replace(",", "."))
        return round(value * _MULTIPLIERS[suffix.upper()])
    return int(re.sub(r"[.,]", "", number))


def canonical_playlist_id(playlist_id: str) -> str:
    """Rewrite 'PL...' playlist IDs to the 'VLPL...' browse ID form."""
    if playlist_id.startswith("PL"):
        return f"VL{playlist_id}"
    return playlist_id


def get_text(tree: Any, *keys: str) -> str:
    """Text of a formatted-string node: joined runs or simpleText."""
    node = traverse(tree, *keys)
    if isinstance(node, str):
        return node
    if not isinstance(node, dict):
        return ""
    if "simpleText" in node:
        return str(node["simpleText"])
    runs = node.get("runs")
    if isinstance(runs, list):
        return "".join(r.get("text", "") for r in runs if isinstance(r, dict))
    return ""


def get_runs(tree: Any, *keys: str) -> list[Run]:
    """Runs of the first formatted string at ``keys``, or []."""
    runs = traverse(tree, *keys, "runs")
    if not isinstance(runs, list):
        return []
    return [r for r in runs if isinstance(r, dict)]


def run_text(runs: Iterable[Run]) -> str:
    return "".join(str(r.get("text", "")) for r in runs)


def flex_column_runs(item: Any) -> list[list[Run]]:
    """Runs of each flex column of a responsive list item, in column order."""
    columns = traverse(item, "flexColumns")
    if not isinstance(columns, list):
        return []
    return [get_runs(column, "text") for column in columns]


def fixed_column_text(item: Any) -> str:
    columns = traverse(item, "fixedColumns")
    if not isinstance(columns, list) or not columns:
        return ""
    return get_text(columns[0], "text")


def page_type(tree: Any) -> str | None:
    value = traverse(tree, "pageType")
    return value if isinstance(value, str) else None


def browse_id(tree: Any) -> str | None:
    value = traverse(tree, "browseId")
    return value if isinstance(value, str) and value else None


def endpoint_of(item: Any) -> dict[str, Any] | None:
    """The item's own navigation endpoint (not one nested in its columns)."""
    if not isinstance(item, dict):
        return None
    endpoint = item.get("navigationEndpoint")
    return endpoint if isinstance(endpoint, dict) else None


# Pages moved from the detail header to the responsive header; both are
# still served depending on the experiment cohort.
PAGE_HEADERS = ("musicResponsiveHeaderRenderer", "musicDetailHeaderRenderer")


def find_header(data: Any, renderers: tuple[str, ...] = PAGE_HEADERS) -> Any:
    """First page header renderer present in ``data``, or ``{}``."""
    for name in renderers:
        header = traverse(data, name)
        if isinstance(header, dict):
            return header
    return {}


def video_id_of(item: Any) -> str | None:
    """Video ID of a list item or tile, from the most specific location."""
    for keys in (
        ("playlistItemData", "videoId"),
        ("watchEndpoint", "videoId"),
        ("videoId",),
    ):
        value = traverse(item, *keys)
        if isinstance(value, str) and value:
            return value
    return None


def artist_refs(
    runs: Iterable[Run],
    page_types: tuple[str, ...] = (PageType.ARTIST,),
) -> list[dict[str, Any]]:
    """Linked runs pointing at one of ``page_types``, as ArtistRef dicts."""
    return [
        {"artist_id": browse_id(run), "name": run.get("text", "")}
        for run in runs
        if page_type(run) in page_types
    ]


def album_ref(runs: Iterable[Run]) -> dict[str, Any] | None:
    for run in runs:
        if page_type(run) == PageType.ALBUM:
            return {"album_id": browse_id(run), "name": run.get("text", "")}
    return None


def find_duration(runs: Iterable[Run]) -> int | None:
    for run in runs:
        if (seconds := parse_duration(run.get("text"))) is not None:
            return seconds
    return None


def find_year(runs: Iterable[Run]) -> int | None:
    for run in runs:
        text = str(run.get("text", "")).strip()
        if YEAR_PATTERN.match(text):
            return int(text)
    return None


def find_count(runs: Iterable[Run], *words: str) -> int | None:
    """Count from the first run whose text ends with one of ``words``."""
    for run in runs:
        text = str(run.get("text", "")).strip().lower()
        if text.endswith(words):
            return parse_count(text)
    return None


def get_thumbnails(tree: Any) -> list[dict[str, Any]] | None:
    """First thumbnail list below ``tree`` in source order, None if empty."""
    thumbnails = traverse(tree, "thumbnails")
    if not isinstance(thumbnails, list):
        return None
    valid = [
        {"url": t["url"], "width": t.get("width", 0), "height": t.get("height", 0)}
        for t in thumbnails
        if isinstance(t, dict) and t.get("url")
    ]
    return valid or None


def is_explicit(item: Any) -> bool:
    return EXPLICIT_BADGE in traverse_list(item, "badges", "iconType")


def require(value: Any, key_path: str, context: str) -> Any:
    """Return ``value`` or raise ParseFailureError if it is absent or empty."""
    if value is None or is_missing(value) or value == "":
        raise ParseFailureError(f"Missing {key_path} in {context}", key_path=key_path)
    return value


def build(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate ``data`` into ``model``.

    Raises:
        ParseFailureError: With the path of the first invalid field.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        key_path = ".".join(str(part) for part in error["loc"])
        raise ParseFailureError(
            f"Invalid {model.__name__}: {key_path}: {error['msg']}",
            key_path=key_path,
        ) from e


def classify_item(item: Any) -> ContentType | None:
    """Decide which entity a list item or carousel tile describes.

    Links to artist/album/playlist pages win; otherwise the music video type
    of the item's video separates songs from videos.
    """
    endpoint = endpoint_of(item)
    if endpoint:
        match page_type(endpoint):
            case PageType.ARTIST | PageType.LIBRARY_ARTIST:
                return ContentType.ARTIST
            case PageType.ALBUM:
                return ContentType.ALBUM
            case PageType.PLAYLIST:
                return ContentType.PLAYLIST
        if "watchPlaylistEndpoint" in endpoint:
            return ContentType.PLAYLIST

    if not video_id_of(item):
        return None
    video_type = traverse(item, "musicVideoType")
    if is_missing(video_type) or video_type == VideoType.ATV:
        return ContentType.SONG
    return ContentType.VIDEO


def parse_each(
    items: Iterable[Any],
    parser: Callable[..., ItemT | None],
    *args: Any,
) -> list[ItemT]:
    """Apply ``parser`` to every item, skipping items that fail to parse."""
    results: list[ItemT] = []
    for item in items:
        try:
            parsed = parser(item, *args)
        except ParseFailureError as e:
            logger.warning("Skipping unparseable item: %s", e.message)
            continue
        if parsed is not None:
            results.append(parsed)
    return results
