"""Data models for ytmkit.

Public API:
    SongDetailed/SongFull, VideoDetailed/VideoFull, ArtistDetailed/ArtistFull,
    AlbumDetailed/AlbumFull, PlaylistDetailed/PlaylistFull - Catalog records
    SearchResult - Tagged union of the Detailed records
    CarouselSection/DescriptionSection - Home feed sections
    CancelToken - Cooperative cancellation for paginated calls
"""

from ytmkit.models.cancel import CancelToken
from ytmkit.models.entities import (
    AlbumDetailed,
    AlbumFull,
    AlbumRef,
    ArtistDetailed,
    ArtistFull,
    ArtistRef,
    PlaylistDetailed,
    PlaylistFull,
    SearchResult,
    SongDetailed,
    SongFull,
    StreamFormat,
    Thumbnail,
    VideoDetailed,
    VideoFull,
)
from ytmkit.models.enums import ContentType, PageType, RendererKind, VideoType
from ytmkit.models.sections import CarouselSection, DescriptionSection, HomeSection

__all__ = [
    "AlbumDetailed",
    "AlbumFull",
    "AlbumRef",
    "ArtistDetailed",
    "ArtistFull",
    "ArtistRef",
    "CancelToken",
    "CarouselSection",
    "ContentType",
    "DescriptionSection",
    "HomeSection",
    "PageType",
    "PlaylistDetailed",
    "PlaylistFull",
    "RendererKind",
    "SearchResult",
    "SongDetailed",
    "SongFull",
    "StreamFormat",
    "Thumbnail",
    "VideoDetailed",
    "VideoFull",
    "VideoType",
]
