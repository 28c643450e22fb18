"""Catalog entity records.

Each entity has one canonical "Full" model that subclasses its compact
"Detailed" model, so the list view is always a strict field subset of the
lookup view. Use ``to_detailed()`` to project a Full record.
"""

from typing import Annotated, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

__all__ = [
    "AlbumDetailed",
    "AlbumFull",
    "AlbumRef",
    "ArtistDetailed",
    "ArtistFull",
    "ArtistRef",
    "PlaylistDetailed",
    "PlaylistFull",
    "SearchResult",
    "SongDetailed",
    "SongFull",
    "StreamFormat",
    "Thumbnail",
    "VideoDetailed",
    "VideoFull",
    "project",
]

VideoId = Annotated[str, StringConstraints(pattern=r"^[A-Za-z0-9_-]{11}$")]
ArtistId = Annotated[str, StringConstraints(pattern=r"^(UC|MPLA)[A-Za-z0-9_-]+$")]
AlbumId = Annotated[str, StringConstraints(pattern=r"^MPRE[A-Za-z0-9_-]+$")]
PlaylistId = Annotated[str, StringConstraints(pattern=r"^[A-Za-z0-9_-]+$")]

DetailedT = TypeVar("DetailedT", bound="CatalogModel")


class CatalogModel(BaseModel):
    """Base model for parsed catalog records."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class Thumbnail(CatalogModel):
    """Image rendition. Sequences are ordered smallest to largest."""

    url: str
    width: int
    height: int


Thumbnails = tuple[Thumbnail, ...]


class ArtistRef(CatalogModel):
    """Artist reference (in songs, albums and videos)."""

    artist_id: ArtistId | None = None
    name: str


class AlbumRef(CatalogModel):
    """Album reference (in songs)."""

    album_id: AlbumId
    name: str


class StreamFormat(CatalogModel):
    """Streaming format advertised by the player endpoint."""

    itag: int
    mime_type: str
    bitrate: int | None = None
    url: str | None = None
    audio_quality: str | None = None
    quality_label: str | None = None
    content_length: int | None = None


class _WithThumbnails(CatalogModel):
    thumbnails: Thumbnails | None = None

    @field_validator("thumbnails")
    @classmethod
    def _reject_empty(cls, value: Thumbnails | None) -> Thumbnails | None:
        if value is not None and not value:
            raise ValueError("thumbnails must be omitted rather than empty")
        return value


def project(record: CatalogModel, view: type[DetailedT]) -> DetailedT:
    """Narrow a record to one of its base views by field subset."""
    return view.model_validate(
        {name: getattr(record, name) for name in view.model_fields}
    )


class SongDetailed(_WithThumbnails):
    type: Literal["song"] = "song"
    video_id: VideoId
    name: str
    artists: tuple[ArtistRef, ...] = ()
    album: AlbumRef | None = None
    duration: int | None = None
    explicit: bool = False


class SongFull(SongDetailed):
    """Song as returned by the player endpoint."""

    formats: tuple[StreamFormat, ...] = ()
    adaptive_formats: tuple[StreamFormat, ...] = ()
    lyrics_eligible: bool = False

    def to_detailed(self) -> SongDetailed:
        return project(self, SongDetailed)


class VideoDetailed(_WithThumbnails):
    type: Literal["video"] = "video"
    video_id: VideoId
    name: str
    artists: tuple[ArtistRef, ...] = ()
    duration: int | None = None
    views: int | None = None


class VideoFull(VideoDetailed):
    """Video as returned by the player endpoint."""

    description: str | None = None
    unlisted: bool = False
    family_safe: bool = True
    paid: bool = False
    tags: tuple[str, ...] = ()

    def to_detailed(self) -> VideoDetailed:
        return project(self, VideoDetailed)


class ArtistDetailed(_WithThumbnails):
    type: Literal["artist"] = "artist"
    artist_id: ArtistId
    name: str


class AlbumDetailed(_WithThumbnails):
    type: Literal["album"] = "album"
    album_id: AlbumId
    name: str
    artist: ArtistRef | None = None
    year: int | None = None
    track_count: int | None = None


class PlaylistDetailed(_WithThumbnails):
    type: Literal["playlist"] = "playlist"
    playlist_id: PlaylistId
    name: str
    artist: ArtistRef | None = None
    video_count: int | None = None


class ArtistFull(ArtistDetailed):
    """Artist page with its preview shelves."""

    subscribers: int | None = None
    description: str | None = None
    top_songs: tuple[SongDetailed, ...] = ()
    top_albums: tuple[AlbumDetailed, ...] = ()
    top_videos: tuple[VideoDetailed, ...] = ()
    featured_on: tuple[PlaylistDetailed, ...] = ()
    similar_artists: tuple[ArtistDetailed, ...] = ()

    def to_detailed(self) -> ArtistDetailed:
        return project(self, ArtistDetailed)


class AlbumFull(AlbumDetailed):
    """Album page including its ordered track list."""

    description: str | None = None
    songs: tuple[SongDetailed, ...] = ()

    def to_detailed(self) -> AlbumDetailed:
        return project(self, AlbumDetailed)


class PlaylistFull(PlaylistDetailed):
    """Playlist header. Tracks are fetched with get_playlist_videos()."""

    description: str | None = None
    year: int | None = None

    def to_detailed(self) -> PlaylistDetailed:
        return project(self, PlaylistDetailed)


SearchResult = Annotated[
    SongDetailed | VideoDetailed | ArtistDetailed | AlbumDetailed | PlaylistDetailed,
    Field(discriminator="type"),
]
