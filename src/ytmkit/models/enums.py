"""Enumerations for ytmkit models."""

from enum import StrEnum


class ContentType(StrEnum):
    """Kind of catalog entity. Used as the ``type`` discriminator."""

    SONG = "song"
    VIDEO = "video"
    ARTIST = "artist"
    ALBUM = "album"
    PLAYLIST = "playlist"


class VideoType(StrEnum):
    """YouTube Music video types (``musicVideoType``)."""

    ATV = "MUSIC_VIDEO_TYPE_ATV"  # Audio Track Video (album version)
    OMV = "MUSIC_VIDEO_TYPE_OMV"  # Official Music Video
    OFFICIAL_SOURCE_MUSIC = "MUSIC_VIDEO_TYPE_OFFICIAL_SOURCE_MUSIC"
    UGC = "MUSIC_VIDEO_TYPE_UGC"  # User Generated Content
    PODCAST_EPISODE = "MUSIC_VIDEO_TYPE_PODCAST_EPISODE"


class PageType(StrEnum):
    """Page types found in ``browseEndpointContextMusicConfig``."""

    ARTIST = "MUSIC_PAGE_TYPE_ARTIST"
    ALBUM = "MUSIC_PAGE_TYPE_ALBUM"
    PLAYLIST = "MUSIC_PAGE_TYPE_PLAYLIST"
    USER_CHANNEL = "MUSIC_PAGE_TYPE_USER_CHANNEL"
    LIBRARY_ARTIST = "MUSIC_PAGE_TYPE_LIBRARY_ARTIST"


class RendererKind(StrEnum):
    """Section renderers understood by the home feed dispatcher."""

    CAROUSEL_SHELF = "musicCarouselShelfRenderer"
    IMMERSIVE_CAROUSEL_SHELF = "musicImmersiveCarouselShelfRenderer"
    SHELF = "musicShelfRenderer"
    DESCRIPTION_SHELF = "musicDescriptionShelfRenderer"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def of(cls, renderer_name: str) -> "RendererKind":
        """Map a renderer key to its kind, UNRECOGNIZED if unknown."""
        try:
            kind = cls(renderer_name)
        except ValueError:
            return cls.UNRECOGNIZED
        return kind
