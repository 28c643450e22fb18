"""ytmkit - Typed YouTube Music catalog client.

This library retrieves songs, videos, artists, albums, playlists, search
results, lyrics and home feed sections from the YouTube Music InnerTube API
and returns them as validated, immutable pydantic records.

Designed for use as a library in applications (e.g., FastAPI) with
a CLI for debugging and development.

Examples:
    Search and look up a song:
    ```python
    from ytmkit import create_client

    client = create_client()
    for result in client.search("never gonna give you up"):
        print(result.type, result.name)
    song = client.get_song("dQw4w9WgXcQ")
    ```

    Fetch a long playlist, cancellable from another thread:
    ```python
    from ytmkit import CancelToken, create_client

    token = CancelToken()
    videos = create_client().get_playlist_videos("PL...", cancel_token=token)
    ```
"""

import logging
from pathlib import Path

from ytmkit.client import YTMusicClient
from ytmkit.config import APIConfig, SearchFilter
from ytmkit.exceptions import (
    APIError,
    CancellationError,
    InvalidVideoIdError,
    NotInitializedError,
    ParseFailureError,
    UpstreamMalformedError,
    YTMKitError,
)
from ytmkit.models import (
    AlbumDetailed,
    AlbumFull,
    AlbumRef,
    ArtistDetailed,
    ArtistFull,
    ArtistRef,
    CancelToken,
    CarouselSection,
    ContentType,
    DescriptionSection,
    HomeSection,
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
from ytmkit.transport import InnertubeSession, RequestFacade, YTMusicTransport

logger = logging.getLogger(__name__)


def create_client(
    config: APIConfig | None = None,
    cookies_path: Path | None = None,
    cookies: str | None = None,
    use_ytmusicapi: bool = False,
) -> YTMusicClient:
    """Create a ready-to-use client.

    This is the recommended way to create a client for library usage.
    It builds the transport and runs its bootstrap.

    Args:
        config: Optional API configuration. Uses defaults if not provided.
        cookies_path: Optional path to cookies.txt for YouTube Music
                     authentication.
        cookies: Optional raw ``Cookie`` header string. Only supported by the
                 default InnerTube transport.
        use_ytmusicapi: Send requests through ytmusicapi instead of the
                        built-in InnerTube session.

    Returns:
        A configured YTMusicClient instance.

    Raises:
        APIError: If the bootstrap page cannot be fetched.
        UpstreamMalformedError: If the bootstrap page holds no usable config.

    Examples:
        Basic usage:
        ```python
        client = create_client()
        albums = client.search_albums("discovery")
        ```

        With authentication:
        ```python
        client = create_client(cookies_path=Path("cookies.txt"))
        ```

        Through ytmusicapi:
        ```python
        client = create_client(use_ytmusicapi=True)
        ```
    """
    transport: RequestFacade
    if use_ytmusicapi:
        if cookies:
            logger.warning("Cookie strings are ignored by the ytmusicapi transport")
        transport = YTMusicTransport(config=config, cookies_path=cookies_path)
    else:
        transport = InnertubeSession(
            config=config, cookies_path=cookies_path, cookies=cookies
        ).initialize()
    return YTMusicClient(transport)


__all__ = [
    "APIConfig",
    "APIError",
    "AlbumDetailed",
    "AlbumFull",
    "AlbumRef",
    "ArtistDetailed",
    "ArtistFull",
    "ArtistRef",
    "CancelToken",
    "CancellationError",
    "CarouselSection",
    "ContentType",
    "DescriptionSection",
    "HomeSection",
    "InnertubeSession",
    "InvalidVideoIdError",
    "NotInitializedError",
    "ParseFailureError",
    "PlaylistDetailed",
    "PlaylistFull",
    "RequestFacade",
    "SearchFilter",
    "SearchResult",
    "SongDetailed",
    "SongFull",
    "StreamFormat",
    "Thumbnail",
    "UpstreamMalformedError",
    "VideoDetailed",
    "VideoFull",
    "YTMKitError",
    "YTMusicClient",
    "YTMusicTransport",
    "create_client",
]
