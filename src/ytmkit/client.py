"""YouTube Music catalog client."""

import logging
import re
from collections.abc import Callable
from typing import Any

from ytmkit.config import (
    BROWSE_ENDPOINT,
    HOME_BROWSE_ID,
    NEXT_ENDPOINT,
    PLAYER_ENDPOINT,
    SEARCH_ENDPOINT,
    SUGGESTIONS_ENDPOINT,
    SearchFilter,
)
from ytmkit.exceptions import InvalidVideoIdError
from ytmkit.models.cancel import CancelToken
from ytmkit.models.entities import (
    AlbumDetailed,
    AlbumFull,
    ArtistDetailed,
    ArtistFull,
    PlaylistDetailed,
    PlaylistFull,
    SearchResult,
    SongDetailed,
    SongFull,
    VideoDetailed,
    VideoFull,
)
from ytmkit.models.sections import HomeSection
from ytmkit.parsers import album, artist, mixed, playlist, search, song, video
from ytmkit.parsers.base import browse_id, canonical_playlist_id, parse_each
from ytmkit.services.pagination import PaginationController
from ytmkit.transport.protocols import JsonDict, RequestFacade
from ytmkit.utils.traverse import traverse, traverse_list, traverse_string

logger = logging.getLogger(__name__)

VIDEO_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{11}$")

# Artist songs: the songs page plus at most one continuation
_ARTIST_SONG_PAGES = 2


def _validate_video_id(video_id: str) -> None:
    if not VIDEO_ID_PATTERN.match(video_id):
        raise InvalidVideoIdError(f"Invalid video ID: {video_id!r}")


class YTMusicClient:
    """YouTube Music catalog client.

    Sends requests through a RequestFacade and turns the responses into
    ytmkit records. Use create_client() to get one with a ready transport.
    """

    def __init__(self, transport: RequestFacade) -> None:
        """Initialize the client.

        Args:
            transport: Request facade (InnertubeSession, YTMusicTransport or
                any object implementing RequestFacade).
        """
        self._transport = transport

    def _browse(self, target: str, **extra: Any) -> JsonDict:
        logger.debug("Browsing %s", target)
        return self._transport.request(BROWSE_ENDPOINT, {"browseId": target, **extra})

    def get_search_suggestions(self, query: str) -> list[str]:
        """Fetch search suggestions for a partial query.

        Raises:
            APIError: If the request fails.
        """
        data = self._transport.request(SUGGESTIONS_ENDPOINT, {"input": query})
        return [q for q in traverse_list(data, "query") if isinstance(q, str)]

    def _search(
        self,
        query: str,
        params: SearchFilter | None,
        parser: Callable[[Any], Any],
    ) -> list[Any]:
        logger.debug(
            "Searching %r (filter: %s)", query, params.name if params else "none"
        )
        data = self._transport.request(
            SEARCH_ENDPOINT,
            {"query": query, "params": params.value if params else None},
        )
        items = traverse_list(data, "musicResponsiveListItemRenderer")
        return parse_each(items, parser)

    def search(self, query: str) -> list[SearchResult]:
        """Search the whole catalog.

        Args:
            query: Search query.

        Returns:
            Results of every content type, in the order YouTube Music ranks
            them. Items that cannot be classified or parsed are skipped.

        Raises:
            APIError: If the request fails.
        """
        return self._search(query, None, search.parse)

    def search_songs(self, query: str) -> list[SongDetailed]:
        """Search for songs."""
        return self._search(query, SearchFilter.SONGS, song.parse_search_result)

    def search_videos(self, query: str) -> list[VideoDetailed]:
        """Search for videos."""
        return self._search(query, SearchFilter.VIDEOS, video.parse_search_result)

    def search_artists(self, query: str) -> list[ArtistDetailed]:
        """Search for artists."""
        return self._search(query, SearchFilter.ARTISTS, artist.parse_search_result)

    def search_albums(self, query: str) -> list[AlbumDetailed]:
        """Search for albums."""
        return self._search(query, SearchFilter.ALBUMS, album.parse_search_result)

    def search_playlists(self, query: str) -> list[PlaylistDetailed]:
        """Search for playlists."""
        return self._search(
            query, SearchFilter.PLAYLISTS, playlist.parse_search_result
        )

    def get_song(self, video_id: str) -> SongFull:
        """Fetch a song with its streaming formats.

        Args:
            video_id: 11-character YouTube video ID.

        Returns:
            Parsed SongFull model.

        Raises:
            InvalidVideoIdError: If the ID is malformed (no request is made)
                or the response describes a different video.
            ParseFailureError: If the response holds no video.
            APIError: If the request fails.
        """
        _validate_video_id(video_id)
        logger.debug("Fetching song: %s", video_id)
        data = self._transport.request(PLAYER_ENDPOINT, {"videoId": video_id})
        result = song.parse(data)
        if result.video_id != video_id:
            raise InvalidVideoIdError(
                f"Requested {video_id} but received {result.video_id}"
            )
        return result

    def get_video(self, video_id: str) -> VideoFull:
        """Fetch a video.

        Raises:
            InvalidVideoIdError: If the ID is malformed (no request is made)
                or the response describes a different video.
            ParseFailureError: If the response holds no video.
            APIError: If the request fails.
        """
        _validate_video_id(video_id)
        logger.debug("Fetching video: %s", video_id)
        data = self._transport.request(PLAYER_ENDPOINT, {"videoId": video_id})
        result = video.parse(data)
        if result.video_id != video_id:
            raise InvalidVideoIdError(
                f"Requested {video_id} but received {result.video_id}"
            )
        return result

    def get_lyrics(self, video_id: str) -> list[str] | None:
        """Fetch the lyrics of a song, one entry per non-empty line.

        Returns:
            Lyric lines, or None if the song has no lyrics.

        Raises:
            InvalidVideoIdError: If the ID is malformed (no request is made).
            APIError: If a request fails.
        """
        _validate_video_id(video_id)
        data = self._transport.request(NEXT_ENDPOINT, {"videoId": video_id})
        # The second tab of the watch page is the lyrics tab
        tabs = traverse_list(data, "tabs", "tabRenderer")
        lyrics_id = browse_id(tabs[1]) if len(tabs) > 1 else None
        if not lyrics_id:
            logger.debug("No lyrics tab for %s", video_id)
            return None

        text = traverse_string(
            self._browse(lyrics_id), "description", "runs", "text"
        )
        if not text:
            return None
        return [line for line in text.replace("\r", "").split("\n") if line]

    def get_artist(self, artist_id: str) -> ArtistFull:
        """Fetch an artist page.

        Raises:
            ParseFailureError: If the page has no artist header.
            APIError: If the request fails.
        """
        return artist.parse(self._browse(artist_id), artist_id)

    def get_artist_songs(
        self,
        artist_id: str,
        cancel_token: CancelToken | None = None,
    ) -> list[SongDetailed]:
        """Fetch an artist's songs (the songs page and one continuation).

        Returns:
            Songs in page order, or [] if the artist has no songs shelf.

        Raises:
            CancellationError: If cancelled before the continuation request.
            APIError: If a request fails.
        """
        artist_data = self._browse(artist_id)
        songs_id = traverse(artist_data, "musicShelfRenderer", "title", "browseId")
        if not isinstance(songs_id, str) or not songs_id:
            logger.debug("Artist %s has no songs shelf", artist_id)
            return []

        credit = {"artist_id": artist_id, "name": artist.artist_name(artist_data)}

        def extract(page: JsonDict) -> list[SongDetailed]:
            return parse_each(
                traverse_list(page, "musicResponsiveListItemRenderer"),
                song.parse_artist_song,
                credit,
            )

        controller = PaginationController(self._transport, cancel_token)
        return controller.collect(
            BROWSE_ENDPOINT,
            {"browseId": songs_id},
            extract,
            max_pages=_ARTIST_SONG_PAGES,
        )

    def get_artist_albums(self, artist_id: str) -> list[AlbumDetailed]:
        """Fetch an artist's albums.

        Follows the "more" link of the first carousel on the artist page.
        When there is none, the carousel itself holds every album.

        Raises:
            APIError: If a request fails.
        """
        artist_data = self._browse(artist_id)
        carousels = traverse_list(artist_data, "musicCarouselShelfRenderer")
        if not carousels:
            logger.debug("Artist %s has no album carousel", artist_id)
            return []

        credit = {"artist_id": artist_id, "name": artist.artist_name(artist_data)}
        source: Any = carousels[0]
        more = traverse(source, "moreContentButton", "browseEndpoint")
        if isinstance(more, dict) and more.get("browseId"):
            extra = {"params": more["params"]} if "params" in more else {}
            source = self._browse(more["browseId"], **extra)

        return parse_each(
            traverse_list(source, "musicTwoRowItemRenderer"),
            album.parse_artist_album,
            credit,
        )

    def get_album(self, album_id: str) -> AlbumFull:
        """Fetch an album with its track list.

        Raises:
            ParseFailureError: If the page has no album header.
            APIError: If the request fails.
        """
        return album.parse(self._browse(album_id), album_id)

    def get_playlist(self, playlist_id: str) -> PlaylistFull:
        """Fetch a playlist header.

        ``PL...`` IDs are browsed as ``VLPL...``; other IDs pass through.

        Raises:
            ParseFailureError: If the page has no playlist header.
            APIError: If the request fails.
        """
        playlist_id = canonical_playlist_id(playlist_id)
        return playlist.parse(self._browse(playlist_id), playlist_id)

    def get_playlist_videos(
        self,
        playlist_id: str,
        cancel_token: CancelToken | None = None,
    ) -> list[VideoDetailed]:
        """Fetch every video of a playlist, following all continuations.

        Raises:
            CancellationError: If cancelled between pages.
            APIError: If a request fails.
        """
        playlist_id = canonical_playlist_id(playlist_id)

        def first(page: JsonDict) -> list[VideoDetailed]:
            return parse_each(
                traverse_list(
                    page,
                    "musicPlaylistShelfRenderer",
                    "musicResponsiveListItemRenderer",
                ),
                video.parse_playlist_video,
            )

        def rest(page: JsonDict) -> list[VideoDetailed]:
            return parse_each(
                traverse_list(page, "musicResponsiveListItemRenderer"),
                video.parse_playlist_video,
            )

        controller = PaginationController(self._transport, cancel_token)
        return controller.collect(
            BROWSE_ENDPOINT, {"browseId": playlist_id}, first, rest
        )

    def get_home_sections(
        self,
        cancel_token: CancelToken | None = None,
    ) -> list[HomeSection]:
        """Fetch every section of the home feed.

        Raises:
            CancellationError: If cancelled between pages.
            APIError: If a request fails.
        """

        def first(page: JsonDict) -> list[HomeSection]:
            return mixed.parse_sections(
                traverse(page, "sectionListRenderer", "contents")
            )

        def rest(page: JsonDict) -> list[HomeSection]:
            return mixed.parse_sections(
                traverse(page, "sectionListContinuation", "contents")
            )

        controller = PaginationController(self._transport, cancel_token)
        return controller.collect(
            BROWSE_ENDPOINT, {"browseId": HOME_BROWSE_ID}, first, rest
        )
