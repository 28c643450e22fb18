"""Test fixtures and configuration.

Response fixtures mirror the shape of real InnerTube responses, trimmed to
the keys the parsers read.
"""

from typing import Any

import pytest
from ytmkit.client import YTMusicClient

VIDEO_ID = "dQw4w9WgXcQ"
OTHER_VIDEO_ID = "yPYZpwSpKmA"
THIRD_VIDEO_ID = "fJ9rUzIMcZQ"
ARTIST_ID = "UCuAXFkgsw1L7xaCfnd5JJOw"
ALBUM_ID = "MPREb_BQZvl3BFGay"
CHANNEL_ID = "UCowner1234567890"
SONGS_BROWSE_ID = "VLOLAK5uy_songs"

ARTIST_PAGE = "MUSIC_PAGE_TYPE_ARTIST"
ALBUM_PAGE = "MUSIC_PAGE_TYPE_ALBUM"
PLAYLIST_PAGE = "MUSIC_PAGE_TYPE_PLAYLIST"
CHANNEL_PAGE = "MUSIC_PAGE_TYPE_USER_CHANNEL"


class FakeTransport:
    """Request facade that replays canned responses and records every call."""

    def __init__(self, responses: list[dict[str, Any]] | None = None) -> None:
        self.responses = list(responses or [])
        self.calls: list[tuple[str, Any, Any]] = []

    def request(
        self,
        endpoint: str,
        body: dict[str, Any] | None = None,
        query: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        self.calls.append((endpoint, body, query))
        if not self.responses:
            raise AssertionError(f"Unexpected request to {endpoint}")
        return self.responses.pop(0)


def make_client(*responses: dict[str, Any]) -> tuple[YTMusicClient, FakeTransport]:
    """Client over a FakeTransport that answers with ``responses`` in order."""
    transport = FakeTransport(list(responses))
    return YTMusicClient(transport), transport


def browse_endpoint(browse_id: str, page_type: str | None = None) -> dict[str, Any]:
    endpoint: dict[str, Any] = {"browseId": browse_id}
    if page_type:
        endpoint["browseEndpointContextSupportedConfigs"] = {
            "browseEndpointContextMusicConfig": {"pageType": page_type}
        }
    return {"browseEndpoint": endpoint}


def watch_endpoint(video_id: str, video_type: str | None = None) -> dict[str, Any]:
    endpoint: dict[str, Any] = {"videoId": video_id}
    if video_type:
        endpoint["watchEndpointMusicSupportedConfigs"] = {
            "watchEndpointMusicConfig": {"musicVideoType": video_type}
        }
    return {"watchEndpoint": endpoint}


def run(
    text: str, browse_id: str | None = None, page_type: str | None = None
) -> dict[str, Any]:
    result: dict[str, Any] = {"text": text}
    if browse_id:
        result["navigationEndpoint"] = browse_endpoint(browse_id, page_type)
    return result


def runs(*items: dict[str, Any] | str) -> dict[str, Any]:
    return {"runs": [run(i) if isinstance(i, str) else i for i in items]}


def thumbnail(*widths: int) -> dict[str, Any]:
    return {
        "musicThumbnailRenderer": {
            "thumbnail": {
                "thumbnails": [
                    {"url": f"https://lh3.example.com/w{w}", "width": w, "height": w}
                    for w in widths
                ]
            }
        }
    }


def flex_column(*items: dict[str, Any] | str) -> dict[str, Any]:
    return {"musicResponsiveListItemFlexColumnRenderer": {"text": runs(*items)}}


def fixed_column(text: str) -> dict[str, Any]:
    return {"musicResponsiveListItemFixedColumnRenderer": {"text": runs(text)}}


def song_row(
    video_id: str = VIDEO_ID,
    title: str = "Never Gonna Give You Up",
    video_type: str | None = "MUSIC_VIDEO_TYPE_ATV",
    explicit: bool = False,
    with_album: bool = True,
) -> dict[str, Any]:
    """Song ``musicResponsiveListItemRenderer`` as found in search results."""
    meta: list[dict[str, Any] | str] = [
        "Song",
        " • ",
        run("Rick Astley", ARTIST_ID, ARTIST_PAGE),
    ]
    if with_album:
        meta += [" • ", run("Whenever You Need Somebody", ALBUM_ID, ALBUM_PAGE)]
    meta += [" • ", "3:33"]
    item: dict[str, Any] = {
        "thumbnail": thumbnail(60, 120),
        "overlay": {
            "musicItemThumbnailOverlayRenderer": {
                "content": {
                    "musicPlayButtonRenderer": {
                        "playNavigationEndpoint": watch_endpoint(video_id, video_type)
                    }
                }
            }
        },
        "flexColumns": [flex_column(title), flex_column(*meta)],
        "playlistItemData": {"videoId": video_id},
    }
    if explicit:
        item["badges"] = [
            {"musicInlineBadgeRenderer": {"icon": {"iconType": "MUSIC_EXPLICIT_BADGE"}}}
        ]
    return item


def artist_row(artist_id: str = ARTIST_ID, name: str = "Rick Astley") -> dict[str, Any]:
    return {
        "thumbnail": thumbnail(60, 120),
        "flexColumns": [
            flex_column(name),
            flex_column("Artist", " • ", "4.1M subscribers"),
        ],
        "navigationEndpoint": browse_endpoint(artist_id, ARTIST_PAGE),
    }


def album_row(album_id: str = ALBUM_ID) -> dict[str, Any]:
    return {
        "thumbnail": thumbnail(60, 120),
        "flexColumns": [
            flex_column("Whenever You Need Somebody"),
            flex_column(
                "Album",
                " • ",
                run("Rick Astley", ARTIST_ID, ARTIST_PAGE),
                " • ",
                "1987",
            ),
        ],
        "navigationEndpoint": browse_endpoint(album_id, ALBUM_PAGE),
    }


def playlist_row(playlist_id: str = "VLPLtest123") -> dict[str, Any]:
    return {
        "thumbnail": thumbnail(60),
        "flexColumns": [
            flex_column("80s Hits"),
            flex_column(
                "Playlist",
                " • ",
                run("Someone", CHANNEL_ID, CHANNEL_PAGE),
                " • ",
                "120 songs",
            ),
        ],
        "navigationEndpoint": browse_endpoint(playlist_id, PLAYLIST_PAGE),
    }


def video_row(
    video_id: str = OTHER_VIDEO_ID, title: str = "Official Video"
) -> dict[str, Any]:
    """Video row as found in playlists: duration in the fixed column."""
    return {
        "thumbnail": thumbnail(60, 120),
        "flexColumns": [
            flex_column(title),
            flex_column(run("Rick Astley", ARTIST_ID, ARTIST_PAGE)),
        ],
        "fixedColumns": [fixed_column("3:33")],
        "playlistItemData": {"videoId": video_id},
    }


def album_tile(album_id: str = ALBUM_ID, year: str = "1987") -> dict[str, Any]:
    """Album ``musicTwoRowItemRenderer`` (carousel tile)."""
    return {
        "thumbnailRenderer": thumbnail(226, 544),
        "title": runs(run("Whenever You Need Somebody", album_id, ALBUM_PAGE)),
        "subtitle": runs("Album", " • ", year),
        "navigationEndpoint": browse_endpoint(album_id, ALBUM_PAGE),
    }


def artist_tile(
    artist_id: str = "UCsimilar1234567", name: str = "Bananarama"
) -> dict[str, Any]:
    return {
        "thumbnailRenderer": thumbnail(226),
        "title": runs(name),
        "subtitle": runs("1.5M subscribers"),
        "navigationEndpoint": browse_endpoint(artist_id, ARTIST_PAGE),
    }


def section_list(
    *sections: dict[str, Any], continuation: str | None = None
) -> dict[str, Any]:
    renderer: dict[str, Any] = {"contents": list(sections)}
    if continuation:
        renderer["continuations"] = [
            {"nextContinuationData": {"continuation": continuation}}
        ]
    return {
        "contents": {
            "singleColumnBrowseResultsRenderer": {
                "tabs": [
                    {"tabRenderer": {"content": {"sectionListRenderer": renderer}}}
                ]
            }
        }
    }


def shelf(*rows: dict[str, Any], **extra: Any) -> dict[str, Any]:
    return {
        "musicShelfRenderer": {
            **extra,
            "contents": [{"musicResponsiveListItemRenderer": r} for r in rows],
        }
    }


def carousel(title: str, *tiles: dict[str, Any], **extra: Any) -> dict[str, Any]:
    return {
        "musicCarouselShelfRenderer": {
            "header": {
                "musicCarouselShelfBasicHeaderRenderer": {"title": runs(title)}
            },
            **extra,
            "contents": list(tiles),
        }
    }


def player_response(video_id: str = VIDEO_ID, **details: Any) -> dict[str, Any]:
    """``player`` response. The duration is only given as a length run."""
    return {
        "playabilityStatus": {"status": "OK"},
        "streamingData": {
            "formats": [
                {
                    "itag": 18,
                    "mimeType": 'video/mp4; codecs="avc1.42001E, mp4a.40.2"',
                    "bitrate": 503000,
                    "url": "https://rr1.example.com/videoplayback?itag=18",
                    "qualityLabel": "360p",
                    "contentLength": "13458295",
                }
            ],
            "adaptiveFormats": [
                {
                    "itag": 140,
                    "mimeType": 'audio/mp4; codecs="mp4a.40.2"',
                    "bitrate": 130000,
                    "audioQuality": "AUDIO_QUALITY_MEDIUM",
                    "contentLength": "3433514",
                },
                {"mimeType": "video/webm"},
            ],
        },
        "videoDetails": {
            "videoId": video_id,
            "title": "Never Gonna Give You Up",
            "lengthText": runs("3:33"),
            "channelId": ARTIST_ID,
            "author": "Rick Astley",
            "musicVideoType": "MUSIC_VIDEO_TYPE_ATV",
            "viewCount": "1500000000",
            "shortDescription": "The official video",
            "keywords": ["rick astley", "80s"],
            "thumbnail": {
                "thumbnails": [
                    {"url": "https://i.ytimg.com/60.jpg", "width": 60, "height": 60},
                    {"url": "https://i.ytimg.com/120.jpg", "width": 120, "height": 120},
                    {"url": "https://i.ytimg.com/544.jpg", "width": 544, "height": 544},
                ]
            },
            **details,
        },
        "microformat": {
            "microformatDataRenderer": {
                "familySafe": True,
                "unlisted": False,
                "paid": False,
                "tags": ["rick astley", "never gonna give you up"],
            }
        },
    }


def search_response(*rows: dict[str, Any]) -> dict[str, Any]:
    return {
        "contents": {
            "tabbedSearchResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {
                                "sectionListRenderer": {"contents": [shelf(*rows)]}
                            }
                        }
                    }
                ]
            }
        }
    }


def album_response() -> dict[str, Any]:
    header = {
        "musicResponsiveHeaderRenderer": {
            "thumbnail": thumbnail(226, 544),
            "title": runs("Whenever You Need Somebody"),
            "subtitle": runs("Album", " • ", "1987"),
            "straplineTextOne": runs(run("Rick Astley", ARTIST_ID, ARTIST_PAGE)),
            "secondSubtitle": runs("2 songs", " • ", "7 minutes"),
            "description": {
                "musicDescriptionShelfRenderer": {
                    "description": runs("Debut studio album.")
                }
            },
        }
    }
    track = {
        "flexColumns": [flex_column("Never Gonna Give You Up"), flex_column()],
        "fixedColumns": [fixed_column("3:33")],
        "playlistItemData": {"videoId": VIDEO_ID},
    }
    bad_track = {"flexColumns": [flex_column("Unavailable")]}
    return {
        "contents": {
            "twoColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {"sectionListRenderer": {"contents": [header]}}
                        }
                    }
                ],
                "secondaryContents": {
                    "sectionListRenderer": {"contents": [shelf(track, bad_track)]}
                },
            }
        }
    }


def artist_response(albums_more: bool = True) -> dict[str, Any]:
    album_carousel_extra: dict[str, Any] = {}
    if albums_more:
        album_carousel_extra["moreContentButton"] = {
            "buttonRenderer": {
                "navigationEndpoint": {
                    "browseEndpoint": {
                        "browseId": f"MPAD{ARTIST_ID}",
                        "params": "ggMIegYIARoCAQI%3D",
                    }
                }
            }
        }
    return {
        "header": {
            "musicImmersiveHeaderRenderer": {
                "title": runs("Rick Astley"),
                "description": runs("English singer."),
                "subscriptionButton": {
                    "subscribeButtonRenderer": {"subscriberCountText": runs("4.1M")}
                },
                "thumbnail": thumbnail(540, 1080),
            }
        },
        **section_list(
            shelf(
                song_row(),
                title=runs(run("Songs", SONGS_BROWSE_ID)),
            ),
            carousel(
                "Albums",
                {"musicTwoRowItemRenderer": album_tile()},
                **album_carousel_extra,
            ),
            carousel(
                "Fans might also like", {"musicTwoRowItemRenderer": artist_tile()}
            ),
        ),
    }


def playlist_header_response(playlist_id: str = "VLPLtest123") -> dict[str, Any]:
    return {
        "header": {
            "musicDetailHeaderRenderer": {
                "title": runs("80s Hits"),
                "subtitle": runs(
                    "Playlist",
                    " • ",
                    run("Someone", CHANNEL_ID, CHANNEL_PAGE),
                    " • ",
                    "2023",
                ),
                "secondSubtitle": runs("25 songs", " • ", "1 hour"),
                "description": runs("Best of the decade."),
                "thumbnail": thumbnail(226, 544),
            }
        }
    }


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Transport with no canned responses."""
    return FakeTransport()


@pytest.fixture
def player_data() -> dict[str, Any]:
    """Player response for dQw4w9WgXcQ."""
    return player_response()


@pytest.fixture
def mixed_search_data() -> dict[str, Any]:
    """Search response with a song, an artist and an album, in that order."""
    return search_response(song_row(), artist_row(), album_row())
