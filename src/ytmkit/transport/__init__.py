"""Request facades: the only code in ytmkit that talks to the network.

Public API:
    RequestFacade - Protocol consumed by YTMusicClient and the paginator
    InnertubeSession - requests-based session bootstrapped from the web app
    YTMusicTransport - Adapter over ytmusicapi.YTMusic
"""

from ytmkit.transport.innertube import InnertubeSession
from ytmkit.transport.protocols import JsonDict, RequestFacade
from ytmkit.transport.ytmusic import YTMusicTransport

__all__ = [
    "InnertubeSession",
    "JsonDict",
    "RequestFacade",
    "YTMusicTransport",
]
