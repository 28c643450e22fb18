"""Request facade backed by ytmusicapi."""

import logging
from pathlib import Path
from urllib.parse import urlencode

from ytmusicapi import YTMusic
from ytmusicapi.exceptions import YTMusicError, YTMusicServerError, YTMusicUserError

from ytmkit.config import APIConfig
from ytmkit.exceptions import APIError
from ytmkit.transport.protocols import JsonDict
from ytmkit.utils.cookies import cookies_to_ytmusic_auth

logger = logging.getLogger(__name__)


class YTMusicTransport:
    """Request facade that reuses ytmusicapi's session and client context.

    ytmusicapi ships a pinned client context, so no bootstrap is needed:
    the transport is usable as soon as it is constructed.
    Implements RequestFacade.

    Requests go through ``YTMusic._send_request``, which is private to
    ytmusicapi. The dependency is capped below the next major release for
    that reason; check the signature before raising the cap.
    """

    def __init__(
        self,
        ytmusic: YTMusic | None = None,
        config: APIConfig | None = None,
        cookies_path: Path | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            ytmusic: Optional YTMusic instance. Creates one if not provided.
            config: Optional API configuration. Uses defaults if not provided.
            cookies_path: Optional path to cookies.txt for authentication.
        """
        self._config = config or APIConfig()
        self._ytm = ytmusic or self._create_ytmusic(cookies_path)

    def _create_ytmusic(self, cookies_path: Path | None) -> YTMusic:
        proxies = (
            {"http": self._config.proxy, "https": self._config.proxy}
            if self._config.proxy
            else None
        )
        auth = cookies_to_ytmusic_auth(cookies_path) if cookies_path else None
        if auth:
            logger.info("Using cookies for ytmusicapi requests")
        else:
            logger.info("No cookies configured for ytmusicapi requests")
        return YTMusic(
            auth=auth,
            proxies=proxies,
            language=self._config.language,
            location=self._config.location,
        )

    def request(
        self,
        endpoint: str,
        body: JsonDict | None = None,
        query: dict[str, str] | None = None,
    ) -> JsonDict:
        """POST through ytmusicapi.

        Raises:
            APIError: If ytmusicapi reports a failure.
        """
        additional_params = f"&{urlencode(query)}" if query else ""
        logger.debug("POST %s via ytmusicapi", endpoint)
        try:
            # ytmusicapi merges its context into the body in place
            return self._ytm._send_request(
                endpoint, dict(body or {}), additional_params
            )
        except (YTMusicServerError, YTMusicUserError) as e:
            logger.warning("YTMusic API error for %s: %s", endpoint, e)
            raise APIError(f"Request to {endpoint} failed: {e}") from e
        except YTMusicError as e:
            logger.warning("YTMusic error for %s: %s", endpoint, e)
            raise APIError(f"Request to {endpoint} failed: {e}") from e
