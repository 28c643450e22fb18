"""InnerTube session bootstrapped from the YouTube Music web app."""

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Self
from urllib.parse import urljoin

import requests

from ytmkit.config import APIConfig
from ytmkit.exceptions import APIError, NotInitializedError, UpstreamMalformedError
from ytmkit.transport.protocols import JsonDict
from ytmkit.utils.cookies import (
    build_auth_headers,
    parse_cookie_string,
    parse_netscape_cookies,
)

logger = logging.getLogger(__name__)

_YTCFG_CALL = re.compile(r"ytcfg\.set\(\s*")

# Keys without which no request can be built
_REQUIRED_CONFIG_KEYS = ("INNERTUBE_API_KEY",)

_EXPERIMENT_FLAGS = (
    "force_music_enable_outertube_tastebuilder_browse",
    "force_music_enable_outertube_playlist_detail_browse",
    "force_music_enable_outertube_search_suggestions",
)


def extract_ytcfg(html: str) -> dict[str, Any]:
    """Merge every ``ytcfg.set({...})`` payload found in the page.

    Payloads are merged left to right. Payloads that are not valid JSON
    objects are skipped.

    Raises:
        UpstreamMalformedError: If no payload could be parsed.
    """
    decoder = json.JSONDecoder()
    config: dict[str, Any] = {}
    parsed = 0

    for match in _YTCFG_CALL.finditer(html):
        try:
            payload, _ = decoder.raw_decode(html, match.end())
        except json.JSONDecodeError as e:
            logger.warning("Skipping unparseable ytcfg payload: %s", e)
            continue
        # ytcfg.set("KEY", value) calls carry single values, not config objects
        if isinstance(payload, dict):
            config.update(payload)
            parsed += 1

    if not parsed:
        raise UpstreamMalformedError("No ytcfg configuration found in bootstrap page")
    logger.debug("Merged %d ytcfg payloads (%d keys)", parsed, len(config))
    return config


class InnertubeSession:
    """Production request facade built on requests.

    Call initialize() once before the first request: it downloads the web app
    and extracts the API key and client context, the same way the browser does.
    Implements RequestFacade.
    """

    def __init__(
        self,
        config: APIConfig | None = None,
        cookies_path: Path | None = None,
        cookies: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the session (no network access).

        Args:
            config: Optional API configuration. Uses defaults if not provided.
            cookies_path: Optional path to a Netscape cookies.txt file.
            cookies: Optional raw ``Cookie`` header string.
            session: Optional requests session, mainly for testing.
        """
        self._config = config or APIConfig()
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": self._config.user_agent,
                "Accept-Language": f"{self._config.language}-{self._config.location},"
                f"{self._config.language};q=0.5",
            }
        )
        if self._config.proxy:
            self._session.proxies.update(
                {"http": self._config.proxy, "https": self._config.proxy}
            )
        self._cookies = self._load_cookies(cookies_path, cookies)
        for name, value in self._cookies.items():
            self._session.cookies.set(name, value, domain=".youtube.com")
        self._ytcfg: dict[str, Any] | None = None

    def _load_cookies(
        self, cookies_path: Path | None, cookies: str | None
    ) -> dict[str, str]:
        loaded: dict[str, str] = {}
        if cookies_path:
            loaded.update(parse_netscape_cookies(cookies_path))
        if cookies:
            loaded.update(parse_cookie_string(cookies))
        if loaded:
            logger.info("Using %d cookies for InnerTube requests", len(loaded))
        else:
            logger.info("No cookies configured for InnerTube requests")
        return loaded

    @property
    def is_initialized(self) -> bool:
        """True once initialize() has extracted a client configuration."""
        return self._ytcfg is not None

    def initialize(self, force: bool = False) -> Self:
        """Fetch the web app and extract the client configuration.

        Args:
            force: Re-run the bootstrap even if already initialized.

        Returns:
            self, for chaining.

        Raises:
            APIError: If the page cannot be fetched.
            UpstreamMalformedError: If the page holds no usable configuration.
        """
        if self.is_initialized and not force:
            return self

        logger.debug("Bootstrapping InnerTube config from %s", self._config.base_url)
        try:
            response = self._session.get(
                self._config.base_url, timeout=self._config.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise APIError(f"Failed to fetch bootstrap page: {e}") from e

        ytcfg = extract_ytcfg(response.text)
        missing = [key for key in _REQUIRED_CONFIG_KEYS if not ytcfg.get(key)]
        if missing:
            raise UpstreamMalformedError(
                f"Bootstrap config is missing required keys: {', '.join(missing)}"
            )

        ytcfg["GL"] = self._config.location
        ytcfg["HL"] = self._config.language
        self._ytcfg = ytcfg
        return self

    def _context(self, utc_offset: int) -> JsonDict:
        ytcfg = self._ytcfg or {}
        return {
            "capabilities": {},
            "client": {
                "clientName": ytcfg.get("INNERTUBE_CLIENT_NAME"),
                "clientVersion": ytcfg.get("INNERTUBE_CLIENT_VERSION"),
                "experimentIds": [],
                "experimentsToken": "",
                "gl": ytcfg.get("GL"),
                "hl": ytcfg.get("HL"),
                "locationInfo": {
                    "locationPermissionAuthorizationStatus": (
                        "LOCATION_PERMISSION_AUTHORIZATION_STATUS_UNSUPPORTED"
                    ),
                },
                "musicAppInfo": {
                    "musicActivityMasterSwitch": (
                        "MUSIC_ACTIVITY_MASTER_SWITCH_INDETERMINATE"
                    ),
                    "musicLocationMasterSwitch": (
                        "MUSIC_LOCATION_MASTER_SWITCH_INDETERMINATE"
                    ),
                    "pwaInstallabilityStatus": "PWA_INSTALLABILITY_STATUS_UNKNOWN",
                },
                "utcOffsetMinutes": utc_offset,
            },
            "request": {
                "internalExperimentFlags": [
                    {"key": flag, "value": "true"} for flag in _EXPERIMENT_FLAGS
                ],
                "sessionIndex": {},
            },
            "user": {"enableSafetyMode": False},
        }

    def _headers(self, utc_offset: int, time_zone: str) -> dict[str, str]:
        ytcfg = self._ytcfg or {}
        headers = {
            "x-origin": self._config.base_url.rstrip("/"),
            "X-Goog-Visitor-Id": ytcfg.get("VISITOR_DATA") or "",
            "X-YouTube-Client-Name": str(
                ytcfg.get("INNERTUBE_CONTEXT_CLIENT_NAME", "")
            ),
            "X-YouTube-Client-Version": str(ytcfg.get("INNERTUBE_CLIENT_VERSION", "")),
            "X-YouTube-Device": str(ytcfg.get("DEVICE", "")),
            "X-YouTube-Page-CL": str(ytcfg.get("PAGE_CL", "")),
            "X-YouTube-Page-Label": str(ytcfg.get("PAGE_BUILD_LABEL", "")),
            "X-YouTube-Utc-Offset": str(utc_offset),
            "X-YouTube-Time-Zone": time_zone,
        }
        headers.update(build_auth_headers(self._cookies))
        return headers

    def request(
        self,
        endpoint: str,
        body: JsonDict | None = None,
        query: dict[str, str] | None = None,
    ) -> JsonDict:
        """POST to an InnerTube endpoint.

        Raises:
            NotInitializedError: If initialize() has not completed.
            APIError: If the request fails or the response is not JSON.
        """
        if self._ytcfg is None:
            raise NotInitializedError(
                "Session not initialized. Call initialize() before making requests"
            )

        now = datetime.now().astimezone()
        offset = now.utcoffset()
        utc_offset = int(offset.total_seconds() // 60) if offset else 0
        time_zone = now.tzname() or "UTC"

        version = self._ytcfg.get("INNERTUBE_API_VERSION") or "v1"
        url = urljoin(self._config.base_url, f"youtubei/{version}/{endpoint}")
        params = {
            **(query or {}),
            "alt": "json",
            "key": self._ytcfg["INNERTUBE_API_KEY"],
        }
        payload = {"context": self._context(utc_offset), **(body or {})}

        logger.debug("POST %s (query keys: %s)", endpoint, sorted(query or {}))
        try:
            response = self._session.post(
                url,
                params=params,
                json=payload,
                headers=self._headers(utc_offset, time_zone),
                timeout=self._config.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.warning("InnerTube request to %s failed: %s", endpoint, e)
            raise APIError(f"Request to {endpoint} failed: {e}") from e
        except ValueError as e:
            raise APIError(f"Response from {endpoint} is not JSON: {e}") from e

        if not isinstance(data, dict):
            raise APIError(f"Unexpected response type from {endpoint}")
        return data
