"""Cookie helpers for authenticated YouTube Music requests.

Accepts either a Netscape ``cookies.txt`` export (as used by yt-dlp) or a raw
``Cookie`` header string copied from the browser, and derives the
SAPISIDHASH authorization header YouTube expects from signed-in clients.
"""

import hashlib
import logging
import time
from pathlib import Path

logger = logging.getLogger(__name__)

YTM_ORIGIN = "https://music.youtube.com"

# Newer browsers only carry the __Secure- variant
_SAPISID_NAMES = ("__Secure-3PAPISID", "SAPISID")


def parse_netscape_cookies(cookies_path: Path) -> dict[str, str]:
    """Read a Netscape format cookies.txt into a name -> value dict.

    Unreadable files yield an empty dict (logged).
    """
    try:
        content = cookies_path.read_text()
    except OSError as e:
        logger.warning("Failed to read cookies file: %s", e)
        return {}

    cookies: dict[str, str] = {}
    for line in content.splitlines():
        # "#HttpOnly_" prefixed lines are real cookies, plain "#" are comments
        line = line.strip().removeprefix("#HttpOnly_")
        if not line or line.startswith("#"):
            continue
        fields = line.split("\t")
        if len(fields) >= 7:
            cookies[fields[5]] = fields[6]
    return cookies


def parse_cookie_string(cookie_string: str) -> dict[str, str]:
    """Parse a ``name=value; name2=value2`` header string."""
    cookies: dict[str, str] = {}
    for pair in cookie_string.split(";"):
        name, sep, value = pair.strip().partition("=")
        if sep and name:
            cookies[name] = value
    return cookies


def get_sapisid(cookies: dict[str, str]) -> str | None:
    """Return the SAPISID value, preferring the __Secure-3PAPISID variant."""
    for name in _SAPISID_NAMES:
        if value := cookies.get(name):
            return value
    return None


def generate_sapisidhash(sapisid: str, origin: str = YTM_ORIGIN) -> str:
    """Build the ``SAPISIDHASH <ts>_<sha1>`` authorization value.

    See: https://stackoverflow.com/a/32065323/5726546
    """
    timestamp = str(int(time.time()))
    digest = hashlib.sha1(f"{timestamp} {sapisid} {origin}".encode()).hexdigest()
    return f"SAPISIDHASH {timestamp}_{digest}"


def build_auth_headers(cookies: dict[str, str]) -> dict[str, str]:
    """Headers that authenticate a request carrying ``cookies``.

    Returns an empty dict when the cookies hold no SAPISID (anonymous session).
    """
    sapisid = get_sapisid(cookies)
    if not sapisid:
        return {}
    return {
        "Authorization": generate_sapisidhash(sapisid),
        "X-Goog-AuthUser": "0",
        "x-origin": YTM_ORIGIN,
    }


def cookies_to_ytmusic_auth(cookies_path: Path) -> dict[str, str] | None:
    """Convert cookies.txt into the header dict ytmusicapi accepts as ``auth``.

    Returns:
        Header dict, or None if the file is missing or not signed in.
    """
    if not cookies_path.exists():
        logger.debug("Cookies file not found: %s", cookies_path)
        return None

    cookies = parse_netscape_cookies(cookies_path)
    auth = build_auth_headers(cookies)
    if not auth:
        logger.warning("No SAPISID cookie found - authentication not possible")
        return None

    return {
        "Accept": "*/*",
        "Content-Type": "application/json",
        "Cookie": "; ".join(f"{k}={v}" for k, v in cookies.items()),
        **auth,
    }
