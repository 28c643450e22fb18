"""Utility functions for ytmkit.

Available via `from ytmkit.utils import ...` for power users.
Not re-exported at the top-level `ytmkit` package.
"""

from ytmkit.utils.cookies import (
    build_auth_headers,
    cookies_to_ytmusic_auth,
    parse_cookie_string,
    parse_netscape_cookies,
)
from ytmkit.utils.traverse import (
    MISSING,
    is_missing,
    traverse,
    traverse_list,
    traverse_string,
)

__all__ = [
    "MISSING",
    "build_auth_headers",
    "cookies_to_ytmusic_auth",
    "is_missing",
    "parse_cookie_string",
    "parse_netscape_cookies",
    "traverse",
    "traverse_list",
    "traverse_string",
]
