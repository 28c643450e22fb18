"""Custom exceptions for ytmkit.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""


class YTMKitError(Exception):
    """Base exception for ytmkit.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidVideoIdError(YTMKitError):
    """Video ID is malformed or does not match the returned content.

    Raised before any request when the ID is not an 11-character token,
    and after parsing when the server answered with a different video
    than the one requested.
    """

    status_code: int = 400  # Bad Request


class NotInitializedError(YTMKitError):
    """Request made before the session bootstrap completed.

    Call initialize() on the transport (or use create_client()) first.
    """

    status_code: int = 503  # Service Unavailable


class ParseFailureError(YTMKitError):
    """A required field could not be located in the response tree.

    Attributes:
        key_path: Dotted key path that failed to resolve.
    """

    status_code: int = 502  # Bad Gateway (upstream sent unusable data)

    def __init__(self, message: str, key_path: str = "") -> None:
        self.key_path = key_path
        super().__init__(message)


class UpstreamMalformedError(YTMKitError):
    """The bootstrap page did not contain a usable client configuration."""

    status_code: int = 502  # Bad Gateway


class APIError(YTMKitError):
    """YouTube Music API error.

    Raised when the underlying API request fails.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)


class CancellationError(YTMKitError):
    """Operation was cancelled.

    Raised when a paginated fetch is cancelled via a CancelToken.
    """

    status_code: int = 499  # Client Closed Request (nginx convention)
