"""Stop flag for continuation-driven client calls."""

import threading


class CancelToken:
    """Flag shared between a caller and a running paginated client call.

    ``PaginationController`` checks the flag before every continuation
    request. Once it is set, no further page is fetched and the call raises
    ``CancellationError``; items gathered from earlier pages are discarded.
    The first page is always requested, so cancelling before the call starts
    still costs one request.

    A token stays cancelled. Reusing it makes every later call stop after its
    first page.

    Example:
        >>> token = CancelToken()
        >>> worker = threading.Thread(
        ...     target=client.get_playlist_videos, args=(playlist_id, token)
        ... )
        >>> worker.start()
        >>> token.cancel()
    """

    __slots__ = ("_flag",)

    def __init__(self) -> None:
        self._flag = threading.Event()

    def cancel(self) -> None:
        """Ask the call holding this token to stop at its next page boundary."""
        self._flag.set()

    @property
    def is_cancelled(self) -> bool:
        return self._flag.is_set()
