"""Continuation-based pagination."""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

from ytmkit.exceptions import CancellationError
from ytmkit.models.cancel import CancelToken
from ytmkit.transport.protocols import JsonDict, RequestFacade
from ytmkit.utils.traverse import traverse_list

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")

# Query parameter carrying the token of the next page
CONTINUATION_PARAM = "continuation"


@dataclass(frozen=True)
class HasMore:
    """Another page can be fetched with ``token``."""

    token: str


@dataclass(frozen=True)
class Exhausted:
    """No further pages."""


PageState = HasMore | Exhausted


def advance(page: Any, seen: set[str]) -> PageState:
    """Decide whether another page follows ``page``.

    The first non-empty ``continuation`` string in the page is the token of
    the next page. A token that was already requested ends the listing, so a
    server repeating itself cannot cause an endless loop.
    """
    token = next(
        (t for t in traverse_list(page, "continuation") if isinstance(t, str) and t),
        None,
    )
    if token is None:
        return Exhausted()
    if token in seen:
        logger.debug("Continuation token repeated, stopping")
        return Exhausted()
    return HasMore(token)


class PaginationController:
    """Drives a seed request and its continuation requests.

    Pages are fetched strictly one after another. The optional cancel token is
    checked before every continuation request.
    """

    def __init__(
        self,
        transport: RequestFacade,
        cancel_token: CancelToken | None = None,
    ) -> None:
        self._transport = transport
        self._cancel_token = cancel_token

    def _check_cancellation(self) -> None:
        """Raise CancellationError if the cancel token was set."""
        if self._cancel_token and self._cancel_token.is_cancelled:
            raise CancellationError("Operation cancelled")

    def pages(
        self,
        endpoint: str,
        body: JsonDict,
        max_pages: int | None = None,
    ) -> Iterator[JsonDict]:
        """Yield the seed page, then every continuation page.

        Args:
            endpoint: InnerTube endpoint of the seed request.
            body: Body of the seed request. Continuations send an empty body.
            max_pages: Stop after this many pages (seed included).

        Raises:
            CancellationError: If cancelled before a continuation request.
        """
        seen: set[str] = set()
        page = self._transport.request(endpoint, body)
        fetched = 1
        yield page

        while True:
            match advance(page, seen):
                case Exhausted():
                    logger.debug("Listing exhausted after %d page(s)", fetched)
                    return
                case HasMore(token=token):
                    if max_pages is not None and fetched >= max_pages:
                        logger.debug("Page limit %d reached", max_pages)
                        return
                    self._check_cancellation()
                    seen.add(token)
                    page = self._transport.request(
                        endpoint, {}, {CONTINUATION_PARAM: token}
                    )
                    fetched += 1
                    yield page

    def collect(
        self,
        endpoint: str,
        body: JsonDict,
        first: Callable[[JsonDict], list[ItemT]],
        rest: Callable[[JsonDict], list[ItemT]] | None = None,
        max_pages: int | None = None,
    ) -> list[ItemT]:
        """Accumulate the items of every page in fetch order.

        Args:
            endpoint: InnerTube endpoint of the seed request.
            body: Body of the seed request.
            first: Extracts the items of the seed page.
            rest: Extracts the items of continuation pages. Defaults to ``first``.
            max_pages: Stop after this many pages (seed included).

        Returns:
            All items, without reordering or de-duplication.

        Raises:
            CancellationError: If cancelled; items gathered so far are dropped.
        """
        items: list[ItemT] = []
        for index, page in enumerate(self.pages(endpoint, body, max_pages)):
            extract = first if index == 0 or rest is None else rest
            items.extend(extract(page))
        return items
