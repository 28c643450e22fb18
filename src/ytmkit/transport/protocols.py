"""Transport protocol for dependency injection."""

from typing import Any, Protocol

JsonDict = dict[str, Any]


class RequestFacade(Protocol):
    """Protocol for InnerTube request backends.

    This protocol enables dependency injection and testing.
    Implement this protocol to create fake transports for testing.

    Implementations own HTTP, authentication and session state; callers
    only see decoded JSON documents.
    """

    def request(
        self,
        endpoint: str,
        body: JsonDict | None = None,
        query: dict[str, str] | None = None,
    ) -> JsonDict:
        """POST ``body`` to ``endpoint`` and return the decoded JSON document.

        Args:
            endpoint: InnerTube endpoint name (``browse``, ``search``...).
            body: Request body merged over the client context.
            query: Extra query string parameters (e.g. ``continuation``).
        """
        ...
