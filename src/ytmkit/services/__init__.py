"""Services for ytmkit.

Public API:
    PaginationController - Seed + continuation request loop
    HasMore, Exhausted - Pagination states
    advance - Pagination transition function
"""

from ytmkit.services.pagination import (
    Exhausted,
    HasMore,
    PaginationController,
    advance,
)

__all__ = [
    "Exhausted",
    "HasMore",
    "PaginationController",
    "advance",
]
