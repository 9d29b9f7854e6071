"""
Pagination value object.

Limit/offset window used by transaction listings.
"""

from dataclasses import dataclass
from typing import Any

from .domain_error import DomainError

PAGINATION_MIN_LIMIT = 1
PAGINATION_MAX_LIMIT = 100
PAGINATION_MIN_OFFSET = 0
PAGINATION_MIN_PAGE = 1


class PaginationDomainError(DomainError):
    pass


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Pagination:
    """
    Limit/offset window, validated on construction.

    Raises:
        PaginationDomainError: limit is outside 1..100 or offset is
            negative.
    """

    limit: int
    offset: int

    def __post_init__(self) -> None:
        if (
            not _is_integer(self.limit)
            or not PAGINATION_MIN_LIMIT <= self.limit <= PAGINATION_MAX_LIMIT
        ):
            raise PaginationDomainError(
                f"limit must be an integer between {PAGINATION_MIN_LIMIT} "
                f"and {PAGINATION_MAX_LIMIT}"
            )
        if (
            not _is_integer(self.offset)
            or self.offset < PAGINATION_MIN_OFFSET
        ):
            raise PaginationDomainError(
                "offset must be a non-negative integer"
            )

    @classmethod
    def of(cls, limit: int, offset: int) -> "Pagination":
        return cls(limit, offset)

    @classmethod
    def from_page(cls, page: int, limit: int) -> "Pagination":
        """Convert a 1-based page number into a limit/offset window."""
        if not _is_integer(page) or page < PAGINATION_MIN_PAGE:
            raise PaginationDomainError("page must be an integer >= 1")
        if not _is_integer(limit):
            raise PaginationDomainError(
                f"limit must be an integer between {PAGINATION_MIN_LIMIT} "
                f"and {PAGINATION_MAX_LIMIT}"
            )
        return cls.of(limit, (page - 1) * limit)

    def next(self) -> "Pagination":
        return Pagination.of(self.limit, self.offset + self.limit)

    def prev(self) -> "Pagination":
        return Pagination.of(self.limit, max(self.offset - self.limit, 0))
