"""Sort order for transaction listings."""

from dataclasses import dataclass
from typing import Literal

from .domain_error import DomainError

OrderDirection = Literal["asc", "desc"]
OrderField = Literal["date", "id"]

ORDER_DIRECTIONS: tuple[OrderDirection, ...] = ("asc", "desc")


class TransactionListOrderValidationError(DomainError):
    pass


@dataclass(frozen=True)
class TransactionListOrder:
    """
    Stable ordering for transaction lists.

    date is the primary sort key and id breaks ties; the direction applies
    to both keys.
    """

    direction: OrderDirection

    @classmethod
    def from_direction(cls, direction: str) -> "TransactionListOrder":
        if direction not in ORDER_DIRECTIONS:
            raise TransactionListOrderValidationError(
                f"Order must be 'asc' or 'desc', got {direction!r}"
            )
        return cls(direction)  # type: ignore[arg-type]

    def to_composite_order(
        self,
    ) -> tuple[tuple[OrderField, OrderDirection], ...]:
        return (("date", self.direction), ("id", self.direction))
