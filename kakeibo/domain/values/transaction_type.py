"""
TransactionType value object.

Represents the direction of a transaction: money coming in (INCOME) or
going out (EXPENSE). All raw text enters through from_string().
"""

from dataclasses import dataclass
from typing import ClassVar, Literal

from .domain_error import DomainError

TransactionTypeValue = Literal["INCOME", "EXPENSE"]


class TransactionTypeValidationError(DomainError):
    """Raised when text is not one of the accepted transaction types."""


@dataclass(frozen=True)
class TransactionType:
    """
    Immutable wrapper around the closed set {INCOME, EXPENSE}.

    Attributes:
        value: The tag held by this instance.

    Raises:
        TransactionTypeValidationError: If value is outside the closed set.
    """

    INCOME: ClassVar[TransactionTypeValue] = "INCOME"
    EXPENSE: ClassVar[TransactionTypeValue] = "EXPENSE"

    value: TransactionTypeValue

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or self.value not in self.values():
            raise TransactionTypeValidationError(
                "Transaction type must be INCOME or EXPENSE, "
                f"got {self.value!r}"
            )

    @classmethod
    def values(cls) -> tuple[TransactionTypeValue, ...]:
        """Accepted tags in declaration order."""
        return (cls.INCOME, cls.EXPENSE)

    @classmethod
    def income(cls) -> "TransactionType":
        return cls(cls.INCOME)

    @classmethod
    def expense(cls) -> "TransactionType":
        return cls(cls.EXPENSE)

    @classmethod
    def from_string(cls, text: str) -> "TransactionType":
        """
        Parse externally supplied text.

        Matching is exact: no trimming and no case folding.

        Args:
            text: Raw tag, e.g. from a request body or a stored column.

        Returns:
            Instance equal to income() or expense().

        Raises:
            TransactionTypeValidationError: Text is empty or not a valid tag.
        """
        return cls(text)  # type: ignore[arg-type]

    def is_income(self) -> bool:
        return self.value == self.INCOME

    def is_expense(self) -> bool:
        return self.value == self.EXPENSE

    def equals(self, other: object) -> bool:
        return isinstance(other, TransactionType) and self.value == other.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"TransactionType('{self.value}')"
