"""
Money value object for account-book amounts.

Amounts are whole currency units (yen has no minor unit) paired with a
three-letter currency code.
"""

from dataclasses import dataclass
from typing import Any

from .domain_error import DomainError

DEFAULT_CURRENCY = "JPY"
CURRENCY_CODE_LENGTH = 3


class MoneyValidationError(DomainError):
    """Raised for invalid amounts, currencies or arithmetic."""


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Money:
    """
    Money value object with amount validation.

    Attributes:
        amount: Non-negative integer amount.
        currency: Upper-case ISO 4217 style code.

    Raises:
        MoneyValidationError: If amount is negative or not an integer,
            or the currency is not a three-letter code.
    """

    amount: int
    currency: str

    def __init__(self, amount: int, currency: str = DEFAULT_CURRENCY) -> None:
        if not _is_integer(amount):
            raise MoneyValidationError(
                f"Amount must be an integer: {amount!r}"
            )
        if amount < 0:
            raise MoneyValidationError(f"Amount cannot be negative: {amount}")
        if (
            not isinstance(currency, str)
            or len(currency) != CURRENCY_CODE_LENGTH
            or len(currency.strip()) != CURRENCY_CODE_LENGTH
        ):
            raise MoneyValidationError(
                f"Currency code must be {CURRENCY_CODE_LENGTH} characters: "
                f"{currency!r}"
            )

        # Use __setattr__ because of frozen=True
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", currency.upper())

    @classmethod
    def of(cls, amount: int) -> "Money":
        """Create an amount in the default currency (JPY)."""
        return cls(amount)

    @classmethod
    def of_with_currency(cls, amount: int, currency: str) -> "Money":
        """
        Create an amount in an explicit currency.

        Raises:
            MoneyValidationError: Code is not exactly three characters.
        """
        return cls(amount, currency)

    def add(self, other: "Money") -> "Money":
        self._ensure_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        self._ensure_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise MoneyValidationError(
                f"Subtraction result is negative: {self} - {other}"
            )
        return Money(result, self.currency)

    def multiply(self, factor: int) -> "Money":
        if not _is_integer(factor):
            raise MoneyValidationError(
                f"Factor must be an integer: {factor!r}"
            )
        if factor < 0:
            raise MoneyValidationError(f"Factor cannot be negative: {factor}")
        return Money(self.amount * factor, self.currency)

    def divide(self, divisor: int) -> "Money":
        """Integer division, rounding down."""
        if not _is_integer(divisor):
            raise MoneyValidationError(
                f"Divisor must be an integer: {divisor!r}"
            )
        if divisor < 1:
            raise MoneyValidationError(
                f"Divisor must be greater than zero: {divisor}"
            )
        return Money(self.amount // divisor, self.currency)

    def equals(self, other: object) -> bool:
        return self == other

    def greater_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def less_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def format(self) -> str:
        """Format as yen, e.g. ¥1,000."""
        return f"¥{self.amount:,}"

    def _ensure_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise MoneyValidationError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __mul__(self, factor: int) -> "Money":
        return self.multiply(factor)

    def __floordiv__(self, divisor: int) -> "Money":
        return self.divide(divisor)

    def __str__(self) -> str:
        return f"{self.amount:,} {self.currency}"

    def __repr__(self) -> str:
        return f"Money({self.amount}, '{self.currency}')"
