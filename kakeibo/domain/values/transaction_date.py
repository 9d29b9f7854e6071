"""
TransactionDate value object.

A calendar date (no time, no timezone) on which a transaction happened.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Any

from .domain_error import DomainError

YEAR_MIN = 1900
YEAR_MAX = 2100
MONTH_MIN = 1
MONTH_MAX = 12
DAY_MIN = 1
DAY_MAX = 31

DATE_SEPARATOR = "-"
DATE_PARTS_COUNT = 3
DATE_PART_PATTERN = re.compile(r"[0-9]+")


class TransactionDateValidationError(DomainError):
    """Raised for out-of-range, non-existent or malformed dates."""


def _ensure(condition: bool, message: str) -> None:
    if not condition:
        raise TransactionDateValidationError(message)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, order=True)
class TransactionDate:
    """
    Immutable year/month/day triple, validated on construction.

    Raises:
        TransactionDateValidationError: Any part is out of range or the
            date does not exist (e.g. February 30th).
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _ensure(
            _is_integer(self.year) and YEAR_MIN <= self.year <= YEAR_MAX,
            f"Year must be an integer between {YEAR_MIN} and {YEAR_MAX}",
        )
        _ensure(
            _is_integer(self.month) and MONTH_MIN <= self.month <= MONTH_MAX,
            f"Month must be an integer between {MONTH_MIN} and {MONTH_MAX}",
        )
        _ensure(
            _is_integer(self.day) and DAY_MIN <= self.day <= DAY_MAX,
            f"Day must be an integer between {DAY_MIN} and {DAY_MAX}",
        )
        try:
            date(self.year, self.month, self.day)
        except ValueError as e:
            raise TransactionDateValidationError(
                f"Invalid date: {self.year}-{self.month}-{self.day}"
            ) from e

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "TransactionDate":
        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: date) -> "TransactionDate":
        return cls.of(value.year, value.month, value.day)

    @classmethod
    def from_string(cls, text: str) -> "TransactionDate":
        """
        Parse an ISO 8601 calendar date (YYYY-MM-DD).

        Only ASCII digits are accepted in each part.

        Raises:
            TransactionDateValidationError: Text is not three digit groups
                or the parts do not form a valid date.
        """
        _ensure(
            isinstance(text, str),
            f"Date must be in YYYY-MM-DD format: {text!r}",
        )
        parts = text.split(DATE_SEPARATOR)
        _ensure(
            len(parts) == DATE_PARTS_COUNT
            and all(DATE_PART_PATTERN.fullmatch(part) for part in parts),
            f"Date must be in YYYY-MM-DD format: {text!r}",
        )
        year, month, day = (int(part) for part in parts)

        return cls.of(year, month, day)

    @classmethod
    def today(cls) -> "TransactionDate":
        return cls.from_date(date.today())

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def format(self) -> str:
        """Format as YYYY-MM-DD."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def format_japanese(self) -> str:
        """Format as YYYY年M月D日."""
        return f"{self.year}年{self.month}月{self.day}日"

    def equals(self, other: object) -> bool:
        return self == other

    def is_same_month(self, other: "TransactionDate") -> bool:
        return self.year == other.year and self.month == other.month

    def is_same_year(self, other: "TransactionDate") -> bool:
        return self.year == other.year

    def is_after(self, other: "TransactionDate") -> bool:
        return self.to_date() > other.to_date()

    def is_before(self, other: "TransactionDate") -> bool:
        return self.to_date() < other.to_date()

    def is_future(self) -> bool:
        return self.is_after(TransactionDate.today())

    def is_past(self) -> bool:
        return self.is_before(TransactionDate.today())

    def __str__(self) -> str:
        return self.format()
