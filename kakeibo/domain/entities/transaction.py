"""
Transaction entity (aggregate root).

Owns the business rules for a single account-book entry.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from kakeibo.domain.values.domain_error import DomainError
from kakeibo.domain.values.identity import (
    as_category_id,
    as_transaction_id,
    as_user_id,
)
from kakeibo.domain.values.money import Money
from kakeibo.domain.values.transaction_date import TransactionDate
from kakeibo.domain.values.transaction_type import TransactionType
from kakeibo.utils.datetime_helpers import utc_now

from .records import TransactionTypeField, as_transaction_type

TITLE_MAX_LENGTH = 100
MEMO_MAX_LENGTH = 500


class TransactionDomainError(DomainError):
    pass


def _validated_title(title: str) -> str:
    if not title or not title.strip():
        raise TransactionDomainError("Title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise TransactionDomainError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters"
        )
    return title.strip()


def _validated_amount(amount: Money) -> Money:
    if amount.is_zero():
        raise TransactionDomainError("Amount must be greater than zero")
    return amount


def _validated_date(date: TransactionDate) -> TransactionDate:
    if date.is_future():
        raise TransactionDomainError(
            f"Transactions cannot be dated in the future: {date}"
        )
    return date


def _validated_memo(memo: str) -> str:
    if len(memo) > MEMO_MAX_LENGTH:
        raise TransactionDomainError(
            f"Memo must be at most {MEMO_MAX_LENGTH} characters"
        )
    return memo.strip()


class Transaction(BaseModel):
    """
    Transaction domain entity.

    Attributes:
        id: Transaction identifier.
        user_id: Owner of the transaction.
        type: Income or expense.
        title: Short label, 1-100 characters.
        amount: Positive amount.
        date: Day the transaction happened; never in the future.
        category_id: Primary category.
        memo: Free text, up to 500 characters.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., gt=0)
    user_id: int = Field(..., gt=0)
    type: TransactionTypeField
    title: str
    amount: InstanceOf[Money]
    date: InstanceOf[TransactionDate]
    category_id: int = Field(..., gt=0)
    memo: str = ""
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: int,
        user_id: int,
        type: TransactionType | str,
        title: str,
        amount: Money,
        date: TransactionDate,
        category_id: int,
        memo: str = "",
    ) -> "Transaction":
        """
        Create a new transaction, enforcing every business rule.

        Raises:
            TransactionDomainError: Title, amount, date or memo is invalid.
            TransactionTypeValidationError: type is not INCOME or EXPENSE.
            IdentityValidationError: An identifier is not a positive int.
        """
        now = utc_now()
        return cls(
            id=as_transaction_id(id),
            user_id=as_user_id(user_id),
            type=as_transaction_type(type),
            title=_validated_title(title),
            amount=_validated_amount(amount),
            date=_validated_date(date),
            category_id=as_category_id(category_id),
            memo=_validated_memo(memo),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: int,
        user_id: int,
        type: TransactionType | str,
        title: str,
        amount: Money,
        date: TransactionDate,
        category_id: int,
        memo: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Transaction":
        """Rebuild a stored transaction without re-running business rules."""
        return cls(
            id=as_transaction_id(id),
            user_id=as_user_id(user_id),
            type=as_transaction_type(type),
            title=title,
            amount=amount,
            date=date,
            category_id=as_category_id(category_id),
            memo=memo,
            created_at=created_at,
            updated_at=updated_at,
        )

    def update_title(self, new_title: str) -> None:
        self.title = _validated_title(new_title)
        self._touch()

    def update_amount(self, new_amount: Money) -> None:
        self.amount = _validated_amount(new_amount)
        self._touch()

    def update_date(self, new_date: TransactionDate) -> None:
        self.date = _validated_date(new_date)
        self._touch()

    def update_category(self, new_category_id: int) -> None:
        self.category_id = as_category_id(new_category_id)
        self._touch()

    def update_memo(self, new_memo: str) -> None:
        self.memo = _validated_memo(new_memo)
        self._touch()

    def delete(self) -> None:
        """Mark as logically deleted."""
        self._touch()

    def is_income(self) -> bool:
        return self.type.is_income()

    def is_expense(self) -> bool:
        return self.type.is_expense()

    def is_in_month(self, target: TransactionDate) -> bool:
        return self.date.is_same_month(target)

    def is_in_year(self, target: TransactionDate) -> bool:
        return self.date.is_same_year(target)

    def _touch(self) -> None:
        self.updated_at = utc_now()
