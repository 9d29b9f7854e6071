"""
Input validation rules for transaction use cases.

Each rule inspects one field of the normalised input. Fields left as None
were not supplied; they are skipped on partial updates and rejected where
the rule is required.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, TypeVar

from structlog import get_logger

from kakeibo.domain.entities.transaction import (
    MEMO_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)
from kakeibo.domain.values.domain_error import DomainError
from kakeibo.domain.values.transaction_date import (
    TransactionDate,
    TransactionDateValidationError,
)
from kakeibo.domain.values.transaction_type import (
    TransactionType,
    TransactionTypeValidationError,
)

from .errors import (
    FutureTransactionDateError,
    InvalidAmountError,
    InvalidCategoryIdError,
    InvalidCategoryIdsError,
    InvalidDateFormatError,
    InvalidMemoError,
    InvalidTransactionTypeError,
    TransactionMemoTooLongError,
    TransactionTitleRequiredError,
    TransactionTitleTooLongError,
)

T = TypeVar("T")

logger = get_logger(__name__)

MIN_AMOUNT = 1


class BaseValidationRule(ABC, Generic[T]):
    """Base class for all input validation rules."""

    @abstractmethod
    def validate(self, entity: T) -> DomainError | None:
        """
        Validate entity against rule.

        Returns:
            None when the entity passes, otherwise the error to raise.
        """
        pass


class RuleChain(Generic[T]):
    """Runs rules in order and raises the first failure."""

    def __init__(self, rules: Sequence[BaseValidationRule[T]]) -> None:
        self.rules = list(rules)

    def check(self, entity: T) -> T:
        for rule in self.rules:
            error = rule.validate(entity)
            if error is not None:
                logger.debug(
                    f"{type(rule).__name__} rejected input: {error.message}"
                )
                raise error
        return entity


class FieldRule(BaseValidationRule[Any]):
    """
    Rule over a single input field.

    A None field was not supplied. It passes unless the rule is required,
    in which case missing() supplies the error.
    """

    field: str

    def __init__(self, required: bool = False) -> None:
        self.required = required

    def validate(self, entity: Any) -> DomainError | None:
        value = getattr(entity, self.field)
        if value is None:
            return self.missing() if self.required else None
        return self.check(value)

    @abstractmethod
    def missing(self) -> DomainError:
        pass

    @abstractmethod
    def check(self, value: Any) -> DomainError | None:
        pass


class TransactionTypeRule(FieldRule):
    field = "type"

    def missing(self) -> DomainError:
        return InvalidTransactionTypeError(None)

    def check(self, value: Any) -> DomainError | None:
        if isinstance(value, TransactionType):
            return None
        try:
            TransactionType.from_string(value)
        except TransactionTypeValidationError:
            return InvalidTransactionTypeError(value)
        return None


class TitleRule(FieldRule):
    field = "title"

    def missing(self) -> DomainError:
        return TransactionTitleRequiredError()

    def check(self, value: Any) -> DomainError | None:
        if not isinstance(value, str) or len(value) == 0:
            return TransactionTitleRequiredError()
        if len(value) > TITLE_MAX_LENGTH:
            return TransactionTitleTooLongError(TITLE_MAX_LENGTH)
        return None


class MemoRule(FieldRule):
    """Memo is optional even on create."""

    field = "memo"

    def __init__(self) -> None:
        super().__init__(required=False)

    def missing(self) -> DomainError:
        return InvalidMemoError(None)

    def check(self, value: Any) -> DomainError | None:
        if not isinstance(value, str):
            return InvalidMemoError(value)
        if len(value) > MEMO_MAX_LENGTH:
            return TransactionMemoTooLongError(MEMO_MAX_LENGTH)
        return None


class AmountRule(FieldRule):
    field = "amount"

    def missing(self) -> DomainError:
        return InvalidAmountError(None)

    def check(self, value: Any) -> DomainError | None:
        if (
            not isinstance(value, int)
            or isinstance(value, bool)
            or value < MIN_AMOUNT
        ):
            return InvalidAmountError(value)
        return None


class DateRule(FieldRule):
    """Date must parse as YYYY-MM-DD and must not be in the future."""

    field = "date"

    def missing(self) -> DomainError:
        return InvalidDateFormatError(None)

    def check(self, value: Any) -> DomainError | None:
        if not isinstance(value, str):
            return InvalidDateFormatError(value)
        try:
            transaction_date = TransactionDate.from_string(value)
        except TransactionDateValidationError:
            return InvalidDateFormatError(value)
        if transaction_date.is_future():
            return FutureTransactionDateError(value)
        return None


class CategoryIdRule(FieldRule):
    field = "category_id"

    def missing(self) -> DomainError:
        return InvalidCategoryIdError(None)

    def check(self, value: Any) -> DomainError | None:
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            return InvalidCategoryIdError(value)
        return None


class CategoryIdsRule(BaseValidationRule[Any]):
    def validate(self, entity: Any) -> DomainError | None:
        if entity.category_ids is not None and len(entity.category_ids) == 0:
            return InvalidCategoryIdsError()
        return None


def default_field_rules(
    required: bool = False,
) -> list[BaseValidationRule[Any]]:
    """
    Rules shared by create and update, in reporting order.

    Create passes required=True so that type, title, amount and date must
    be present; update leaves them optional.
    """
    return [
        TransactionTypeRule(required),
        TitleRule(required),
        MemoRule(),
        AmountRule(required),
        DateRule(required),
    ]


def strip_text(value: Any) -> Any:
    """Trim strings and leave anything else for the rules to reject."""
    return value.strip() if isinstance(value, str) else value
