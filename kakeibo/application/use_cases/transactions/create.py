"""
Create transaction use case.

normalise -> validate fields -> load category -> check type -> persist
"""

from dataclasses import dataclass, replace

from structlog import get_logger

from kakeibo.domain.entities.records import (
    CategoryRecord,
    CreateTransactionData,
    TransactionRecord,
    as_transaction_type,
)
from kakeibo.domain.repositories import (
    CategoryRepository,
    TransactionRepository,
)
from kakeibo.domain.values.transaction_date import TransactionDate
from kakeibo.domain.values.transaction_type import TransactionType

from ..base import reraise_unexpected
from .errors import (
    CategoryNotFoundError,
    CategoryTypeMismatchError,
    UnexpectedCreateTransactionError,
)
from .rules import (
    CategoryIdRule,
    RuleChain,
    default_field_rules,
    strip_text,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateTransactionInput:
    user_id: int
    type: TransactionType | str
    title: str
    amount: int
    date: str
    category_id: int
    memo: str | None = ""


class CreateTransactionUseCase:
    """Register a new income or expense for a user."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
        rules: RuleChain[CreateTransactionInput] | None = None,
    ):
        self.transaction_repository = transaction_repository
        self.category_repository = category_repository
        self.rules = rules or RuleChain(
            [
                *default_field_rules(required=True),
                CategoryIdRule(required=True),
            ]
        )

    def execute(self, data: CreateTransactionInput) -> TransactionRecord:
        """
        Validate and store a transaction.

        Args:
            data: Raw input from the caller.

        Returns:
            The stored transaction record.

        Raises:
            DomainError: A field is invalid, the category is missing or its
                type differs from the transaction type.
            UnexpectedCreateTransactionError: A repository call failed.
        """
        value = self.rules.check(self._normalize(data))

        transaction_type = as_transaction_type(value.type)
        transaction_date = TransactionDate.from_string(value.date)

        category = self._fetch_category(value.category_id)
        if not category.type.equals(transaction_type):
            raise CategoryTypeMismatchError(
                str(transaction_type), str(category.type)
            )

        payload = CreateTransactionData(
            user_id=value.user_id,
            type=transaction_type,
            title=value.title,
            amount=value.amount,
            date=transaction_date.format(),
            category_id=value.category_id,
            memo=value.memo,
        )

        with reraise_unexpected(
            UnexpectedCreateTransactionError, "Failed to save transaction"
        ):
            record = self.transaction_repository.create(payload)

        logger.info(
            f"Transaction {record.id} created for user {record.user_id}"
        )
        return record

    def _normalize(
        self, data: CreateTransactionInput
    ) -> CreateTransactionInput:
        return replace(
            data,
            title=strip_text(data.title),
            memo=strip_text(data.memo) if data.memo is not None else "",
        )

    def _fetch_category(self, category_id: int) -> CategoryRecord:
        with reraise_unexpected(
            UnexpectedCreateTransactionError, "Failed to fetch category"
        ):
            category = self.category_repository.find_by_id(category_id)

        if category is None:
            raise CategoryNotFoundError(category_id)
        return category
