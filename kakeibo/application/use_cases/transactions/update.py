"""
Update transaction use case (partial update).

Only supplied fields are validated and changed. When category_ids is given
it replaces the stored set and its first id becomes the primary category.
"""

from dataclasses import dataclass, replace

from structlog import get_logger

from kakeibo.domain.entities.records import (
    CategoryRecord,
    TransactionRecord,
    as_transaction_type,
)
from kakeibo.domain.entities.transaction import Transaction
from kakeibo.domain.repositories import (
    CategoryRepository,
    TransactionRepository,
)
from kakeibo.domain.values.money import Money
from kakeibo.domain.values.transaction_date import TransactionDate
from kakeibo.domain.values.transaction_type import TransactionType

from ..base import reraise_unexpected
from .builders import UpdateTransactionBuilder, UpdateTransactionOutput
from .errors import (
    CategoriesNotFoundError,
    CategoryTypeMismatchError,
    InvalidCategoryIdsError,
    NotOwnerError,
    TransactionNotFoundError,
    UnexpectedUpdateTransactionError,
)
from .rules import (
    CategoryIdsRule,
    RuleChain,
    default_field_rules,
    strip_text,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpdateTransactionInput:
    user_id: int
    id: int
    type: TransactionType | str | None = None
    title: str | None = None
    amount: int | None = None
    date: str | None = None
    category_ids: list[int] | None = None
    memo: str | None = None


class UpdateTransactionUseCase:
    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
        rules: RuleChain[UpdateTransactionInput] | None = None,
    ):
        self.transaction_repository = transaction_repository
        self.category_repository = category_repository
        self.rules = rules or RuleChain(
            default_field_rules() + [CategoryIdsRule()]
        )
        self.builder = UpdateTransactionBuilder()

    def execute(self, data: UpdateTransactionInput) -> UpdateTransactionOutput:
        """
        Apply a partial update to a transaction owned by the caller.

        Raises:
            DomainError: A supplied field is invalid, the transaction is
                missing or owned by someone else, a category is missing or
                does not match the resulting transaction type.
            UnexpectedUpdateTransactionError: A repository call failed.
        """
        value = self.rules.check(self._normalize(data))

        current = self._fetch_current(value.id)
        if current.user_id != value.user_id:
            raise NotOwnerError()

        category_ids = self._resolve_category_ids(value)
        categories = self._fetch_categories(value.user_id, category_ids)

        resolved_type = (
            as_transaction_type(value.type)
            if value.type is not None
            else current.type
        )
        for category in categories:
            if not category.type.equals(resolved_type):
                raise CategoryTypeMismatchError(
                    str(resolved_type), str(category.type)
                )

        transaction = self._apply_changes(
            value, current, resolved_type, category_ids[0]
        )

        with reraise_unexpected(
            UnexpectedUpdateTransactionError, "Failed to update transaction"
        ):
            record = self.transaction_repository.update(
                transaction, category_ids=value.category_ids
            )

        logger.info(f"Transaction {record.id} updated by user {value.user_id}")
        return self.builder.build(record, category_ids, categories)

    def _normalize(
        self, data: UpdateTransactionInput
    ) -> UpdateTransactionInput:
        return replace(
            data,
            title=strip_text(data.title),
            memo=strip_text(data.memo),
        )

    def _fetch_current(self, transaction_id: int) -> TransactionRecord:
        with reraise_unexpected(
            UnexpectedUpdateTransactionError, "Failed to fetch transaction"
        ):
            current = self.transaction_repository.find_by_id(transaction_id)

        if current is None:
            raise TransactionNotFoundError(transaction_id)
        return current

    def _resolve_category_ids(
        self, value: UpdateTransactionInput
    ) -> list[int]:
        if value.category_ids is not None:
            return list(value.category_ids)

        with reraise_unexpected(
            UnexpectedUpdateTransactionError,
            "Failed to fetch transaction categories",
        ):
            repository = self.transaction_repository
            stored = repository.find_category_ids_by_transaction_id(value.id)

        if not stored:
            raise InvalidCategoryIdsError()
        return list(stored)

    def _fetch_categories(
        self, user_id: int, category_ids: list[int]
    ) -> list[CategoryRecord]:
        with reraise_unexpected(
            UnexpectedUpdateTransactionError, "Failed to fetch categories"
        ):
            categories = self.category_repository.find_by_ids(
                user_id, category_ids
            )

        found = {category.id for category in categories}
        missing = [i for i in category_ids if i not in found]
        if missing:
            raise CategoriesNotFoundError(missing)
        return categories

    def _apply_changes(
        self,
        value: UpdateTransactionInput,
        current: TransactionRecord,
        resolved_type: TransactionType,
        primary_category_id: int,
    ) -> Transaction:
        amount = Money.of_with_currency(
            value.amount if value.amount is not None else current.amount,
            current.currency,
        )
        date = TransactionDate.from_string(
            value.date if value.date is not None else current.date
        )

        # the entity holds a single category; the first id is the primary one
        transaction = Transaction.reconstruct(
            current.id,
            current.user_id,
            resolved_type,
            value.title if value.title is not None else current.title,
            amount,
            date,
            current.category_id,
            value.memo if value.memo is not None else current.memo,
            current.created_at,
            current.updated_at,
        )

        if primary_category_id != current.category_id:
            transaction.update_category(primary_category_id)
        if value.title is not None:
            transaction.update_title(value.title)
        if value.amount is not None:
            transaction.update_amount(amount)
        if value.date is not None:
            transaction.update_date(date)
        if value.memo is not None:
            transaction.update_memo(value.memo)
        return transaction
