from dataclasses import dataclass

from structlog import get_logger

from kakeibo.domain.entities.records import TransactionRecord
from kakeibo.domain.entities.transaction import Transaction
from kakeibo.domain.repositories import TransactionRepository
from kakeibo.domain.values.money import Money
from kakeibo.domain.values.transaction_date import TransactionDate

from ..base import reraise_unexpected
from .errors import (
    NotOwnerError,
    TransactionNotFoundError,
    UnexpectedDeleteTransactionError,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeleteTransactionInput:
    user_id: int
    id: int


class DeleteTransactionUseCase:
    """Logically delete a transaction owned by the caller."""

    def __init__(self, transaction_repository: TransactionRepository):
        self.transaction_repository = transaction_repository

    def execute(self, data: DeleteTransactionInput) -> dict[str, bool]:
        with reraise_unexpected(
            UnexpectedDeleteTransactionError,
            "Failed to fetch transaction",
        ):
            current = self.transaction_repository.find_by_id(data.id)

        if current is None:
            raise TransactionNotFoundError(data.id)
        if current.user_id != data.user_id:
            raise NotOwnerError()

        with reraise_unexpected(
            UnexpectedDeleteTransactionError,
            "Failed to delete transaction",
        ):
            transaction = self._to_entity(current)
            transaction.delete()
            self.transaction_repository.delete(transaction)

        logger.info(f"Transaction {data.id} deleted by user {data.user_id}")
        return {"deleted": True}

    def _to_entity(self, record: TransactionRecord) -> Transaction:
        return Transaction.reconstruct(
            record.id,
            record.user_id,
            record.type,
            record.title,
            Money.of_with_currency(record.amount, record.currency),
            TransactionDate.from_string(record.date),
            record.category_id,
            record.memo,
            record.created_at,
            record.updated_at,
        )
