"""
List transactions use case.

Filters, orders and paginates a user's transactions, then resolves the
categories referenced by the page.
"""

from dataclasses import dataclass

from structlog import get_logger

from kakeibo.config import LedgerConfig, get_config
from kakeibo.domain.entities.records import CategoryRecord
from kakeibo.domain.repositories import (
    CategoryRepository,
    ListTransactionsQuery,
    ListTransactionsResult,
    TransactionRepository,
)
from kakeibo.domain.values.pagination import (
    Pagination,
    PaginationDomainError,
)
from kakeibo.domain.values.transaction_date import (
    TransactionDate,
    TransactionDateValidationError,
)
from kakeibo.domain.values.transaction_list_order import (
    TransactionListOrder,
)
from kakeibo.domain.values.transaction_type import (
    TransactionType,
    TransactionTypeValidationError,
)

from ..base import reraise_unexpected
from .builders import ListTransactionsBuilder, ListTransactionsOutput
from .errors import (
    InvalidDateFormatError,
    InvalidPaginationError,
    InvalidTransactionTypeError,
    UnexpectedListTransactionsError,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class ListTransactionsInput:
    user_id: int
    page: int = 1
    limit: int | None = None
    order: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    type: str | None = None
    category_ids: list[int] | None = None


class ListTransactionsUseCase:
    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
        ledger_config: LedgerConfig | None = None,
    ):
        self.transaction_repository = transaction_repository
        self.category_repository = category_repository
        self.ledger_config = ledger_config or get_config().ledger
        self.builder = ListTransactionsBuilder()

    def execute(self, data: ListTransactionsInput) -> ListTransactionsOutput:
        """
        Fetch one page of a user's transactions.

        limit and order fall back to the ledger configuration when omitted.

        Raises:
            InvalidPaginationError: page or limit is out of range.
            TransactionListOrderValidationError: order is not asc or desc.
            InvalidTransactionTypeError: type filter is not INCOME or EXPENSE.
            InvalidDateFormatError: a date filter is not YYYY-MM-DD.
            UnexpectedListTransactionsError: A repository call failed.
        """
        limit = (
            data.limit
            if data.limit is not None
            else self.ledger_config.default_page_limit
        )
        pagination = self._create_pagination(data.page, limit)
        order = TransactionListOrder.from_direction(
            data.order or self.ledger_config.default_order
        )

        query = ListTransactionsQuery(
            user_id=data.user_id,
            start_date=self._parse_date_filter(data.start_date),
            end_date=self._parse_date_filter(data.end_date),
            type=self._parse_type_filter(data.type),
            category_ids=data.category_ids,
            order=order.direction,
            limit=pagination.limit,
            offset=pagination.offset,
        )

        with reraise_unexpected(
            UnexpectedListTransactionsError, "Failed to list transactions"
        ):
            result = self.transaction_repository.list_by_user_id(query)

        categories_by_id = self._fetch_categories(data.user_id, result)
        logger.debug(
            f"Listed {len(result.items)} of {result.total} transactions "
            f"for user {data.user_id}"
        )
        return self.builder.build(
            data.page, pagination.limit, result, categories_by_id
        )

    def _create_pagination(self, page: int, limit: int) -> Pagination:
        try:
            return Pagination.from_page(page, limit)
        except PaginationDomainError as e:
            raise InvalidPaginationError(e.message) from e

    def _parse_date_filter(self, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            return TransactionDate.from_string(value).format()
        except TransactionDateValidationError as e:
            raise InvalidDateFormatError(value) from e

    def _parse_type_filter(self, value: str | None) -> TransactionType | None:
        if value is None:
            return None
        try:
            return TransactionType.from_string(value)
        except TransactionTypeValidationError as e:
            raise InvalidTransactionTypeError(value) from e

    def _fetch_categories(
        self, user_id: int, result: ListTransactionsResult
    ) -> dict[int, CategoryRecord]:
        unique_ids = list(
            dict.fromkeys(
                category_id
                for item in result.items
                for category_id in item.category_ids
            )
        )
        if not unique_ids:
            return {}

        with reraise_unexpected(
            UnexpectedListTransactionsError, "Failed to fetch categories"
        ):
            categories = self.category_repository.find_by_ids(
                user_id, unique_ids
            )
        return {category.id: category for category in categories}
