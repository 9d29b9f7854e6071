"""
List categories use case.

Pages through the shared defaults plus the caller's own categories.
"""

from dataclasses import dataclass

from structlog import get_logger

from kakeibo.config import LedgerConfig, get_config
from kakeibo.domain.repositories import (
    CATEGORY_SORT_FIELDS,
    CategoryRepository,
    ListCategoriesQuery,
)
from kakeibo.domain.values.pagination import (
    Pagination,
    PaginationDomainError,
)
from kakeibo.domain.values.transaction_list_order import ORDER_DIRECTIONS
from kakeibo.domain.values.transaction_type import TransactionType

from ..base import reraise_unexpected
from ..transactions.errors import InvalidPaginationError
from .builders import CategoryBuilder, ListCategoriesOutput
from .create import parse_category_type
from .errors import InvalidSortParameterError, UnexpectedListCategoriesError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ListCategoriesInput:
    user_id: int
    page: int = 1
    per_page: int | None = None
    sort_by: str = "display_order"
    order: str = "asc"
    type: TransactionType | str | None = None
    include_hidden: bool = False


class ListCategoriesUseCase:
    def __init__(
        self,
        category_repository: CategoryRepository,
        ledger_config: LedgerConfig | None = None,
    ):
        self.category_repository = category_repository
        self.ledger_config = ledger_config or get_config().ledger
        self.builder = CategoryBuilder()

    def execute(self, data: ListCategoriesInput) -> ListCategoriesOutput:
        """
        Fetch one page of the categories visible to a user.

        per_page falls back to the ledger configuration when omitted.
        Hidden categories are left out unless include_hidden is set.

        Raises:
            InvalidPaginationError: page or per_page is out of range.
            InvalidSortParameterError: sort_by or order is unknown.
            InvalidCategoryTypeError: type filter is not INCOME or EXPENSE.
            UnexpectedListCategoriesError: A repository call failed.
        """
        per_page = (
            data.per_page
            if data.per_page is not None
            else self.ledger_config.default_category_page_limit
        )
        try:
            pagination = Pagination.from_page(data.page, per_page)
        except PaginationDomainError as e:
            raise InvalidPaginationError(e.message) from e

        if data.sort_by not in CATEGORY_SORT_FIELDS:
            raise InvalidSortParameterError("sort_by", data.sort_by)
        if data.order not in ORDER_DIRECTIONS:
            raise InvalidSortParameterError("order", data.order)

        query = ListCategoriesQuery(
            user_id=data.user_id,
            type=(
                parse_category_type(data.type)
                if data.type is not None
                else None
            ),
            include_hidden=data.include_hidden,
            sort_by=data.sort_by,
            order=data.order,
            limit=pagination.limit,
            offset=pagination.offset,
        )

        with reraise_unexpected(
            UnexpectedListCategoriesError, "Failed to list categories"
        ):
            result = self.category_repository.list_by_user_id(query)

        logger.debug(
            f"Listed {len(result.items)} of {result.total} categories "
            f"for user {data.user_id}"
        )
        return self.builder.build_list(data.page, pagination.limit, result)
