"""
Repository ports.

The domain only describes what it needs from storage; implementations live
outside this package.
"""

from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field

from kakeibo.domain.entities.category import Category
from kakeibo.domain.entities.records import (
    CategoryRecord,
    CreateCategoryData,
    CreateTransactionData,
    TransactionListItemRecord,
    TransactionRecord,
    TransactionTypeField,
    UpdateCategoryData,
)
from kakeibo.domain.entities.transaction import Transaction
from kakeibo.domain.values.transaction_list_order import OrderDirection


class ListTransactionsQuery(BaseModel):
    """Filters and window for a user's transaction listing."""

    model_config = ConfigDict(frozen=True)

    user_id: int = Field(..., gt=0)
    start_date: str | None = None
    end_date: str | None = None
    type: TransactionTypeField | None = None
    category_ids: list[int] | None = None
    order: OrderDirection = "desc"
    limit: int = Field(..., ge=1)
    offset: int = Field(default=0, ge=0)


class ListTransactionsResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: list[TransactionListItemRecord] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)


CategorySortField = Literal["name", "created_at", "display_order"]

CATEGORY_SORT_FIELDS: tuple[CategorySortField, ...] = (
    "name",
    "created_at",
    "display_order",
)


class ListCategoriesQuery(BaseModel):
    """Categories visible to a user: shared defaults plus their own."""

    model_config = ConfigDict(frozen=True)

    user_id: int = Field(..., gt=0)
    type: TransactionTypeField | None = None
    include_hidden: bool = False
    sort_by: CategorySortField = "display_order"
    order: OrderDirection = "asc"
    limit: int = Field(..., ge=1)
    offset: int = Field(default=0, ge=0)


class ListCategoriesResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: list[CategoryRecord] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)


class TransactionRepository(Protocol):
    def create(self, data: CreateTransactionData) -> TransactionRecord: ...

    def find_by_id(self, transaction_id: int) -> TransactionRecord | None: ...

    def find_category_ids_by_transaction_id(
        self, transaction_id: int
    ) -> list[int]: ...

    def list_by_user_id(
        self, query: ListTransactionsQuery
    ) -> ListTransactionsResult: ...

    def update(
        self,
        transaction: Transaction,
        category_ids: list[int] | None = None,
    ) -> TransactionRecord: ...

    def delete(self, transaction: Transaction) -> None: ...


class CategoryRepository(Protocol):
    def find_by_id(self, category_id: int) -> CategoryRecord | None: ...

    def find_by_ids(
        self, user_id: int, category_ids: list[int]
    ) -> list[CategoryRecord]: ...

    def find_by_name(
        self, user_id: int, name: str
    ) -> CategoryRecord | None: ...

    def create(self, data: CreateCategoryData) -> CategoryRecord: ...

    def list_by_user_id(
        self, query: ListCategoriesQuery
    ) -> ListCategoriesResult: ...

    def update(
        self, category: Category, data: UpdateCategoryData
    ) -> CategoryRecord: ...
