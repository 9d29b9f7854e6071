"""In-memory repositories and shared constants for kakeibo tests."""

from datetime import datetime, timezone

from kakeibo.domain.entities import (
    Category,
    CategoryRecord,
    CreateCategoryData,
    CreateTransactionData,
    Transaction,
    TransactionListItemRecord,
    TransactionRecord,
    UpdateCategoryData,
)
from kakeibo.domain.repositories import (
    ListCategoriesQuery,
    ListCategoriesResult,
    ListTransactionsQuery,
    ListTransactionsResult,
)

CREATED_AT = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

FOOD = 1
SALARY = 2
DAILY_GOODS = 3
BONUS = 4
HOBBY = 5


class RepositoryDown(RuntimeError):
    """Stands in for a storage failure."""


class InMemoryCategoryRepository:
    def __init__(self, categories: list[CategoryRecord]) -> None:
        self.categories = {category.id: category for category in categories}
        self.fail = False
        self.find_by_ids_calls: list[list[int]] = []
        self.last_query: ListCategoriesQuery | None = None
        self._next_id = max(self.categories, default=0) + 1

    def find_by_id(self, category_id: int) -> CategoryRecord | None:
        if self.fail:
            raise RepositoryDown("category store unavailable")
        return self.categories.get(category_id)

    def find_by_ids(
        self, user_id: int, category_ids: list[int]
    ) -> list[CategoryRecord]:
        if self.fail:
            raise RepositoryDown("category store unavailable")
        self.find_by_ids_calls.append(list(category_ids))
        return [
            self.categories[i] for i in category_ids if i in self.categories
        ]

    def find_by_name(
        self, user_id: int, name: str
    ) -> CategoryRecord | None:
        if self.fail:
            raise RepositoryDown("category store unavailable")
        return next(
            (c for c in self._visible_to(user_id) if c.name == name), None
        )

    def create(self, data: CreateCategoryData) -> CategoryRecord:
        if self.fail:
            raise RepositoryDown("category store unavailable")
        record = make_category(
            self._next_id,
            data.name,
            str(data.type),
            is_default=False,
            user_id=data.user_id,
        )
        self._next_id += 1
        self.categories[record.id] = record
        return record

    def list_by_user_id(
        self, query: ListCategoriesQuery
    ) -> ListCategoriesResult:
        if self.fail:
            raise RepositoryDown("category store unavailable")
        self.last_query = query

        matches = [
            category
            for category in self._visible_to(query.user_id)
            if (query.type is None or category.type == query.type)
            and (query.include_hidden or category.is_visible)
        ]
        matches.sort(
            key=lambda c: (getattr(c, query.sort_by), c.id),
            reverse=query.order == "desc",
        )
        return ListCategoriesResult(
            items=matches[query.offset:query.offset + query.limit],
            total=len(matches),
        )

    def update(
        self, category: Category, data: UpdateCategoryData
    ) -> CategoryRecord:
        if self.fail:
            raise RepositoryDown("category store unavailable")
        changes = {
            "name": category.name.value,
            "updated_at": category.updated_at,
        }
        if data.is_visible is not None:
            changes["is_visible"] = data.is_visible
        if data.display_order is not None:
            changes["display_order"] = data.display_order
        record = self.categories[category.id].model_copy(update=changes)
        self.categories[record.id] = record
        return record

    def _visible_to(self, user_id: int) -> list[CategoryRecord]:
        return [
            category
            for category in self.categories.values()
            if category.user_id is None or category.user_id == user_id
        ]


class InMemoryTransactionRepository:
    def __init__(self) -> None:
        self.records: dict[int, TransactionRecord] = {}
        self.category_ids: dict[int, list[int]] = {}
        self.deleted: list[int] = []
        self.last_query: ListTransactionsQuery | None = None
        self.fail = False
        self._next_id = 1

    def add(self, category_ids: list[int] | None = None, **fields):
        now = fields.pop("created_at", CREATED_AT)
        record = TransactionRecord(
            id=self._next_id,
            created_at=now,
            updated_at=fields.pop("updated_at", now),
            **fields,
        )
        self._next_id += 1
        self.records[record.id] = record
        self.category_ids[record.id] = category_ids or [record.category_id]
        return record

    def create(self, data: CreateTransactionData) -> TransactionRecord:
        if self.fail:
            raise RepositoryDown("transaction store unavailable")
        return self.add(**data.model_dump())

    def find_by_id(self, transaction_id: int) -> TransactionRecord | None:
        if self.fail:
            raise RepositoryDown("transaction store unavailable")
        return self.records.get(transaction_id)

    def find_category_ids_by_transaction_id(
        self, transaction_id: int
    ) -> list[int]:
        return list(self.category_ids.get(transaction_id, []))

    def list_by_user_id(
        self, query: ListTransactionsQuery
    ) -> ListTransactionsResult:
        if self.fail:
            raise RepositoryDown("transaction store unavailable")
        self.last_query = query

        matches = [
            record
            for record in self.records.values()
            if record.user_id == query.user_id
            and (query.start_date is None or record.date >= query.start_date)
            and (query.end_date is None or record.date <= query.end_date)
            and (query.type is None or record.type == query.type)
            and (
                query.category_ids is None
                or set(query.category_ids) & set(self.category_ids[record.id])
            )
        ]
        matches.sort(
            key=lambda record: (record.date, record.id),
            reverse=query.order == "desc",
        )
        window = matches[query.offset:query.offset + query.limit]

        return ListTransactionsResult(
            items=[
                TransactionListItemRecord(
                    id=record.id,
                    user_id=record.user_id,
                    type=record.type,
                    title=record.title,
                    amount=record.amount,
                    currency_code=record.currency,
                    date=record.date,
                    category_ids=self.category_ids[record.id],
                    memo=record.memo or None,
                    created_at=record.created_at,
                    updated_at=record.updated_at,
                )
                for record in window
            ],
            total=len(matches),
        )

    def update(
        self,
        transaction: Transaction,
        category_ids: list[int] | None = None,
    ) -> TransactionRecord:
        if self.fail:
            raise RepositoryDown("transaction store unavailable")
        record = TransactionRecord(
            id=transaction.id,
            user_id=transaction.user_id,
            type=transaction.type,
            title=transaction.title,
            amount=transaction.amount.amount,
            currency=transaction.amount.currency,
            date=transaction.date.format(),
            category_id=transaction.category_id,
            memo=transaction.memo,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )
        self.records[record.id] = record
        if category_ids is not None:
            self.category_ids[record.id] = list(category_ids)
        return record

    def delete(self, transaction: Transaction) -> None:
        if self.fail:
            raise RepositoryDown("transaction store unavailable")
        self.records.pop(transaction.id)
        self.deleted.append(transaction.id)


def make_category(
    id: int,
    name: str,
    type: str,
    is_default: bool = True,
    user_id: int | None = None,
    is_visible: bool = True,
    display_order: int = 0,
) -> CategoryRecord:
    return CategoryRecord(
        id=id,
        name=name,
        type=type,
        is_default=is_default,
        user_id=user_id,
        is_visible=is_visible,
        display_order=display_order,
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )
