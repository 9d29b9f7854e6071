"""
Output DTOs for the transaction use cases.

Builders join repository records with their categories and turn timestamps
into ISO 8601 strings.
"""

from math import ceil
from typing import Iterable, Mapping

from pydantic import BaseModel, Field

from kakeibo.domain.entities.records import (
    CategoryRecord,
    TransactionListItemRecord,
    TransactionRecord,
    TransactionTypeField,
)
from kakeibo.domain.repositories import ListTransactionsResult
from kakeibo.utils.datetime_helpers import to_iso_string


class CategorySummary(BaseModel):
    id: int
    name: str
    type: TransactionTypeField
    is_default: bool


class TransactionView(BaseModel):
    id: int
    user_id: int
    type: TransactionTypeField
    title: str
    amount: int
    currency_code: str
    date: str
    categories: list[CategorySummary] = Field(default_factory=list)
    memo: str | None = None
    created_at: str
    updated_at: str


class PageInfo(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool


class ListTransactionsOutput(BaseModel):
    transactions: list[TransactionView]
    pagination: PageInfo


class UpdateTransactionOutput(BaseModel):
    transaction: TransactionView


def calc_total_pages(total: int, limit: int) -> int:
    return 0 if total == 0 else ceil(total / limit)


def summarize_categories(
    category_ids: Iterable[int],
    categories_by_id: Mapping[int, CategoryRecord],
) -> list[CategorySummary]:
    """Keep the order of category_ids and drop ids with no record."""
    return [
        CategorySummary(
            id=category.id,
            name=category.name,
            type=category.type,
            is_default=category.is_default,
        )
        for category in (categories_by_id.get(i) for i in category_ids)
        if category is not None
    ]


class ListTransactionsBuilder:
    def build(
        self,
        page: int,
        limit: int,
        result: ListTransactionsResult,
        categories_by_id: Mapping[int, CategoryRecord],
    ) -> ListTransactionsOutput:
        total_pages = calc_total_pages(result.total, limit)

        return ListTransactionsOutput(
            transactions=[
                self._build_item(item, categories_by_id)
                for item in result.items
            ],
            pagination=PageInfo(
                total=result.total,
                page=page,
                limit=limit,
                total_pages=total_pages,
                has_next=page < total_pages,
                has_prev=page > 1,
            ),
        )

    def _build_item(
        self,
        item: TransactionListItemRecord,
        categories_by_id: Mapping[int, CategoryRecord],
    ) -> TransactionView:
        return TransactionView(
            id=item.id,
            user_id=item.user_id,
            type=item.type,
            title=item.title,
            amount=item.amount,
            currency_code=item.currency_code,
            date=item.date,
            categories=summarize_categories(
                item.category_ids, categories_by_id
            ),
            memo=item.memo,
            created_at=to_iso_string(item.created_at),
            updated_at=to_iso_string(item.updated_at),
        )


class UpdateTransactionBuilder:
    def build(
        self,
        record: TransactionRecord,
        category_ids: list[int],
        categories: list[CategoryRecord],
    ) -> UpdateTransactionOutput:
        categories_by_id = {category.id: category for category in categories}

        return UpdateTransactionOutput(
            transaction=TransactionView(
                id=record.id,
                user_id=record.user_id,
                type=record.type,
                title=record.title,
                amount=record.amount,
                currency_code=record.currency,
                date=record.date,
                categories=summarize_categories(
                    category_ids, categories_by_id
                ),
                memo=record.memo or None,
                created_at=to_iso_string(record.created_at),
                updated_at=to_iso_string(record.updated_at),
            )
        )
