"""
Output DTOs for the category use cases, plus the record/entity mapping.
"""

from pydantic import BaseModel, Field

from kakeibo.domain.entities.category import Category
from kakeibo.domain.entities.records import (
    CategoryRecord,
    TransactionTypeField,
)
from kakeibo.domain.repositories import ListCategoriesResult
from kakeibo.domain.values.category_name import CategoryName
from kakeibo.utils.datetime_helpers import to_iso_string

from ..transactions.builders import calc_total_pages


class CategoryView(BaseModel):
    id: int
    name: str
    type: TransactionTypeField
    is_default: bool
    is_visible: bool
    display_order: int
    created_at: str
    updated_at: str


class CategoryOutput(BaseModel):
    category: CategoryView


class CategoryPageInfo(BaseModel):
    page: int
    per_page: int
    total_pages: int


class ListCategoriesOutput(BaseModel):
    items: list[CategoryView] = Field(default_factory=list)
    page_info: CategoryPageInfo
    total: int


def to_entity(record: CategoryRecord) -> Category:
    return Category.reconstruct(
        record.id,
        CategoryName.create(record.name),
        record.type,
        record.is_default,
        record.user_id,
        record.created_at,
        record.updated_at,
    )


class CategoryBuilder:
    def build(self, record: CategoryRecord) -> CategoryOutput:
        return CategoryOutput(category=self.build_view(record))

    def build_list(
        self, page: int, per_page: int, result: ListCategoriesResult
    ) -> ListCategoriesOutput:
        return ListCategoriesOutput(
            items=[self.build_view(record) for record in result.items],
            page_info=CategoryPageInfo(
                page=page,
                per_page=per_page,
                total_pages=calc_total_pages(result.total, per_page),
            ),
            total=result.total,
        )

    def build_view(self, record: CategoryRecord) -> CategoryView:
        return CategoryView(
            id=record.id,
            name=record.name,
            type=record.type,
            is_default=record.is_default,
            is_visible=record.is_visible,
            display_order=record.display_order,
            created_at=to_iso_string(record.created_at),
            updated_at=to_iso_string(record.updated_at),
        )
