from .interfaces import (
    CATEGORY_SORT_FIELDS,
    CategoryRepository,
    CategorySortField,
    ListCategoriesQuery,
    ListCategoriesResult,
    ListTransactionsQuery,
    ListTransactionsResult,
    TransactionRepository,
)

__all__ = [
    "CATEGORY_SORT_FIELDS",
    "CategoryRepository",
    "CategorySortField",
    "ListCategoriesQuery",
    "ListCategoriesResult",
    "ListTransactionsQuery",
    "ListTransactionsResult",
    "TransactionRepository",
]
