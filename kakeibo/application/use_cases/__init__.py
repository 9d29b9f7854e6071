from .categories import (
    CreateCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from .transactions import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    ListTransactionsUseCase,
    UpdateTransactionUseCase,
)

__all__ = [
    "CreateCategoryUseCase",
    "GetCategoryUseCase",
    "ListCategoriesUseCase",
    "UpdateCategoryUseCase",
    "CreateTransactionUseCase",
    "DeleteTransactionUseCase",
    "ListTransactionsUseCase",
    "UpdateTransactionUseCase",
]
