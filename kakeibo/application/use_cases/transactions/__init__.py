from .builders import (
    CategorySummary,
    ListTransactionsOutput,
    PageInfo,
    TransactionView,
    UpdateTransactionOutput,
)
from .create import CreateTransactionInput, CreateTransactionUseCase
from .delete import DeleteTransactionInput, DeleteTransactionUseCase
from .errors import (
    CategoriesNotFoundError,
    CategoryNotFoundError,
    CategoryTypeMismatchError,
    FutureTransactionDateError,
    InvalidAmountError,
    InvalidCategoryIdError,
    InvalidCategoryIdsError,
    InvalidDateFormatError,
    InvalidMemoError,
    InvalidPaginationError,
    InvalidTransactionTypeError,
    NotOwnerError,
    TransactionMemoTooLongError,
    TransactionNotFoundError,
    TransactionTitleRequiredError,
    TransactionTitleTooLongError,
    UnexpectedCreateTransactionError,
    UnexpectedDeleteTransactionError,
    UnexpectedListTransactionsError,
    UnexpectedTransactionError,
    UnexpectedUpdateTransactionError,
)
from .list import ListTransactionsInput, ListTransactionsUseCase
from .update import UpdateTransactionInput, UpdateTransactionUseCase

__all__ = [
    "CreateTransactionInput",
    "CreateTransactionUseCase",
    "ListTransactionsInput",
    "ListTransactionsUseCase",
    "UpdateTransactionInput",
    "UpdateTransactionUseCase",
    "DeleteTransactionInput",
    "DeleteTransactionUseCase",
    "CategorySummary",
    "ListTransactionsOutput",
    "PageInfo",
    "TransactionView",
    "UpdateTransactionOutput",
    "CategoriesNotFoundError",
    "CategoryNotFoundError",
    "CategoryTypeMismatchError",
    "FutureTransactionDateError",
    "InvalidAmountError",
    "InvalidCategoryIdError",
    "InvalidCategoryIdsError",
    "InvalidDateFormatError",
    "InvalidMemoError",
    "InvalidPaginationError",
    "InvalidTransactionTypeError",
    "NotOwnerError",
    "TransactionMemoTooLongError",
    "TransactionNotFoundError",
    "TransactionTitleRequiredError",
    "TransactionTitleTooLongError",
    "UnexpectedCreateTransactionError",
    "UnexpectedDeleteTransactionError",
    "UnexpectedListTransactionsError",
    "UnexpectedTransactionError",
    "UnexpectedUpdateTransactionError",
]
