from .category import Category, CategoryDomainError
from .records import (
    CategoryRecord,
    CreateCategoryData,
    CreateTransactionData,
    TransactionListItemRecord,
    TransactionRecord,
    TransactionTypeField,
    UpdateCategoryData,
    as_transaction_type,
)
from .transaction import (
    MEMO_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Transaction,
    TransactionDomainError,
)

__all__ = [
    "Category",
    "Transaction",
    "CategoryDomainError",
    "TransactionDomainError",
    "MEMO_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    # Records
    "CategoryRecord",
    "CreateCategoryData",
    "CreateTransactionData",
    "TransactionListItemRecord",
    "TransactionRecord",
    "TransactionTypeField",
    "UpdateCategoryData",
    "as_transaction_type",
]
