"""
Domain layer containing account-book entities and value objects.

This layer is framework-agnostic and contains core business logic.
"""

from .entities import (
    Category,
    CategoryDomainError,
    Transaction,
    TransactionDomainError,
)
from .values import (
    CategoryName,
    DomainError,
    Money,
    Pagination,
    TransactionDate,
    TransactionListOrder,
    TransactionType,
    TransactionTypeValidationError,
    UserName,
)

__all__ = [
    # Entities
    "Category",
    "Transaction",
    # Value Objects
    "CategoryName",
    "Money",
    "Pagination",
    "TransactionDate",
    "TransactionListOrder",
    "TransactionType",
    "UserName",
    # Errors
    "DomainError",
    "CategoryDomainError",
    "TransactionDomainError",
    "TransactionTypeValidationError",
]
