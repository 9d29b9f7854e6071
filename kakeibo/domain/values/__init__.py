from .category_name import (
    CATEGORY_NAME_MAX_LENGTH,
    CategoryName,
    CategoryNameValidationError,
)
from .domain_error import DomainError
from .identity import (
    CategoryId,
    CurrencyId,
    IdentityValidationError,
    TransactionId,
    TransactionTypeId,
    UserId,
    as_category_id,
    as_transaction_id,
    as_user_id,
    create_id,
)
from .money import Money, MoneyValidationError
from .pagination import Pagination, PaginationDomainError
from .transaction_date import TransactionDate, TransactionDateValidationError
from .transaction_list_order import (
    TransactionListOrder,
    TransactionListOrderValidationError,
)
from .transaction_type import TransactionType, TransactionTypeValidationError
from .user_name import (
    USER_NAME_MAX_LENGTH,
    UserName,
    UserNameValidationError,
)

__all__ = [
    "DomainError",
    # Value Objects
    "CategoryName",
    "Money",
    "Pagination",
    "TransactionDate",
    "TransactionListOrder",
    "TransactionType",
    "UserName",
    # Identifiers
    "CategoryId",
    "CurrencyId",
    "TransactionId",
    "TransactionTypeId",
    "UserId",
    "as_category_id",
    "as_transaction_id",
    "as_user_id",
    "create_id",
    # Limits
    "CATEGORY_NAME_MAX_LENGTH",
    "USER_NAME_MAX_LENGTH",
    # Errors
    "CategoryNameValidationError",
    "IdentityValidationError",
    "MoneyValidationError",
    "PaginationDomainError",
    "TransactionDateValidationError",
    "TransactionListOrderValidationError",
    "TransactionTypeValidationError",
    "UserNameValidationError",
]
