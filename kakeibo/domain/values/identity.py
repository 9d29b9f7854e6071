"""
Typed identifiers.

Each aggregate gets its own NewType over int so that a CategoryId cannot be
passed where a TransactionId is expected without a type checker noticing.
"""

from typing import Any, NewType

from .domain_error import DomainError

UserId = NewType("UserId", int)
CategoryId = NewType("CategoryId", int)
TransactionId = NewType("TransactionId", int)
CurrencyId = NewType("CurrencyId", int)
TransactionTypeId = NewType("TransactionTypeId", int)


class IdentityValidationError(DomainError):
    pass


def create_id(value: Any, type_name: str) -> Any:
    """
    Validate a raw identifier.

    Args:
        value: Raw value, usually an int read from a record.
        type_name: Identifier kind used in the error message.

    Returns:
        The value itself, to be wrapped by the caller's NewType.

    Raises:
        IdentityValidationError: Value is not a positive integer.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise IdentityValidationError(
            f"{type_name} must be an integer: {value!r}"
        )
    if value <= 0:
        raise IdentityValidationError(
            f"{type_name} must be positive: {value}"
        )
    return value


def as_user_id(value: Any) -> UserId:
    return UserId(create_id(value, "UserId"))


def as_category_id(value: Any) -> CategoryId:
    return CategoryId(create_id(value, "CategoryId"))


def as_transaction_id(value: Any) -> TransactionId:
    return TransactionId(create_id(value, "TransactionId"))
