"""Errors raised by the transaction use cases."""

from typing import Iterable

from kakeibo.domain.values.domain_error import DomainError

from ..base import UnexpectedUseCaseError


class InvalidTransactionTypeError(DomainError):
    def __init__(self, transaction_type: object) -> None:
        super().__init__(f"Invalid transaction type: {transaction_type!r}")


class InvalidAmountError(DomainError):
    def __init__(self, amount: object) -> None:
        super().__init__(f"Invalid amount: {amount!r}")


class InvalidDateFormatError(DomainError):
    def __init__(self, date: object) -> None:
        super().__init__(f"Invalid date format: {date!r}")


class FutureTransactionDateError(DomainError):
    def __init__(self, date: str) -> None:
        super().__init__(f"Transactions cannot be dated in the future: {date}")


class TransactionTitleRequiredError(DomainError):
    def __init__(self) -> None:
        super().__init__("Title is required")


class TransactionTitleTooLongError(DomainError):
    def __init__(self, max_length: int) -> None:
        super().__init__(f"Title must be at most {max_length} characters")


class TransactionMemoTooLongError(DomainError):
    def __init__(self, max_length: int) -> None:
        super().__init__(f"Memo must be at most {max_length} characters")


class InvalidMemoError(DomainError):
    def __init__(self, memo: object) -> None:
        super().__init__(f"Memo must be text: {memo!r}")


class InvalidCategoryIdError(DomainError):
    def __init__(self, category_id: object) -> None:
        super().__init__(f"Invalid category id: {category_id!r}")


class CategoryNotFoundError(DomainError):
    def __init__(self, category_id: int) -> None:
        super().__init__(f"Category not found: {category_id}")
        self.category_id = category_id


class CategoriesNotFoundError(DomainError):
    def __init__(self, category_ids: Iterable[int]) -> None:
        self.category_ids = list(category_ids)
        super().__init__(
            "Categories not found: "
            + ",".join(str(i) for i in self.category_ids)
        )


class CategoryTypeMismatchError(DomainError):
    def __init__(self, transaction_type: str, category_type: str) -> None:
        super().__init__(
            f"Transaction type ({transaction_type}) does not match "
            f"category type ({category_type})"
        )


class InvalidCategoryIdsError(DomainError):
    def __init__(self) -> None:
        super().__init__("category_ids must contain at least one id")


class TransactionNotFoundError(DomainError):
    def __init__(self, transaction_id: int) -> None:
        super().__init__(f"Transaction not found: {transaction_id}")
        self.transaction_id = transaction_id


class NotOwnerError(DomainError):
    def __init__(self) -> None:
        super().__init__("Transaction belongs to another user")


class InvalidPaginationError(DomainError):
    pass


class UnexpectedTransactionError(UnexpectedUseCaseError):
    pass


class UnexpectedCreateTransactionError(UnexpectedTransactionError):
    pass


class UnexpectedListTransactionsError(UnexpectedTransactionError):
    pass


class UnexpectedUpdateTransactionError(UnexpectedTransactionError):
    pass


class UnexpectedDeleteTransactionError(UnexpectedTransactionError):
    pass
