"""
Create category use case.

Users add custom categories next to the shared defaults. Names are unique
among the categories a user can see.
"""

from dataclasses import dataclass
from typing import Any

from structlog import get_logger

from kakeibo.domain.entities.records import CreateCategoryData
from kakeibo.domain.repositories import CategoryRepository
from kakeibo.domain.values.category_name import (
    CategoryName,
    CategoryNameValidationError,
)
from kakeibo.domain.values.transaction_type import (
    TransactionType,
    TransactionTypeValidationError,
)

from ..base import reraise_unexpected
from .builders import CategoryBuilder, CategoryOutput
from .errors import (
    DuplicateCategoryError,
    InvalidCategoryNameError,
    InvalidCategoryTypeError,
    UnexpectedCreateCategoryError,
)

logger = get_logger(__name__)


def parse_category_type(value: Any) -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    try:
        return TransactionType.from_string(value)
    except TransactionTypeValidationError as e:
        raise InvalidCategoryTypeError(value) from e


@dataclass(frozen=True)
class CreateCategoryInput:
    user_id: int
    name: str
    type: TransactionType | str


class CreateCategoryUseCase:
    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository
        self.builder = CategoryBuilder()

    def execute(self, data: CreateCategoryInput) -> CategoryOutput:
        """
        Create a custom category owned by data.user_id.

        Raises:
            InvalidCategoryNameError: Name is blank, too long or not text.
            InvalidCategoryTypeError: type is not INCOME or EXPENSE.
            DuplicateCategoryError: The user can already see a category
                with this name.
            UnexpectedCreateCategoryError: A repository call failed.
        """
        try:
            name = CategoryName.create(data.name)
        except CategoryNameValidationError as e:
            raise InvalidCategoryNameError(e.message) from e
        category_type = parse_category_type(data.type)

        with reraise_unexpected(
            UnexpectedCreateCategoryError, "Failed to check category name"
        ):
            existing = self.category_repository.find_by_name(
                data.user_id, name.value
            )
        if existing is not None:
            raise DuplicateCategoryError(name.value)

        payload = CreateCategoryData(
            user_id=data.user_id, name=name.value, type=category_type
        )
        with reraise_unexpected(
            UnexpectedCreateCategoryError, "Failed to save category"
        ):
            record = self.category_repository.create(payload)

        logger.info(f"Category {record.id} created for user {data.user_id}")
        return self.builder.build(record)
