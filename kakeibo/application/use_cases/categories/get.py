"""Get category use case."""

from dataclasses import dataclass

from structlog import get_logger

from kakeibo.domain.repositories import CategoryRepository
from kakeibo.domain.values.identity import (
    CategoryId,
    IdentityValidationError,
    as_category_id,
)

from ..base import reraise_unexpected
from ..transactions.errors import CategoryNotFoundError, InvalidCategoryIdError
from .builders import CategoryBuilder, CategoryOutput, to_entity
from .errors import CategoryAccessForbiddenError, UnexpectedGetCategoryError

logger = get_logger(__name__)


@dataclass(frozen=True)
class GetCategoryInput:
    user_id: int
    id: int


class GetCategoryUseCase:
    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository
        self.builder = CategoryBuilder()

    def execute(self, data: GetCategoryInput) -> CategoryOutput:
        """
        Fetch one category the caller can see.

        Raises:
            InvalidCategoryIdError: id is not a positive integer.
            CategoryNotFoundError: No category has this id.
            CategoryAccessForbiddenError: The category is another user's
                custom category.
            UnexpectedGetCategoryError: A repository call failed.
        """
        category_id = validate_category_id(data.id)

        with reraise_unexpected(
            UnexpectedGetCategoryError, "Failed to fetch category"
        ):
            record = self.category_repository.find_by_id(category_id)

        if record is None:
            raise CategoryNotFoundError(category_id)
        if not to_entity(record).is_available_for(data.user_id):
            raise CategoryAccessForbiddenError(category_id)

        logger.debug(f"Category {category_id} read by user {data.user_id}")
        return self.builder.build(record)


def validate_category_id(value: object) -> CategoryId:
    try:
        return as_category_id(value)
    except IdentityValidationError as e:
        raise InvalidCategoryIdError(value) from e

